from __future__ import annotations

import uuid

from userlookup.models.schemas import UserRecord

SAMPLE_USERS: dict[uuid.UUID, UserRecord] = {
    record.id: record
    for record in (
        UserRecord(
            id=uuid.UUID("3e3dd4ae-3c37-40c6-aa64-7061f284ce28"),
            name="John Doe",
            age=18,
            grade=1,
            active=True,
        ),
        UserRecord(
            id=uuid.UUID("fc5e3b5e-4c0c-4d5f-8e0a-6e2a9b7a1d21"),
            name="Jane Doe",
            age=19,
            grade=1,
            active=False,
        ),
        UserRecord(
            id=uuid.UUID("8d1f0b62-9a3b-4b4c-9d6e-2f5a7c3e1b40"),
            name="Alex Smith",
            age=18,
            grade=2,
            active=True,
        ),
    )
}

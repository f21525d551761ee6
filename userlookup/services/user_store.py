from __future__ import annotations

import uuid
from collections.abc import Generator
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session

from userlookup.config import get_settings
from userlookup.db.models import User
from userlookup.db.sample_data import SAMPLE_USERS
from userlookup.db.session import get_db
from userlookup.models.schemas import UserRecord
from userlookup.services.filtering import UserCriteria, filter_users


class UserStore(Protocol):
    def get(self, user_id: uuid.UUID) -> UserRecord | None: ...

    def find(self, criteria: UserCriteria) -> list[UserRecord]: ...


class StaticUserStore:
    """Read-only view over the compiled-in sample users."""

    def __init__(self, users: dict[uuid.UUID, UserRecord] | None = None) -> None:
        self.users = SAMPLE_USERS if users is None else users

    def get(self, user_id: uuid.UUID) -> UserRecord | None:
        return self.users.get(user_id)

    def find(self, criteria: UserCriteria) -> list[UserRecord]:
        matches = filter_users(self.users.values(), criteria)
        return sorted(matches, key=lambda user: (user.name, str(user.id)))


class SqlUserStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self, user_id: uuid.UUID) -> UserRecord | None:
        row = self.db.get(User, user_id)
        return UserRecord.model_validate(row) if row else None

    def find(self, criteria: UserCriteria) -> list[UserRecord]:
        stmt = select(User).where(
            User.name.contains(criteria.name, autoescape=True),
            User.grade == criteria.grade,
        )
        if criteria.age is not None:
            stmt = stmt.where(User.age == criteria.age)
        if criteria.active is not None:
            stmt = stmt.where(User.active == criteria.active)
        stmt = stmt.order_by(User.name, User.id)

        rows = self.db.execute(stmt).scalars().all()
        return [UserRecord.model_validate(row) for row in rows]


def get_user_store() -> Generator[UserStore, None, None]:
    settings = get_settings()
    if settings.user_backend == "static":
        yield StaticUserStore()
        return

    sessions = get_db()
    try:
        yield SqlUserStore(next(sessions))
    finally:
        sessions.close()

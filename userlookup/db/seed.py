from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from userlookup.db.models import Base, User
from userlookup.db.sample_data import SAMPLE_USERS
from userlookup.db.session import get_engine

logger = logging.getLogger(__name__)


def create_schema() -> None:
    Base.metadata.create_all(bind=get_engine())
    logger.info("schema.created")


def seed_sample_users(db: Session) -> int:
    """Insert the sample users that are not stored yet; returns how many were added."""

    existing = set(db.execute(select(User.id).where(User.id.in_(list(SAMPLE_USERS)))).scalars())
    added = 0
    for record in SAMPLE_USERS.values():
        if record.id in existing:
            continue
        db.add(User(**record.model_dump()))
        added += 1
    db.commit()

    logger.info("seed.completed", extra={"added": added, "skipped": len(existing)})
    return added

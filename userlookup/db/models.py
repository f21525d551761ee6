from __future__ import annotations

import uuid

from sqlalchemy import Boolean, SmallInteger, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import Uuid


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    # Column keeps the historical `uuid` name; `Uuid` maps to native UUID on Postgres.
    id: Mapped[uuid.UUID] = mapped_column("uuid", Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    age: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    grade: Mapped[int] = mapped_column(SmallInteger, index=True, nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

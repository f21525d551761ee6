from __future__ import annotations

import re
import uuid
from collections.abc import Iterable
from dataclasses import dataclass

from userlookup.models.schemas import SMALLINT_MAX, SMALLINT_MIN, UserRecord

NAME_GRADE_ERROR = "Error parsing user parameter"

_SMALL_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_user_id(raw: str) -> uuid.UUID:
    try:
        return uuid.UUID(raw)
    except ValueError as exc:
        raise ValueError(f"Malformed user id: {raw!r}") from exc


def parse_small_int(raw: str) -> int:
    if not _SMALL_INT_RE.fullmatch(raw):
        raise ValueError(f"{raw!r} is not an integer")
    value = int(raw)
    if not SMALLINT_MIN <= value <= SMALLINT_MAX:
        raise ValueError(f"{value} is out of range")
    return value


def parse_name_grade(raw: str) -> tuple[str, int]:
    """Split a `<name>_<grade>` path segment."""

    parts = raw.split("_")
    if len(parts) != 2:
        raise ValueError(NAME_GRADE_ERROR)
    name, grade = parts
    try:
        return name, parse_small_int(grade)
    except ValueError as exc:
        raise ValueError(NAME_GRADE_ERROR) from exc


@dataclass(frozen=True)
class UserCriteria:
    name: str
    grade: int
    age: int | None = None
    active: bool | None = None

    def matches(self, user: UserRecord) -> bool:
        if self.name not in user.name or user.grade != self.grade:
            return False
        if self.age is not None and user.age != self.age:
            return False
        if self.active is not None and user.active != self.active:
            return False
        return True


def filter_users(users: Iterable[UserRecord], criteria: UserCriteria) -> list[UserRecord]:
    return [user for user in users if criteria.matches(user)]


FILTERS_ERROR = "Error parsing user filters"

_TRUE_FLAGS = {"true", "on", "yes", "1"}
_FALSE_FLAGS = {"false", "off", "no", "0"}


def parse_flag(raw: str) -> bool:
    value = raw.lower()
    if value in _TRUE_FLAGS:
        return True
    if value in _FALSE_FLAGS:
        return False
    raise ValueError(f"{raw!r} is not a boolean")


def parse_filters(age: str | None, active: str | None) -> tuple[int | None, bool | None]:
    """Parse the optional `age`/`active` query values; absent values stay None."""

    try:
        return (
            parse_small_int(age) if age is not None else None,
            parse_flag(active) if active is not None else None,
        )
    except ValueError as exc:
        raise ValueError(FILTERS_ERROR) from exc

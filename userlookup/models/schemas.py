from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field

SMALLINT_MIN = -32768
SMALLINT_MAX = 32767

_ESCAPES = {
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\0": "\\0",
    "\\": "\\\\",
    '"': '\\"',
}


def quote_debug(text: str) -> str:
    """Double-quote `text`, escaping non-printable characters as `\\u{hex}`."""

    out = ['"']
    for ch in text:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch.isprintable():
            out.append(ch)
        else:
            out.append(f"\\u{{{ord(ch):x}}}")
    out.append('"')
    return "".join(out)


class UserRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: uuid.UUID
    name: str
    age: int = Field(ge=SMALLINT_MIN, le=SMALLINT_MAX)
    grade: int = Field(ge=SMALLINT_MIN, le=SMALLINT_MAX)
    active: bool

    def render(self) -> str:
        active = "true" if self.active else "false"
        return (
            f"User {{ uuid: {self.id}, name: {quote_debug(self.name)}, age: {self.age}, "
            f"grade: {self.grade}, active: {active} }}"
        )

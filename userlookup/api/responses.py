from __future__ import annotations

from fastapi.responses import PlainTextResponse

from userlookup.models.schemas import UserRecord

CUSTOM_ID_HEADER = "X-CUSTOM-ID"


def plain_text(body: str, status_code: int = 200, headers: dict[str, str] | None = None) -> PlainTextResponse:
    merged = {CUSTOM_ID_HEADER: "CUSTOM"}
    merged.update(headers or {})
    return PlainTextResponse(body, status_code=status_code, headers=merged)


def user_response(user: UserRecord) -> PlainTextResponse:
    return plain_text(f"Found user: {user.render()}", headers={"X-USER-ID": str(user.id)})


def users_response(users: list[UserRecord]) -> PlainTextResponse:
    body = ",".join(user.render() for user in users)
    return plain_text(body, headers={CUSTOM_ID_HEADER: "USERS"})

from __future__ import annotations

import re

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse, PlainTextResponse

from userlookup.config import get_settings

router = APIRouter(tags=["greetings"])

_MAX_RANK = 255
_RANK_RE = re.compile(r"\+?[0-9]+")


def _parse_rank(segment: str) -> int | None:
    if not _RANK_RE.fullmatch(segment):
        return None
    rank = int(segment)
    return rank if rank <= _MAX_RANK else None


@router.get("/", response_class=PlainTextResponse)
async def index() -> str:
    return "Hello, world!"


@router.get("/favicon.png")
async def favicon() -> FileResponse:
    path = get_settings().static_path / "favicon.png"
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Not found")
    return FileResponse(path, media_type="image/png")


# Must be registered after every other single-segment route.
@router.get("/{segment}", response_class=PlainTextResponse)
async def greet(segment: str) -> str:
    rank = _parse_rank(segment)
    if rank is not None:
        return f"Your rank is, {rank + 10}!"
    return f"Hello, {segment}!"

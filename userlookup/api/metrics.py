from __future__ import annotations

from fastapi import APIRouter, HTTPException

from userlookup.config import get_settings
from userlookup.observability.visitors import get_visitor_counter


router = APIRouter(prefix="/api", tags=["metrics"])


@router.get("/metrics")
async def metrics() -> dict:
    settings = get_settings()
    if not settings.enable_metrics_endpoint:
        raise HTTPException(status_code=404, detail="Not found")
    return get_visitor_counter().snapshot()

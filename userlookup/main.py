from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from userlookup.api.greetings import router as greetings_router
from userlookup.api.metrics import router as metrics_router
from userlookup.api.users import router as users_router
from userlookup.config import get_settings
from userlookup.db.session import reset_engine
from userlookup.observability.logging import configure_logging
from userlookup.observability.middleware import TraceIdMiddleware
from userlookup.observability.visitors import get_visitor_counter


app = FastAPI(title="User Lookup", version="0.1.0")
app.add_middleware(TraceIdMiddleware)
app.include_router(metrics_router)
app.include_router(users_router)
# Greetings own the `/{segment}` fallback, so they go last.
app.include_router(greetings_router)

logger = structlog.get_logger(__name__)


def _request_target(request: Request) -> str:
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


@app.exception_handler(StarletteHTTPException)
async def http_error_page(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    if exc.status_code == 404:
        body = f"We cannot find this page {_request_target(request)}."
    elif exc.status_code == 403:
        body = f"Access forbidden {_request_target(request)}."
    else:
        body = str(exc.detail)
    return PlainTextResponse(body, status_code=exc.status_code, headers=getattr(exc, "headers", None))


@app.on_event("startup")
def _startup() -> None:
    settings = get_settings()
    configure_logging()
    logger.info("Setting up visitor counter")
    get_visitor_counter()
    logger.info("Finish setting up visitor counter", user_backend=settings.user_backend)


@app.on_event("shutdown")
def _shutdown() -> None:
    reset_engine()

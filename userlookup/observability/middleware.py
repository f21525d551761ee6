from __future__ import annotations

import uuid
from time import perf_counter
from typing import Any, Callable

import structlog
from starlette.datastructures import Headers, MutableHeaders

from userlookup.observability.visitors import get_visitor_counter

TRACE_ID_HEADER = "X-TRACE-ID"


class TraceIdMiddleware:
    """Propagates X-TRACE-ID from request to response and counts visitors."""

    def __init__(self, app: Callable[..., Any]) -> None:
        self.app = app
        # Avoid self-observing the observability endpoint.
        self._excluded_paths = {"/api/metrics"}

    async def __call__(self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        trace_id = Headers(scope=scope).get(TRACE_ID_HEADER)
        if not trace_id:
            trace_id = str(uuid.uuid4())
            MutableHeaders(scope=scope)[TRACE_ID_HEADER] = trace_id

        path = scope.get("path")
        method = scope.get("method")

        structlog.contextvars.bind_contextvars(
            trace_id=trace_id,
            path=path,
            method=method,
        )

        counted = path not in self._excluded_paths
        if counted:
            get_visitor_counter().increment()

        start = perf_counter()
        status_code: int = 500

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal status_code

            if message.get("type") == "http.response.start":
                status_code = int(message.get("status", 500))
                headers = MutableHeaders(scope=message)
                headers[TRACE_ID_HEADER] = trace_id

            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            elapsed_ms = (perf_counter() - start) * 1000.0

            if counted:
                get_visitor_counter().observe_http_request(elapsed_ms=elapsed_ms)

            structlog.get_logger("access").info(
                "http_request",
                status_code=status_code,
                elapsed_ms=round(elapsed_ms, 2),
            )

            structlog.contextvars.clear_contextvars()

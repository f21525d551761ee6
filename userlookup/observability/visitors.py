from __future__ import annotations

from dataclasses import asdict, dataclass
from threading import Lock
from typing import Any

import structlog


@dataclass
class _LatencyAgg:
    count: int = 0
    sum_ms: float = 0.0
    max_ms: float = 0.0

    def observe(self, elapsed_ms: float) -> None:
        self.count += 1
        self.sum_ms += float(elapsed_ms)
        if elapsed_ms > self.max_ms:
            self.max_ms = float(elapsed_ms)


class VisitorCounter:
    """Thread-safe, process-local visitor count (resets on restart)."""

    def __init__(self) -> None:
        self._lock = Lock()
        self.visitors: int = 0
        self.http_request_ms = _LatencyAgg()

    def increment(self) -> int:
        with self._lock:
            self.visitors += 1
            visitors = self.visitors
        structlog.get_logger("visitors").info(f"Number of visitors: {visitors}", visitors=visitors)
        return visitors

    def observe_http_request(self, elapsed_ms: float) -> None:
        with self._lock:
            self.http_request_ms.observe(elapsed_ms)

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            return {
                "visitors": self.visitors,
                "latency_ms": {
                    "http_request_ms": asdict(self.http_request_ms),
                },
            }

    def reset(self) -> None:
        with self._lock:
            self.visitors = 0
            self.http_request_ms = _LatencyAgg()


_COUNTER: VisitorCounter | None = None


def get_visitor_counter() -> VisitorCounter:
    global _COUNTER
    if _COUNTER is None:
        _COUNTER = VisitorCounter()
    return _COUNTER


def reset_visitor_counter() -> None:
    """Reset the count and latency aggregate (used by tests)."""

    get_visitor_counter().reset()

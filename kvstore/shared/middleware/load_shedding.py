"""
Admission control (load shedding).

Bounds the number of requests being processed at once.
A request arriving while the bound is reached is rejected
immediately with OverloadedError; nothing is queued or retried.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from kvstore.shared.errors.conditions import OverloadedError

logger = logging.getLogger(__name__)


class ConcurrencyLimiter:
    """Counter of in-flight requests with a fixed upper bound.

    try_acquire checks and increments without suspending, so on a
    single event loop no other task can interleave between the two.
    """

    def __init__(self, limit: int) -> None:
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        self._limit = limit
        self._in_flight = 0

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def in_flight(self) -> int:
        return self._in_flight

    def try_acquire(self) -> bool:
        """Take a slot if one is free.

        Returns:
            True if the caller now holds a slot, False if at capacity.
        """
        if self._in_flight >= self._limit:
            return False
        self._in_flight += 1
        return True

    def release(self) -> None:
        """Give back a slot taken by try_acquire."""
        if self._in_flight == 0:
            raise RuntimeError("release() called without a matching try_acquire()")
        self._in_flight -= 1


class LoadSheddingMiddleware(BaseHTTPMiddleware):
    """Rejects requests once the limiter is at capacity."""

    def __init__(self, app: ASGIApp, limiter: ConcurrencyLimiter) -> None:
        super().__init__(app)
        self._limiter = limiter

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Admit the request or raise OverloadedError."""
        if not self._limiter.try_acquire():
            logger.warning(
                "Shedding %s %s: %d requests in flight",
                request.method,
                request.url.path,
                self._limiter.in_flight,
            )
            raise OverloadedError(self._limiter.limit)
        try:
            return await call_next(request)
        finally:
            self._limiter.release()

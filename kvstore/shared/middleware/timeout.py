"""
Timeout enforcement.

Starts a deadline when the request enters this stage. If the route
has not produced a response by then, the in-flight work is cancelled
and ElapsedError is raised. Store writes are single dict assignments,
so cancelled work never leaves a partial value behind.
"""

import asyncio
import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from kvstore.shared.errors.conditions import ElapsedError

logger = logging.getLogger(__name__)


class TimeoutMiddleware(BaseHTTPMiddleware):
    """Abandons requests that run past a fixed deadline."""

    def __init__(self, app: ASGIApp, timeout_seconds: float) -> None:
        super().__init__(app)
        if timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {timeout_seconds}")
        self._timeout_seconds = timeout_seconds

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Run the route under the deadline."""
        try:
            return await asyncio.wait_for(
                call_next(request), timeout=self._timeout_seconds
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Timed out %s %s after %.2fs",
                request.method,
                request.url.path,
                self._timeout_seconds,
            )
            raise ElapsedError(self._timeout_seconds) from None

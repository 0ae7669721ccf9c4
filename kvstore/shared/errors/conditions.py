"""
Conditions raised by the request pipeline itself.

These are infrastructure failures raised above the handlers:
admission control rejecting a request and the timeout stage
abandoning one. Each carries its ErrorKind tag.
"""

from kvstore.domain.kv.errors import ErrorKind


class PipelineError(Exception):
    """Base error for failures raised by pipeline stages."""

    kind: ErrorKind = ErrorKind.UNCLASSIFIED

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class OverloadedError(PipelineError):
    """Raised when admission control sheds a request."""

    kind = ErrorKind.OVERLOADED

    def __init__(self, limit: int) -> None:
        super().__init__(f"Concurrency limit of {limit} in-flight requests reached")
        self.limit = limit


class ElapsedError(PipelineError):
    """Raised when a request does not complete before its deadline."""

    kind = ErrorKind.ELAPSED

    def __init__(self, timeout_seconds: float) -> None:
        super().__init__(f"Request exceeded deadline of {timeout_seconds}s")
        self.timeout_seconds = timeout_seconds

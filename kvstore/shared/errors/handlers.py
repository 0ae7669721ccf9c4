"""
Centralized error classification for the key-value service.

Maps every ErrorKind to an HTTP status and a plain-text body.
Two entry points share the same translation:
- register_error_handlers: application errors at the handler boundary
- ErrorClassifierMiddleware: the outermost pipeline stage, catching
  whatever the inner stages (admission, timeout, routing) let through
"""

import logging
from dataclasses import dataclass

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from kvstore.domain.kv.errors import ErrorKind, KeyValueDomainError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_408 = 408
HTTP_500 = 500
HTTP_503 = 503


@dataclass(frozen=True)
class ErrorTranslation:
    """Status code and body template for one ErrorKind."""

    status_code: int
    body: str
    log_level: int


ERROR_TRANSLATIONS: dict[ErrorKind, ErrorTranslation] = {
    ErrorKind.NOT_FOUND: ErrorTranslation(HTTP_404, "", logging.INFO),
    ErrorKind.INVALID_BODY: ErrorTranslation(
        HTTP_400, "request body is not valid UTF-8", logging.WARNING
    ),
    ErrorKind.OVERLOADED: ErrorTranslation(
        HTTP_503, "service is overloaded, try again later", logging.WARNING
    ),
    ErrorKind.ELAPSED: ErrorTranslation(
        HTTP_408, "request timed out", logging.WARNING
    ),
    ErrorKind.UNCLASSIFIED: ErrorTranslation(
        HTTP_500, "Unhandled internal error: {details}", logging.ERROR
    ),
}


def error_kind(exc: BaseException) -> ErrorKind:
    """Read the kind tag an error was raised with.

    Errors raised outside this service carry no tag and are UNCLASSIFIED.
    """
    kind = getattr(exc, "kind", None)
    if isinstance(kind, ErrorKind):
        return kind
    return ErrorKind.UNCLASSIFIED


def classify(exc: BaseException) -> tuple[int, str]:
    """Translate an error into an HTTP status code and response body.

    Args:
        exc: Any exception that ended a request.

    Returns:
        The (status_code, body) pair to send to the client.
    """
    kind = error_kind(exc)
    translation = ERROR_TRANSLATIONS[kind]
    details = str(exc) or type(exc).__name__
    return translation.status_code, translation.body.format(details=details)


def error_response(exc: BaseException) -> PlainTextResponse:
    """Build the plain-text response for an error and log it once."""
    kind = error_kind(exc)
    status_code, body = classify(exc)
    if kind is ErrorKind.UNCLASSIFIED:
        logger.exception(
            "Unexpected error: %s", type(exc).__name__, exc_info=exc
        )
    else:
        logger.log(
            ERROR_TRANSLATIONS[kind].log_level,
            "Request failed (%s): %s",
            kind.value,
            exc,
        )
    return PlainTextResponse(body, status_code=status_code)


def register_error_handlers(app: FastAPI) -> None:
    """Register application error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(KeyValueDomainError)
    async def handle_key_value_domain(
        _request: Request, exc: KeyValueDomainError
    ) -> PlainTextResponse:
        """Handle missing keys and undecodable values."""
        return error_response(exc)


class ErrorClassifierMiddleware(BaseHTTPMiddleware):
    """Outermost pipeline stage.

    Catches every exception raised by the inner stages and turns it
    into a response, so no failure reaches the server as a crash.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Run the inner stages and translate any failure."""
        try:
            return await call_next(request)
        except Exception as exc:
            return error_response(exc)

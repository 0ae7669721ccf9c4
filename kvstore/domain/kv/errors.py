"""
Error taxonomy for the key-value service.

ErrorKind is the closed set of failure kinds a request can end in.
Every error raised anywhere in the service carries its kind as a tag,
set at the point of failure; the boundary translator matches on the
tag, never on the exception class.
No framework imports allowed.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Every way a request can fail."""

    NOT_FOUND = "not_found"
    INVALID_BODY = "invalid_body"
    OVERLOADED = "overloaded"
    ELAPSED = "elapsed"
    UNCLASSIFIED = "unclassified"


class KeyValueDomainError(Exception):
    """Base error for application-level key-value failures."""

    kind: ErrorKind = ErrorKind.UNCLASSIFIED

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class KeyNotFoundError(KeyValueDomainError):
    """Raised when a key has never been set."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, key: str) -> None:
        super().__init__(f"Key not found: {key}")
        self.key = key


class InvalidValueEncodingError(KeyValueDomainError):
    """Raised when a value to be stored is not valid UTF-8 text."""

    kind = ErrorKind.INVALID_BODY

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Value for key {key} is not valid UTF-8: {reason}")
        self.key = key
        self.reason = reason

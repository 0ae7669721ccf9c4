"""
Tests for the key-value domain layer.

Tests error classes and their kind tags in isolation.
No external dependencies or IO required.
"""

from kvstore.domain.kv.errors import (
    ErrorKind,
    InvalidValueEncodingError,
    KeyNotFoundError,
    KeyValueDomainError,
)


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_key_not_found_error_message(self) -> None:
        """KeyNotFoundError contains the key in its message."""
        exc = KeyNotFoundError("user:42")
        assert exc.key == "user:42"
        assert "user:42" in exc.message
        assert str(exc) == exc.message

    def test_key_not_found_is_tagged(self) -> None:
        """KeyNotFoundError carries the NOT_FOUND kind."""
        assert KeyNotFoundError("k").kind is ErrorKind.NOT_FOUND

    def test_invalid_value_encoding_is_tagged(self) -> None:
        """InvalidValueEncodingError carries the INVALID_BODY kind."""
        exc = InvalidValueEncodingError("k", "invalid start byte")
        assert exc.kind is ErrorKind.INVALID_BODY
        assert "invalid start byte" in exc.message

    def test_base_error_is_unclassified(self) -> None:
        """The base class tag defaults to UNCLASSIFIED."""
        assert KeyValueDomainError("x").kind is ErrorKind.UNCLASSIFIED

"""
Tests for settings loading and the CLI argument parser.
"""

import pytest
from pydantic import ValidationError

from kvstore.cli import build_parser
from kvstore.core.config import Settings
from kvstore.shared.logging import resolve_level


class TestSettings:
    """Tests for environment-driven configuration."""

    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.host == "127.0.0.1"
        assert settings.port == 3001
        assert settings.request_timeout_seconds == 10.0
        assert settings.max_concurrent_requests >= 1

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KVSTORE_PORT", "8080")
        monkeypatch.setenv("KVSTORE_REQUEST_TIMEOUT_SECONDS", "2.5")
        settings = Settings(_env_file=None)
        assert settings.port == 8080
        assert settings.request_timeout_seconds == 2.5

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, request_timeout_seconds=0)

    def test_concurrency_bound_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, max_concurrent_requests=0)


class TestCli:
    """Tests for the command-line parser."""

    def test_overrides(self) -> None:
        args = build_parser().parse_args(
            ["--host", "0.0.0.0", "--port", "9000", "--log-level", "debug"]
        )
        assert args.host == "0.0.0.0"
        assert args.port == 9000
        assert args.log_level == "debug"


class TestLogging:
    """Tests for log level resolution."""

    def test_level_names(self) -> None:
        assert resolve_level("debug") == 10
        assert resolve_level("WARNING") == 30

    def test_unknown_name_falls_back_to_info(self) -> None:
        assert resolve_level("chatty") == 20

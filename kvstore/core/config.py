"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Address the HTTP server binds to.
        port: Port the HTTP server binds to.
        request_timeout_seconds: Deadline for a request to finish once admitted.
        max_concurrent_requests: Number of requests allowed in flight before
            new ones are shed with a 503.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="KVSTORE_",
    )

    project_name: str = "kvstore"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = Field(default=3001, ge=1, le=65535)
    request_timeout_seconds: float = Field(default=10.0, gt=0)
    max_concurrent_requests: int = Field(default=256, ge=1)


settings = Settings()

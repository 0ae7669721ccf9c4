"""
Shared fixtures for the key-value service tests.

Every test gets its own application and store; nothing is shared
between tests.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from kvstore.core.config import Settings
from kvstore.infrastructure.kv.in_memory_store import InMemoryKeyValueStore
from kvstore.main import create_app


class SlowStore(InMemoryKeyValueStore):
    """In-memory store whose writes hold the write lock for ``delay`` seconds.

    A delay of zero behaves exactly like the plain store.
    """

    def __init__(self, delay: float = 0.0) -> None:
        super().__init__()
        self.delay = delay

    async def set(self, key: str, value: str) -> None:
        async with self.lock.write():
            if self.delay:
                await asyncio.sleep(self.delay)
            self._data[key] = value


class FailingStore(InMemoryKeyValueStore):
    """Store whose reads blow up with an unexpected error."""

    async def get(self, key: str):
        raise RuntimeError("disk on fire")


def make_settings(**overrides) -> Settings:
    """Settings for tests, independent of the environment's .env file."""
    values = {
        "log_level": "WARNING",
        "request_timeout_seconds": 5.0,
        "max_concurrent_requests": 256,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def client(store: InMemoryKeyValueStore) -> TestClient:
    return TestClient(create_app(settings=make_settings(), store=store))


@pytest.fixture
def slow_store() -> SlowStore:
    return SlowStore()


@pytest.fixture
def failing_store() -> FailingStore:
    return FailingStore()


@pytest.fixture
def build_app():
    """Factory building an isolated application with settings overrides."""

    def _build(store: InMemoryKeyValueStore | None = None, **overrides):
        return create_app(settings=make_settings(**overrides), store=store)

    return _build

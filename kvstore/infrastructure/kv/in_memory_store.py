"""
Adapter: in-memory key-value store.

Implements the KeyValueStore port with a dict guarded by a read-write lock.
Lives for the lifetime of the application; nothing is persisted.
"""

import logging
from typing import Optional

from kvstore.domain.kv.ports import KeyValueStore
from kvstore.infrastructure.kv.rwlock import RWLock

logger = logging.getLogger(__name__)


class InMemoryKeyValueStore(KeyValueStore):
    """Concurrent in-memory store shared by every request task.

    Readers (get, list_all) share the lock; set takes it exclusively.
    Each critical section is a single dict operation with no await inside,
    so a cancelled request leaves either the old value or the new one.
    """

    def __init__(self) -> None:
        self._data: dict[str, str] = {}
        self._lock = RWLock()

    async def get(self, key: str) -> Optional[str]:
        """Return the value for key, or None if it was never set.

        Args:
            key: Exact key to look up.

        Returns:
            The stored value or None.
        """
        async with self._lock.read():
            return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        """Insert or overwrite the value for key.

        Args:
            key: Key to write.
            value: Text value, possibly empty.
        """
        async with self._lock.write():
            self._data[key] = value
        logger.debug("Stored key=%s", key)

    async def list_all(self) -> list[tuple[str, str]]:
        """Return a snapshot of all entries in no particular order."""
        async with self._lock.read():
            return list(self._data.items())

    @property
    def lock(self) -> RWLock:
        return self._lock

"""
Use case: Store a value under a key.

Input: SetValueCommand (key, value)
Output: None
Side effects: Inserts or overwrites one entry in the shared store.
Failure cases: None; every write is accepted.
"""

import logging

from kvstore.application.kv.dtos import SetValueCommand
from kvstore.domain.kv.ports import KeyValueStore

logger = logging.getLogger(__name__)


class SetValueUseCase:
    """Writes one entry. Concurrent writes to a key: last writer wins."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    async def execute(self, command: SetValueCommand) -> None:
        """Run the write use case.

        Args:
            command: The key and the value to store under it.
        """
        logger.info("Setting key=%s (%d chars)", command.key, len(command.value))
        await self._store.set(command.key, command.value)

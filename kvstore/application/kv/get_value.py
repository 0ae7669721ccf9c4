"""
Use case: Read the value stored under a key.

Input: GetValueQuery (key)
Output: EntryResult
Side effects: None.
Failure cases: KeyNotFoundError.
"""

import logging

from kvstore.application.kv.dtos import EntryResult, GetValueQuery
from kvstore.domain.kv.errors import KeyNotFoundError
from kvstore.domain.kv.ports import KeyValueStore

logger = logging.getLogger(__name__)


class GetValueUseCase:
    """Looks a key up and turns absence into KeyNotFoundError."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    async def execute(self, query: GetValueQuery) -> EntryResult:
        """Run the lookup use case.

        Args:
            query: The lookup request containing the key.

        Returns:
            The entry for the key.

        Raises:
            KeyNotFoundError: If the key has never been set.
        """
        value = await self._store.get(query.key)
        if value is None:
            raise KeyNotFoundError(query.key)
        return EntryResult(key=query.key, value=value)

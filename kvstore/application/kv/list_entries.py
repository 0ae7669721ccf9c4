"""
Use case: Enumerate every stored entry.

Input: ListEntriesQuery
Output: list[EntryResult] in store order (unspecified)
Side effects: None.
Failure cases: None.
"""

import logging

from kvstore.application.kv.dtos import EntryResult, ListEntriesQuery
from kvstore.domain.kv.ports import KeyValueStore

logger = logging.getLogger(__name__)


class ListEntriesUseCase:
    """Takes a snapshot of the store and maps it to DTOs."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    async def execute(self, query: ListEntriesQuery) -> list[EntryResult]:
        """Run the listing use case.

        Args:
            query: The (empty) listing request.

        Returns:
            One EntryResult per stored key.
        """
        entries = await self._store.list_all()
        logger.debug("Listing %d entries", len(entries))
        return [EntryResult(key=key, value=value) for key, value in entries]

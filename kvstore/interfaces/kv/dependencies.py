"""
Dependency injection for the key-value bounded context.

Provides FastAPI dependency functions that hand the shared store,
owned by the application instance, to use cases via constructor injection.
"""

from fastapi import Depends, Request

from kvstore.application.kv.get_value import GetValueUseCase
from kvstore.application.kv.list_entries import ListEntriesUseCase
from kvstore.application.kv.set_value import SetValueUseCase
from kvstore.domain.kv.ports import KeyValueStore


def get_store(request: Request) -> KeyValueStore:
    """Return the store created for this application instance."""
    return request.app.state.store


def get_list_entries_use_case(
    store: KeyValueStore = Depends(get_store),
) -> ListEntriesUseCase:
    """Build ListEntriesUseCase around the shared store."""
    return ListEntriesUseCase(store=store)


def get_get_value_use_case(
    store: KeyValueStore = Depends(get_store),
) -> GetValueUseCase:
    """Build GetValueUseCase around the shared store."""
    return GetValueUseCase(store=store)


def get_set_value_use_case(
    store: KeyValueStore = Depends(get_store),
) -> SetValueUseCase:
    """Build SetValueUseCase around the shared store."""
    return SetValueUseCase(store=store)

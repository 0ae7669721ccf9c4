"""
Port interfaces (ABCs) for the key-value bounded context.

Ports define the contracts that use cases require from the outside world.
Infrastructure adapters implement these interfaces.
Use cases never depend on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """Port for the shared key-value mapping.

    Implementations must be safe for many concurrent readers and at most
    one writer at a time. Enumeration order is unspecified.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the value stored under an exact key, or None if absent."""
        raise NotImplementedError

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Insert the key, or overwrite its value if it already exists."""
        raise NotImplementedError

    @abstractmethod
    async def list_all(self) -> list[tuple[str, str]]:
        """Return a consistent snapshot of every (key, value) pair.

        Returns:
            List of pairs in no particular order.
        """
        raise NotImplementedError

"""
Data Transfer Objects for the key-value application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ListEntriesQuery:
    """Input DTO for enumerating every entry. Carries no parameters."""


@dataclass(frozen=True)
class EntryResult:
    """Output DTO for a single stored entry.

    Attributes:
        key: The entry's key.
        value: The entry's value.
    """

    key: str
    value: str


@dataclass(frozen=True)
class GetValueQuery:
    """Input DTO for reading one value.

    Attributes:
        key: Exact key to look up.
    """

    key: str


@dataclass(frozen=True)
class SetValueCommand:
    """Input DTO for writing one value.

    Attributes:
        key: Key to write.
        value: Raw request body text; may be empty.
    """

    key: str
    value: str

"""Abstract repository interfaces (ports): define the contract, not the implementation."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class ContentRepository(ABC, Generic[T]):
    """Port for a keyed collection of content records of one type.

    Readers get snapshots; writers go through `create` and `modify`.
    """

    @abstractmethod
    async def get_by_id(self, record_id: str) -> T | None:
        """Retrieve a single record by its ID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[T]:
        """Return every record, in insertion order."""
        ...

    @abstractmethod
    async def create(self, record: T) -> T:
        """Store a new record."""
        ...

    @abstractmethod
    async def modify(self, record_id: str, mutator: Callable[[T], None]) -> T | None:
        """Apply `mutator` to the stored record atomically.

        Returns the updated record, or None when the ID is unknown.
        """
        ...

    @abstractmethod
    async def count(self) -> int:
        ...

    @abstractmethod
    async def clear_all(self) -> None:
        ...

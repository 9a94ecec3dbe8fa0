"""In-memory implementation of the ContentRepository port."""

import asyncio
import copy
from collections.abc import Callable
from typing import Generic, TypeVar

from sanctuary_cms.application.interfaces import ContentRepository

T = TypeVar("T")


class InMemoryContentRepository(ContentRepository[T], Generic[T]):
    """Keyed record store living in process memory.

    Writes are copy-on-write under a lock: the stored object is replaced,
    never edited in place, so lists handed out by `get_all` stay stable.
    """

    def __init__(self, records: list[T] | None = None):
        self._records: dict[str, T] = {}
        self._lock = asyncio.Lock()
        for record in records or []:
            self._records[record.id] = record

    async def get_by_id(self, record_id: str) -> T | None:
        return self._records.get(record_id)

    async def get_all(self) -> list[T]:
        return list(self._records.values())

    async def create(self, record: T) -> T:
        async with self._lock:
            self._records[record.id] = record
        return record

    async def modify(self, record_id: str, mutator: Callable[[T], None]) -> T | None:
        async with self._lock:
            current = self._records.get(record_id)
            if current is None:
                return None
            updated = copy.deepcopy(current)
            mutator(updated)
            self._records[record_id] = updated
            return updated

    async def count(self) -> int:
        return len(self._records)

    async def clear_all(self) -> None:
        async with self._lock:
            self._records.clear()

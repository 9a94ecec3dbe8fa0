"""Observer port for instrumentation events emitted by the content engines.

Callers pass an observer in; the engines never log or count on their own
beyond debug-level module logging.
"""

from abc import ABC, abstractmethod
from typing import Any

from sanctuary_cms.domain.entities import ContentType


class ContentObserver(ABC):
    """Receives search, engagement and versioning events."""

    @abstractmethod
    def search_completed(
        self,
        content_type: ContentType,
        query: str | None,
        total: int,
        page: int,
        duration_ms: float,
    ) -> None:
        ...

    @abstractmethod
    def engagement_recorded(self, event: str, record_id: str, **values: Any) -> None:
        ...

    @abstractmethod
    def version_recorded(
        self,
        content_type: ContentType,
        content_id: str,
        version_number: int,
        changes_summary: str,
    ) -> None:
        ...


class NullContentObserver(ContentObserver):
    """Observer that discards every event."""

    def search_completed(self, content_type, query, total, page, duration_ms) -> None:
        pass

    def engagement_recorded(self, event, record_id, **values) -> None:
        pass

    def version_recorded(self, content_type, content_id, version_number, changes_summary) -> None:
        pass

"""Port for content version history persistence."""

from abc import ABC, abstractmethod

from sanctuary_cms.domain.entities import ContentType, ContentVersion


class VersionRepository(ABC):
    """Stores saved versions of content records."""

    @abstractmethod
    async def add(self, version: ContentVersion) -> ContentVersion:
        """Persist a new version."""
        ...

    @abstractmethod
    async def get(self, version_id: str) -> ContentVersion | None:
        """Retrieve a single version by its ID."""
        ...

    @abstractmethod
    async def list_for(self, content_type: ContentType, content_id: str) -> list[ContentVersion]:
        """All versions of one record, oldest first."""
        ...

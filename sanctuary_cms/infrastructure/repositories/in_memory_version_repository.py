"""In-memory implementation of the VersionRepository port."""

from sanctuary_cms.application.interfaces import VersionRepository
from sanctuary_cms.domain.entities import ContentType, ContentVersion


class InMemoryVersionRepository(VersionRepository):

    def __init__(self):
        self._versions: dict[str, ContentVersion] = {}

    async def add(self, version: ContentVersion) -> ContentVersion:
        self._versions[version.id] = version
        return version

    async def get(self, version_id: str) -> ContentVersion | None:
        return self._versions.get(version_id)

    async def list_for(self, content_type: ContentType, content_id: str) -> list[ContentVersion]:
        history = [
            v for v in self._versions.values()
            if v.content_type == content_type and v.content_id == content_id
        ]
        return sorted(history, key=lambda v: v.version_number)

"""Application service (use case) for reading and searching content."""

from sanctuary_cms.application.interfaces import ContentObserver, ContentRepository
from sanctuary_cms.application.services import analytics
from sanctuary_cms.application.services.search_engine import search
from sanctuary_cms.domain.entities import EducationalResource, FAQ, SearchQuery, SearchResult
from sanctuary_cms.domain.exceptions import EntityNotFoundError
from sanctuary_cms.domain.field_config import (
    FAQ_ACCESSORS,
    FAQ_SUGGESTION_VOCABULARY,
    RESOURCE_ACCESSORS,
    RESOURCE_SUGGESTION_VOCABULARY,
)


class ContentService:
    """Search and lookup over the FAQ and resource repositories (DI)."""

    def __init__(
        self,
        faq_repository: ContentRepository[FAQ],
        resource_repository: ContentRepository[EducationalResource],
        *,
        observer: ContentObserver | None = None,
        suggestion_limit: int = 5,
        related_limit: int = 3,
        popular_limit: int = 10,
    ):
        self._faqs = faq_repository
        self._resources = resource_repository
        self._observer = observer
        self._suggestion_limit = suggestion_limit
        self._related_limit = related_limit
        self._popular_limit = popular_limit

    async def search_faqs(self, query: SearchQuery) -> SearchResult[FAQ]:
        corpus = await self._faqs.get_all()
        return search(
            corpus,
            query,
            FAQ_ACCESSORS,
            vocabulary=FAQ_SUGGESTION_VOCABULARY,
            suggestion_limit=self._suggestion_limit,
            observer=self._observer,
        )

    async def search_resources(self, query: SearchQuery) -> SearchResult[EducationalResource]:
        corpus = await self._resources.get_all()
        return search(
            corpus,
            query,
            RESOURCE_ACCESSORS,
            vocabulary=RESOURCE_SUGGESTION_VOCABULARY,
            suggestion_limit=self._suggestion_limit,
            observer=self._observer,
        )

    async def get_faq(self, faq_id: str) -> FAQ:
        faq = await self._faqs.get_by_id(faq_id)
        if faq is None:
            raise EntityNotFoundError("FAQ", faq_id)
        return faq

    async def get_resource(self, resource_id: str) -> EducationalResource:
        resource = await self._resources.get_by_id(resource_id)
        if resource is None:
            raise EntityNotFoundError("EducationalResource", resource_id)
        return resource

    async def related_faqs(self, faq_id: str) -> list[FAQ]:
        faq = await self.get_faq(faq_id)
        corpus = await self._faqs.get_all()
        return analytics.related(faq, corpus, FAQ_ACCESSORS, self._related_limit)

    async def related_resources(self, resource_id: str) -> list[EducationalResource]:
        resource = await self.get_resource(resource_id)
        corpus = await self._resources.get_all()
        return analytics.related(resource, corpus, RESOURCE_ACCESSORS, self._related_limit)

    # ── Curated listings ─────────────────────────────────────────────

    async def featured_faqs(self) -> list[FAQ]:
        return analytics.featured(await self._faqs.get_all(), FAQ_ACCESSORS)

    async def featured_resources(self) -> list[EducationalResource]:
        return analytics.featured(await self._resources.get_all(), RESOURCE_ACCESSORS)

    async def popular_faqs(self, limit: int | None = None) -> list[FAQ]:
        return analytics.popular_flagged(
            await self._faqs.get_all(), FAQ_ACCESSORS, limit or self._popular_limit
        )

    async def popular_resources(self, limit: int | None = None) -> list[EducationalResource]:
        return analytics.popular_flagged(
            await self._resources.get_all(), RESOURCE_ACCESSORS, limit or self._popular_limit
        )

"""Engagement service: records feedback votes, downloads, views and ratings.

Every operation increments counters on the stored record; there is no
deduplication or rate limiting. An unknown record ID is a silent no-op
(returns None).
"""

import logging

from sanctuary_cms.application.interfaces import ContentObserver, ContentRepository
from sanctuary_cms.domain.entities import ContentType, EducationalResource, FAQ

logger = logging.getLogger(__name__)


class EngagementService:
    """Mutates engagement metrics through the repository port."""

    def __init__(
        self,
        faq_repository: ContentRepository[FAQ],
        resource_repository: ContentRepository[EducationalResource],
        *,
        observer: ContentObserver | None = None,
    ):
        self._faqs = faq_repository
        self._resources = resource_repository
        self._observer = observer

    async def record_feedback(self, faq_id: str, helpful: bool) -> FAQ | None:
        faq = await self._faqs.modify(faq_id, lambda f: f.register_vote(helpful))
        if faq is None:
            logger.debug("Feedback ignored for unknown FAQ %s", faq_id)
            return None
        self._emit(
            "feedback", faq_id,
            helpful=helpful, ratio=round(faq.helpfulness_ratio, 2),
        )
        return faq

    async def record_download(self, resource_id: str) -> EducationalResource | None:
        resource = await self._resources.modify(resource_id, _increment("downloads"))
        if resource is None:
            logger.debug("Download ignored for unknown resource %s", resource_id)
            return None
        self._emit("download", resource_id, downloads=resource.downloads)
        return resource

    async def record_view(
        self, content_type: ContentType, record_id: str
    ) -> FAQ | EducationalResource | None:
        repository = self._faqs if content_type == ContentType.FAQ else self._resources
        record = await repository.modify(record_id, _increment("views"))
        if record is None:
            logger.debug("View ignored for unknown %s %s", content_type.value, record_id)
            return None
        self._emit("view", record_id, content_type=content_type.value, views=record.views)
        return record

    async def record_rating(self, resource_id: str, rating: float) -> EducationalResource | None:
        resource = await self._resources.modify(
            resource_id, lambda r: r.register_rating(rating)
        )
        if resource is None:
            logger.debug("Rating ignored for unknown resource %s", resource_id)
            return None
        self._emit(
            "rating", resource_id,
            rating=round(resource.rating, 2), rating_count=resource.rating_count,
        )
        return resource

    def _emit(self, event: str, record_id: str, **values) -> None:
        if self._observer is not None:
            self._observer.engagement_recorded(event, record_id, **values)


def _increment(field_name: str):
    def mutate(record) -> None:
        setattr(record, field_name, getattr(record, field_name) + 1)
    return mutate

"""FastAPI dependency injection: wires infrastructure to the application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends

from sanctuary_cms.config import Settings, get_settings
from sanctuary_cms.application.interfaces import ContentObserver
from sanctuary_cms.application.services import (
    AnalyticsService,
    ContentService,
    EngagementService,
    VersionControlService,
)
from sanctuary_cms.domain.entities import ContentType, EducationalResource, FAQ
from sanctuary_cms.infrastructure.logging.colored_logger import ConsoleContentObserver
from sanctuary_cms.infrastructure.repositories import (
    InMemoryContentRepository,
    InMemoryVersionRepository,
)


# ── Process-wide singletons ──────────────────────────────────────────

@lru_cache
def get_faq_repository() -> InMemoryContentRepository[FAQ]:
    return InMemoryContentRepository()


@lru_cache
def get_resource_repository() -> InMemoryContentRepository[EducationalResource]:
    return InMemoryContentRepository()


@lru_cache
def get_version_repository() -> InMemoryVersionRepository:
    return InMemoryVersionRepository()


@lru_cache
def get_content_observer() -> ContentObserver:
    return ConsoleContentObserver()


# ── Service providers ────────────────────────────────────────────────

async def get_content_service(
    settings: Settings = Depends(get_settings),
    observer: ContentObserver = Depends(get_content_observer),
) -> AsyncGenerator[ContentService, None]:
    """Provides a ContentService over the shared repositories."""
    yield ContentService(
        get_faq_repository(),
        get_resource_repository(),
        observer=observer,
        suggestion_limit=settings.suggestion_limit,
        related_limit=settings.related_limit,
        popular_limit=settings.popular_limit,
    )


async def get_engagement_service(
    observer: ContentObserver = Depends(get_content_observer),
) -> AsyncGenerator[EngagementService, None]:
    """Provides an EngagementService that mutates the shared repositories."""
    yield EngagementService(
        get_faq_repository(),
        get_resource_repository(),
        observer=observer,
    )


async def get_analytics_service(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[AnalyticsService, None]:
    """Provides an AnalyticsService configured with the dashboard limits."""
    yield AnalyticsService(
        get_faq_repository(),
        get_resource_repository(),
        popular_limit=settings.popular_limit,
        trending_limit=settings.trending_limit,
        trending_faq_min_views=settings.trending_faq_min_views,
        trending_resource_min_downloads=settings.trending_resource_min_downloads,
        recommendation_limit=settings.recommendation_limit,
    )


async def get_version_control_service(
    settings: Settings = Depends(get_settings),
    observer: ContentObserver = Depends(get_content_observer),
) -> AsyncGenerator[VersionControlService, None]:
    """Provides a VersionControlService over both content repositories."""
    yield VersionControlService(
        {
            ContentType.FAQ: get_faq_repository(),
            ContentType.RESOURCE: get_resource_repository(),
        },
        get_version_repository(),
        observer=observer,
        treat_missing_previous_as_all_added=settings.diff_treat_missing_previous_as_all_added,
    )

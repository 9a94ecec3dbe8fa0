"""Application service for dashboard analytics over the content repositories."""

from datetime import datetime

from sanctuary_cms.application.interfaces import ContentRepository
from sanctuary_cms.application.services import analytics
from sanctuary_cms.domain.entities import (
    ContentOverview,
    EducationalResource,
    FAQ,
    Recommendations,
    TagUsage,
    TrendingContent,
)
from sanctuary_cms.domain.field_config import FAQ_ACCESSORS, RESOURCE_ACCESSORS


class AnalyticsService:
    """Read-only aggregates; never mutates stored records."""

    def __init__(
        self,
        faq_repository: ContentRepository[FAQ],
        resource_repository: ContentRepository[EducationalResource],
        *,
        popular_limit: int = 10,
        trending_limit: int = 5,
        trending_faq_min_views: int = 100,
        trending_resource_min_downloads: int = 50,
        recommendation_limit: int = 5,
    ):
        self._faqs = faq_repository
        self._resources = resource_repository
        self._popular_limit = popular_limit
        self._trending_limit = trending_limit
        self._trending_faq_min_views = trending_faq_min_views
        self._trending_resource_min_downloads = trending_resource_min_downloads
        self._recommendation_limit = recommendation_limit

    async def overview(self) -> ContentOverview:
        faqs = await self._faqs.get_all()
        resources = await self._resources.get_all()
        return ContentOverview(
            popular_faqs=analytics.popular(faqs, "views", self._popular_limit),
            category_popularity=analytics.category_popularity(faqs),
            helpfulness=analytics.helpfulness_stats(faqs),
            popular_resources=analytics.popular(resources, "downloads", self._popular_limit),
            download_stats=analytics.download_stats(resources),
        )

    async def trending(self, now: datetime | None = None) -> TrendingContent:
        faqs = await self._faqs.get_all()
        resources = await self._resources.get_all()
        return TrendingContent(
            faqs=analytics.trending(
                faqs, "views", self._trending_faq_min_views,
                now=now, limit=self._trending_limit,
            ),
            resources=analytics.trending(
                resources, "downloads", self._trending_resource_min_downloads,
                now=now, limit=self._trending_limit,
            ),
        )

    async def recommendations(
        self,
        viewed_faq_ids: list[str],
        downloaded_resource_ids: list[str],
    ) -> Recommendations:
        faqs = await self._faqs.get_all()
        resources = await self._resources.get_all()
        interests = analytics.interests_of([
            *(f for f in faqs if f.id in viewed_faq_ids),
            *(r for r in resources if r.id in downloaded_resource_ids),
        ])
        return Recommendations(
            faqs=analytics.recommend(
                interests, faqs, viewed_faq_ids, FAQ_ACCESSORS, self._recommendation_limit
            ),
            resources=analytics.recommend(
                interests, resources, downloaded_resource_ids,
                RESOURCE_ACCESSORS, self._recommendation_limit,
            ),
        )

    async def tag_usage(self) -> TagUsage:
        return TagUsage(
            faq_tags=analytics.tag_usage_counts(await self._faqs.get_all()),
            resource_tags=analytics.tag_usage_counts(await self._resources.get_all()),
        )

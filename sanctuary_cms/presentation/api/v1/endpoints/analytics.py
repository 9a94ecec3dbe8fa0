"""Analytics dashboard endpoints."""

from fastapi import APIRouter, Depends

from sanctuary_cms.application.schemas import (
    ContentOverviewResponse,
    RecommendationRequest,
    RecommendationsResponse,
    TagUsageResponse,
    TrendingContentResponse,
)
from sanctuary_cms.application.services import AnalyticsService
from sanctuary_cms.infrastructure.dependencies import get_analytics_service

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get("/overview", response_model=ContentOverviewResponse)
async def overview(
    service: AnalyticsService = Depends(get_analytics_service),
) -> ContentOverviewResponse:
    """Popular content, per-category totals and helpfulness figures."""
    result = await service.overview()
    return ContentOverviewResponse.model_validate(result, from_attributes=True)


@router.get("/trending", response_model=TrendingContentResponse)
async def trending(
    service: AnalyticsService = Depends(get_analytics_service),
) -> TrendingContentResponse:
    """Content with the highest engagement per day since its last update."""
    result = await service.trending()
    return TrendingContentResponse.model_validate(result, from_attributes=True)


@router.post("/recommendations", response_model=RecommendationsResponse)
async def recommendations(
    data: RecommendationRequest,
    service: AnalyticsService = Depends(get_analytics_service),
) -> RecommendationsResponse:
    result = await service.recommendations(data.viewed_faq_ids, data.downloaded_resource_ids)
    return RecommendationsResponse.model_validate(result, from_attributes=True)


@router.get("/tags", response_model=TagUsageResponse)
async def tag_usage(
    service: AnalyticsService = Depends(get_analytics_service),
) -> TagUsageResponse:
    """Number of FAQs and resources carrying each tag."""
    result = await service.tag_usage()
    return TagUsageResponse.model_validate(result, from_attributes=True)

"""Pydantic DTOs for the analytics dashboard."""

from pydantic import BaseModel, Field

from .content import FAQResponse, ResourceResponse


class HelpfulnessStatsResponse(BaseModel):
    average_helpfulness: float
    total_votes: int

    model_config = {"from_attributes": True}


class ContentOverviewResponse(BaseModel):
    popular_faqs: list[FAQResponse]
    category_popularity: dict[str, int]
    helpfulness: HelpfulnessStatsResponse
    popular_resources: list[ResourceResponse]
    download_stats: dict[str, int]

    model_config = {"from_attributes": True}


class TrendingContentResponse(BaseModel):
    faqs: list[FAQResponse]
    resources: list[ResourceResponse]

    model_config = {"from_attributes": True}


class RecommendationRequest(BaseModel):
    """Ids the visitor has already seen; recommendations exclude them."""

    viewed_faq_ids: list[str] = Field(default_factory=list, examples=[["visiting-hours"]])
    downloaded_resource_ids: list[str] = Field(default_factory=list)


class RecommendationsResponse(BaseModel):
    faqs: list[FAQResponse]
    resources: list[ResourceResponse]

    model_config = {"from_attributes": True}


class TagUsageResponse(BaseModel):
    faq_tags: dict[str, int]
    resource_tags: dict[str, int]

    model_config = {"from_attributes": True}

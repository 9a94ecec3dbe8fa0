from .content import (
    CategoryResponse,
    FAQResponse,
    FeedbackRequest,
    RatingRequest,
    ResourceResponse,
    TagResponse,
)
from .search import FAQSearchResponse, ResourceSearchResponse, SortKey
from .analytics import (
    ContentOverviewResponse,
    HelpfulnessStatsResponse,
    RecommendationRequest,
    RecommendationsResponse,
    TagUsageResponse,
    TrendingContentResponse,
)
from .versioning import (
    ChangeRecordSchema,
    ChangeSummarySchema,
    DiffRequest,
    RollbackRequest,
    VersionComparisonResponse,
    VersionCreate,
    VersionResponse,
)

__all__ = [
    "CategoryResponse",
    "FAQResponse",
    "FeedbackRequest",
    "RatingRequest",
    "ResourceResponse",
    "TagResponse",
    "FAQSearchResponse",
    "ResourceSearchResponse",
    "SortKey",
    "ContentOverviewResponse",
    "HelpfulnessStatsResponse",
    "RecommendationRequest",
    "RecommendationsResponse",
    "TagUsageResponse",
    "TrendingContentResponse",
    "ChangeRecordSchema",
    "ChangeSummarySchema",
    "DiffRequest",
    "RollbackRequest",
    "VersionComparisonResponse",
    "VersionCreate",
    "VersionResponse",
]

from .content import (
    Category,
    ContentRecord,
    ContentType,
    Difficulty,
    EducationalResource,
    FAQ,
    Tag,
)
from .change import (
    ChangeRecord,
    ChangeSummary,
    ChangeType,
    FieldSchema,
    FieldSpec,
    Importance,
    ValueKind,
)
from .search import SORT_ALIASES, SearchQuery, SearchResult, SortBy, SortOrder
from .version import ContentVersion, VersionComparison, WorkflowState
from .analytics import (
    ContentOverview,
    HelpfulnessStats,
    Recommendations,
    TagUsage,
    TrendingContent,
)

__all__ = [
    "Category",
    "ContentRecord",
    "ContentType",
    "Difficulty",
    "EducationalResource",
    "FAQ",
    "Tag",
    "ChangeRecord",
    "ChangeSummary",
    "ChangeType",
    "FieldSchema",
    "FieldSpec",
    "Importance",
    "ValueKind",
    "SORT_ALIASES",
    "SearchQuery",
    "SearchResult",
    "SortBy",
    "SortOrder",
    "ContentVersion",
    "VersionComparison",
    "WorkflowState",
    "ContentOverview",
    "HelpfulnessStats",
    "Recommendations",
    "TagUsage",
    "TrendingContent",
]

"""Domain entities for content search: query parameters and paged results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class SortBy(str, Enum):
    RELEVANCE = "relevance"
    POPULARITY = "popularity"
    RATING = "rating"
    DATE = "date"
    ALPHABETICAL = "alphabetical"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


# Legacy listing-page sort keys, mapped onto the strategies above
SORT_ALIASES: dict[str, SortBy] = {
    "title": SortBy.ALPHABETICAL,
    "helpfulness": SortBy.RATING,
}


@dataclass
class SearchQuery:
    """All filter, sort and pagination parameters for one search call.

    Empty strings and empty lists mean "filter not active".
    `sort_order=None` keeps the natural direction of the chosen strategy
    (descending for numeric strategies, ascending for alphabetical).
    """

    text: str | None = None
    category_id: str | None = None
    tag_ids: list[str] = field(default_factory=list)
    type: str | None = None
    difficulty: str | None = None
    audience: str | None = None
    sort_by: SortBy | str = SortBy.RELEVANCE
    sort_order: SortOrder | str | None = None
    page: int = 1
    page_size: int = 10


@dataclass
class SearchResult(Generic[T]):
    """One page of search results plus paging metadata."""

    items: list[T]
    total: int
    current_page: int
    total_pages: int
    has_more: bool
    search_time_ms: float = 0.0
    suggestions: list[str] | None = None

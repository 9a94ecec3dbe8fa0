"""Pydantic DTOs for the search endpoints."""

from typing import Literal

from pydantic import BaseModel

from .content import FAQResponse, ResourceResponse

# Strategy names plus the listing-page aliases accepted by the ranking layer
SortKey = Literal[
    "relevance", "popularity", "rating", "date", "alphabetical", "title", "helpfulness"
]


class FAQSearchResponse(BaseModel):
    items: list[FAQResponse]
    total: int
    current_page: int
    total_pages: int
    has_more: bool
    search_time_ms: float
    suggestions: list[str] | None = None

    model_config = {"from_attributes": True}


class ResourceSearchResponse(BaseModel):
    items: list[ResourceResponse]
    total: int
    current_page: int
    total_pages: int
    has_more: bool
    search_time_ms: float
    suggestions: list[str] | None = None

    model_config = {"from_attributes": True}

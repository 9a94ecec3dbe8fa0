"""Pydantic DTOs for FAQ and educational resource records."""

from datetime import datetime

from pydantic import BaseModel, Field


class CategoryResponse(BaseModel):
    id: str
    name: str
    slug: str = ""
    description: str = ""
    target_audience: list[str] = []

    model_config = {"from_attributes": True}


class TagResponse(BaseModel):
    id: str
    name: str
    slug: str = ""

    model_config = {"from_attributes": True}


class FAQResponse(BaseModel):
    """FAQ entry returned to the client."""

    id: str
    question: str
    answer: str
    short_answer: str | None = None
    category: CategoryResponse
    tags: list[TagResponse]
    difficulty: str | None = None
    keywords: list[str]
    priority: int
    author: str | None = None
    status: str
    version: int
    is_popular: bool
    is_featured: bool
    views: int
    helpful: int
    not_helpful: int
    helpfulness_ratio: float
    last_updated: datetime

    model_config = {"from_attributes": True}


class ResourceResponse(BaseModel):
    """Educational resource returned to the client."""

    id: str
    title: str
    description: str
    summary: str = ""
    category: CategoryResponse
    tags: list[TagResponse]
    type: str
    difficulty: str | None = None
    target_audience: list[str]
    url: str | None = None
    keywords: list[str]
    language: str
    featured: bool
    is_popular: bool
    file_size: int | None = None
    duration: int | None = None
    page_count: int | None = None
    views: int
    downloads: int
    rating: float
    rating_count: int
    last_updated: datetime

    model_config = {"from_attributes": True}


class FeedbackRequest(BaseModel):
    """A helpful / not-helpful vote on an FAQ."""

    helpful: bool = Field(..., examples=[True])


class RatingRequest(BaseModel):
    """A 1 to 5 star rating for a resource."""

    rating: float = Field(..., ge=1, le=5, examples=[5])

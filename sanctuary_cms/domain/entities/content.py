"""Domain entities for sanctuary content: FAQ entries and educational resources."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ContentType(str, Enum):
    """The two kinds of content records the engines work on."""

    FAQ = "faq"
    RESOURCE = "resource"


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


@dataclass
class Category:
    """A content category. FAQ and resource categories share this shape."""

    id: str
    name: str
    slug: str = ""
    description: str = ""
    target_audience: list[str] = field(default_factory=list)


@dataclass
class Tag:
    """A tag attached to content records; `name` is the display value."""

    id: str
    name: str
    slug: str = ""


@dataclass
class FAQ:
    """A frequently asked question with its answer and engagement counters."""

    id: str
    question: str
    answer: str
    category: Category
    tags: list[Tag] = field(default_factory=list)
    difficulty: str | None = Difficulty.BEGINNER.value
    keywords: list[str] = field(default_factory=list)
    priority: int = 0

    short_answer: str | None = None
    author: str | None = None
    status: str = "published"
    version: int = 1
    is_popular: bool = False
    is_featured: bool = False

    # Engagement
    views: int = 0
    helpful: int = 0
    not_helpful: int = 0
    helpfulness_ratio: float = 0.0

    last_updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def title(self) -> str:
        return self.question

    def register_vote(self, helpful: bool) -> None:
        """Count a helpful / not-helpful vote and refresh the ratio."""
        if helpful:
            self.helpful += 1
        else:
            self.not_helpful += 1
        total = self.helpful + self.not_helpful
        self.helpfulness_ratio = self.helpful / total if total else 0.0


@dataclass
class EducationalResource:
    """A downloadable or viewable learning resource (guide, video, PDF...)."""

    id: str
    title: str
    description: str
    category: Category
    tags: list[Tag] = field(default_factory=list)
    type: str = "article"  # pdf | video | article | infographic | quiz | guide | checklist
    difficulty: str | None = Difficulty.BEGINNER.value
    target_audience: list[str] = field(default_factory=list)
    url: str | None = None

    summary: str = ""
    keywords: list[str] = field(default_factory=list)
    language: str = "en"
    featured: bool = False
    is_popular: bool = False
    file_size: int | None = None     # bytes
    duration: int | None = None      # minutes, videos
    page_count: int | None = None    # PDFs

    # Engagement
    views: int = 0
    downloads: int = 0
    rating: float = 0.0
    rating_count: int = 0

    last_updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def register_rating(self, value: float) -> None:
        """Fold a new 1–5 star rating into the running average."""
        total = self.rating * self.rating_count + value
        self.rating_count += 1
        self.rating = total / self.rating_count


ContentRecord = FAQ | EducationalResource

"""Read-only analytics aggregates computed over the content corpus."""

from dataclasses import dataclass, field

from .content import FAQ, EducationalResource


@dataclass
class HelpfulnessStats:
    average_helpfulness: float = 0.0
    total_votes: int = 0


@dataclass
class ContentOverview:
    """Dashboard overview: popular content and per-category totals."""

    popular_faqs: list[FAQ] = field(default_factory=list)
    category_popularity: dict[str, int] = field(default_factory=dict)
    helpfulness: HelpfulnessStats = field(default_factory=HelpfulnessStats)
    popular_resources: list[EducationalResource] = field(default_factory=list)
    download_stats: dict[str, int] = field(default_factory=dict)


@dataclass
class TrendingContent:
    faqs: list[FAQ] = field(default_factory=list)
    resources: list[EducationalResource] = field(default_factory=list)


@dataclass
class Recommendations:
    faqs: list[FAQ] = field(default_factory=list)
    resources: list[EducationalResource] = field(default_factory=list)


@dataclass
class TagUsage:
    """How many records carry each tag id, per content type."""

    faq_tags: dict[str, int] = field(default_factory=dict)
    resource_tags: dict[str, int] = field(default_factory=dict)

"""Read-only aggregation helpers over content snapshots.

Thin compositions of filtering, summation and the shared sort keys; none of
them mutate their inputs.
"""

from collections.abc import Iterable, Sequence
from datetime import datetime, timezone
from typing import Any, TypeVar

from sanctuary_cms.application.services.ranking import numeric_value, as_timestamp
from sanctuary_cms.domain.entities import EducationalResource, FAQ, HelpfulnessStats
from sanctuary_cms.domain.field_config import FieldAccessors, field_value

T = TypeVar("T")

_SECONDS_PER_DAY = 60 * 60 * 24


def totals_by_category(records: Iterable[Any], metric: str) -> dict[str, int]:
    """Sum one metric per category id, in first-seen category order."""
    totals: dict[str, int] = {}
    for record in records:
        category_id = record.category.id
        totals[category_id] = totals.get(category_id, 0) + (field_value(record, metric) or 0)
    return totals


def category_popularity(faqs: Iterable[FAQ]) -> dict[str, int]:
    return totals_by_category(faqs, "views")


def download_stats(resources: Iterable[EducationalResource]) -> dict[str, int]:
    return totals_by_category(resources, "downloads")


def helpfulness_stats(faqs: Iterable[FAQ]) -> HelpfulnessStats:
    total_helpful = total_votes = 0
    for faq in faqs:
        total_helpful += faq.helpful
        total_votes += faq.helpful + faq.not_helpful
    average = total_helpful / total_votes if total_votes else 0.0
    return HelpfulnessStats(average_helpfulness=average, total_votes=total_votes)


def popular(records: Sequence[T], metric: str, limit: int | None = 10) -> list[T]:
    return sorted(records, key=lambda r: numeric_value(field_value(r, metric)), reverse=True)[:limit]


def featured(records: Sequence[T], accessors: FieldAccessors) -> list[T]:
    """Records flagged as featured, highest priority (FAQs) or rating (resources) first."""
    flagged = [r for r in records if field_value(r, accessors.featured_field)]
    return popular(flagged, accessors.featured_rank_field, limit=None)


def popular_flagged(records: Sequence[T], accessors: FieldAccessors, limit: int = 10) -> list[T]:
    """Records editorially marked popular, most viewed or downloaded first."""
    flagged = [r for r in records if field_value(r, accessors.popular_flag_field)]
    return popular(flagged, accessors.popularity_field, limit)


def tag_usage_counts(records: Iterable[Any]) -> dict[str, int]:
    """Number of records carrying each tag id, in first-seen tag order."""
    counts: dict[str, int] = {}
    for record in records:
        for tag in record.tags:
            counts[tag.id] = counts.get(tag.id, 0) + 1
    return counts


def trending(
    records: Sequence[T],
    metric: str,
    threshold: int,
    *,
    now: datetime | None = None,
    limit: int = 5,
) -> list[T]:
    """Records above `threshold`, ranked by metric per day since last update.

    A record updated "now" (or in the future) ranks first.
    """
    now = now or datetime.now(timezone.utc)

    def per_day(record: T) -> float:
        days = (now - as_timestamp(field_value(record, "last_updated"))).total_seconds() / _SECONDS_PER_DAY
        if days <= 0:
            return float("inf")
        return numeric_value(field_value(record, metric)) / days

    eligible = [r for r in records if numeric_value(field_value(r, metric)) > threshold]
    return sorted(eligible, key=per_day, reverse=True)[:limit]


def related(record: T, corpus: Sequence[T], accessors: FieldAccessors, limit: int = 3) -> list[T]:
    """Other records sharing the category or at least one tag, best rated first."""
    category_id = record.category.id
    tag_ids = {t.id for t in record.tags}
    candidates = [
        r for r in corpus
        if r.id != record.id
        and (r.category.id == category_id or any(t.id in tag_ids for t in r.tags))
    ]
    return popular(candidates, accessors.rating_field, limit)


def interests_of(seen: Iterable[Any]) -> set[str]:
    """Category and tag ids of the records a visitor already engaged with."""
    interests: set[str] = set()
    for item in seen:
        interests.add(item.category.id)
        interests.update(t.id for t in item.tags)
    return interests


def recommend(
    interests: set[str],
    candidates: Sequence[T],
    exclude_ids: Iterable[str],
    accessors: FieldAccessors,
    limit: int = 5,
) -> list[T]:
    """Candidates matching an interest, skipping already seen ids, best rated first."""
    excluded = set(exclude_ids)
    matches = [
        c for c in candidates
        if c.id not in excluded
        and (c.category.id in interests or any(t.id in interests for t in c.tags))
    ]
    return popular(matches, accessors.rating_field, limit)

"""Shared ranking utilities: sort strategies and search suggestions."""

from collections.abc import Callable, Iterable, Sequence
from datetime import datetime, timezone
from typing import Any, TypeVar

from sanctuary_cms.domain.entities import SORT_ALIASES, SortBy, SortOrder
from sanctuary_cms.domain.field_config import FieldAccessors, field_value

T = TypeVar("T")

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def resolve_sort_by(sort_by: SortBy | str | None) -> SortBy:
    """Map a requested sort key onto a strategy; unknown keys rank by relevance."""
    if sort_by is None:
        return SortBy.RELEVANCE
    if isinstance(sort_by, SortBy):
        return sort_by
    if sort_by in SORT_ALIASES:
        return SORT_ALIASES[sort_by]
    try:
        return SortBy(sort_by)
    except ValueError:
        return SortBy.RELEVANCE


def is_descending(strategy: SortBy, sort_order: SortOrder | str | None) -> bool:
    """Numeric strategies default to descending, alphabetical to ascending.

    Only "asc" (any case) requests ascending order; any other value is descending.
    """
    value = getattr(sort_order, "value", sort_order)
    if value is None or value == "":
        return strategy != SortBy.ALPHABETICAL
    return str(value).casefold() != SortOrder.ASC.value


def sort_key(strategy: SortBy, accessors: FieldAccessors) -> Callable[[Any], Any]:
    """Build the key function for a non-relevance strategy over one content type."""
    if strategy == SortBy.POPULARITY:
        return lambda r: numeric_value(field_value(r, accessors.popularity_field))
    if strategy == SortBy.RATING:
        return lambda r: numeric_value(field_value(r, accessors.rating_field))
    if strategy == SortBy.DATE:
        return lambda r: as_timestamp(field_value(r, accessors.date_field))

    def title_key(r: Any) -> tuple[str, str]:
        title = str(field_value(r, accessors.title_field) or "")
        return title.casefold(), title
    return title_key


def relevance_key(accessors: FieldAccessors, descending: bool) -> Callable[[Any], tuple[float, ...]]:
    """Order by the leading relevance field in the requested direction.

    Trailing fields only break ties and always rank high values first,
    so ascending relevance still lists the best-rated resource first
    within each featured group.
    """
    lead, *tie_breaks = accessors.relevance_fields
    sign = -1.0 if descending else 1.0

    def key(r: Any) -> tuple[float, ...]:
        return (
            sign * numeric_value(field_value(r, lead)),
            *(-numeric_value(field_value(r, f)) for f in tie_breaks),
        )
    return key


def sort_records(
    records: Iterable[T],
    accessors: FieldAccessors,
    sort_by: SortBy | str | None = SortBy.RELEVANCE,
    sort_order: SortOrder | str | None = None,
) -> list[T]:
    """Return a new, stably sorted list; equal keys keep their input order."""
    strategy = resolve_sort_by(sort_by)
    descending = is_descending(strategy, sort_order)
    if strategy == SortBy.RELEVANCE:
        return sorted(records, key=relevance_key(accessors, descending))
    return sorted(records, key=sort_key(strategy, accessors), reverse=descending)


def suggest(query: str, vocabulary: Sequence[str], limit: int = 5) -> list[str]:
    """Offer vocabulary terms for a query that found nothing.

    A term qualifies when it contains the query, or when the query
    contains the term's first word. Vocabulary order is kept.
    """
    needle = query.strip().lower()
    if not needle:
        return []
    matches: list[str] = []
    for term in vocabulary:
        lowered = term.lower()
        first_word = lowered.split(" ")[0]
        if needle in lowered or (first_word and first_word in needle):
            matches.append(term)
            if len(matches) >= limit:
                break
    return matches


def numeric_value(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    return float(value)


def as_timestamp(value: Any) -> datetime:
    if value is None:
        return _EPOCH
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value

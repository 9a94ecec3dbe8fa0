"""Search & ranking engine: filter, sort and paginate an in-memory corpus.

Stages run in a fixed order, each working on the output of the previous one:

  1. Text filter: case-insensitive substring over title/body, keywords and tag names.
  2. Structured filters: category, tags (any of), type, difficulty, audience.
  3. Sort: one strategy from `ranking`, stable.
  4. Paginate: 1-indexed pages of `page_size` records.
"""

import logging
import math
import time
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from sanctuary_cms.application.interfaces import ContentObserver
from sanctuary_cms.application.services.ranking import sort_records, suggest
from sanctuary_cms.domain.entities import SearchQuery, SearchResult
from sanctuary_cms.domain.field_config import FieldAccessors, field_value

logger = logging.getLogger(__name__)

T = TypeVar("T")


def search(
    corpus: Sequence[T],
    query: SearchQuery,
    accessors: FieldAccessors,
    *,
    vocabulary: Sequence[str] = (),
    suggestion_limit: int = 5,
    observer: ContentObserver | None = None,
) -> SearchResult[T]:
    """Run one search over `corpus`. Never mutates the corpus."""
    start = time.perf_counter()
    text = (query.text or "").strip()

    results: list[T] = list(corpus)
    suggestions: list[str] | None = None

    # ── Stage 1: text ──────────────────────────────────────────────
    if text:
        results = [r for r in results if matches_text(r, text, accessors)]
        if not results:
            suggestions = suggest(text, vocabulary, limit=suggestion_limit)

    # ── Stage 2: structured filters ────────────────────────────────
    results = apply_filters(results, query, accessors)

    # ── Stage 3: sort ──────────────────────────────────────────────
    results = sort_records(results, accessors, query.sort_by, query.sort_order)

    # ── Stage 4: paginate ──────────────────────────────────────────
    page = max(query.page, 1)
    page_size = max(query.page_size, 1)
    start_index = (page - 1) * page_size
    end_index = start_index + page_size
    total = len(results)

    duration_ms = (time.perf_counter() - start) * 1000
    logger.debug(
        "Search %s: text=%r total=%d page=%d time=%.2fms",
        accessors.content_type.value, text, total, page, duration_ms,
    )
    if observer is not None:
        observer.search_completed(accessors.content_type, text or None, total, page, duration_ms)

    return SearchResult(
        items=results[start_index:end_index],
        total=total,
        current_page=page,
        total_pages=math.ceil(total / page_size),
        has_more=end_index < total,
        search_time_ms=duration_ms,
        suggestions=suggestions,
    )


def matches_text(record: Any, text: str, accessors: FieldAccessors) -> bool:
    """True when any searchable field contains `text` (case-insensitive)."""
    needle = text.lower()
    for name in accessors.text_fields:
        value = field_value(record, name)
        if value and needle in str(value).lower():
            return True
    for keyword in field_value(record, accessors.keyword_field) or ():
        if needle in str(keyword).lower():
            return True
    for tag in field_value(record, accessors.tag_field) or ():
        if needle in str(_ref_attr(tag, "name") or "").lower():
            return True
    return False


def apply_filters(records: list[T], query: SearchQuery, accessors: FieldAccessors) -> list[T]:
    """Apply every active structured filter; all of them must pass."""
    if query.category_id:
        records = [
            r for r in records
            if _ref_attr(field_value(r, accessors.category_field), "id") == query.category_id
        ]
    if query.tag_ids:
        wanted = set(query.tag_ids)
        records = [r for r in records if wanted & _tag_ids(r, accessors)]
    if query.type and accessors.type_field:
        records = [r for r in records if field_value(r, accessors.type_field) == query.type]
    if query.difficulty:
        records = [
            r for r in records
            if field_value(r, accessors.difficulty_field) == query.difficulty
        ]
    if query.audience and accessors.audience_field:
        records = [
            r for r in records
            if query.audience in (field_value(r, accessors.audience_field) or ())
        ]
    return records


def _tag_ids(record: Any, accessors: FieldAccessors) -> set[str]:
    return {_ref_attr(tag, "id") for tag in field_value(record, accessors.tag_field) or ()}


def _ref_attr(value: Any, name: str) -> Any:
    """Read `id`/`name` from a tag or category, entity or mapping."""
    if value is None:
        return None
    if isinstance(value, Mapping):
        return value.get(name)
    return getattr(value, name, None)

"""Per-content-type field tables.

Two tables drive the generic engines:

* **Field schemas** declare which fields participate in change tracking,
  with their display label, value kind and importance.
* **Field accessors** map the logical concepts the search engine needs
  (title, searchable text, sortable metrics) onto concrete field names, so
  the same search code serves FAQs and educational resources.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from sanctuary_cms.domain.entities import ContentType, FieldSchema, FieldSpec, ValueKind


FAQ_FIELD_SCHEMA: FieldSchema = MappingProxyType({
    "question": FieldSpec("Question", ValueKind.TEXT, important=True),
    "answer": FieldSpec("Answer", ValueKind.TEXT, important=True),
    "category": FieldSpec("Category", ValueKind.OBJECT, important=True),
    "tags": FieldSpec("Tags", ValueKind.ARRAY),
    "difficulty": FieldSpec("Difficulty", ValueKind.TEXT),
    "keywords": FieldSpec("Keywords", ValueKind.ARRAY),
    "priority": FieldSpec("Priority", ValueKind.NUMBER),
})

RESOURCE_FIELD_SCHEMA: FieldSchema = MappingProxyType({
    "title": FieldSpec("Title", ValueKind.TEXT, important=True),
    "description": FieldSpec("Description", ValueKind.TEXT, important=True),
    "category": FieldSpec("Category", ValueKind.OBJECT, important=True),
    "tags": FieldSpec("Tags", ValueKind.ARRAY),
    "type": FieldSpec("Type", ValueKind.TEXT, important=True),
    "difficulty": FieldSpec("Difficulty", ValueKind.TEXT),
    "target_audience": FieldSpec("Target Audience", ValueKind.ARRAY),
    "url": FieldSpec("URL", ValueKind.TEXT, important=True),
})


@dataclass(frozen=True)
class FieldAccessors:
    """Logical-concept → field-name table for one content type."""

    content_type: ContentType
    title_field: str
    text_fields: tuple[str, ...]
    popularity_field: str
    rating_field: str
    relevance_fields: tuple[str, ...]
    featured_field: str
    featured_rank_field: str
    popular_flag_field: str = "is_popular"
    keyword_field: str = "keywords"
    tag_field: str = "tags"
    category_field: str = "category"
    difficulty_field: str = "difficulty"
    type_field: str | None = None
    audience_field: str | None = None
    date_field: str = "last_updated"


FAQ_ACCESSORS = FieldAccessors(
    content_type=ContentType.FAQ,
    title_field="question",
    text_fields=("question", "answer"),
    popularity_field="views",
    rating_field="helpfulness_ratio",
    relevance_fields=("priority",),
    featured_field="is_featured",
    featured_rank_field="priority",
)

RESOURCE_ACCESSORS = FieldAccessors(
    content_type=ContentType.RESOURCE,
    title_field="title",
    text_fields=("title", "description", "summary"),
    popularity_field="downloads",
    rating_field="rating",
    relevance_fields=("featured", "rating"),
    featured_field="featured",
    featured_rank_field="rating",
    type_field="type",
    audience_field="target_audience",
)

# Terms offered when a text search finds nothing
FAQ_SUGGESTION_VOCABULARY: tuple[str, ...] = (
    "visiting hours", "tour cost", "volunteer requirements", "donations",
    "animal care", "sponsorship", "adoption", "parking", "directions",
    "group tours", "children", "accessibility", "feeding animals",
)

RESOURCE_SUGGESTION_VOCABULARY: tuple[str, ...] = (
    "pig intelligence", "animal care", "vegan recipes", "volunteer training",
    "classroom activities", "family resources", "plant based", "sanctuary life",
    "animal behavior", "rescue stories", "nutrition guide", "meal prep",
)

_SCHEMAS: dict[ContentType, FieldSchema] = {
    ContentType.FAQ: FAQ_FIELD_SCHEMA,
    ContentType.RESOURCE: RESOURCE_FIELD_SCHEMA,
}

_ACCESSORS: dict[ContentType, FieldAccessors] = {
    ContentType.FAQ: FAQ_ACCESSORS,
    ContentType.RESOURCE: RESOURCE_ACCESSORS,
}


def schema_for(content_type: ContentType) -> FieldSchema:
    return _SCHEMAS[ContentType(content_type)]


def accessors_for(content_type: ContentType) -> FieldAccessors:
    return _ACCESSORS[ContentType(content_type)]


def field_value(record: Any, name: str) -> Any:
    """Read a field from an entity or a snapshot mapping; missing → None."""
    if record is None:
        return None
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)

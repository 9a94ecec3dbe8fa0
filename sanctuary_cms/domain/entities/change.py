"""Domain entities for field-level change tracking between content versions."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ChangeType(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


class Importance(str, Enum):
    """Importance tier of a changed field. Only two tiers are produced."""

    HIGH = "high"
    MEDIUM = "medium"


class ValueKind(str, Enum):
    TEXT = "text"
    OBJECT = "object"
    ARRAY = "array"
    NUMBER = "number"


@dataclass(frozen=True)
class FieldSpec:
    """Display and importance metadata for one tracked field."""

    label: str
    value_kind: ValueKind
    important: bool = False


FieldSchema = Mapping[str, FieldSpec]


@dataclass
class ChangeRecord:
    """One field-level difference between two versions of a content record."""

    field: str
    field_label: str
    old_value: Any
    new_value: Any
    change_type: ChangeType


@dataclass(frozen=True)
class ChangeSummary:
    total: int = 0
    added: int = 0
    removed: int = 0
    modified: int = 0
    major_changes: int = 0

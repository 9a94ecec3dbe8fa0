"""Diff engine: field-level change detection between two content snapshots.

Pure functions only. A snapshot is either a content entity or a mapping of
field name → value; only the fields declared in the field schema take part
in a diff, and results follow the schema's declaration order.
"""

import dataclasses
import json
import logging
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from sanctuary_cms.domain.entities import (
    ChangeRecord,
    ChangeSummary,
    ChangeType,
    FieldSchema,
    Importance,
)
from sanctuary_cms.domain.field_config import field_value

logger = logging.getLogger(__name__)

ALL_CHANGES = "all"


def compute_diff(
    previous: Any | None,
    current: Any,
    schema: FieldSchema,
    *,
    treat_missing_previous_as_all_added: bool = False,
) -> list[ChangeRecord]:
    """Compare two snapshots of the same content type field by field.

    With no previous snapshot nothing is reported, unless
    `treat_missing_previous_as_all_added` is set; then every non-empty
    field of `current` comes back as ``added``.
    """
    if previous is None and not treat_missing_previous_as_all_added:
        return []

    changes: list[ChangeRecord] = []
    for name, spec in schema.items():
        old_value = field_value(previous, name)
        new_value = field_value(current, name)

        if _canonical(old_value) == _canonical(new_value):
            continue

        if old_value is None:
            change_type = ChangeType.ADDED
        elif new_value is None:
            change_type = ChangeType.REMOVED
        else:
            change_type = ChangeType.MODIFIED

        changes.append(ChangeRecord(
            field=name,
            field_label=spec.label,
            old_value=old_value,
            new_value=new_value,
            change_type=change_type,
        ))

    logger.debug("Diff computed: %d changed fields of %d tracked", len(changes), len(schema))
    return changes


def classify_importance(field: str, schema: FieldSchema) -> Importance:
    """``high`` for fields flagged important, ``medium`` for everything else.

    Fields missing from the schema are ``medium`` as well; there is no
    lower tier.
    """
    spec = schema.get(field)
    if spec is not None and spec.important:
        return Importance.HIGH
    return Importance.MEDIUM


def summarize_changes(changes: Iterable[ChangeRecord], schema: FieldSchema) -> ChangeSummary:
    total = added = removed = modified = major = 0
    for change in changes:
        total += 1
        if change.change_type == ChangeType.ADDED:
            added += 1
        elif change.change_type == ChangeType.REMOVED:
            removed += 1
        else:
            modified += 1
        if classify_importance(change.field, schema) == Importance.HIGH:
            major += 1
    return ChangeSummary(
        total=total,
        added=added,
        removed=removed,
        modified=modified,
        major_changes=major,
    )


def filter_changes(changes: list[ChangeRecord], change_type: ChangeType | str) -> list[ChangeRecord]:
    """Keep only changes of one type; ``"all"`` keeps everything."""
    if change_type == ALL_CHANGES:
        return list(changes)
    wanted = ChangeType(change_type)
    return [c for c in changes if c.change_type == wanted]


def describe_changes(summary: ChangeSummary) -> str:
    """One-line description, e.g. ``"3 changes (1 major)"``."""
    if summary.total == 0:
        return "No changes"
    noun = "change" if summary.total == 1 else "changes"
    text = f"{summary.total} {noun}"
    if summary.major_changes:
        text += f" ({summary.major_changes} major)"
    return text


def format_value(value: Any) -> str:
    """Render a field value for display in a change list."""
    if value is None:
        return "None"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        return ", ".join(format_value(item) for item in value)
    if isinstance(value, Mapping):
        if value.get("name"):
            return str(value["name"])
        return json.dumps(_canonical(value), default=str)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        name = getattr(value, "name", None)
        if name:
            return str(name)
        return json.dumps(_canonical(value), default=str)
    return str(value)


def _canonical(value: Any) -> Any:
    """Reduce a value to plain dicts/lists/scalars for structural comparison.

    Lists stay ordered, so a reordering counts as a change.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _canonical(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {k: _canonical(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_canonical(v) for v in value]
    return value

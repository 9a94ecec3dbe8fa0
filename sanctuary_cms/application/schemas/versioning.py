"""Pydantic DTOs for version history and change tracking."""

from datetime import datetime
from typing import Any

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, Field

from sanctuary_cms.application.services.diff_engine import classify_importance, format_value
from sanctuary_cms.domain.entities import (
    ChangeRecord,
    ChangeType,
    ContentType,
    ContentVersion,
    FieldSchema,
    Importance,
    WorkflowState,
)


class ChangeRecordSchema(BaseModel):
    """One field change with display strings for both sides."""

    field: str
    field_label: str
    change_type: ChangeType
    importance: Importance
    old_value: Any = None
    new_value: Any = None
    old_display: str
    new_display: str

    @classmethod
    def from_change(cls, change: ChangeRecord, schema: FieldSchema) -> "ChangeRecordSchema":
        return cls(
            field=change.field,
            field_label=change.field_label,
            change_type=change.change_type,
            importance=classify_importance(change.field, schema),
            old_value=jsonable_encoder(change.old_value),
            new_value=jsonable_encoder(change.new_value),
            old_display=format_value(change.old_value),
            new_display=format_value(change.new_value),
        )


class ChangeSummarySchema(BaseModel):
    total: int
    added: int
    removed: int
    modified: int
    major_changes: int

    model_config = {"from_attributes": True}


class VersionComparisonResponse(BaseModel):
    changes: list[ChangeRecordSchema]
    summary: ChangeSummarySchema
    description: str
    from_version: int | None = None
    to_version: int | None = None


class DiffRequest(BaseModel):
    """Two ad-hoc snapshots of the same content type to compare."""

    content_type: ContentType
    previous: dict[str, Any] | None = None
    current: dict[str, Any]
    change_type: ChangeType | None = Field(
        None, description="Only return changes of this kind; omit for all changes."
    )


class VersionCreate(BaseModel):
    author: str = Field(..., min_length=1, examples=["Sarah Thompson"])
    changelog: str = ""
    workflow_state: WorkflowState = WorkflowState.DRAFT


class RollbackRequest(BaseModel):
    author: str = Field(..., min_length=1)


class VersionResponse(BaseModel):
    id: str
    content_id: str
    content_type: ContentType
    version_number: int
    title: str | None = None
    author: str
    changelog: str
    changes_summary: str
    workflow_state: WorkflowState
    created_at: datetime
    snapshot: dict[str, Any]

    @classmethod
    def from_version(cls, version: ContentVersion) -> "VersionResponse":
        return cls(
            id=version.id,
            content_id=version.content_id,
            content_type=version.content_type,
            version_number=version.version_number,
            title=version.title,
            author=version.author,
            changelog=version.changelog,
            changes_summary=version.changes_summary,
            workflow_state=version.workflow_state,
            created_at=version.created_at,
            snapshot=jsonable_encoder(version.snapshot),
        )

"""Domain entities for content version history."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4

from .change import ChangeRecord, ChangeSummary
from .content import ContentType


class WorkflowState(str, Enum):
    DRAFT = "draft"
    REVIEW = "review"
    APPROVED = "approved"
    PUBLISHED = "published"
    ARCHIVED = "archived"


@dataclass
class ContentVersion:
    """A saved snapshot of a content record's tracked fields.

    `snapshot` only holds the fields declared in the content type's
    field schema, so two versions can be diffed directly.
    """

    content_id: str
    content_type: ContentType
    version_number: int
    snapshot: dict[str, Any]
    author: str
    changelog: str = ""
    changes_summary: str = ""
    workflow_state: WorkflowState = WorkflowState.DRAFT
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def title(self) -> str | None:
        return self.snapshot.get("title") or self.snapshot.get("question")


@dataclass
class VersionComparison:
    """Result of diffing two snapshots: the change list and its summary."""

    changes: list[ChangeRecord]
    summary: ChangeSummary
    from_version: int | None = None
    to_version: int | None = None

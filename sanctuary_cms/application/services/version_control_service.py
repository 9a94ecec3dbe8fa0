"""Version control for content records: snapshots, comparison and rollback."""

import copy
import logging
from collections.abc import Mapping
from typing import Any

from sanctuary_cms.application.interfaces import (
    ContentObserver,
    ContentRepository,
    VersionRepository,
)
from sanctuary_cms.application.services.diff_engine import (
    compute_diff,
    describe_changes,
    summarize_changes,
)
from sanctuary_cms.domain.entities import (
    ContentType,
    ContentVersion,
    FieldSchema,
    VersionComparison,
    WorkflowState,
)
from sanctuary_cms.domain.exceptions import EntityNotFoundError
from sanctuary_cms.domain.field_config import field_value, schema_for

logger = logging.getLogger(__name__)


def take_snapshot(record: Any, schema: FieldSchema) -> dict[str, Any]:
    """Deep copy of the schema-declared fields of a record."""
    return {name: copy.deepcopy(field_value(record, name)) for name in schema}


class VersionControlService:
    """Orchestrates version history. Depends on the content and version ports (DI)."""

    def __init__(
        self,
        repositories: Mapping[ContentType, ContentRepository],
        version_repository: VersionRepository,
        *,
        observer: ContentObserver | None = None,
        treat_missing_previous_as_all_added: bool = False,
    ):
        self._repositories = repositories
        self._versions = version_repository
        self._observer = observer
        self._treat_missing_previous_as_all_added = treat_missing_previous_as_all_added

    async def create_version(
        self,
        content_type: ContentType,
        content_id: str,
        author: str,
        changelog: str = "",
        workflow_state: WorkflowState = WorkflowState.DRAFT,
    ) -> ContentVersion:
        """Snapshot the stored record as its next version."""
        schema = schema_for(content_type)
        record = await self._get_record(content_type, content_id)
        snapshot = take_snapshot(record, schema)

        history = await self._versions.list_for(content_type, content_id)
        previous = history[-1] if history else None
        if previous is None:
            changes_summary = "Initial version"
        else:
            changes = compute_diff(previous.snapshot, snapshot, schema)
            changes_summary = describe_changes(summarize_changes(changes, schema))

        version = await self._versions.add(ContentVersion(
            content_id=content_id,
            content_type=content_type,
            version_number=(previous.version_number + 1) if previous else 1,
            snapshot=snapshot,
            author=author,
            changelog=changelog,
            changes_summary=changes_summary,
            workflow_state=workflow_state,
        ))
        logger.info(
            "Recorded %s %s v%d: %s",
            content_type.value, content_id, version.version_number, changes_summary,
        )
        if self._observer is not None:
            self._observer.version_recorded(
                content_type, content_id, version.version_number, changes_summary
            )
        return version

    async def list_versions(self, content_type: ContentType, content_id: str) -> list[ContentVersion]:
        """Version history, newest first."""
        history = await self._versions.list_for(content_type, content_id)
        return sorted(history, key=lambda v: v.version_number, reverse=True)

    async def get_version(
        self, content_type: ContentType, content_id: str, version_id: str
    ) -> ContentVersion:
        version = await self._versions.get(version_id)
        if (
            version is None
            or version.content_id != content_id
            or version.content_type != content_type
        ):
            raise EntityNotFoundError("ContentVersion", version_id)
        return version

    async def compare_versions(
        self,
        content_type: ContentType,
        content_id: str,
        from_version_id: str,
        to_version_id: str,
    ) -> VersionComparison:
        older = await self.get_version(content_type, content_id, from_version_id)
        newer = await self.get_version(content_type, content_id, to_version_id)
        comparison = self.track_changes(content_type, older.snapshot, newer.snapshot)
        comparison.from_version = older.version_number
        comparison.to_version = newer.version_number
        return comparison

    async def rollback(
        self,
        content_type: ContentType,
        content_id: str,
        version_id: str,
        author: str,
    ) -> ContentVersion:
        """Restore a version's snapshot onto the record and save it as a new version."""
        target = await self.get_version(content_type, content_id, version_id)
        await self._get_record(content_type, content_id)

        def restore(record: Any) -> None:
            for name, value in target.snapshot.items():
                setattr(record, name, copy.deepcopy(value))

        await self._repositories[content_type].modify(content_id, restore)
        return await self.create_version(
            content_type,
            content_id,
            author,
            changelog=f"Rollback to v{target.version_number}",
            workflow_state=target.workflow_state,
        )

    def track_changes(
        self,
        content_type: ContentType,
        previous: Any | None,
        current: Any,
    ) -> VersionComparison:
        """Diff two arbitrary snapshots of one content type."""
        schema = schema_for(content_type)
        changes = compute_diff(
            previous,
            current,
            schema,
            treat_missing_previous_as_all_added=self._treat_missing_previous_as_all_added,
        )
        return VersionComparison(changes=changes, summary=summarize_changes(changes, schema))

    async def _get_record(self, content_type: ContentType, content_id: str) -> Any:
        record = await self._repositories[content_type].get_by_id(content_id)
        if record is None:
            raise EntityNotFoundError(content_type.value, content_id)
        return record

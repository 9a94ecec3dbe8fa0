"""Version history, comparison, rollback and ad-hoc diff endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from sanctuary_cms.application.schemas import (
    ChangeRecordSchema,
    ChangeSummarySchema,
    DiffRequest,
    RollbackRequest,
    VersionComparisonResponse,
    VersionCreate,
    VersionResponse,
)
from sanctuary_cms.application.services import VersionControlService
from sanctuary_cms.application.services.diff_engine import (
    ALL_CHANGES,
    describe_changes,
    filter_changes,
)
from sanctuary_cms.domain.entities import ChangeType, ContentType, VersionComparison
from sanctuary_cms.domain.exceptions import EntityNotFoundError
from sanctuary_cms.domain.field_config import schema_for
from sanctuary_cms.infrastructure.dependencies import get_version_control_service

router = APIRouter(tags=["Versions"])


def _comparison_response(
    comparison: VersionComparison,
    content_type: ContentType,
    change_type: ChangeType | None = None,
) -> VersionComparisonResponse:
    schema = schema_for(content_type)
    changes = filter_changes(comparison.changes, change_type or ALL_CHANGES)
    return VersionComparisonResponse(
        changes=[ChangeRecordSchema.from_change(c, schema) for c in changes],
        summary=ChangeSummarySchema.model_validate(comparison.summary, from_attributes=True),
        description=describe_changes(comparison.summary),
        from_version=comparison.from_version,
        to_version=comparison.to_version,
    )


@router.post(
    "/versions/{content_type}/{content_id}",
    response_model=VersionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_version(
    content_type: ContentType,
    content_id: str,
    data: VersionCreate,
    service: VersionControlService = Depends(get_version_control_service),
) -> VersionResponse:
    """Snapshot the current state of a record as its next version."""
    try:
        version = await service.create_version(
            content_type, content_id, data.author, data.changelog, data.workflow_state
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return VersionResponse.from_version(version)


@router.get("/versions/{content_type}/{content_id}", response_model=list[VersionResponse])
async def list_versions(
    content_type: ContentType,
    content_id: str,
    service: VersionControlService = Depends(get_version_control_service),
) -> list[VersionResponse]:
    """Version history of a record, newest first."""
    versions = await service.list_versions(content_type, content_id)
    return [VersionResponse.from_version(v) for v in versions]


@router.get(
    "/versions/{content_type}/{content_id}/compare",
    response_model=VersionComparisonResponse,
)
async def compare_versions(
    content_type: ContentType,
    content_id: str,
    from_id: str,
    to_id: str,
    change_type: ChangeType | None = None,
    service: VersionControlService = Depends(get_version_control_service),
) -> VersionComparisonResponse:
    """Field-level changes between two saved versions."""
    try:
        comparison = await service.compare_versions(content_type, content_id, from_id, to_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _comparison_response(comparison, content_type, change_type)


@router.post(
    "/versions/{content_type}/{content_id}/rollback/{version_id}",
    response_model=VersionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def rollback(
    content_type: ContentType,
    content_id: str,
    version_id: str,
    data: RollbackRequest,
    service: VersionControlService = Depends(get_version_control_service),
) -> VersionResponse:
    """Restore an older version; the restored state is saved as a new version."""
    try:
        version = await service.rollback(content_type, content_id, version_id, data.author)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return VersionResponse.from_version(version)


@router.post("/changes/diff", response_model=VersionComparisonResponse)
async def diff_snapshots(
    data: DiffRequest,
    service: VersionControlService = Depends(get_version_control_service),
) -> VersionComparisonResponse:
    """Compare two ad-hoc snapshots without touching stored content."""
    comparison = service.track_changes(data.content_type, data.previous, data.current)
    return _comparison_response(comparison, data.content_type, data.change_type)

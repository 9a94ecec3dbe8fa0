"""Educational resource search, lookup and engagement endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from sanctuary_cms.config import Settings, get_settings
from sanctuary_cms.application.schemas import (
    RatingRequest,
    ResourceResponse,
    ResourceSearchResponse,
    SortKey,
)
from sanctuary_cms.application.services import ContentService, EngagementService
from sanctuary_cms.domain.entities import ContentType, EducationalResource, SearchQuery, SortOrder
from sanctuary_cms.domain.exceptions import EntityNotFoundError
from sanctuary_cms.infrastructure.dependencies import (
    get_content_service,
    get_engagement_service,
)

router = APIRouter(prefix="/resources", tags=["Resources"])


def _found(resource: EducationalResource | None, resource_id: str) -> ResourceResponse:
    if resource is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("EducationalResource", resource_id)),
        )
    return ResourceResponse.model_validate(resource, from_attributes=True)


@router.get("/search", response_model=ResourceSearchResponse)
async def search_resources(
    q: str | None = None,
    category: str | None = None,
    tags: list[str] | None = Query(None),
    type: str | None = None,
    difficulty: str | None = None,
    audience: str | None = None,
    sort_by: SortKey = "relevance",
    sort_order: SortOrder | None = None,
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1, le=100),
    settings: Settings = Depends(get_settings),
    service: ContentService = Depends(get_content_service),
) -> ResourceSearchResponse:
    """Search resources with text, filters, sorting and pagination."""
    result = await service.search_resources(SearchQuery(
        text=q,
        category_id=category,
        tag_ids=tags or [],
        type=type,
        difficulty=difficulty,
        audience=audience,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        page_size=page_size or settings.resource_page_size,
    ))
    return ResourceSearchResponse.model_validate(result, from_attributes=True)


@router.get("/featured", response_model=list[ResourceResponse])
async def featured_resources(
    service: ContentService = Depends(get_content_service),
) -> list[ResourceResponse]:
    """Featured resources, best rated first."""
    resources = await service.featured_resources()
    return [ResourceResponse.model_validate(r, from_attributes=True) for r in resources]


@router.get("/popular", response_model=list[ResourceResponse])
async def popular_resources(
    limit: int | None = Query(None, ge=1, le=100),
    service: ContentService = Depends(get_content_service),
) -> list[ResourceResponse]:
    """Resources marked popular, most downloaded first."""
    resources = await service.popular_resources(limit)
    return [ResourceResponse.model_validate(r, from_attributes=True) for r in resources]


@router.get("/{resource_id}", response_model=ResourceResponse)
async def get_resource(
    resource_id: str,
    service: ContentService = Depends(get_content_service),
) -> ResourceResponse:
    """Retrieve a single resource by ID."""
    try:
        resource = await service.get_resource(resource_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ResourceResponse.model_validate(resource, from_attributes=True)


@router.get("/{resource_id}/related", response_model=list[ResourceResponse])
async def related_resources(
    resource_id: str,
    service: ContentService = Depends(get_content_service),
) -> list[ResourceResponse]:
    """Resources from the same category or sharing a tag."""
    try:
        resources = await service.related_resources(resource_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return [ResourceResponse.model_validate(r, from_attributes=True) for r in resources]


@router.post("/{resource_id}/downloads", response_model=ResourceResponse)
async def record_download(
    resource_id: str,
    service: EngagementService = Depends(get_engagement_service),
) -> ResourceResponse:
    resource = await service.record_download(resource_id)
    return _found(resource, resource_id)


@router.post("/{resource_id}/views", response_model=ResourceResponse)
async def record_view(
    resource_id: str,
    service: EngagementService = Depends(get_engagement_service),
) -> ResourceResponse:
    resource = await service.record_view(ContentType.RESOURCE, resource_id)
    return _found(resource, resource_id)


@router.post("/{resource_id}/ratings", response_model=ResourceResponse)
async def record_rating(
    resource_id: str,
    data: RatingRequest,
    service: EngagementService = Depends(get_engagement_service),
) -> ResourceResponse:
    """Fold a 1 to 5 star rating into the resource's average."""
    resource = await service.record_rating(resource_id, data.rating)
    return _found(resource, resource_id)

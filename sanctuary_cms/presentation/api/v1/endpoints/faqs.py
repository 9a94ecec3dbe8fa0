"""FAQ search, lookup and feedback endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from sanctuary_cms.config import Settings, get_settings
from sanctuary_cms.application.schemas import (
    FAQResponse,
    FAQSearchResponse,
    FeedbackRequest,
    SortKey,
)
from sanctuary_cms.application.services import ContentService, EngagementService
from sanctuary_cms.domain.entities import ContentType, FAQ, SearchQuery, SortOrder
from sanctuary_cms.domain.exceptions import EntityNotFoundError
from sanctuary_cms.infrastructure.dependencies import (
    get_content_service,
    get_engagement_service,
)

router = APIRouter(prefix="/faqs", tags=["FAQs"])


def _found(faq: FAQ | None, faq_id: str) -> FAQResponse:
    if faq is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("FAQ", faq_id)),
        )
    return FAQResponse.model_validate(faq, from_attributes=True)


@router.get("/search", response_model=FAQSearchResponse)
async def search_faqs(
    q: str | None = None,
    category: str | None = None,
    tags: list[str] | None = Query(None),
    difficulty: str | None = None,
    sort_by: SortKey = "relevance",
    sort_order: SortOrder | None = None,
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1, le=100),
    settings: Settings = Depends(get_settings),
    service: ContentService = Depends(get_content_service),
) -> FAQSearchResponse:
    """Search FAQs with text, filters, sorting and pagination."""
    result = await service.search_faqs(SearchQuery(
        text=q,
        category_id=category,
        tag_ids=tags or [],
        difficulty=difficulty,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        page_size=page_size or settings.faq_page_size,
    ))
    return FAQSearchResponse.model_validate(result, from_attributes=True)


@router.get("/featured", response_model=list[FAQResponse])
async def featured_faqs(
    service: ContentService = Depends(get_content_service),
) -> list[FAQResponse]:
    """Featured FAQs, highest priority first."""
    faqs = await service.featured_faqs()
    return [FAQResponse.model_validate(f, from_attributes=True) for f in faqs]


@router.get("/popular", response_model=list[FAQResponse])
async def popular_faqs(
    limit: int | None = Query(None, ge=1, le=100),
    service: ContentService = Depends(get_content_service),
) -> list[FAQResponse]:
    """FAQs marked popular, most viewed first."""
    faqs = await service.popular_faqs(limit)
    return [FAQResponse.model_validate(f, from_attributes=True) for f in faqs]


@router.get("/{faq_id}", response_model=FAQResponse)
async def get_faq(
    faq_id: str,
    service: ContentService = Depends(get_content_service),
) -> FAQResponse:
    """Retrieve a single FAQ by ID."""
    try:
        faq = await service.get_faq(faq_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return FAQResponse.model_validate(faq, from_attributes=True)


@router.get("/{faq_id}/related", response_model=list[FAQResponse])
async def related_faqs(
    faq_id: str,
    service: ContentService = Depends(get_content_service),
) -> list[FAQResponse]:
    """FAQs from the same category or sharing a tag."""
    try:
        faqs = await service.related_faqs(faq_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return [FAQResponse.model_validate(f, from_attributes=True) for f in faqs]


@router.post("/{faq_id}/feedback", response_model=FAQResponse)
async def record_feedback(
    faq_id: str,
    data: FeedbackRequest,
    service: EngagementService = Depends(get_engagement_service),
) -> FAQResponse:
    """Count a helpful / not-helpful vote."""
    faq = await service.record_feedback(faq_id, data.helpful)
    return _found(faq, faq_id)


@router.post("/{faq_id}/views", response_model=FAQResponse)
async def record_view(
    faq_id: str,
    service: EngagementService = Depends(get_engagement_service),
) -> FAQResponse:
    """Count one view of an FAQ."""
    faq = await service.record_view(ContentType.FAQ, faq_id)
    return _found(faq, faq_id)

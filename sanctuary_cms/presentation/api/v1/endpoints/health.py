"""Health check endpoint: reports version and how much content is loaded."""

from fastapi import APIRouter

from sanctuary_cms.config import get_settings
from sanctuary_cms.infrastructure.dependencies import (
    get_faq_repository,
    get_resource_repository,
)

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Returns the application status plus loaded FAQ and resource counts."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "content": {
            "faqs": await get_faq_repository().count(),
            "resources": await get_resource_repository().count(),
        },
    }

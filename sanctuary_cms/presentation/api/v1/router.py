"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from sanctuary_cms.presentation.api.v1.endpoints.health import router as health_router
from sanctuary_cms.presentation.api.v1.endpoints.faqs import router as faqs_router
from sanctuary_cms.presentation.api.v1.endpoints.resources import router as resources_router
from sanctuary_cms.presentation.api.v1.endpoints.analytics import router as analytics_router
from sanctuary_cms.presentation.api.v1.endpoints.versions import router as versions_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(faqs_router)
router.include_router(resources_router)
router.include_router(analytics_router)
router.include_router(versions_router)

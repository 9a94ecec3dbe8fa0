"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sanctuary_cms.config import get_settings
from sanctuary_cms.infrastructure.dependencies import (
    get_faq_repository,
    get_resource_repository,
)
from sanctuary_cms.infrastructure.logging.log_config import setup_logging
from sanctuary_cms.infrastructure.seed.yaml_seed_loader import YamlSeedLoader
from sanctuary_cms.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: configure logging and load the seed content."""
    settings = get_settings()
    setup_logging()

    loader = YamlSeedLoader(
        data_dir=settings.seed_data_dir,
        faq_repository=get_faq_repository(),
        resource_repository=get_resource_repository(),
    )
    faqs, resources = await loader.load()
    logger.info("Content ready: %d FAQs, %d resources", faqs, resources)

    yield


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "sanctuary_cms.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )

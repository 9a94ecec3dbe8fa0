"""Shared fixtures for API tests: a client over freshly seeded repositories."""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from sanctuary_cms.config import get_settings
from sanctuary_cms.infrastructure import dependencies
from sanctuary_cms.infrastructure.seed.yaml_seed_loader import YamlSeedLoader
from sanctuary_cms.main import app


@pytest_asyncio.fixture
async def client():
    # ASGITransport does not run the lifespan, so seed the repositories here
    dependencies.get_faq_repository.cache_clear()
    dependencies.get_resource_repository.cache_clear()
    dependencies.get_version_repository.cache_clear()
    await YamlSeedLoader(
        get_settings().seed_data_dir,
        dependencies.get_faq_repository(),
        dependencies.get_resource_repository(),
    ).load()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

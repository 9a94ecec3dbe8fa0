from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_PACKAGE_DIR = Path(__file__).resolve().parent
_PROJECT_DIR = _PACKAGE_DIR.parent
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Sanctuary Content API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Seed data (YAML files with categories, tags and records)
    seed_data_dir: str = str(_PACKAGE_DIR / "data")

    # Search
    faq_page_size: int = 10
    resource_page_size: int = 12
    suggestion_limit: int = 5

    # Analytics
    trending_faq_min_views: int = 100
    trending_resource_min_downloads: int = 50
    trending_limit: int = 5
    popular_limit: int = 10
    related_limit: int = 3
    recommendation_limit: int = 5

    # Change tracking: report every field of a brand-new record as "added"
    diff_treat_missing_previous_as_all_added: bool = False

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_search: str = "INFO"           # search pipeline events
    log_level_engagement: str = "INFO"       # feedback / download / view events
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()

"""YAML seed loader: parses the bundled FAQ and resource files into repositories.

Executed once at application startup via the FastAPI lifespan.
"""

import logging
from datetime import date, datetime, time, timezone
from pathlib import Path
from typing import Any

import yaml

from sanctuary_cms.application.interfaces import ContentRepository
from sanctuary_cms.domain.entities import Category, EducationalResource, FAQ, Tag
from sanctuary_cms.domain.exceptions import SeedDataError

logger = logging.getLogger(__name__)

FAQ_FILE = "faqs.yaml"
RESOURCE_FILE = "resources.yaml"


class YamlSeedLoader:
    """Loads seed content from a data directory into the content repositories."""

    def __init__(
        self,
        data_dir: str | Path,
        faq_repository: ContentRepository[FAQ],
        resource_repository: ContentRepository[EducationalResource],
    ):
        self._data_dir = Path(data_dir)
        self._faqs = faq_repository
        self._resources = resource_repository

    async def load(self) -> tuple[int, int]:
        """Replace repository contents with the seed files.

        Returns (faq_count, resource_count). Missing files load nothing.
        """
        logger.info("Loading seed content from %s", self._data_dir)

        faq_count = 0
        data = self._load_yaml(self._data_dir / FAQ_FILE)
        if data is not None:
            await self._faqs.clear_all()
            for faq in self.parse_faqs(data):
                await self._faqs.create(faq)
                faq_count += 1

        resource_count = 0
        data = self._load_yaml(self._data_dir / RESOURCE_FILE)
        if data is not None:
            await self._resources.clear_all()
            for resource in self.parse_resources(data):
                await self._resources.create(resource)
                resource_count += 1

        logger.info("Seed content loaded: %d FAQs, %d resources", faq_count, resource_count)
        return faq_count, resource_count

    # ── Parsing ──────────────────────────────────────────────────────

    @classmethod
    def parse_faqs(cls, data: dict[str, Any]) -> list[FAQ]:
        categories = cls._index_categories(data, FAQ_FILE)
        tags = cls._index_tags(data)
        faqs: list[FAQ] = []
        for entry in data.get("faqs") or []:
            if not isinstance(entry, dict) or "id" not in entry or "question" not in entry:
                raise SeedDataError(FAQ_FILE, f"invalid FAQ entry: {entry!r}")
            helpful = int(entry.get("helpful", 0))
            not_helpful = int(entry.get("not_helpful", 0))
            votes = helpful + not_helpful
            faqs.append(FAQ(
                id=str(entry["id"]),
                question=entry["question"],
                answer=entry.get("answer", ""),
                category=cls._lookup(categories, entry.get("category"), "category", FAQ_FILE),
                tags=[cls._lookup(tags, t, "tag", FAQ_FILE) for t in entry.get("tags") or []],
                difficulty=entry.get("difficulty"),
                keywords=[str(k) for k in entry.get("keywords") or []],
                priority=int(entry.get("priority", 0)),
                short_answer=entry.get("short_answer"),
                author=entry.get("author"),
                status=entry.get("status", "published"),
                version=int(entry.get("version", 1)),
                is_popular=bool(entry.get("is_popular", False)),
                is_featured=bool(entry.get("is_featured", False)),
                views=int(entry.get("views", 0)),
                helpful=helpful,
                not_helpful=not_helpful,
                helpfulness_ratio=helpful / votes if votes else 0.0,
                last_updated=cls._as_datetime(entry.get("last_updated")),
            ))
        return faqs

    @classmethod
    def parse_resources(cls, data: dict[str, Any]) -> list[EducationalResource]:
        categories = cls._index_categories(data, RESOURCE_FILE)
        tags = cls._index_tags(data)
        resources: list[EducationalResource] = []
        for entry in data.get("resources") or []:
            if not isinstance(entry, dict) or "id" not in entry or "title" not in entry:
                raise SeedDataError(RESOURCE_FILE, f"invalid resource entry: {entry!r}")
            resources.append(EducationalResource(
                id=str(entry["id"]),
                title=entry["title"],
                description=entry.get("description", ""),
                category=cls._lookup(categories, entry.get("category"), "category", RESOURCE_FILE),
                tags=[cls._lookup(tags, t, "tag", RESOURCE_FILE) for t in entry.get("tags") or []],
                type=entry.get("type", "article"),
                difficulty=entry.get("difficulty"),
                target_audience=list(entry.get("target_audience") or []),
                url=entry.get("url"),
                summary=entry.get("summary", ""),
                keywords=[str(k) for k in entry.get("keywords") or []],
                language=entry.get("language", "en"),
                featured=bool(entry.get("featured", False)),
                is_popular=bool(entry.get("is_popular", False)),
                file_size=entry.get("file_size"),
                duration=entry.get("duration"),
                page_count=entry.get("page_count"),
                views=int(entry.get("views", 0)),
                downloads=int(entry.get("downloads", 0)),
                rating=float(entry.get("rating", 0.0)),
                rating_count=int(entry.get("rating_count", 0)),
                last_updated=cls._as_datetime(entry.get("last_updated")),
            ))
        return resources

    @staticmethod
    def _index_categories(data: dict[str, Any], source: str) -> dict[str, Category]:
        categories: dict[str, Category] = {}
        for entry in data.get("categories") or []:
            if not isinstance(entry, dict) or "id" not in entry:
                raise SeedDataError(source, f"invalid category entry: {entry!r}")
            categories[entry["id"]] = Category(
                id=entry["id"],
                name=entry.get("name", entry["id"]),
                slug=entry.get("slug", entry["id"]),
                description=entry.get("description", ""),
                target_audience=list(entry.get("target_audience") or []),
            )
        return categories

    @staticmethod
    def _index_tags(data: dict[str, Any]) -> dict[str, Tag]:
        return {
            entry["id"]: Tag(
                id=entry["id"],
                name=entry.get("name", entry["id"]),
                slug=entry.get("slug", entry["id"]),
            )
            for entry in data.get("tags") or []
        }

    @staticmethod
    def _lookup(index: dict[str, Any], key: str | None, kind: str, source: str) -> Any:
        if key not in index:
            raise SeedDataError(source, f"unknown {kind} '{key}'")
        return index[key]

    @staticmethod
    def _as_datetime(value: Any) -> datetime:
        """YAML gives dates, datetimes or strings; normalize to aware UTC datetimes."""
        if value is None:
            return datetime.now(timezone.utc)
        if isinstance(value, str):
            value = datetime.fromisoformat(value)
        if isinstance(value, datetime):
            return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
        if isinstance(value, date):
            return datetime.combine(value, time.min, tzinfo=timezone.utc)
        raise SeedDataError("seed", f"unsupported timestamp {value!r}")

    def _load_yaml(self, path: Path) -> dict | None:
        """Load and parse a YAML file, returning None when absent or unreadable."""
        if not path.exists():
            logger.warning("Seed file not found: %s", path)
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError:
            logger.exception("Failed to parse YAML file: %s", path)
            return None
        if not isinstance(data, dict):
            raise SeedDataError(path.name, f"top level must be a mapping, got {type(data).__name__}")
        return data

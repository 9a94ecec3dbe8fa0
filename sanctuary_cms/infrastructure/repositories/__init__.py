from .in_memory_content_repository import InMemoryContentRepository
from .in_memory_version_repository import InMemoryVersionRepository

__all__ = [
    "InMemoryContentRepository",
    "InMemoryVersionRepository",
]

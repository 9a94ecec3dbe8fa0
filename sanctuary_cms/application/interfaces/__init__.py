from .content_repository import ContentRepository
from .version_repository import VersionRepository
from .content_observer import ContentObserver, NullContentObserver

__all__ = [
    "ContentRepository",
    "VersionRepository",
    "ContentObserver",
    "NullContentObserver",
]

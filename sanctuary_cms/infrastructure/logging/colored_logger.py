"""Colored content logger: ANSI-colored console output for content events.

Implements the ContentObserver port so searches, engagement counters and
version snapshots are easy to trace visually in the terminal.

Color scheme:
    🔵 Blue    : Search
    🟢 Green   : Feedback / Rating
    🟠 Cyan    : Download / View
    🟣 Magenta : Versioning
    ⚪ Gray    : Details
"""

import logging
from typing import Any

from sanctuary_cms.application.interfaces import ContentObserver
from sanctuary_cms.domain.entities import ContentType

SEARCH_LOGGER = "ContentSearch"
ENGAGEMENT_LOGGER = "ContentEngagement"
VERSION_LOGGER = "ContentVersioning"


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"


# ── Event Definitions ────────────────────────────────────────────────

class ContentEvent:
    """Predefined content events with colors and icons."""

    SEARCH = ("SEARCH", _Colors.BLUE, "🔍")
    FEEDBACK = ("FEEDBACK", _Colors.GREEN, "📊")
    DOWNLOAD = ("DOWNLOAD", _Colors.CYAN, "📥")
    VIEW = ("VIEW", _Colors.CYAN, "👀")
    RATING = ("RATING", _Colors.YELLOW, "⭐")
    VERSION = ("VERSION", _Colors.MAGENTA, "🗂️")


_ENGAGEMENT_EVENTS: dict[str, tuple[str, str, str]] = {
    "feedback": ContentEvent.FEEDBACK,
    "download": ContentEvent.DOWNLOAD,
    "view": ContentEvent.VIEW,
    "rating": ContentEvent.RATING,
}


def format_event(event: tuple[str, str, str], message: str, **kwargs: Any) -> str:
    """Render one colored log line with optional key=value details."""
    label, color, icon = event
    formatted = (
        f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
        f"{color}{message}{_Colors.RESET}"
    )
    if kwargs:
        details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
        formatted += f" {_Colors.GRAY}({details}){_Colors.RESET}"
    return formatted


# ── ConsoleContentObserver ───────────────────────────────────────────

class ConsoleContentObserver(ContentObserver):
    """Color-coded logging observer for the content engines.

    Usage:
        observer = ConsoleContentObserver()
        service = ContentService(faqs, resources, observer=observer)
    """

    def __init__(self):
        self._search = logging.getLogger(SEARCH_LOGGER)
        self._engagement = logging.getLogger(ENGAGEMENT_LOGGER)
        self._versions = logging.getLogger(VERSION_LOGGER)

    def search_completed(
        self,
        content_type: ContentType,
        query: str | None,
        total: int,
        page: int,
        duration_ms: float,
    ) -> None:
        self._search.info(format_event(
            ContentEvent.SEARCH,
            f"{content_type.value} search \"{query or ''}\"",
            results=total,
            page=page,
            time=f"{duration_ms:.2f}ms",
        ))

    def engagement_recorded(self, event: str, record_id: str, **values: Any) -> None:
        spec = _ENGAGEMENT_EVENTS.get(event)
        if spec is None:
            spec = (event.upper(), _Colors.GRAY, "•")
        self._engagement.info(format_event(spec, record_id, **values))

    def version_recorded(
        self,
        content_type: ContentType,
        content_id: str,
        version_number: int,
        changes_summary: str,
    ) -> None:
        self._versions.info(format_event(
            ContentEvent.VERSION,
            f"{content_type.value}/{content_id} v{version_number}",
            changes=changes_summary,
        ))

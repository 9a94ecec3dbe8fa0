from .analytics_service import AnalyticsService
from .content_service import ContentService
from .engagement_service import EngagementService
from .version_control_service import VersionControlService

__all__ = [
    "AnalyticsService",
    "ContentService",
    "EngagementService",
    "VersionControlService",
]

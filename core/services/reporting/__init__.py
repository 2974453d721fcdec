from .service import ReportingService
from .models import (
    ActivityProgressRow,
    ProjectProgressSummary,
    TimelineEntry,
)
from .summary import index_projects, weighted_progress

__all__ = [
    "ReportingService",
    "ActivityProgressRow",
    "ProjectProgressSummary",
    "TimelineEntry",
    "index_projects",
    "weighted_progress",
]

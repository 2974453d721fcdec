from dataclasses import dataclass
from datetime import date
from typing import List

from core.domain.project import Project
from core.services.reporting import (
    ActivityProgressRow,
    ProjectProgressSummary,
    TimelineEntry,
)


@dataclass
class ExcelReportContext:
    project: Project
    summary: ProjectProgressSummary
    progress_rows: List[ActivityProgressRow]
    timeline: List[TimelineEntry]
    as_of: date

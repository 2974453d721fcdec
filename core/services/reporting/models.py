from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from core.domain.activity import Activity
from core.services.reconciliation.models import MatchedAggregate, ProgressResult, TimelineSpan


@dataclass
class ActivityProgressRow:
    activity: Activity
    aggregate: MatchedAggregate
    progress: ProgressResult

    @property
    def activity_id(self) -> str:
        return self.activity.id

    @property
    def has_data(self) -> bool:
        return self.aggregate.has_data


@dataclass
class TimelineEntry:
    activity: Activity
    span: TimelineSpan
    progress: ProgressResult


@dataclass
class ProjectProgressSummary:
    project_code: str
    project_name: str
    activities_total: int
    activities_with_data: int
    status_counts: Dict[str, int]
    total_contract_value: float
    total_planned_value: float
    total_earned_value: float
    remaining_value: float
    value_progress_percent: float
    weighted_progress_percent: float
    critical_activities: int
    delayed_activities: int
    unscheduled_activities: int
    ambiguous_records: int
    alerts: List[str] = field(default_factory=list)
    timeline_start: Optional[date] = None
    timeline_end: Optional[date] = None

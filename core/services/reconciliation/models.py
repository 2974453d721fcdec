from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.domain.enums import ProgressStatus


@dataclass(frozen=True)
class MatchedAggregate:
    planned_count: int
    actual_count: int
    total_planned: float
    total_actual: float
    has_data: bool


@dataclass(frozen=True)
class ValueBreakdown:
    rate: float
    value: float
    planned_value: float
    remaining_value: float


@dataclass(frozen=True)
class ProgressResult:
    progress_from_measurements: float
    progress_from_plan: float
    progress_percent: float  # unclamped, over-delivery reads above 100
    actual_units: float
    status: ProgressStatus
    rate: float
    executed_value: float
    has_data: bool

    @property
    def status_label(self) -> str:
        return self.status.label


@dataclass(frozen=True)
class TimelineSpan:
    planned_start: date
    planned_end: date
    actual_start: Optional[date]
    actual_end: Optional[date]
    duration_days: int
    is_delayed: bool
    is_completed: bool
    is_critical: bool


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date

    @property
    def days(self) -> int:
        return (self.end - self.start).days


__all__ = [
    "MatchedAggregate",
    "ValueBreakdown",
    "ProgressResult",
    "TimelineSpan",
    "DateRange",
]

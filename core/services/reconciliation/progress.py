from __future__ import annotations

from typing import Any

from core.domain.activity import Activity
from core.domain.enums import ProgressStatus
from core.services.reconciliation.models import MatchedAggregate, ProgressResult
from core.services.reconciliation.parsing import parse_number
from core.services.reconciliation.valuation import calculate_value

COMPLETED_THRESHOLD = 100.0
ON_TRACK_THRESHOLD = 80.0
IN_PROGRESS_THRESHOLD = 50.0


def percent_of(part: Any, whole: Any) -> float:
    denominator = parse_number(whole)
    if denominator <= 0:
        return 0.0
    return parse_number(part) / denominator * 100.0


def status_for_progress(progress_percent: float, actual_count: int) -> ProgressStatus:
    # no actual record at all means not started, whatever the percentages say
    if actual_count == 0:
        return ProgressStatus.NOT_STARTED
    if progress_percent >= COMPLETED_THRESHOLD:
        return ProgressStatus.COMPLETED
    if progress_percent >= ON_TRACK_THRESHOLD:
        return ProgressStatus.ON_TRACK
    if progress_percent >= IN_PROGRESS_THRESHOLD:
        return ProgressStatus.IN_PROGRESS
    if progress_percent > 0:
        return ProgressStatus.BEHIND_SCHEDULE
    return ProgressStatus.NOT_STARTED


def classify(aggregate: MatchedAggregate, activity: Activity) -> ProgressResult:
    """
    Progress, status and executed value for one activity.

    KPI actuals are authoritative; the BOQ's own actual units are only used when
    no actual quantity was measured. The higher of the two progress readings is
    reported, since either source alone may under-report partial data entry.
    """
    if aggregate.total_actual > 0:
        actual_units = aggregate.total_actual
    else:
        actual_units = parse_number(activity.actual_units)

    planned_units = parse_number(activity.planned_units)
    from_measurements = percent_of(aggregate.total_actual, aggregate.total_planned)
    from_plan = percent_of(actual_units, planned_units)
    final_progress = max(from_measurements, from_plan)

    total_units = parse_number(activity.total_units) or planned_units
    value = calculate_value(total_units, planned_units, actual_units, activity.total_value)

    return ProgressResult(
        progress_from_measurements=from_measurements,
        progress_from_plan=from_plan,
        progress_percent=final_progress,
        actual_units=actual_units,
        status=status_for_progress(final_progress, aggregate.actual_count),
        rate=value.rate,
        executed_value=value.value,
        has_data=aggregate.has_data,
    )


__all__ = [
    "COMPLETED_THRESHOLD",
    "ON_TRACK_THRESHOLD",
    "IN_PROGRESS_THRESHOLD",
    "percent_of",
    "status_for_progress",
    "classify",
]

from __future__ import annotations

import logging
import math
from datetime import date, timedelta
from typing import Iterable, Optional

from core.domain.activity import Activity, DateLike
from core.domain.enums import InputType
from core.domain.measurement import MeasurementRecord
from core.services.reconciliation.models import DateRange, TimelineSpan
from core.services.reconciliation.parsing import parse_date, parse_number

logger = logging.getLogger(__name__)

DEFAULT_SPAN_DAYS = 1
DEFAULT_PADDING_DAYS = 7
EMPTY_WINDOW_MONTHS = 3


def _first_date(*values: DateLike) -> Optional[date]:
    for value in values:
        parsed = parse_date(value)
        if parsed is not None:
            return parsed
    return None


def resolve_planned_end(activity: Activity, planned_start: date) -> date:
    """
    First usable end-like field; otherwise start + calendar duration, otherwise
    start + one day. An end before the start is treated as unusable so spans
    always run forward.
    """
    for value in (activity.planned_end_date, activity.lookahead_end_date):
        parsed = parse_date(value)
        if parsed is not None and parsed >= planned_start:
            return parsed

    duration = parse_number(activity.calendar_duration_days)
    if duration > 0:
        return planned_start + timedelta(days=math.floor(duration))
    return planned_start + timedelta(days=DEFAULT_SPAN_DAYS)


def build_timeline_span(
    activity: Activity,
    matched_records: Iterable[MeasurementRecord],
) -> Optional[TimelineSpan]:
    """
    Chronological placement of one activity, or None when it has no usable
    planned start (it is left off the timeline, never guessed).
    """
    planned_start = _first_date(activity.planned_start_date, activity.lookahead_start_date)
    if planned_start is None:
        logger.debug("Activity %s has no planned start; omitted from timeline", activity.id)
        return None

    planned_end = resolve_planned_end(activity, planned_start)

    actual_dates = sorted(
        parsed
        for parsed in (
            parse_date(record.record_date)
            for record in matched_records
            if record.kind is InputType.ACTUAL
        )
        if parsed is not None
    )
    actual_start = actual_dates[0] if actual_dates else None
    actual_end = actual_dates[-1] if actual_dates else None

    is_delayed = bool(activity.is_delayed)
    is_critical = is_delayed or (actual_end is not None and actual_end > planned_end)

    return TimelineSpan(
        planned_start=planned_start,
        planned_end=planned_end,
        actual_start=actual_start,
        actual_end=actual_end,
        duration_days=(planned_end - planned_start).days,
        is_delayed=is_delayed,
        is_completed=bool(activity.is_completed),
        is_critical=is_critical,
    )


def _month_end(first_of_month: date, months_ahead: int) -> date:
    month_index = first_of_month.month - 1 + months_ahead
    year = first_of_month.year + month_index // 12
    month = month_index % 12 + 1
    return date(year, month, 1) - timedelta(days=1)


def timeline_date_range(
    spans: Iterable[TimelineSpan],
    padding_days: int = DEFAULT_PADDING_DAYS,
    today: Optional[date] = None,
) -> DateRange:
    """
    Window covering every planned and actual date, padded on both sides.
    With nothing to show: the current month and the two after it.
    """
    spans = list(spans)
    if not spans:
        first = (today or date.today()).replace(day=1)
        return DateRange(start=first, end=_month_end(first, EMPTY_WINDOW_MONTHS))

    starts = [s.planned_start for s in spans] + [s.actual_start for s in spans if s.actual_start]
    ends = [s.planned_end for s in spans] + [s.actual_end for s in spans if s.actual_end]
    padding = timedelta(days=max(0, int(padding_days)))
    return DateRange(start=min(starts) - padding, end=max(ends) + padding)


__all__ = [
    "DEFAULT_SPAN_DAYS",
    "DEFAULT_PADDING_DAYS",
    "resolve_planned_end",
    "build_timeline_span",
    "timeline_date_range",
]

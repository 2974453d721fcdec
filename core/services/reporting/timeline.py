from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence

from core.domain.activity import Activity
from core.domain.measurement import MeasurementRecord
from core.domain.project import Project
from core.services.reconciliation import (
    DateRange,
    MatchPredicate,
    activities_for_project,
    aggregate,
    build_timeline_span,
    classify,
    match,
    timeline_date_range,
)
from core.services.reporting.models import TimelineEntry


class ReportingTimelineMixin:
    _predicate: MatchPredicate
    _timeline_padding_days: int

    def build_timeline(
        self,
        project: Project,
        activities: Sequence[Activity],
        records: Sequence[MeasurementRecord],
    ) -> List[TimelineEntry]:
        """
        Timeline entries ordered by planned start. Activities without a planned
        start are left out.
        """
        entries: List[TimelineEntry] = []
        for activity in activities_for_project(project, activities):
            matched = match(activity, records, self._predicate)
            span = build_timeline_span(activity, matched)
            if span is None:
                continue
            entries.append(
                TimelineEntry(
                    activity=activity,
                    span=span,
                    progress=classify(aggregate(matched), activity),
                )
            )
        entries.sort(key=lambda e: (e.span.planned_start, e.span.planned_end))
        return entries

    def timeline_range(
        self,
        entries: Sequence[TimelineEntry],
        today: Optional[date] = None,
    ) -> DateRange:
        return timeline_date_range(
            (e.span for e in entries),
            padding_days=self._timeline_padding_days,
            today=today,
        )

    def get_critical_entries(self, entries: Sequence[TimelineEntry]) -> List[TimelineEntry]:
        return [e for e in entries if e.span.is_critical]

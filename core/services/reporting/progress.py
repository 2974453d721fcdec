from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from core.domain.activity import Activity
from core.domain.measurement import MeasurementRecord
from core.domain.project import Project
from core.services.reconciliation import (
    MatchPredicate,
    activities_for_project,
    aggregate,
    ambiguous_claims,
    classify,
    match,
)
from core.services.reporting.models import ActivityProgressRow

logger = logging.getLogger(__name__)


class ReportingProgressMixin:
    _predicate: MatchPredicate

    def evaluate_activity(
        self,
        activity: Activity,
        records: Sequence[MeasurementRecord],
    ) -> ActivityProgressRow:
        """match -> aggregate -> classify for one activity against the shared record set."""
        matched = match(activity, records, self._predicate)
        totals = aggregate(matched)
        return ActivityProgressRow(
            activity=activity,
            aggregate=totals,
            progress=classify(totals, activity),
        )

    def evaluate_activities(
        self,
        activities: Sequence[Activity],
        records: Sequence[MeasurementRecord],
    ) -> List[ActivityProgressRow]:
        return [self.evaluate_activity(activity, records) for activity in activities]

    def evaluate_project(
        self,
        project: Project,
        activities: Sequence[Activity],
        records: Sequence[MeasurementRecord],
    ) -> List[ActivityProgressRow]:
        """
        Progress rows for every activity of ``project``.
        ``records`` must be the batched set loaded once for the screen.
        """
        scoped = activities_for_project(project, activities)
        rows = self.evaluate_activities(scoped, records)
        logger.info(
            "Evaluated %d activities for project %s (%d with measurement data)",
            len(rows),
            project.full_code,
            sum(1 for r in rows if r.has_data),
        )
        return rows

    def ambiguous_records(
        self,
        activities: Sequence[Activity],
        records: Sequence[MeasurementRecord],
    ) -> Dict[str, List[str]]:
        """
        Records claimed by more than one activity. Reported, never resolved:
        telling the owners apart needs a key the datasets do not share.
        """
        claims = ambiguous_claims(activities, records, self._predicate)
        if claims:
            logger.warning("%d measurement record(s) match more than one activity", len(claims))
        return claims

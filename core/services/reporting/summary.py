from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

from core.domain.enums import ProgressStatus
from core.domain.identifiers import normalize_code
from core.domain.project import Project
from core.exceptions import BusinessRuleError, NotFoundError
from core.services.reconciliation import calculate_value, parse_number, percent_of
from core.services.reporting.models import (
    ActivityProgressRow,
    ProjectProgressSummary,
    TimelineEntry,
)


def index_projects(projects: Iterable[Project]) -> Dict[str, Project]:
    """Working set keyed by normalized full code; full codes must be unique."""
    indexed: Dict[str, Project] = {}
    for project in projects:
        key = normalize_code(project.full_code)
        if key in indexed:
            raise BusinessRuleError(
                f"Project code '{project.full_code}' appears more than once in the working set.",
                code="DUPLICATE_PROJECT_CODE",
            )
        indexed[key] = project
    return indexed


def weighted_progress(rows: Sequence[ActivityProgressRow]) -> float:
    """Progress weighted by contract value; plain average when no value is recorded."""
    if not rows:
        return 0.0
    weights = [parse_number(r.activity.total_value) for r in rows]
    total_weight = sum(weights)
    if total_weight <= 0:
        return sum(r.progress.progress_percent for r in rows) / len(rows)
    return sum(r.progress.progress_percent * w for r, w in zip(rows, weights)) / total_weight


class ReportingSummaryMixin:
    def find_project(self, projects: Iterable[Project], code: str) -> Project:
        project = index_projects(projects).get(normalize_code(code))
        if project is None:
            raise NotFoundError(f"Project '{code}' not found.", code="PROJECT_NOT_FOUND")
        return project

    def summarize_project(
        self,
        project: Project,
        rows: Sequence[ActivityProgressRow],
        timeline: Optional[Sequence[TimelineEntry]] = None,
        ambiguous: Optional[Dict[str, List[str]]] = None,
        today: Optional[date] = None,
    ) -> ProjectProgressSummary:
        status_counts = Counter(r.progress.status.value for r in rows)
        for status in ProgressStatus:
            status_counts.setdefault(status.value, 0)

        contract_value = 0.0
        planned_value = 0.0
        earned_value = 0.0
        remaining_value = 0.0
        for r in rows:
            activity = r.activity
            planned_units = parse_number(activity.planned_units)
            total_units = parse_number(activity.total_units) or planned_units
            value = calculate_value(total_units, planned_units, r.progress.actual_units, activity.total_value)
            contract_value += parse_number(activity.total_value)
            planned_value += value.planned_value
            earned_value += value.value
            remaining_value += value.remaining_value

        entries = list(timeline) if timeline is not None else []
        critical = sum(1 for e in entries if e.span.is_critical)
        delayed = sum(1 for e in entries if e.span.is_delayed)
        # only known when a timeline was built for the same rows
        unscheduled = max(0, len(rows) - len(entries)) if timeline is not None else 0
        ambiguous_count = len(ambiguous or {})

        window = self.timeline_range(entries, today=today) if entries else None

        summary = ProjectProgressSummary(
            project_code=project.full_code,
            project_name=project.project_name,
            activities_total=len(rows),
            activities_with_data=sum(1 for r in rows if r.has_data),
            status_counts=dict(status_counts),
            total_contract_value=contract_value,
            total_planned_value=planned_value,
            total_earned_value=earned_value,
            remaining_value=remaining_value,
            value_progress_percent=percent_of(earned_value, planned_value),
            weighted_progress_percent=weighted_progress(rows),
            critical_activities=critical,
            delayed_activities=delayed,
            unscheduled_activities=unscheduled,
            ambiguous_records=ambiguous_count,
            timeline_start=window.start if window else None,
            timeline_end=window.end if window else None,
        )
        summary.alerts = self._build_alerts(summary)
        return summary

    def _build_alerts(self, summary: ProjectProgressSummary) -> List[str]:
        alerts: List[str] = []

        if summary.activities_total == 0:
            alerts.append("This project has no BOQ activities yet.")
            return alerts

        without_data = summary.activities_total - summary.activities_with_data
        if without_data > 0:
            alerts.append(f"{without_data} activity(ies) have no measurement data yet.")

        if summary.critical_activities > 0:
            alerts.append(
                f"{summary.critical_activities} activity(ies) are critical "
                "(flagged delayed or finished after the planned end)."
            )

        if summary.unscheduled_activities > 0:
            alerts.append(
                f"{summary.unscheduled_activities} activity(ies) have no planned start date "
                "and are left off the timeline."
            )

        if summary.ambiguous_records > 0:
            alerts.append(
                f"{summary.ambiguous_records} measurement record(s) match more than one activity."
            )

        return alerts

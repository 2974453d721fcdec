from __future__ import annotations

from typing import Iterable, List

from core.domain.activity import Activity
from core.domain.identifiers import normalize_code
from core.domain.measurement import MeasurementRecord
from core.domain.project import Project
from core.services.reconciliation.normalize import code_matches


def activity_in_project(project: Project, activity: Activity) -> bool:
    full_code = normalize_code(project.full_code)
    activity_full = normalize_code(activity.project_full_code)
    if activity_full:
        return activity_full == full_code
    # activities stored without a full code only belong to projects without a sub-code
    if (project.project_sub_code or "").strip():
        return False
    return normalize_code(activity.project_code) == normalize_code(project.project_code)


def activities_for_project(project: Project, activities: Iterable[Activity]) -> List[Activity]:
    return [activity for activity in activities if activity_in_project(project, activity)]


def records_for_project(project: Project, records: Iterable[MeasurementRecord]) -> List[MeasurementRecord]:
    """
    Project-scoped subset of a batched record set, using the same code rule as
    matching so pre-filtering never drops a record an activity would claim.
    """
    codes = project.match_codes
    short_code = normalize_code(project.project_code)
    return [
        record
        for record in records
        if code_matches(record.code, codes)
        or (short_code and normalize_code(record.project_code) == short_code)
    ]


__all__ = ["activity_in_project", "activities_for_project", "records_for_project"]

"""Reporting API wrappers around renderer classes."""

from pathlib import Path
from datetime import date
from typing import Sequence

from core.domain.activity import Activity
from core.domain.measurement import MeasurementRecord
from core.domain.project import Project
from core.services.reporting import ReportingService
from core.reporting.renderers.excel import ExcelReportRenderer
from core.reporting.contexts import ExcelReportContext
from core.reporting.exporters import (
    PROGRESS_COLUMNS,
    TIMELINE_COLUMNS,
    progress_export_rows,
    timeline_export_rows,
    write_csv,
)


def _ensure_parent(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def build_report_context(
    reporting_service: ReportingService,
    project: Project,
    activities: Sequence[Activity],
    records: Sequence[MeasurementRecord],
    as_of: date | None = None,
) -> ExcelReportContext:
    as_of = as_of or date.today()
    rows = reporting_service.evaluate_project(project, activities, records)
    timeline = reporting_service.build_timeline(project, activities, records)
    ambiguous = reporting_service.ambiguous_records([r.activity for r in rows], records)
    summary = reporting_service.summarize_project(
        project, rows, timeline=timeline, ambiguous=ambiguous, today=as_of
    )
    return ExcelReportContext(
        project=project,
        summary=summary,
        progress_rows=rows,
        timeline=timeline,
        as_of=as_of,
    )


def generate_excel_report(
    reporting_service: ReportingService,
    project: Project,
    activities: Sequence[Activity],
    records: Sequence[MeasurementRecord],
    output_path: str | Path,
    as_of: date | None = None,
) -> Path:
    ctx = build_report_context(reporting_service, project, activities, records, as_of=as_of)
    return ExcelReportRenderer().render(ctx, _ensure_parent(Path(output_path)))


def generate_timeline_csv(
    reporting_service: ReportingService,
    project: Project,
    activities: Sequence[Activity],
    records: Sequence[MeasurementRecord],
    output_path: str | Path,
) -> Path:
    entries = reporting_service.build_timeline(project, activities, records)
    rows = timeline_export_rows(entries, project)
    return write_csv(rows, TIMELINE_COLUMNS, _ensure_parent(Path(output_path)))


def generate_progress_csv(
    reporting_service: ReportingService,
    project: Project,
    activities: Sequence[Activity],
    records: Sequence[MeasurementRecord],
    output_path: str | Path,
) -> Path:
    progress_rows = reporting_service.evaluate_project(project, activities, records)
    rows = progress_export_rows(progress_rows, project)
    return write_csv(rows, PROGRESS_COLUMNS, _ensure_parent(Path(output_path)))

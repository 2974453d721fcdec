# main_report.py
"""
Command-line host: reconcile one project of a dashboard snapshot and write a report.

The snapshot is a JSON object with raw data-store rows:

    {"projects": [...], "activities": [...], "measurements": [...]}

("boq" and "kpis" are accepted as the older names of the last two lists.)
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Sequence

from core.exceptions import DomainError, ValidationError
from core.reporting.api import (
    generate_excel_report,
    generate_progress_csv,
    generate_timeline_csv,
)
from core.services.reconciliation import parse_date, records_for_project
from core.services.reporting import ReportingService
from infra.field_mapping import activity_from_row, measurement_from_row, project_from_row
from infra.logging_config import setup_logging
from infra.settings import ReportSettings
from infra.tracing import bind_trace_id
from infra.version import get_app_version

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_DOMAIN_ERROR = 2


def _rows(snapshot: Dict[str, Any], *keys: str) -> List[Dict[str, Any]]:
    for key in keys:
        rows = snapshot.get(key)
        if rows:
            return list(rows)
    return []


def load_snapshot(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as fh:
        snapshot = json.load(fh)
    if not isinstance(snapshot, dict):
        raise ValidationError(
            "Snapshot must be a JSON object with projects, activities and measurements.",
            code="INVALID_SNAPSHOT",
        )
    return snapshot


def build_services(settings: ReportSettings) -> Dict[str, Any]:
    return {
        "settings": settings,
        "reporting_service": ReportingService(
            timeline_padding_days=settings.timeline_padding_days
        ),
    }


def run_report(
    snapshot: Dict[str, Any],
    project_code: str,
    output_path: Path,
    *,
    services: Dict[str, Any],
    as_of: date | None = None,
    csv_kind: str = "progress",
) -> Path:
    reporting = services["reporting_service"]

    projects = [project_from_row(r) for r in _rows(snapshot, "projects")]
    activities = [activity_from_row(r) for r in _rows(snapshot, "activities", "boq")]
    records = [measurement_from_row(r) for r in _rows(snapshot, "measurements", "kpis")]

    project = reporting.find_project(projects, project_code)
    # batched once for the whole project, shared by every activity
    records = records_for_project(project, records)
    logger.info(
        "Loaded snapshot: %d projects, %d activities, %d measurements for %s",
        len(projects),
        len(activities),
        len(records),
        project.full_code,
    )

    suffix = output_path.suffix.lower()
    if suffix == ".xlsx":
        return generate_excel_report(reporting, project, activities, records, output_path, as_of=as_of)
    if suffix == ".csv":
        if csv_kind == "timeline":
            return generate_timeline_csv(reporting, project, activities, records, output_path)
        return generate_progress_csv(reporting, project, activities, records, output_path)
    raise ValidationError(
        f"Unsupported report format '{output_path.suffix}'. Use .xlsx or .csv.",
        code="UNSUPPORTED_FORMAT",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boq-progress-report",
        description="Reconcile BOQ activities with KPI measurements and export the progress report.",
    )
    parser.add_argument("snapshot", type=Path, help="JSON snapshot of projects, activities and measurements")
    parser.add_argument("--project", required=True, help="project code or full code to report on")
    parser.add_argument(
        "--out",
        type=Path,
        help="output file (.xlsx or .csv), defaults to <data dir>/reports/<project>-progress.xlsx",
    )
    parser.add_argument(
        "--csv-kind",
        choices=("progress", "timeline"),
        default="progress",
        help="which table a .csv output holds",
    )
    parser.add_argument("--as-of", help="report date, defaults to today")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_app_version()}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = ReportSettings.from_env()
    except DomainError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_DOMAIN_ERROR

    setup_logging(settings)
    services = build_services(settings)

    with bind_trace_id(None) as trace_id:
        try:
            as_of = parse_date(args.as_of) if args.as_of else None
            if args.as_of and as_of is None:
                raise ValidationError(f"Unrecognised --as-of date '{args.as_of}'.", code="INVALID_DATE")
            snapshot = load_snapshot(args.snapshot)
            written = run_report(
                snapshot,
                args.project,
                args.out or settings.report_path(args.project),
                services=services,
                as_of=as_of,
                csv_kind=args.csv_kind,
            )
        except DomainError as exc:
            logger.error("Report failed [%s]: %s", exc.code, exc)
            return EXIT_DOMAIN_ERROR
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Could not read snapshot or write report: %s", exc)
            return EXIT_IO_ERROR

    logger.info("Report written to %s (trace %s)", written, trace_id)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

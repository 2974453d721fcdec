# reporting/exporters.py
from __future__ import annotations

import csv
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from core.domain.project import Project
from core.services.reporting import ActivityProgressRow, TimelineEntry

TIMELINE_COLUMNS = [
    "Activity Name",
    "Project Code",
    "Planned Start Date",
    "Planned End Date",
    "Duration (Days)",
    "Actual Start Date",
    "Actual End Date",
    "Progress %",
    "Status",
    "Critical",
]

PROGRESS_COLUMNS = [
    "Activity Name",
    "Project Code",
    "Zone",
    "Unit",
    "Planned Units",
    "Actual Units",
    "Planned Records",
    "Actual Records",
    "Progress %",
    "Status",
    "Rate",
    "Executed Value",
]


def _ensure_path(path: str | Path) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    return p


def _fmt_date(value: Optional[date]) -> str:
    return value.isoformat() if value else ""


def _fmt_percent(value: float) -> str:
    return f"{value:.1f}%"


def schedule_status(entry: TimelineEntry) -> str:
    if entry.span.is_completed:
        return "Completed"
    if entry.span.is_delayed:
        return "Delayed"
    return "On Track"


def timeline_export_rows(entries: Sequence[TimelineEntry], project: Project) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []
    for e in entries:
        rows.append(
            {
                "Activity Name": e.activity.display_name or "Unknown",
                "Project Code": project.full_code,
                "Planned Start Date": _fmt_date(e.span.planned_start),
                "Planned End Date": _fmt_date(e.span.planned_end),
                "Duration (Days)": e.span.duration_days,
                "Actual Start Date": _fmt_date(e.span.actual_start),
                "Actual End Date": _fmt_date(e.span.actual_end),
                "Progress %": _fmt_percent(e.progress.progress_percent),
                "Status": schedule_status(e),
                "Critical": "Yes" if e.span.is_critical else "No",
            }
        )
    return rows


def progress_export_rows(rows: Sequence[ActivityProgressRow], project: Project) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for r in rows:
        out.append(
            {
                "Activity Name": r.activity.display_name or "Unknown",
                "Project Code": project.full_code,
                "Zone": r.activity.zone,
                "Unit": r.activity.unit,
                "Planned Units": r.activity.planned_units,
                "Actual Units": r.progress.actual_units,
                "Planned Records": r.aggregate.planned_count,
                "Actual Records": r.aggregate.actual_count,
                "Progress %": _fmt_percent(r.progress.progress_percent),
                "Status": r.progress.status_label if r.has_data else "No data yet",
                "Rate": round(r.progress.rate, 4),
                "Executed Value": round(r.progress.executed_value, 2),
            }
        )
    return out


def write_csv(rows: Sequence[Dict[str, Any]], columns: Sequence[str], output_path: str | Path) -> Path:
    output_path = _ensure_path(output_path)
    with output_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=list(columns))
        writer.writeheader()
        for row in rows:
            writer.writerow({col: row.get(col, "") for col in columns})
    return output_path

# infra/field_mapping.py
"""
Boundary adapters from raw data-store rows to domain objects.

The source tables were edited by hand for years, so the same fact can sit
under several column names ("Activity Name", "activity_name", "Activity").
Each canonical field lists its aliases in priority order; the first alias
holding a usable value wins. Date fields skip aliases whose value does not
parse (e.g. "N/A") and keep looking.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from core.domain.activity import Activity
from core.domain.identifiers import generate_id
from core.domain.measurement import MeasurementRecord
from core.domain.project import Project
from core.exceptions import ValidationError
from core.services.reconciliation import (
    parse_bool,
    parse_date,
    parse_number,
    parse_optional_number,
)


Row = Mapping[str, Any]


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def _optional_text(value: Any) -> Optional[str]:
    return _text(value) or None


@dataclass(frozen=True)
class FieldSpec:
    aliases: Tuple[str, ...]
    parser: Callable[[Any], Any] = _text
    default: Any = None
    # dates: an alias only counts when its value parses
    require_parsed: bool = False


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def resolve_field(row: Row, spec: FieldSpec) -> Any:
    for alias in spec.aliases:
        if alias not in row:
            continue
        raw = row[alias]
        if _is_blank(raw):
            continue
        parsed = spec.parser(raw)
        if spec.require_parsed and parsed is None:
            continue
        return parsed
    return spec.default


def resolve_fields(row: Row, table: Mapping[str, FieldSpec]) -> Dict[str, Any]:
    return {name: resolve_field(row, spec) for name, spec in table.items()}


_ID = FieldSpec(("id", "ID", "Id"))
_PROJECT_CODE = FieldSpec(("project_code", "Project Code", "PROJECT CODE"), default="")
_PROJECT_FULL_CODE = FieldSpec(("project_full_code", "Project Full Code"), _optional_text)

PROJECT_FIELDS: Dict[str, FieldSpec] = {
    "id": _ID,
    "project_code": _PROJECT_CODE,
    "project_name": FieldSpec(("project_name", "Project Name", "Project Full Name"), default=""),
    "project_sub_code": FieldSpec(
        ("project_sub_code", "Project Sub Code", "Project Sub-Code"), _optional_text
    ),
    "project_full_code": _PROJECT_FULL_CODE,
}

ACTIVITY_FIELDS: Dict[str, FieldSpec] = {
    "id": _ID,
    "project_code": _PROJECT_CODE,
    "project_full_code": _PROJECT_FULL_CODE,
    "activity_name": FieldSpec(("activity_name", "Activity Name", "Activity"), default=""),
    "activity_description": FieldSpec(
        ("activity_description", "Activity Description", "Item Description"), default=""
    ),
    "zone_ref": FieldSpec(("zone_ref", "Zone Ref", "Zone"), default=""),
    "zone_number": FieldSpec(("zone_number", "Zone Number", "Zone #"), default=""),
    "unit": FieldSpec(("unit", "Unit"), default=""),
    "planned_units": FieldSpec(("planned_units", "Planned Units"), parse_number, 0.0),
    "total_units": FieldSpec(("total_units", "Total Units"), parse_optional_number),
    "actual_units": FieldSpec(("actual_units", "Actual Units"), parse_optional_number),
    "total_value": FieldSpec(("total_value", "Total Value", "Value"), parse_number, 0.0),
    "planned_start_date": FieldSpec(
        (
            "planned_activity_start_date",
            "activity_planned_start_date",
            "Planned Activity Start Date",
            "Planned Start Date",
            "planned_start_date",
        ),
        parse_date,
        require_parsed=True,
    ),
    "lookahead_start_date": FieldSpec(
        ("lookahead_start_date", "Lookahead Start Date", "START"), parse_date, require_parsed=True
    ),
    "planned_end_date": FieldSpec(
        (
            "deadline",
            "activity_planned_completion_date",
            "Deadline",
            "Planned Completion Date",
            "planned_end_date",
            "Planned End Date",
        ),
        parse_date,
        require_parsed=True,
    ),
    "lookahead_end_date": FieldSpec(
        (
            "lookahead_activity_completion_date",
            "lookahead_end_date",
            "Lookahead End Date",
            "FINISH",
        ),
        parse_date,
        require_parsed=True,
    ),
    "calendar_duration_days": FieldSpec(
        ("calendar_duration", "Calendar Duration"), parse_optional_number
    ),
    "is_delayed": FieldSpec(("activity_delayed", "Activity Delayed?"), parse_bool, False),
    "is_completed": FieldSpec(("activity_completed", "Activity Completed"), parse_bool, False),
}

MEASUREMENT_FIELDS: Dict[str, FieldSpec] = {
    "id": _ID,
    "project_code": _PROJECT_CODE,
    "project_sub_code": FieldSpec(
        ("project_sub_code", "Project Sub Code", "Project Sub-Code"), _optional_text
    ),
    "project_full_code": FieldSpec(("project_full_code", "Project Full Code"), default=""),
    # the KPI table merged "Activity Name" and "Activity" into "Activity Description"
    "activity_name": FieldSpec(
        ("Activity Description", "activity_description", "activity_name", "Activity Name", "Activity"),
        default="",
    ),
    "input_type": FieldSpec(("input_type", "Input Type"), default=""),
    "quantity": FieldSpec(("quantity", "Quantity"), lambda v: v, 0),
    "zone": FieldSpec(("zone", "Zone", "Zone Number"), default=""),
    "record_date": FieldSpec(
        (
            "actual_date",
            "Actual Date",
            "activity_date",
            "Activity Date",
        ),
        parse_date,
        require_parsed=True,
    ),
}


def _with_id(values: Dict[str, Any]) -> Dict[str, Any]:
    values["id"] = _text(values.get("id")) or generate_id()
    return values


def project_from_row(row: Row) -> Project:
    values = _with_id(resolve_fields(row, PROJECT_FIELDS))
    if not values["project_code"]:
        raise ValidationError("Project row has no project code.", code="PROJECT_CODE_MISSING")
    return Project(**values)


def activity_from_row(row: Row) -> Activity:
    values = _with_id(resolve_fields(row, ACTIVITY_FIELDS))
    if not values["project_code"] and not values["project_full_code"]:
        raise ValidationError(
            f"Activity '{values['activity_name']}' has no project code.",
            code="PROJECT_CODE_MISSING",
        )
    return Activity(**values)


def measurement_from_row(row: Row) -> MeasurementRecord:
    values = _with_id(resolve_fields(row, MEASUREMENT_FIELDS))
    if not values["project_code"] and not values["project_full_code"]:
        raise ValidationError(
            f"Measurement '{values['activity_name']}' has no project code.",
            code="PROJECT_CODE_MISSING",
        )
    return MeasurementRecord(**values)


__all__ = [
    "FieldSpec",
    "PROJECT_FIELDS",
    "ACTIVITY_FIELDS",
    "MEASUREMENT_FIELDS",
    "resolve_field",
    "resolve_fields",
    "project_from_row",
    "activity_from_row",
    "measurement_from_row",
]

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

from core.domain.identifiers import generate_id, normalize_code

# Dates reach the engine as they were stored: real dates, ISO strings, or markers like "N/A".
DateLike = Union[date, datetime, str, None]


@dataclass
class Activity:
    """A BOQ line item: planned, budgeted work inside one project."""

    id: str
    project_code: str
    activity_name: str
    project_full_code: Optional[str] = None
    activity_description: str = ""
    zone_ref: str = ""
    zone_number: str = ""
    unit: str = ""
    planned_units: float = 0.0
    total_units: Optional[float] = None  # rate denominator; planned_units when absent
    actual_units: Optional[float] = None  # recorded on the BOQ itself, fallback only
    total_value: float = 0.0

    # schedule, earlier fields win when several resolve
    planned_start_date: DateLike = None
    lookahead_start_date: DateLike = None
    planned_end_date: DateLike = None
    lookahead_end_date: DateLike = None
    calendar_duration_days: Optional[float] = None

    is_delayed: bool = False
    is_completed: bool = False

    @property
    def display_name(self) -> str:
        return (self.activity_name or "").strip() or (self.activity_description or "").strip()

    @property
    def full_code(self) -> str:
        return (self.project_full_code or "").strip() or (self.project_code or "").strip()

    @property
    def match_codes(self) -> tuple[str, ...]:
        codes: list[str] = []
        for value in (self.project_full_code, self.project_code):
            code = normalize_code(value)
            if code and code not in codes:
                codes.append(code)
        return tuple(codes)

    @property
    def zone(self) -> str:
        return (self.zone_ref or "").strip() or (self.zone_number or "").strip()

    @staticmethod
    def create(project_code: str, activity_name: str, **extra) -> "Activity":
        return Activity(
            id=generate_id(),
            project_code=project_code,
            activity_name=activity_name,
            **extra,
        )


__all__ = ["Activity", "DateLike"]

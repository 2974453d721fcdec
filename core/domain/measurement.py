from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from core.domain.activity import DateLike
from core.domain.enums import InputType
from core.domain.identifiers import compose_full_code, generate_id, normalize_code


@dataclass
class MeasurementRecord:
    """A dated KPI entry. Linked to its activity by name, never by id."""

    id: str
    project_full_code: str
    activity_name: str
    input_type: Union[InputType, str]
    quantity: Any = 0  # numeric, or the raw text typed in the field
    zone: str = ""
    record_date: DateLike = None
    project_code: str = ""
    project_sub_code: Optional[str] = None

    @property
    def kind(self) -> InputType | None:
        return InputType.parse(self.input_type)

    @property
    def code(self) -> str:
        explicit = (self.project_full_code or "").strip()
        short = (self.project_code or "").strip()
        if short and (self.project_sub_code or "").strip():
            # older rows store the bare project code as their full code
            if not explicit or normalize_code(explicit) == normalize_code(short):
                return compose_full_code(short, self.project_sub_code)
        return explicit or short

    @staticmethod
    def create(
        project_full_code: str,
        activity_name: str,
        input_type: Union[InputType, str],
        quantity: Any = 0,
        **extra,
    ) -> "MeasurementRecord":
        return MeasurementRecord(
            id=generate_id(),
            project_full_code=project_full_code,
            activity_name=activity_name,
            input_type=input_type,
            quantity=quantity,
            **extra,
        )


__all__ = ["MeasurementRecord"]

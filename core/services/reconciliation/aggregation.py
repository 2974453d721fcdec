from __future__ import annotations

from typing import Iterable

from core.domain.enums import InputType
from core.domain.measurement import MeasurementRecord
from core.services.reconciliation.models import MatchedAggregate
from core.services.reconciliation.parsing import parse_number


def aggregate(matched_records: Iterable[MeasurementRecord]) -> MatchedAggregate:
    """
    Reduce matched records to planned/actual totals.

    A record whose quantity cannot be read still counts toward its partition
    (it adds 0). Records of an unknown input type only contribute to has_data.
    """
    planned_count = 0
    actual_count = 0
    total_planned = 0.0
    total_actual = 0.0
    seen = 0

    for record in matched_records:
        seen += 1
        kind = record.kind
        if kind is InputType.PLANNED:
            planned_count += 1
            total_planned += parse_number(record.quantity)
        elif kind is InputType.ACTUAL:
            actual_count += 1
            total_actual += parse_number(record.quantity)

    return MatchedAggregate(
        planned_count=planned_count,
        actual_count=actual_count,
        total_planned=total_planned,
        total_actual=total_actual,
        has_data=seen > 0,
    )


__all__ = ["aggregate"]

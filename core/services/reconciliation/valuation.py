from __future__ import annotations

from typing import Any

from core.services.reconciliation.models import ValueBreakdown
from core.services.reconciliation.parsing import parse_number


def calculate_rate(total_value: Any, total_units: Any) -> float:
    units = parse_number(total_units)
    return parse_number(total_value) / units if units > 0 else 0.0


def calculate_value(
    total_units: Any,
    planned_units: Any,
    actual_units: Any,
    total_value: Any,
) -> ValueBreakdown:
    """
    Rate = total value / total units, then value = rate x actual units.

    The rate is kept as its own figure so the same per-unit price can be reused
    for planned and remaining value.
    """
    total = parse_number(total_units)
    actual = parse_number(actual_units)
    rate = calculate_rate(total_value, total)
    return ValueBreakdown(
        rate=rate,
        value=rate * actual,
        planned_value=rate * parse_number(planned_units),
        remaining_value=rate * (total - actual),
    )


__all__ = ["calculate_rate", "calculate_value"]

import math

import pytest

from core.domain import Activity, InputType, MeasurementRecord, ProgressStatus
from core.services.reconciliation import (
    aggregate,
    calculate_rate,
    calculate_value,
    classify,
    status_for_progress,
)


def _record(input_type, quantity):
    return MeasurementRecord.create("P5008", "Excavation", input_type, quantity)


def test_matched_quantities_roll_up_to_in_progress():
    activity = Activity.create("P5008", "Excavation", planned_units=100, total_value=1000)
    matched = [
        _record(InputType.PLANNED, 100),
        _record(InputType.ACTUAL, 40),
        _record(InputType.ACTUAL, 20),
    ]

    totals = aggregate(matched)
    result = classify(totals, activity)

    assert totals.total_planned == pytest.approx(100)
    assert totals.total_actual == pytest.approx(60)
    assert totals.planned_count == 1
    assert totals.actual_count == 2
    assert result.progress_from_measurements == pytest.approx(60)
    assert result.progress_percent == pytest.approx(60)
    assert result.status is ProgressStatus.IN_PROGRESS
    assert result.rate == pytest.approx(10)
    assert result.executed_value == pytest.approx(600)


def test_no_matches_and_no_plan_is_not_started():
    activity = Activity.create("P5008", "Excavation", planned_units=0)

    totals = aggregate([])
    result = classify(totals, activity)

    assert totals.has_data is False
    assert result.has_data is False
    assert result.progress_percent == 0
    assert result.status is ProgressStatus.NOT_STARTED
    assert result.rate == 0
    assert result.executed_value == 0


def test_over_delivery_reads_above_100_and_completes():
    activity = Activity.create("P5008", "Excavation", planned_units=50, total_value=500)

    totals = aggregate([_record("Actual", 60)])
    result = classify(totals, activity)

    assert totals.total_actual == pytest.approx(60)
    assert totals.total_planned == 0
    assert result.progress_from_measurements == 0
    assert result.progress_from_plan == pytest.approx(120)
    assert result.progress_percent == pytest.approx(120)
    assert result.status is ProgressStatus.COMPLETED
    assert result.actual_units == pytest.approx(60)
    assert result.executed_value == pytest.approx(600)


def test_unreadable_quantity_still_counts_as_a_record():
    totals = aggregate([_record("Actual", "n/a"), _record("Actual", "12 m3")])

    assert totals.actual_count == 2
    assert totals.total_actual == pytest.approx(12)


def test_unknown_input_type_only_marks_data_present():
    totals = aggregate([_record("Forecast", 10)])

    assert totals.has_data is True
    assert totals.planned_count == totals.actual_count == 0
    assert totals.total_planned == totals.total_actual == 0


def test_boq_actual_units_are_the_fallback():
    activity = Activity.create("P5008", "Excavation", planned_units=100, actual_units=25)

    result = classify(aggregate([_record("Actual", 0)]), activity)

    assert result.actual_units == pytest.approx(25)
    assert result.progress_percent == pytest.approx(25)
    assert result.status is ProgressStatus.BEHIND_SCHEDULE


def test_optimistic_reading_wins():
    activity = Activity.create("P5008", "Excavation", planned_units=1000)
    matched = [_record("Planned", 10), _record("Actual", 9)]

    result = classify(aggregate(matched), activity)

    assert result.progress_from_plan == pytest.approx(0.9)
    assert result.progress_from_measurements == pytest.approx(90)
    assert result.status is ProgressStatus.ON_TRACK


def test_no_actual_record_dominates():
    activity = Activity.create("P5008", "Excavation", planned_units=10, actual_units=10)

    result = classify(aggregate([_record("Planned", 10)]), activity)

    assert result.progress_percent == pytest.approx(100)
    assert result.status is ProgressStatus.NOT_STARTED


def test_classification_is_idempotent():
    activity = Activity.create("P5008", "Excavation", planned_units=100, total_value=1000)
    totals = aggregate([_record("Planned", 100), _record("Actual", 45)])

    assert classify(totals, activity) == classify(totals, activity)


@pytest.mark.parametrize(
    "progress, expected",
    [
        (0, ProgressStatus.NOT_STARTED),
        (0.5, ProgressStatus.BEHIND_SCHEDULE),
        (49.9, ProgressStatus.BEHIND_SCHEDULE),
        (50, ProgressStatus.IN_PROGRESS),
        (79.9, ProgressStatus.IN_PROGRESS),
        (80, ProgressStatus.ON_TRACK),
        (99.9, ProgressStatus.ON_TRACK),
        (100, ProgressStatus.COMPLETED),
        (250, ProgressStatus.COMPLETED),
    ],
)
def test_status_thresholds(progress, expected):
    assert status_for_progress(progress, actual_count=1) is expected


def test_status_never_drops_as_progress_grows():
    readings = [0, 10, 49.99, 50, 65, 80, 95, 100, 130]
    ranks = [status_for_progress(p, actual_count=1).rank for p in readings]
    assert ranks == sorted(ranks)


def test_status_labels():
    assert ProgressStatus.BEHIND_SCHEDULE.label == "Behind Schedule"
    assert ProgressStatus.ON_TRACK.label == "On Track"


def test_rate_and_value_are_zero_safe():
    assert calculate_rate(1000, 0) == 0
    assert calculate_rate(1000, "n/a") == 0

    breakdown = calculate_value(0, 0, 10, 500)
    assert breakdown.rate == 0
    assert breakdown.value == 0
    assert breakdown.planned_value == 0
    assert breakdown.remaining_value == 0


def test_value_breakdown_uses_one_rate():
    breakdown = calculate_value(total_units=200, planned_units=150, actual_units=50, total_value="4,000")

    assert breakdown.rate == pytest.approx(20)
    assert breakdown.value == pytest.approx(1000)
    assert breakdown.planned_value == pytest.approx(3000)
    assert breakdown.remaining_value == pytest.approx(3000)


def test_total_units_override_planned_units_for_rate():
    activity = Activity.create(
        "P5008", "Excavation", planned_units=100, total_units=200, total_value=1000
    )

    result = classify(aggregate([_record("Actual", 20)]), activity)

    assert result.rate == pytest.approx(5)
    assert result.executed_value == pytest.approx(100)


def test_zero_planned_units_with_records_stays_finite():
    activity = Activity.create("P5008", "Excavation", planned_units=0, total_value=1000)
    matched = [_record("Planned", 0), _record("Actual", 15), _record("Actual", "abc")]

    result = classify(aggregate(matched), activity)

    assert result.progress_from_measurements == 0
    assert result.progress_from_plan == 0
    assert result.progress_percent == 0
    assert result.rate == 0
    assert result.executed_value == 0
    assert result.actual_units == pytest.approx(15)
    assert result.status is ProgressStatus.NOT_STARTED
    assert all(
        math.isfinite(v)
        for v in (result.progress_percent, result.rate, result.executed_value, result.actual_units)
    )

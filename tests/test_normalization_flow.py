from datetime import date, datetime

import pytest

from core.domain import Project, compose_full_code
from core.services.reconciliation import (
    code_matches,
    normalize_text,
    parse_bool,
    parse_date,
    parse_number,
    resolve_zone,
)


def test_normalize_text_lowercases_and_trims():
    assert normalize_text("  Excavation Works ") == "excavation works"
    assert normalize_text(None) == ""


def test_resolve_zone_strips_project_code_prefix():
    assert resolve_zone("P5008-Zone A", "P5008") == "zone a"
    assert resolve_zone("p5008 - Zone A", "P5008") == "zone a"
    assert resolve_zone("P5008 Zone A", "P5008") == "zone a"
    assert resolve_zone("zone a", "P5008") == "zone a"


def test_resolve_zone_prefers_full_code():
    assert resolve_zone("P5066-I2 - 1", "P5066", "P5066-I2") == "1"
    assert resolve_zone("P5066-I2 - 1", "P5066") == "i2 - 1"


def test_resolve_zone_unspecified_is_empty():
    assert resolve_zone("", "P5008") == ""
    assert resolve_zone(None, "P5008") == ""
    assert resolve_zone("   ", "P5008") == ""


def test_resolve_zone_only_strips_leading_code():
    assert resolve_zone("Block P5008-2", "P5008") == "block p5008-2"


def test_code_matches_equality_and_prefix():
    assert code_matches("p5008", ("P5008",))
    assert code_matches("P5008-01", ("P5008",))
    assert code_matches("P50081", ("P5008",))
    assert code_matches("P5066-I2", ("P5066-I3", "P5066"))
    assert not code_matches("P5009", ("P5008",))
    assert not code_matches("P500", ("P5008",))
    assert not code_matches("", ("P5008",))


@pytest.mark.parametrize(
    "code, sub_code, expected",
    [
        ("P5066", None, "P5066"),
        ("P5066", "", "P5066"),
        ("P5066", "P5066-I2", "P5066-I2"),
        ("P5066", "-I2", "P5066-I2"),
        ("P5066", "I2", "P5066-I2"),
    ],
)
def test_full_code_derivation(code, sub_code, expected):
    assert compose_full_code(code, sub_code) == expected
    assert Project.create(code, project_sub_code=sub_code).full_code == expected


def test_explicit_full_code_wins():
    project = Project.create("P5066", project_sub_code="I2", project_full_code="P5066-I2A")
    assert project.full_code == "P5066-I2A"
    assert project.match_codes == ("P5066-I2A", "P5066")


@pytest.mark.parametrize(
    "raw, expected",
    [
        (12, 12.0),
        ("40", 40.0),
        ("1,250.5 m3", 1250.5),
        ("  -3.5 ", -3.5),
        ("abc", 0.0),
        ("", 0.0),
        (None, 0.0),
        (float("nan"), 0.0),
        (float("inf"), 0.0),
        (True, 0.0),
    ],
)
def test_parse_number_is_lenient(raw, expected):
    assert parse_number(raw) == pytest.approx(expected)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (date(2024, 1, 5), date(2024, 1, 5)),
        (datetime(2024, 1, 5, 17, 30), date(2024, 1, 5)),
        ("2024-01-05", date(2024, 1, 5)),
        ("2024-01-05T10:30:00Z", date(2024, 1, 5)),
        ("2024-01-05T10:30:00+03:00", date(2024, 1, 5)),
        ("01/05/2024", date(2024, 1, 5)),
        ("05-01-2024", date(2024, 1, 5)),
        ("Jan 5, 2024", date(2024, 1, 5)),
        ("N/A", None),
        ("null", None),
        ("", None),
        (None, None),
        ("next week", None),
    ],
)
def test_parse_date_accepts_stored_spellings(raw, expected):
    assert parse_date(raw) == expected


def test_parse_bool_markers():
    assert parse_bool("Yes")
    assert parse_bool("TRUE")
    assert parse_bool(1)
    assert not parse_bool("no")
    assert not parse_bool(None)

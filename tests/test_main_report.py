from __future__ import annotations

import csv
import json

import pytest
from openpyxl import load_workbook

import main_report


@pytest.fixture(autouse=True)
def _quiet_host(monkeypatch, tmp_path):
    monkeypatch.setenv("RECON_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("RECON_LOG_LEVEL", raising=False)
    monkeypatch.delenv("RECON_TIMELINE_PADDING_DAYS", raising=False)
    calls = []
    monkeypatch.setattr(main_report, "setup_logging", lambda settings: calls.append(settings))
    return calls


@pytest.fixture
def snapshot_file(tmp_path, snapshot):
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(snapshot), encoding="utf-8")
    return path


def test_writes_excel_report(snapshot_file, tmp_path, _quiet_host):
    out = tmp_path / "out" / "report.xlsx"

    code = main_report.main([str(snapshot_file), "--project", "p5008", "--out", str(out), "--as-of", "2024-01-15"])

    assert code == main_report.EXIT_OK
    assert len(_quiet_host) == 1
    wb = load_workbook(out)
    assert wb["Overview"]["A1"].value == "BOQ Progress - Riverside Towers"
    assert [c.value for c in wb["Activities"]["A"]][1:] == ["Excavation", "Concrete Pour"]
    assert wb["Timeline"].max_row == 3


def test_writes_timeline_csv(snapshot_file, tmp_path):
    out = tmp_path / "timeline.csv"

    code = main_report.main(
        [str(snapshot_file), "--project", "P5008", "--out", str(out), "--csv-kind", "timeline"]
    )

    assert code == main_report.EXIT_OK
    with out.open(newline="", encoding="utf-8") as fh:
        rows = list(csv.DictReader(fh))
    assert [r["Activity Name"] for r in rows] == ["Excavation", "Concrete Pour"]
    assert rows[1]["Planned Start Date"] == "2024-01-05"
    assert rows[0]["Progress %"] == "60.0%"


def test_unknown_project_is_a_domain_error(snapshot_file, tmp_path):
    code = main_report.main([str(snapshot_file), "--project", "P0000", "--out", str(tmp_path / "x.xlsx")])
    assert code == main_report.EXIT_DOMAIN_ERROR


def test_unsupported_format_is_a_domain_error(snapshot_file, tmp_path):
    code = main_report.main([str(snapshot_file), "--project", "P5008", "--out", str(tmp_path / "x.pdf")])
    assert code == main_report.EXIT_DOMAIN_ERROR


def test_bad_as_of_date_is_a_domain_error(snapshot_file, tmp_path):
    code = main_report.main(
        [str(snapshot_file), "--project", "P5008", "--out", str(tmp_path / "x.csv"), "--as-of", "someday"]
    )
    assert code == main_report.EXIT_DOMAIN_ERROR


def test_missing_snapshot_is_an_io_error(tmp_path):
    code = main_report.main([str(tmp_path / "missing.json"), "--project", "P5008", "--out", str(tmp_path / "x.csv")])
    assert code == main_report.EXIT_IO_ERROR


def test_malformed_snapshot_is_an_io_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    code = main_report.main([str(path), "--project", "P5008", "--out", str(tmp_path / "x.csv")])
    assert code == main_report.EXIT_IO_ERROR


def test_invalid_settings_stop_before_logging(snapshot_file, tmp_path, monkeypatch, _quiet_host):
    monkeypatch.setenv("RECON_TIMELINE_PADDING_DAYS", "a week")

    code = main_report.main([str(snapshot_file), "--project", "P5008", "--out", str(tmp_path / "x.csv")])

    assert code == main_report.EXIT_DOMAIN_ERROR
    assert _quiet_host == []


def test_report_defaults_to_data_dir(snapshot_file, tmp_path):
    code = main_report.main([str(snapshot_file), "--project", "P5008"])

    assert code == main_report.EXIT_OK
    expected = tmp_path / "data" / "reports" / "P5008-progress.xlsx"
    assert load_workbook(expected).sheetnames == ["Overview", "Activities", "Timeline"]

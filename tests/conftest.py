# tests/conftest.py
import pytest

from core.domain import Activity, InputType, MeasurementRecord, Project
from core.services.reporting import ReportingService
from infra.settings import ReportSettings


@pytest.fixture
def settings(tmp_path):
    return ReportSettings(data_dir=tmp_path / "data")


@pytest.fixture
def services(settings):
    # Recreate what main_report.build_services() does, but with test settings
    return {
        "settings": settings,
        "reporting_service": ReportingService(
            timeline_padding_days=settings.timeline_padding_days
        ),
    }


@pytest.fixture
def project():
    return Project.create("P5008", "Riverside Towers")


@pytest.fixture
def activities():
    excavation = Activity.create(
        "P5008",
        "Excavation",
        zone_ref="P5008-Zone A",
        unit="m3",
        planned_units=100,
        total_value=1000,
        planned_start_date="2024-01-01",
        calendar_duration_days=10,
    )
    concrete = Activity.create(
        "P5008",
        "Concrete Pour",
        unit="m3",
        planned_units=50,
        total_value=5000,
        planned_start_date="2024-01-05",
        planned_end_date="2024-01-20",
    )
    formwork = Activity.create("P5008", "Formwork", unit="m2", planned_units=20)
    other_project = Activity.create(
        "P9000",
        "Excavation",
        planned_units=10,
        total_value=100,
        planned_start_date="2024-02-01",
    )
    return [excavation, concrete, formwork, other_project]


@pytest.fixture
def records():
    return [
        MeasurementRecord.create(
            "P5008", "Excavation", InputType.PLANNED, 100, zone="zone a", record_date="2024-01-01"
        ),
        MeasurementRecord.create(
            "P5008", "excavation", "actual", "40", zone="Zone A", record_date="2024-01-03"
        ),
        MeasurementRecord.create(
            "P5008", "Excavation", "Actual", "20 m3", zone="P5008 - Zone A", record_date="2024-01-12"
        ),
        MeasurementRecord.create(
            "P5008", "Concrete Pour", "Actual", 30, record_date="2024-01-10"
        ),
        MeasurementRecord.create(
            "P9000", "Excavation", "Actual", 999, record_date="2024-02-02"
        ),
    ]


@pytest.fixture
def snapshot():
    # raw rows as the data store returns them, display-name keys included
    return {
        "projects": [
            {"Project Code": "P5008", "Project Name": "Riverside Towers"},
            {"Project Code": "P9000", "Project Name": "Harbour Depot"},
        ],
        "activities": [
            {
                "Project Code": "P5008",
                "Activity Name": "Excavation",
                "Zone Ref": "P5008-Zone A",
                "Unit": "m3",
                "Planned Units": "100",
                "Total Value": "1,000",
                "Planned Activity Start Date": "2024-01-01",
                "Calendar Duration": "10",
            },
            {
                "Project Code": "P5008",
                "Activity Name": "Concrete Pour",
                "Planned Units": 50,
                "Total Value": 5000,
                "Planned Activity Start Date": "N/A",
                "Lookahead Start Date": "01/05/2024",
                "Deadline": "2024-01-20",
            },
        ],
        "kpis": [
            {"Project Full Code": "P5008", "Activity Name": "Excavation", "Input Type": "Planned", "Quantity": "100"},
            {"Project Full Code": "P5008", "Activity Name": "Excavation", "Input Type": "Actual", "Quantity": "60", "Activity Date": "2024-01-03"},
            {"Project Full Code": "P5008", "Activity Name": "Concrete Pour", "Input Type": "Actual", "Quantity": "30", "Activity Date": "2024-01-10"},
        ],
    }

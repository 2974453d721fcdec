from core.domain.activity import Activity, DateLike
from core.domain.enums import InputType, ProgressStatus
from core.domain.identifiers import compose_full_code, generate_id, normalize_code
from core.domain.measurement import MeasurementRecord
from core.domain.project import Project

__all__ = [
    "generate_id",
    "normalize_code",
    "compose_full_code",
    "InputType",
    "ProgressStatus",
    "DateLike",
    "Project",
    "Activity",
    "MeasurementRecord",
]

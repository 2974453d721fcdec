from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class InputType(str, Enum):
    PLANNED = "Planned"
    ACTUAL = "Actual"

    @classmethod
    def parse(cls, value: Any) -> Optional["InputType"]:
        """Accept enum members or free text ("actual", " Planned ") and return None otherwise."""
        if isinstance(value, InputType):
            return value
        text = str(value or "").strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        return None


class ProgressStatus(str, Enum):
    NOT_STARTED = "NOT_STARTED"
    BEHIND_SCHEDULE = "BEHIND_SCHEDULE"
    IN_PROGRESS = "IN_PROGRESS"
    ON_TRACK = "ON_TRACK"
    COMPLETED = "COMPLETED"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]

    @property
    def rank(self) -> int:
        # ordering used by badges: NOT_STARTED < BEHIND_SCHEDULE < ... < COMPLETED
        return _STATUS_ORDER.index(self)


_STATUS_ORDER = (
    ProgressStatus.NOT_STARTED,
    ProgressStatus.BEHIND_SCHEDULE,
    ProgressStatus.IN_PROGRESS,
    ProgressStatus.ON_TRACK,
    ProgressStatus.COMPLETED,
)

_STATUS_LABELS = {
    ProgressStatus.NOT_STARTED: "Not Started",
    ProgressStatus.BEHIND_SCHEDULE: "Behind Schedule",
    ProgressStatus.IN_PROGRESS: "In Progress",
    ProgressStatus.ON_TRACK: "On Track",
    ProgressStatus.COMPLETED: "Completed",
}


__all__ = ["InputType", "ProgressStatus"]

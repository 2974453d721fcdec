# infra/settings.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from core.exceptions import ValidationError
from core.services.reconciliation.timeline import DEFAULT_PADDING_DAYS
from infra.path import default_report_path, user_data_dir

ENV_PREFIX = "RECON_"


@dataclass(frozen=True)
class ReportSettings:
    log_level: int = logging.INFO
    data_dir: Path | None = None
    timeline_padding_days: int = DEFAULT_PADDING_DAYS

    @property
    def resolved_data_dir(self) -> Path:
        return user_data_dir(self.data_dir)

    @property
    def log_dir(self) -> Path:
        return self.resolved_data_dir / "logs"

    def report_path(self, project_code: str, suffix: str = ".xlsx") -> Path:
        return default_report_path(self.resolved_data_dir, project_code, suffix)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ReportSettings":
        env = os.environ if environ is None else environ

        level_name = (env.get(f"{ENV_PREFIX}LOG_LEVEL") or "INFO").strip().upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValidationError(
                f"Unknown log level '{level_name}'.", code="INVALID_LOG_LEVEL"
            )

        raw_dir = (env.get(f"{ENV_PREFIX}DATA_DIR") or "").strip()

        raw_padding = (env.get(f"{ENV_PREFIX}TIMELINE_PADDING_DAYS") or "").strip()
        padding = DEFAULT_PADDING_DAYS
        if raw_padding:
            try:
                padding = int(raw_padding)
            except ValueError:
                raise ValidationError(
                    f"Timeline padding must be a whole number of days, got '{raw_padding}'.",
                    code="INVALID_TIMELINE_PADDING",
                ) from None
            if padding < 0:
                raise ValidationError(
                    "Timeline padding cannot be negative.", code="INVALID_TIMELINE_PADDING"
                )

        return cls(
            log_level=level,
            data_dir=Path(raw_dir) if raw_dir else None,
            timeline_padding_days=padding,
        )


__all__ = ["ENV_PREFIX", "ReportSettings"]

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.domain.identifiers import compose_full_code, generate_id, normalize_code


@dataclass
class Project:
    id: str
    project_code: str
    project_name: str = ""
    project_sub_code: Optional[str] = None
    project_full_code: Optional[str] = None  # explicit value from the data store wins

    @property
    def full_code(self) -> str:
        explicit = (self.project_full_code or "").strip()
        if explicit:
            return explicit
        return compose_full_code(self.project_code, self.project_sub_code)

    @property
    def match_codes(self) -> tuple[str, ...]:
        """Normalized codes, most specific first, that activities and records may carry."""
        codes: list[str] = []
        for value in (self.full_code, self.project_code):
            code = normalize_code(value)
            if code and code not in codes:
                codes.append(code)
        return tuple(codes)

    @staticmethod
    def create(project_code: str, project_name: str = "", **extra) -> "Project":
        return Project(
            id=generate_id(),
            project_code=project_code,
            project_name=project_name,
            **extra,
        )


__all__ = ["Project"]

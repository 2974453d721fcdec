from __future__ import annotations

from typing import Any
from uuid import uuid4


def generate_id() -> str:
    return str(uuid4())


def normalize_code(value: Any) -> str:
    """Project codes compare case-insensitively and ignore surrounding blanks."""
    if value is None:
        return ""
    return str(value).strip().upper()


def compose_full_code(project_code: Any, project_sub_code: Any = None) -> str:
    """
    Build the full project code the way codes are written in the field:

    - "P5066" + None       -> "P5066"
    - "P5066" + "P5066-I2" -> "P5066-I2"  (sub-code already carries the code)
    - "P5066" + "-I2"      -> "P5066-I2"
    - "P5066" + "I2"       -> "P5066-I2"
    """
    code = str(project_code or "").strip()
    sub = str(project_sub_code or "").strip()
    if not sub:
        return code
    if not code or sub.upper().startswith(code.upper()):
        return sub
    if sub.startswith("-"):
        return f"{code}{sub}"
    return f"{code}-{sub}"


__all__ = ["generate_id", "normalize_code", "compose_full_code"]

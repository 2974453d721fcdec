from __future__ import annotations

import re
from typing import Any, Iterable

from core.domain.identifiers import normalize_code

# code followed by "-", " - ", or whitespace
_CODE_SEPARATOR = r"(?:\s*-\s*|\s+)"


def normalize_text(text: Any) -> str:
    """
    Canonical form for free-text identifiers: lower-cased and trimmed.

    Names are compared by substring containment on this form, not equality.
    There is no stemming or locale handling, so "Excavations" and "excavation"
    only meet through containment.
    """
    if text is None:
        return ""
    return str(text).strip().lower()


def resolve_zone(raw_zone: Any, project_code: Any, full_code: Any = None) -> str:
    """
    Comparable zone key: "P5008-Zone A" with project code "P5008" -> "zone a".

    The full code is tried before the short code so "P5066-I2 - 1" resolves to
    "1" rather than "i2 - 1". An empty result means "zone unspecified".
    """
    zone = normalize_text(raw_zone)
    if not zone:
        return ""

    for code in (full_code, project_code):
        code_text = normalize_text(code)
        if not code_text:
            continue
        stripped = re.sub(rf"^{re.escape(code_text)}{_CODE_SEPARATOR}", "", zone, count=1)
        if stripped != zone:
            return stripped.strip()
    return zone


def code_matches(candidate: Any, codes: Iterable[str]) -> bool:
    """
    True when ``candidate`` equals one of ``codes`` or starts with one of them,
    so a record coded "P5008-01" reports against "P5008".
    """
    value = normalize_code(candidate)
    if not value:
        return False
    for code in codes:
        code = normalize_code(code)
        if code and value.startswith(code):
            return True
    return False


__all__ = ["normalize_text", "resolve_zone", "code_matches"]

from __future__ import annotations

import math
import re
from datetime import date, datetime
from typing import Any, Optional

# first number-looking run, e.g. "1,250.5 m3" -> "1,250.5 "
_NUMBER_PATTERN = re.compile(r"-?[0-9]+[0-9,.\s]*")
_NUMBER_NOISE = re.compile(r"[^0-9.\-]")

_NULL_DATE_MARKERS = {"", "n/a", "na", "null", "none", "undefined", "nan", "-"}
_DATE_FORMATS = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%m/%d/%y",
    "%d-%m-%Y",
    "%d.%m.%Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%d %B %Y",
    "%d-%b-%Y",
    "%d-%b-%y",
)

_TRUE_MARKERS = {"true", "yes", "y", "1"}


def parse_number(value: Any) -> float:
    """
    Lenient numeric parse for field-entered quantities and money.
    Never raises: anything unparseable, NaN or infinite becomes 0.0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else 0.0

    text = str(value).strip()
    if not text:
        return 0.0
    found = _NUMBER_PATTERN.search(text)
    if not found:
        return 0.0
    try:
        number = float(_NUMBER_NOISE.sub("", found.group(0)))
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def parse_optional_number(value: Any) -> Optional[float]:
    """Like parse_number, but keeps "no value" distinguishable from zero."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_number(value)


def parse_date(value: Any) -> Optional[date]:
    """
    Resolve a stored date-like value to a calendar day.

    datetimes are truncated to their day; ISO strings (with or without a time
    part) and a handful of common spellings are accepted. Markers such as
    "N/A" or "null" and anything unrecognised resolve to None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if text.lower() in _NULL_DATE_MARKERS:
        return None

    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUE_MARKERS


__all__ = ["parse_number", "parse_optional_number", "parse_date", "parse_bool"]

from __future__ import annotations

import re
from typing import Optional

from ..core.exceptions import ValidationError

_MONTH_RE = re.compile(r"^(0[1-9]|1[0-2])-\d{4}$")

_MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_month(value: Optional[str]) -> str:
    """Validate a MM-YYYY month key.

    The key is matched verbatim against stored rows, so no normalization is done
    beyond trimming whitespace.
    """
    month = require_non_empty(value, "month")
    if not _MONTH_RE.match(month):
        raise ValidationError(f"month must be in MM-YYYY format, got {month!r}")
    return month


def month_display(month: str) -> str:
    """'01-2025' -> 'Jan-25'. Unrecognized values are returned unchanged."""
    if not month or not _MONTH_RE.match(month):
        return month
    mm, yyyy = month.split("-")
    return f"{_MONTH_NAMES[int(mm) - 1]}-{yyyy[-2:]}"


def month_bounds(month: str) -> tuple[int, int]:
    """Return (year, month_number) for a validated MM-YYYY key."""
    mm, yyyy = require_month(month).split("-")
    return int(yyyy), int(mm)

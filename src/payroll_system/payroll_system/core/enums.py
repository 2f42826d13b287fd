from __future__ import annotations

from enum import Enum
from typing import Optional, Union


def _normalize(value: str) -> str:
    return value.strip().lower().replace(" ", "_").replace("-", "_")


class _StoredEnum(str, Enum):
    """Matches stored values whatever their case, padding or word separator."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = _normalize(value)
            for member in cls:
                if _normalize(member.value) == key:
                    return member
        return None


class EmployeeStatus(_StoredEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Category(_StoredEnum):
    """Employee category; drives food allowance and the rehab OT rule."""

    DIRECT = "Direct"
    INDIRECT = "Indirect"


class FoodAllowanceType(_StoredEnum):
    PER_DAY = "per_day"
    FIXED = "fixed"
    NONE = "none"


class LeaveStatus(_StoredEnum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class IndemnityStatus(_StoredEnum):
    """Once PAID, recalculation never moves a record back to ACTIVE."""

    ACTIVE = "Active"
    PAID = "Paid"


class SkipReason(str, Enum):
    """Why an employee was left out of a payroll run."""

    NO_ATTENDANCE = "no_attendance"
    ZERO_PRESENT_DAYS = "zero_present_days"
    INVALID_DATA = "invalid_data"
    UNKNOWN_EMPLOYEE = "unknown_employee"


def parse_stored(enum_cls, value: Optional[str], default) -> Union[Enum, str]:
    """Member for a stored value, default when blank, the raw text when unrecognised.

    Unrecognised text is kept so the row still loads and the owning use case can
    reject just that record.
    """
    if value is None or not str(value).strip():
        return default
    try:
        return enum_cls(str(value))
    except ValueError:
        return str(value)

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..common.money import Amount


@dataclass(frozen=True)
class AttendanceRecord:
    """One uploaded attendance row.

    Several rows may exist for the same (emp_id, month) when attendance was
    uploaded per department.
    """

    emp_id: str
    month: str
    working_days: Amount = 0
    present_days: Amount = 0
    absent_days: Amount = 0
    round_off: Amount = None
    ot_hours_normal: Amount = 0
    ot_hours_friday: Amount = 0
    ot_hours_holiday: Amount = 0
    dues_earned: Amount = 0
    comments: Optional[str] = None
    attendance_id: Optional[int] = None


@dataclass(frozen=True)
class AttendanceSummary:
    """All of an employee's rows for one month, folded into one."""

    record_count: int
    working_days: Decimal
    present_days: Decimal
    absent_days: Decimal
    round_off_total: Decimal
    ot_hours_normal: Decimal
    ot_hours_friday: Decimal
    ot_hours_holiday: Decimal
    dues_earned: Decimal
    comments: str

    @property
    def effective_present_days(self) -> Decimal:
        """round_off wins over present_days whenever it is set."""
        if self.round_off_total > 0:
            return self.round_off_total
        return self.present_days

    @property
    def has_records(self) -> bool:
        return self.record_count > 0

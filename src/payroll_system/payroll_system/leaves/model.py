from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class Leave:
    leave_id: int
    emp_id: str
    leave_type: str
    start_date: date
    end_date: date
    days: int
    reason: str = ""
    status: Union[LeaveStatus, str] = LeaveStatus.PENDING
    reviewed_by: Optional[str] = None

    def starts_in(self, year: int, month: int) -> bool:
        return self.start_date.year == year and self.start_date.month == month

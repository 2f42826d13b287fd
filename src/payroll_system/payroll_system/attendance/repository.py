from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_month(self, month: str, *, department: Optional[str] = None) -> Sequence[AttendanceRecord]:
        """All attendance rows for a MM-YYYY month.

        When department is given, only rows of employees in that department.
        """
        raise NotImplementedError

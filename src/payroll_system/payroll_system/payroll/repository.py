from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PayrollRecord


class PayrollRepository(Protocol):
    def list_payroll(
        self,
        *,
        month: Optional[str] = None,
        department: Optional[str] = None,
        emp_id: Optional[str] = None,
    ) -> Sequence[PayrollRecord]:
        raise NotImplementedError

    def get(self, emp_id: str, month: str) -> Optional[PayrollRecord]:
        raise NotImplementedError

    def replace_month(
        self,
        month: str,
        records: Sequence[PayrollRecord],
        *,
        emp_ids: Optional[Sequence[str]] = None,
    ) -> int:
        """Delete the month's rows (only emp_ids when given), then insert records.

        Must be atomic: readers never observe the empty-then-partial state.
        """
        raise NotImplementedError

    def update(self, record: PayrollRecord) -> bool:
        raise NotImplementedError

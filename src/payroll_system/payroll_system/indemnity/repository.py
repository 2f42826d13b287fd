from __future__ import annotations

from decimal import Decimal
from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import IndemnityRecord


class IndemnityRepository(Protocol):
    def list_indemnity(self) -> Sequence[IndemnityRecord]:
        raise NotImplementedError

    def get_by_employee(self, emp_id: str) -> Optional[IndemnityRecord]:
        raise NotImplementedError

    def create(self, record: IndemnityRecord) -> IndemnityRecord:
        raise NotImplementedError

    def update_amounts(self, emp_id: str, *, years_of_service: Decimal, indemnity_amount: Decimal) -> bool:
        """Recalculation path: only years and amount change, never status."""
        raise NotImplementedError

    def mark_paid(self, emp_id: str, *, paid_at: datetime, indemnity_amount: Optional[Decimal] = None) -> bool:
        raise NotImplementedError

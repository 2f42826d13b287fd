from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from ..core.enums import IndemnityStatus


@dataclass(frozen=True)
class IndemnityRecord:
    """End-of-service benefit accrued by one employee (one row per emp_id)."""

    emp_id: str
    years_of_service: Decimal
    indemnity_amount: Decimal
    status: Union[IndemnityStatus, str] = IndemnityStatus.ACTIVE
    paid_at: Optional[datetime] = None

    @property
    def is_paid(self) -> bool:
        return self.status == IndemnityStatus.PAID

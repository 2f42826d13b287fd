from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class FoodMoneyEntry:
    """Food money given separately from the master sheet for one month."""

    emp_id: str
    month: str
    amount: Decimal

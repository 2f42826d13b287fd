from __future__ import annotations

from decimal import Decimal
from typing import Mapping, Protocol, Sequence

from .model import FoodMoneyEntry


class FoodMoneyRepository(Protocol):
    """Monthly food-money worksheet.

    A positive amount for an employee/month is paid as-is instead of the
    prorated master-sheet allowance.
    """

    def amounts_for_month(self, month: str) -> Mapping[str, Decimal]:
        raise NotImplementedError

    def list_for_month(self, month: str) -> Sequence[FoodMoneyEntry]:
        raise NotImplementedError

    def set_for_month(self, month: str, entries: Sequence[FoodMoneyEntry]) -> int:
        """Replace the month's amounts of the given employees, atomically."""
        raise NotImplementedError

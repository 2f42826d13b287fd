from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence

from ..common.money import money, to_decimal
from ..common.validators import require_month, require_non_empty
from ..core.exceptions import ValidationError
from .model import FoodMoneyEntry
from .repository import FoodMoneyRepository

logger = logging.getLogger(__name__)


class FoodMoneyService:
    """Use case: maintain the monthly food-money worksheet that payroll reads."""

    def __init__(self, food_money: FoodMoneyRepository):
        self._food_money = food_money

    def list_food_money(self, month: str) -> Sequence[FoodMoneyEntry]:
        return self._food_money.list_for_month(require_month(month))

    def set_food_money(self, month: str, entries: Iterable[Mapping[str, Any]]) -> list[FoodMoneyEntry]:
        """Set the month's amount for each listed employee.

        Employees not listed keep what they had. A later entry for the same
        emp_id wins. The whole batch is rejected if any entry is invalid.
        """
        month = require_month(month)
        by_emp: dict[str, FoodMoneyEntry] = {}
        for i, raw in enumerate(entries or []):
            if not isinstance(raw, Mapping):
                raise ValidationError(f"entries[{i}] must be an object with emp_id and amount")
            emp_id = require_non_empty(str(raw.get("emp_id") or ""), f"entries[{i}].emp_id")
            amount = money(to_decimal(raw.get("amount"), f"entries[{i}].amount"))
            if amount < 0:
                raise ValidationError(f"entries[{i}].amount must not be negative")
            by_emp[emp_id] = FoodMoneyEntry(emp_id=emp_id, month=month, amount=amount)

        if not by_emp:
            raise ValidationError("entries must list at least one employee")

        saved = list(by_emp.values())
        self._food_money.set_for_month(month, saved)
        logger.info("Food money for %s set for %d employee(s)", month, len(saved))
        return saved

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ...attendance.model import AttendanceSummary
from ...employees.model import Employee
from ..model import PayrollRecord
from .rates import OvertimeRates


@dataclass(frozen=True)
class OvertimePay:
    normal: Decimal
    friday: Decimal
    holiday: Decimal

    @property
    def total(self) -> Decimal:
        return self.normal + self.friday + self.holiday


@dataclass(frozen=True)
class PayrollCalculation:
    """A PayrollRecord plus the unrounded figures it was built from."""

    record: PayrollRecord
    hourly_basic_salary: Decimal
    rates: OvertimeRates
    overtime: OvertimePay
    prorated_basic: Decimal
    prorated_other_allowance: Decimal
    food_allowance: Decimal
    gross_salary: Decimal
    is_capped: bool
    is_rehab_indirect: bool


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(
        self,
        employee: Employee,
        summary: AttendanceSummary,
        month: str,
        *,
        food_money: Optional[Decimal] = None,
    ) -> PayrollCalculation:
        raise NotImplementedError

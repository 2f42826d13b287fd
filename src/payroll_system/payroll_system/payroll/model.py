from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from ..core.enums import SkipReason


@dataclass(frozen=True)
class PayrollRecord:
    """Computed pay for one employee and month, persisted for audit/editing.

    basic_salary and other_allowance are the prorated amounts actually paid.
    gross_salary = basic_salary + other_allowance + food_allowance + ot_amount
    net_salary = round_half_up(gross_salary + dues_earned - deductions)

    Both hold exactly on the stored 2 dp values.
    """

    emp_id: str
    month: str
    basic_salary: Decimal
    other_allowance: Decimal
    ot_amount: Decimal
    food_allowance: Decimal
    days_worked: Decimal
    gross_salary: Decimal
    deductions: Decimal
    dues_earned: Decimal
    net_salary: Decimal
    comments: str = ""


@dataclass(frozen=True)
class PayrollWarning:
    """An employee left out of a payroll run, and why."""

    emp_id: str
    name: str
    code: SkipReason
    reason: str


@dataclass(frozen=True)
class PayrollGenerationResult:
    created: list[PayrollRecord] = field(default_factory=list)
    warnings: list[PayrollWarning] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.created)

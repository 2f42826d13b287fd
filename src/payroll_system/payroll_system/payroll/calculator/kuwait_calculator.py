from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ...attendance.model import AttendanceSummary
from ...common.money import ZERO, money, round_half_up, to_decimal
from ...core.constants import (
    DEFAULT_DEDUCTIONS,
    FOOD_ALLOWANCE_ELIGIBLE_ACCOMMODATIONS,
    FOOD_ALLOWANCE_ELIGIBLE_CATEGORIES,
    REHAB_DEPARTMENT,
    REHAB_INDIRECT_OT_FACTOR,
    WORKING_DAYS_PER_MONTH,
)
from ...core.enums import Category
from ...core.exceptions import ValidationError
from ...employees.model import Employee
from ..model import PayrollRecord
from .base import OvertimePay, PayrollCalculation, PayrollCalculator
from .rates import OvertimeRates, hourly_basic_salary, rates_for


def _norm(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def prorate(amount: Decimal, days: Decimal) -> Decimal:
    """Proration with capping against the 26-day month.

    Monthly-salaried staff: more than 26 days never pays above the contracted
    amount, fewer days pay amount / 26 per day.
    """
    if amount <= 0:
        return ZERO
    if days >= WORKING_DAYS_PER_MONTH:
        return amount
    return (amount / WORKING_DAYS_PER_MONTH) * days


def is_rehab_indirect(employee: Employee) -> bool:
    return _norm(employee.department) == REHAB_DEPARTMENT and _norm(employee.category) == Category.INDIRECT.value.lower()


def qualifies_for_food_allowance(employee: Employee) -> bool:
    """Default-deny: only Indirect staff living in their own accommodation."""
    accommodation = _norm(employee.accommodation)
    has_own = any(kind in accommodation for kind in FOOD_ALLOWANCE_ELIGIBLE_ACCOMMODATIONS)
    is_eligible_category = _norm(employee.category) in FOOD_ALLOWANCE_ELIGIBLE_CATEGORIES
    return is_eligible_category and has_own


def food_allowance(employee: Employee, days: Decimal, *, worksheet_amount: Optional[Decimal] = None) -> Decimal:
    """Food allowance for the month.

    A positive food-money worksheet amount is paid as-is. Otherwise the master
    amount is prorated for eligible employees; everyone else gets exactly 0.
    """
    if worksheet_amount is not None and worksheet_amount > 0:
        return worksheet_amount
    if not qualifies_for_food_allowance(employee):
        return ZERO
    amount = to_decimal(employee.food_allowance_amount, "food_allowance_amount")
    if amount <= 0:
        return ZERO
    return prorate(amount, days)


def overtime_pay(rates: OvertimeRates, summary: AttendanceSummary, *, rehab_indirect: bool) -> OvertimePay:
    normal = summary.ot_hours_normal * rates.normal
    friday = summary.ot_hours_friday * rates.friday
    holiday = summary.ot_hours_holiday * rates.holiday

    # reduction applies to pay, never to the rates
    if rehab_indirect:
        normal *= REHAB_INDIRECT_OT_FACTOR
        friday *= REHAB_INDIRECT_OT_FACTOR
        holiday *= REHAB_INDIRECT_OT_FACTOR

    return OvertimePay(normal=normal, friday=friday, holiday=holiday)


def net_salary(gross_salary: Decimal, dues_earned: Decimal, deductions: Decimal) -> Decimal:
    return round_half_up(gross_salary + dues_earned - deductions)


class KuwaitPayrollCalculator(PayrollCalculator):
    """Kuwait labor-law rules: 26-day proration, 1.25/1.50/2.00 OT."""

    def calculate(
        self,
        employee: Employee,
        summary: AttendanceSummary,
        month: str,
        *,
        food_money: Optional[Decimal] = None,
    ) -> PayrollCalculation:
        basic = to_decimal(employee.basic_salary, "basic_salary")
        if basic < 0:
            raise ValidationError(f"basic_salary must not be negative: {basic}")
        other = to_decimal(employee.other_allowance, "other_allowance")
        days = summary.effective_present_days

        rates = rates_for(employee, basic)
        rehab = is_rehab_indirect(employee)
        ot = overtime_pay(rates, summary, rehab_indirect=rehab)

        prorated_basic = prorate(basic, days)
        prorated_other = prorate(other, days)
        food = food_allowance(employee, days, worksheet_amount=food_money)

        gross = prorated_basic + prorated_other + food + ot.total

        # stored gross is the sum of the stored parts, and net derives from it
        basic_paid = money(prorated_basic)
        other_paid = money(prorated_other)
        food_paid = money(food)
        ot_paid = money(ot.total)
        stored_gross = basic_paid + other_paid + food_paid + ot_paid
        deductions = money(DEFAULT_DEDUCTIONS)
        dues = money(summary.dues_earned)

        record = PayrollRecord(
            emp_id=employee.emp_id,
            month=month,
            basic_salary=basic_paid,
            other_allowance=other_paid,
            food_allowance=food_paid,
            ot_amount=ot_paid,
            days_worked=money(days),
            gross_salary=stored_gross,
            deductions=deductions,
            dues_earned=dues,
            net_salary=money(net_salary(stored_gross, dues, deductions)),
            comments=summary.comments,
        )

        return PayrollCalculation(
            record=record,
            hourly_basic_salary=hourly_basic_salary(basic, employee.working_hours_per_day),
            rates=rates,
            overtime=ot,
            prorated_basic=prorated_basic,
            prorated_other_allowance=prorated_other,
            food_allowance=food,
            gross_salary=gross,
            is_capped=days >= WORKING_DAYS_PER_MONTH,
            is_rehab_indirect=rehab,
        )

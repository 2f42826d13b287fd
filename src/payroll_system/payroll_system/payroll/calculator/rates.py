"""Hourly basic salary (HBS) and overtime rates.

HBS = basic_salary / (26 x working_hours_per_day). The 26 is the fixed salary
divisor, never the employee's attendance working_days.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ...common.money import Amount, to_decimal
from ...core.constants import (
    DEFAULT_WORKING_HOURS_PER_DAY,
    OT_MULTIPLIER_FRIDAY,
    OT_MULTIPLIER_HOLIDAY,
    OT_MULTIPLIER_NORMAL,
    WORKING_DAYS_PER_MONTH,
)
from ...employees.model import Employee


@dataclass(frozen=True)
class OvertimeRates:
    """Per-hour overtime rates."""

    normal: Decimal
    friday: Decimal
    holiday: Decimal


def resolve_working_hours(value: Amount) -> Decimal:
    hours = to_decimal(value, "working_hours_per_day")
    return hours if hours > 0 else Decimal(DEFAULT_WORKING_HOURS_PER_DAY)


def hourly_basic_salary(basic_salary: Decimal, working_hours_per_day: Amount) -> Decimal:
    hours = resolve_working_hours(working_hours_per_day)
    return basic_salary / (WORKING_DAYS_PER_MONTH * hours)


def _pick(override: Decimal, derived: Decimal) -> Decimal:
    # an override replaces the derived rate, it is never added to it
    return override if override > 0 else derived


def overtime_rates(
    basic_salary: Decimal,
    working_hours_per_day: Amount,
    *,
    normal_override: Amount = 0,
    friday_override: Amount = 0,
    holiday_override: Amount = 0,
) -> OvertimeRates:
    hbs = hourly_basic_salary(basic_salary, working_hours_per_day)
    return OvertimeRates(
        normal=_pick(to_decimal(normal_override, "ot_rate_normal"), hbs * OT_MULTIPLIER_NORMAL),
        friday=_pick(to_decimal(friday_override, "ot_rate_friday"), hbs * OT_MULTIPLIER_FRIDAY),
        holiday=_pick(to_decimal(holiday_override, "ot_rate_holiday"), hbs * OT_MULTIPLIER_HOLIDAY),
    )


def rates_for(employee: Employee, basic_salary: Decimal) -> OvertimeRates:
    return overtime_rates(
        basic_salary,
        employee.working_hours_per_day,
        normal_override=employee.ot_rate_normal,
        friday_override=employee.ot_rate_friday,
        holiday_override=employee.ot_rate_holiday,
    )

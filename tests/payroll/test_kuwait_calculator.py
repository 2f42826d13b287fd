from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.attendance.aggregator import aggregate_attendance
from src.payroll_system.payroll_system.attendance.model import AttendanceRecord
from src.payroll_system.payroll_system.core.exceptions import ValidationError
from src.payroll_system.payroll_system.employees.model import Employee
from src.payroll_system.payroll_system.payroll.calculator.kuwait_calculator import (
    KuwaitPayrollCalculator,
    food_allowance,
    is_rehab_indirect,
    net_salary,
    prorate,
    qualifies_for_food_allowance,
)


def _employee(**kwargs) -> Employee:
    kwargs.setdefault("emp_id", "E1")
    kwargs.setdefault("name", "Test")
    kwargs.setdefault("basic_salary", Decimal("520"))
    return Employee(**kwargs)


def _summary(**kwargs):
    kwargs.setdefault("emp_id", "E1")
    kwargs.setdefault("month", "01-2025")
    kwargs.setdefault("working_days", 26)
    return aggregate_attendance([AttendanceRecord(**kwargs)])


@pytest.mark.parametrize("days", [26, 27, 30, 31, Decimal("26.5")])
def test_prorate_caps_at_full_amount(days):
    assert prorate(Decimal("600"), Decimal(days)) == Decimal("600")


@pytest.mark.parametrize("days", [0, 1, 13, 25, Decimal("22.5")])
def test_prorate_is_linear_below_26_days(days):
    days = Decimal(days)
    assert prorate(Decimal("600"), days) == Decimal("600") / 26 * days


def test_prorate_of_non_positive_amount_is_zero():
    assert prorate(Decimal("0"), Decimal("20")) == 0
    assert prorate(Decimal("-5"), Decimal("20")) == 0


@pytest.mark.parametrize(
    "category, accommodation",
    [
        ("Direct", "Own"),
        ("Direct", "own house"),
        ("Indirect", "Company"),
        ("Indirect", "Camp"),
        ("Indirect", ""),
        ("", "Own"),
        ("Contract", "Own"),
    ],
)
def test_food_allowance_is_zero_unless_indirect_with_own_accommodation(category, accommodation):
    emp = _employee(category=category, accommodation=accommodation, food_allowance_amount=Decimal("30"))

    assert not qualifies_for_food_allowance(emp)
    assert food_allowance(emp, Decimal("26")) == 0
    assert food_allowance(emp, Decimal("10")) == 0


def test_food_allowance_match_is_trimmed_and_case_insensitive():
    emp = _employee(category="INDIRECT", accommodation="  OWN Flat ", food_allowance_amount=Decimal("26"))

    assert qualifies_for_food_allowance(emp)
    assert food_allowance(emp, Decimal("31")) == Decimal("26")
    assert food_allowance(emp, Decimal("13")) == Decimal("13")


def test_food_allowance_needs_a_positive_amount():
    emp = _employee(category="Indirect", accommodation="Own", food_allowance_amount=0)

    assert food_allowance(emp, Decimal("26")) == 0


def test_food_money_worksheet_amount_is_paid_as_is():
    emp = _employee(category="Direct", accommodation="Camp")

    assert food_allowance(emp, Decimal("10"), worksheet_amount=Decimal("15")) == Decimal("15")
    assert food_allowance(emp, Decimal("10"), worksheet_amount=Decimal("0")) == 0


def test_rehab_indirect_detection():
    assert is_rehab_indirect(_employee(department="REHAB", category="indirect"))
    assert is_rehab_indirect(_employee(department=" Rehab ", category="Indirect"))
    assert not is_rehab_indirect(_employee(department="Rehab", category="Direct"))
    assert not is_rehab_indirect(_employee(department="Rehabilitation", category="Indirect"))


def test_rehab_indirect_overtime_is_seventy_percent():
    summary = _summary(present_days=26, ot_hours_normal=10, ot_hours_friday=4, ot_hours_holiday=2)
    calc = KuwaitPayrollCalculator()

    direct = calc.calculate(_employee(department="Maintenance", category="Direct"), summary, "01-2025")
    rehab = calc.calculate(_employee(department="Rehab", category="Indirect"), summary, "01-2025")

    assert direct.overtime.total == Decimal("56.25")
    assert rehab.overtime.total == direct.overtime.total * Decimal("0.70")
    assert rehab.overtime.normal == direct.overtime.normal * Decimal("0.70")
    # rates themselves are untouched
    assert rehab.rates == direct.rates
    assert rehab.is_rehab_indirect and not direct.is_rehab_indirect


def test_net_salary_rounds_half_up():
    assert net_salary(Decimal("450.5"), Decimal("0"), Decimal("0")) == Decimal("451")
    assert net_salary(Decimal("450.49"), Decimal("0"), Decimal("0")) == Decimal("450")
    assert net_salary(Decimal("440.5"), Decimal("10"), Decimal("0")) == Decimal("451")
    assert net_salary(Decimal("460.5"), Decimal("0"), Decimal("10")) == Decimal("451")


def test_full_calculation_for_part_month():
    emp = _employee(
        basic_salary="520",
        other_allowance="52",
        category="Indirect",
        accommodation="Own",
        food_allowance_amount="26",
    )
    summary = _summary(present_days=13, absent_days=13, ot_hours_normal=2, dues_earned=5, comments="half month")

    calc = KuwaitPayrollCalculator().calculate(emp, summary, "01-2025")
    rec = calc.record

    assert rec.basic_salary == Decimal("260.00")
    assert rec.other_allowance == Decimal("26.00")
    assert rec.food_allowance == Decimal("13.00")
    assert rec.ot_amount == Decimal("6.25")
    assert rec.gross_salary == Decimal("305.25")
    assert rec.gross_salary == rec.basic_salary + rec.other_allowance + rec.food_allowance + rec.ot_amount
    assert rec.deductions == 0
    assert rec.dues_earned == Decimal("5.00")
    assert rec.net_salary == Decimal("310.00")
    assert rec.days_worked == 13
    assert rec.comments == "half month"
    assert not calc.is_capped


def test_long_month_never_overpays():
    emp = _employee(basic_salary="600", other_allowance="60")
    calc = KuwaitPayrollCalculator().calculate(emp, _summary(working_days=31, present_days=31), "12-2024")

    assert calc.is_capped
    assert calc.record.basic_salary == Decimal("600")
    assert calc.record.other_allowance == Decimal("60")
    assert calc.record.net_salary == Decimal("660")


def test_round_off_drives_proration():
    emp = _employee(basic_salary="520")
    calc = KuwaitPayrollCalculator().calculate(emp, _summary(present_days=20, round_off=22), "01-2025")

    assert calc.record.days_worked == 22
    assert calc.record.basic_salary == Decimal("440.00")


def test_malformed_salary_raises_validation_error():
    with pytest.raises(ValidationError, match="basic_salary"):
        KuwaitPayrollCalculator().calculate(_employee(basic_salary="n/a"), _summary(present_days=10), "01-2025")


def test_stored_gross_is_the_sum_of_stored_parts():
    emp = _employee(basic_salary="100", other_allowance="100")
    rec = KuwaitPayrollCalculator().calculate(emp, _summary(present_days=1), "01-2025").record

    assert rec.basic_salary == Decimal("3.85")
    assert rec.other_allowance == Decimal("3.85")
    assert rec.gross_salary == Decimal("7.70")
    assert rec.gross_salary == rec.basic_salary + rec.other_allowance + rec.food_allowance + rec.ot_amount
    assert rec.net_salary == Decimal("8")

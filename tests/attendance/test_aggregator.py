from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.attendance.aggregator import aggregate_attendance, group_by_employee
from src.payroll_system.payroll_system.attendance.model import AttendanceRecord
from src.payroll_system.payroll_system.core.exceptions import ValidationError


def _row(**kwargs) -> AttendanceRecord:
    kwargs.setdefault("emp_id", "E1")
    kwargs.setdefault("month", "01-2025")
    return AttendanceRecord(**kwargs)


def test_department_slices_are_summed():
    rows = [
        _row(working_days=13, present_days=12, absent_days=1, comments="Project A"),
        _row(working_days=13, present_days=13, absent_days=0, comments="Project B"),
    ]

    summary = aggregate_attendance(rows)

    assert summary.record_count == 2
    assert summary.working_days == 26
    assert summary.present_days == 25
    assert summary.absent_days == 1
    assert summary.effective_present_days == 25
    assert summary.comments == "Project A; Project B"


def test_round_off_overrides_present_days():
    summary = aggregate_attendance([_row(working_days=26, present_days=20, round_off=Decimal("22"))])

    assert summary.present_days == 20
    assert summary.effective_present_days == 22


def test_round_off_is_summed_over_rows_that_carry_it():
    rows = [
        _row(present_days=12, round_off="10"),
        _row(present_days=12, round_off=None),
        _row(present_days=1, round_off="2.5"),
    ]

    summary = aggregate_attendance(rows)

    assert summary.round_off_total == Decimal("12.5")
    assert summary.effective_present_days == Decimal("12.5")


def test_zero_round_off_falls_back_to_present_days():
    summary = aggregate_attendance([_row(present_days=18, round_off=0)])

    assert summary.effective_present_days == 18


def test_ot_hours_and_dues_are_summed():
    rows = [
        _row(ot_hours_normal="2.5", ot_hours_friday=1, ot_hours_holiday=0, dues_earned="10.25"),
        _row(ot_hours_normal=Decimal("1.5"), ot_hours_friday=3, ot_hours_holiday="4", dues_earned=None),
    ]

    summary = aggregate_attendance(rows)

    assert summary.ot_hours_normal == 4
    assert summary.ot_hours_friday == 4
    assert summary.ot_hours_holiday == 4
    assert summary.dues_earned == Decimal("10.25")


def test_blank_comments_are_dropped():
    rows = [_row(comments="  "), _row(comments=None), _row(comments=" late upload ")]

    assert aggregate_attendance(rows).comments == "late upload"


def test_no_rows_gives_empty_summary():
    summary = aggregate_attendance([])

    assert not summary.has_records
    assert summary.effective_present_days == 0
    assert summary.comments == ""


def test_non_numeric_value_raises():
    with pytest.raises(ValidationError, match="present_days"):
        aggregate_attendance([_row(present_days="twelve")])


def test_group_by_employee_matches_month_verbatim():
    rows = [
        _row(emp_id="E1", month="01-2025"),
        _row(emp_id="E1", month="1-2025"),
        _row(emp_id="E2", month="01-2025"),
        _row(emp_id="E1", month="02-2025"),
    ]

    grouped = group_by_employee(rows, month="01-2025")

    assert set(grouped) == {"E1", "E2"}
    assert len(grouped["E1"]) == 1

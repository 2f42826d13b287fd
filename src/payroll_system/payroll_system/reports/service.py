from __future__ import annotations

import logging
from typing import Optional

from ..attendance.aggregator import aggregate_attendance, group_by_employee
from ..attendance.repository import AttendanceRepository
from ..common.money import money, to_decimal
from ..common.validators import month_bounds, month_display, require_month
from ..core.enums import LeaveStatus
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from ..food_money.repository import FoodMoneyRepository
from ..leaves.repository import LeaveRepository
from ..payroll.calculator.base import PayrollCalculator
from ..payroll.calculator.kuwait_calculator import KuwaitPayrollCalculator
from ..payroll.repository import PayrollRepository
from .model import ReportRow

logger = logging.getLogger(__name__)


class MonthlyReportService:
    """Read-only monthly report.

    Saved payroll wins for the money columns; without it the row is recomputed
    with the same calculator so the report renders before payroll is generated.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        payroll: PayrollRepository,
        *,
        leaves: Optional[LeaveRepository] = None,
        food_money: Optional[FoodMoneyRepository] = None,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._payroll = payroll
        self._leaves = leaves
        self._food_money = food_money
        self._calculator = calculator or KuwaitPayrollCalculator()

    def _leave_days(self, month: str) -> dict[str, int]:
        if not self._leaves:
            return {}
        year, mm = month_bounds(month)
        totals: dict[str, int] = {}
        for leave in self._leaves.list_leaves(status=LeaveStatus.APPROVED):
            if leave.starts_in(year, mm):
                totals[leave.emp_id] = totals.get(leave.emp_id, 0) + int(leave.days)
        return totals

    def build_monthly_report(self, month: str, department: Optional[str] = None) -> list[ReportRow]:
        month = require_month(month)

        employees = self._employees.list_employees(department=department)
        by_emp = group_by_employee(self._attendance.list_for_month(month, department=department), month=month)
        saved = {p.emp_id: p for p in self._payroll.list_payroll(month=month, department=department)}
        food_money = self._food_money.amounts_for_month(month) if self._food_money else {}
        leave_days = self._leave_days(month)

        rows: list[ReportRow] = []
        for employee in employees:
            try:
                summary = aggregate_attendance(by_emp.get(employee.emp_id, []))
                calc = self._calculator.calculate(
                    employee, summary, month, food_money=food_money.get(employee.emp_id)
                )
                salary = to_decimal(employee.basic_salary, "basic_salary")
            except ValidationError as e:
                logger.warning("Report row for %s (%s) skipped: %s", employee.emp_id, employee.name, e)
                continue

            payroll = saved.get(employee.emp_id)
            source = payroll or calc.record
            comments = (payroll.comments if payroll and payroll.comments else summary.comments).strip()

            if source.days_worked <= 0 and not comments:
                continue

            rows.append(
                ReportRow(
                    emp_id=employee.emp_id,
                    month=month,
                    month_display=month_display(month),
                    name=employee.name,
                    designation=employee.designation,
                    department=employee.department,
                    accommodation=employee.accommodation,
                    category=employee.category,
                    salary=money(salary),
                    worked_days=source.days_worked,
                    working_days=summary.working_days,
                    normal_ot=summary.ot_hours_normal,
                    friday_ot=summary.ot_hours_friday,
                    holiday_ot=summary.ot_hours_holiday,
                    salary_earned=source.basic_salary,
                    allowances_earned=source.other_allowance,
                    food_allow=source.food_allowance,
                    not_earned=money(calc.overtime.normal),
                    fot_earned=money(calc.overtime.friday),
                    hot_earned=money(calc.overtime.holiday),
                    ot_amount=source.ot_amount,
                    dues_earned=source.dues_earned,
                    deductions=source.deductions,
                    gross_salary=source.gross_salary,
                    total_earnings=source.net_salary,
                    leave_days=leave_days.get(employee.emp_id, 0),
                    comments=comments,
                    doj=employee.date_of_joining,
                    from_saved_payroll=payroll is not None,
                )
            )

        logger.info("Monthly report %s: %d row(s) from %d employee(s)", month, len(rows), len(employees))
        return rows

from __future__ import annotations

import dataclasses
import logging
from typing import Mapping, Optional, Sequence

from ..attendance.aggregator import aggregate_attendance, group_by_employee
from ..attendance.repository import AttendanceRepository
from ..common.money import Amount, money, to_decimal
from ..common.validators import require_month, require_non_empty
from ..core.enums import EmployeeStatus, SkipReason
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..food_money.repository import FoodMoneyRepository
from .calculator.base import PayrollCalculation, PayrollCalculator
from .calculator.kuwait_calculator import KuwaitPayrollCalculator, net_salary
from .model import PayrollGenerationResult, PayrollRecord, PayrollWarning
from .repository import PayrollRepository

logger = logging.getLogger(__name__)


def _log_breakdown(employee: Employee, calc: PayrollCalculation) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    rec = calc.record
    logger.debug(
        "%s (%s) %s: days=%s%s hbs=%.3f rates=%.3f/%.3f/%.3f ot=%.3f%s food=%.3f gross=%.3f dues=%s net=%s",
        employee.emp_id,
        employee.name,
        rec.month,
        rec.days_worked,
        " (capped)" if calc.is_capped else "",
        calc.hourly_basic_salary,
        calc.rates.normal,
        calc.rates.friday,
        calc.rates.holiday,
        calc.overtime.total,
        " (70% rehab indirect)" if calc.is_rehab_indirect else "",
        calc.food_allowance,
        calc.gross_salary,
        rec.dues_earned,
        rec.net_salary,
    )


class PayrollService:
    """Use case: compute, persist and edit monthly payroll."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        payroll: PayrollRepository,
        *,
        food_money: Optional[FoodMoneyRepository] = None,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._payroll = payroll
        self._food_money = food_money
        self._calculator = calculator or KuwaitPayrollCalculator()

    def preview_payroll(self, month: str, department: Optional[str] = None) -> PayrollGenerationResult:
        """Compute the month without touching persisted payroll."""
        month = require_month(month)
        employees = self._employees.list_employees(department=department)
        return self._compute(month, department, employees)

    def generate_payroll(self, month: str, department: Optional[str] = None) -> PayrollGenerationResult:
        """Compute the month and replace its persisted rows wholesale.

        Manual edits to the month's rows are lost: this is a full replace, not a
        merge. When nothing could be computed the stored rows are left as they
        are and only the warnings come back.
        """
        month = require_month(month)
        employees = self._employees.list_employees(department=department)
        result = self._compute(month, department, employees)

        if not result.created:
            logger.warning("No payroll generated for %s (%d skipped)", month, len(result.warnings))
            return result

        scope = [e.emp_id for e in employees] if department else None
        saved = self._payroll.replace_month(month, result.created, emp_ids=scope)
        logger.info(
            "Payroll for %s%s: saved %d record(s), skipped %d",
            month,
            f" [{department}]" if department else "",
            saved,
            len(result.warnings),
        )
        return result

    def _compute(self, month: str, department: Optional[str], employees: Sequence[Employee]) -> PayrollGenerationResult:
        attendance = self._attendance.list_for_month(month, department=department)
        by_emp = group_by_employee(attendance, month=month)
        food_money: Mapping = self._food_money.amounts_for_month(month) if self._food_money else {}

        logger.info(
            "Computing payroll for %s: %d employee(s), %d attendance row(s)",
            month,
            len(employees),
            len(attendance),
        )

        created: list[PayrollRecord] = []
        warnings: list[PayrollWarning] = []

        def skip(emp_id: str, name: str, code: SkipReason, reason: str) -> None:
            logger.warning("Skipping %s (%s): %s", emp_id, name, reason)
            warnings.append(PayrollWarning(emp_id=emp_id, name=name, code=code, reason=reason))

        for employee in employees:
            if not employee.in_department(department):
                continue
            if not isinstance(employee.status, EmployeeStatus):
                skip(employee.emp_id, employee.name, SkipReason.INVALID_DATA, f"status is not recognised: {employee.status!r}")
                continue
            if not employee.is_active:
                continue

            rows = by_emp.get(employee.emp_id)
            if not rows:
                skip(employee.emp_id, employee.name, SkipReason.NO_ATTENDANCE, f"No attendance records for {month}")
                continue

            try:
                summary = aggregate_attendance(rows)
                if summary.effective_present_days <= 0:
                    skip(
                        employee.emp_id,
                        employee.name,
                        SkipReason.ZERO_PRESENT_DAYS,
                        "Zero present days (no work performed)",
                    )
                    continue
                calc = self._calculator.calculate(
                    employee, summary, month, food_money=food_money.get(employee.emp_id)
                )
            except ValidationError as e:
                skip(employee.emp_id, employee.name, SkipReason.INVALID_DATA, str(e))
                continue

            _log_breakdown(employee, calc)
            created.append(calc.record)

        if not department:
            known = {e.emp_id for e in employees}
            for emp_id in by_emp:
                if emp_id not in known:
                    skip(
                        emp_id,
                        "Unknown",
                        SkipReason.UNKNOWN_EMPLOYEE,
                        "Employee not found in master (add to master sheet for payroll)",
                    )

        return PayrollGenerationResult(created=created, warnings=warnings)

    def list_payroll(self, *, month: Optional[str] = None, department: Optional[str] = None) -> Sequence[PayrollRecord]:
        if month:
            month = require_month(month)
        return self._payroll.list_payroll(month=month, department=department)

    def payroll_for_employee(self, emp_id: str, month: Optional[str] = None) -> Sequence[PayrollRecord]:
        """All saved months of one employee, or just the given month."""
        emp_id = require_non_empty(emp_id, "emp_id")
        if month:
            month = require_month(month)
        return self._payroll.list_payroll(month=month, emp_id=emp_id)

    def update_payroll(
        self,
        emp_id: str,
        month: str,
        *,
        food_allowance: Amount = None,
        deductions: Amount = None,
        comments: Optional[str] = None,
    ) -> PayrollRecord:
        """Edit a persisted row; gross and net are recomputed from its parts."""
        emp_id = require_non_empty(emp_id, "emp_id")
        month = require_month(month)

        existing = self._payroll.get(emp_id, month)
        if not existing:
            raise NotFoundError(f"Payroll record not found for {emp_id} in {month}")

        food = existing.food_allowance if food_allowance is None else money(to_decimal(food_allowance, "food_allowance"))
        deduct = existing.deductions if deductions is None else money(to_decimal(deductions, "deductions"))
        if food < 0:
            raise ValidationError("food_allowance must not be negative")
        if deduct < 0:
            raise ValidationError("deductions must not be negative")

        gross = existing.basic_salary + existing.other_allowance + food + existing.ot_amount
        updated = dataclasses.replace(
            existing,
            food_allowance=food,
            deductions=deduct,
            gross_salary=money(gross),
            net_salary=money(net_salary(gross, existing.dues_earned, deduct)),
            comments=existing.comments if comments is None else comments,
        )
        self._payroll.update(updated)
        logger.info("Updated payroll %s/%s: food=%s deductions=%s net=%s", emp_id, month, food, deduct, updated.net_salary)
        return updated

from __future__ import annotations

import dataclasses
import logging
from typing import Optional, Sequence

from ..common.datetime_utils import Clock, SystemClock
from ..common.money import Amount, money, to_decimal
from ..common.validators import require_non_empty
from ..core.enums import IndemnityStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .calculator import indemnity_amount, years_of_service
from .model import IndemnityRecord
from .repository import IndemnityRepository

logger = logging.getLogger(__name__)


class IndemnityService:
    """Use case: keep every employee's end-of-service indemnity current."""

    def __init__(
        self,
        employees: EmployeeRepository,
        indemnity: IndemnityRepository,
        *,
        clock: Optional[Clock] = None,
    ):
        self._employees = employees
        self._indemnity = indemnity
        self._clock = clock or SystemClock()

    def calculate_for(self, employee: Employee) -> IndemnityRecord:
        """Fresh (unsaved) Active record for one employee as of the clock's today."""
        if employee.date_of_joining is None:
            raise ValidationError(f"{employee.emp_id}: date_of_joining is required")
        basic = to_decimal(employee.basic_salary, "basic_salary")
        years = years_of_service(employee.date_of_joining, self._clock.today())
        return IndemnityRecord(
            emp_id=employee.emp_id,
            years_of_service=money(years),
            indemnity_amount=money(indemnity_amount(basic, years)),
            status=IndemnityStatus.ACTIVE,
        )

    def recalculate_indemnity(self) -> list[IndemnityRecord]:
        """Recompute all employees; update in place or create.

        Existing rows only get years_of_service and indemnity_amount refreshed;
        a Paid status is never reset.
        """
        results: list[IndemnityRecord] = []
        created = 0

        for employee in self._employees.list_employees():
            try:
                fresh = self.calculate_for(employee)
            except ValidationError as e:
                logger.warning("Skipping indemnity for %s (%s): %s", employee.emp_id, employee.name, e)
                continue

            existing = self._indemnity.get_by_employee(employee.emp_id)
            if existing:
                self._indemnity.update_amounts(
                    employee.emp_id,
                    years_of_service=fresh.years_of_service,
                    indemnity_amount=fresh.indemnity_amount,
                )
                results.append(
                    dataclasses.replace(
                        existing,
                        years_of_service=fresh.years_of_service,
                        indemnity_amount=fresh.indemnity_amount,
                    )
                )
            else:
                results.append(self._indemnity.create(fresh))
                created += 1

        logger.info("Indemnity recalculated for %d employee(s), %d new", len(results), created)
        return results

    def list_indemnity(self) -> Sequence[IndemnityRecord]:
        return self._indemnity.list_indemnity()

    def get_indemnity(self, emp_id: str) -> IndemnityRecord:
        emp_id = require_non_empty(emp_id, "emp_id")
        record = self._indemnity.get_by_employee(emp_id)
        if not record:
            raise NotFoundError(f"Indemnity record not found for {emp_id}")
        return record

    def mark_paid(self, emp_id: str, *, indemnity_amount: Amount = None) -> IndemnityRecord:
        """Flip a record to Paid. Paying an already-paid record changes nothing."""
        emp_id = require_non_empty(emp_id, "emp_id")
        existing = self._indemnity.get_by_employee(emp_id)
        if not existing:
            raise NotFoundError(f"Indemnity record not found for {emp_id}")
        if existing.is_paid:
            logger.info("Indemnity for %s already paid at %s", emp_id, existing.paid_at)
            return existing

        amount = None
        if indemnity_amount is not None:
            amount = money(to_decimal(indemnity_amount, "indemnity_amount"))
            if amount < 0:
                raise ValidationError("indemnity_amount must not be negative")

        paid_at = self._clock.now()
        self._indemnity.mark_paid(emp_id, paid_at=paid_at, indemnity_amount=amount)
        logger.info("Indemnity for %s marked paid", emp_id)
        return dataclasses.replace(
            existing,
            status=IndemnityStatus.PAID,
            paid_at=paid_at,
            indemnity_amount=existing.indemnity_amount if amount is None else amount,
        )

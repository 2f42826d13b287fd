from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from ..common.money import Amount
from ..core.enums import EmployeeStatus, FoodAllowanceType


@dataclass(frozen=True)
class Employee:
    """Contract snapshot consulted per pay run (read-only to the engine).

    Numeric fields are kept as loaded; calculators coerce them so that a bad
    value only fails this employee's computation.
    """

    emp_id: str
    name: str
    basic_salary: Amount
    department: str = ""
    designation: str = ""
    category: str = "Direct"
    accommodation: str = ""
    other_allowance: Amount = 0
    food_allowance_amount: Amount = 0
    food_allowance_type: FoodAllowanceType = FoodAllowanceType.NONE
    working_hours_per_day: Amount = 8
    ot_rate_normal: Amount = 0
    ot_rate_friday: Amount = 0
    ot_rate_holiday: Amount = 0
    date_of_joining: Optional[date] = None
    # raw text when the stored status is not recognised
    status: Union[EmployeeStatus, str] = EmployeeStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE

    def in_department(self, department: Optional[str]) -> bool:
        if not department:
            return True
        return (self.department or "").strip().lower() == department.strip().lower()

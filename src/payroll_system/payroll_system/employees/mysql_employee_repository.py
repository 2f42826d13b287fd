from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.enums import EmployeeStatus, FoodAllowanceType, parse_stored
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, lower_eq
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_COLUMNS = """
    emp_id, name, designation, department, category, accommodation,
    basic_salary, other_allowance, food_allowance_amount, food_allowance_type,
    working_hours, ot_rate_normal, ot_rate_friday, ot_rate_holiday,
    doj, status
"""


def _to_employee(r: dict) -> Employee:
    food_type = parse_stored(FoodAllowanceType, r.get("food_allowance_type"), FoodAllowanceType.NONE)
    if not isinstance(food_type, FoodAllowanceType):
        logger.warning("%s: unknown food_allowance_type %r, using none", r["emp_id"], food_type)
        food_type = FoodAllowanceType.NONE
    return Employee(
        emp_id=str(r["emp_id"]),
        name=r["name"],
        designation=r.get("designation") or "",
        department=r.get("department") or "",
        category=r.get("category") or "Direct",
        accommodation=r.get("accommodation") or "",
        basic_salary=r["basic_salary"],
        other_allowance=r.get("other_allowance"),
        food_allowance_amount=r.get("food_allowance_amount"),
        food_allowance_type=food_type,
        working_hours_per_day=r.get("working_hours"),
        ot_rate_normal=r.get("ot_rate_normal"),
        ot_rate_friday=r.get("ot_rate_friday"),
        ot_rate_holiday=r.get("ot_rate_holiday"),
        date_of_joining=r.get("doj"),
        status=parse_stored(EmployeeStatus, r.get("status"), EmployeeStatus.ACTIVE),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_employees(self, *, department: Optional[str] = None) -> Sequence[Employee]:
        sql = f"SELECT {_COLUMNS} FROM employees"
        params: tuple = ()
        if department:
            sql += f" WHERE {lower_eq('department')}"
            params = (department,)
        sql += " ORDER BY emp_id ASC"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [_to_employee(r) for r in fetchall(cur)]

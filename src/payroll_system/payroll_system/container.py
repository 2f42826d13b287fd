from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .common.datetime_utils import Clock, SystemClock
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .food_money.mysql_food_money_repository import MySQLFoodMoneyRepository
from .food_money.service import FoodMoneyService
from .indemnity.mysql_indemnity_repository import MySQLIndemnityRepository
from .indemnity.service import IndemnityService
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .payroll.calculator.kuwait_calculator import KuwaitPayrollCalculator
from .payroll.mysql_payroll_repository import MySQLPayrollRepository
from .payroll.service import PayrollService
from .reports.service import MonthlyReportService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    attendance_repo: MySQLAttendanceRepository
    leaves_repo: MySQLLeaveRepository
    food_money_repo: MySQLFoodMoneyRepository
    payroll_repo: MySQLPayrollRepository
    indemnity_repo: MySQLIndemnityRepository

    payroll_service: PayrollService
    food_money_service: FoodMoneyService
    indemnity_service: IndemnityService
    report_service: MonthlyReportService


def build_container(*, db_config: dict, clock: Optional[Clock] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    leaves_repo = MySQLLeaveRepository(conn)
    food_money_repo = MySQLFoodMoneyRepository(conn)
    payroll_repo = MySQLPayrollRepository(conn)
    indemnity_repo = MySQLIndemnityRepository(conn)

    calculator = KuwaitPayrollCalculator()

    payroll_service = PayrollService(
        employees_repo,
        attendance_repo,
        payroll_repo,
        food_money=food_money_repo,
        calculator=calculator,
    )
    food_money_service = FoodMoneyService(food_money_repo)
    indemnity_service = IndemnityService(employees_repo, indemnity_repo, clock=clock or SystemClock())
    report_service = MonthlyReportService(
        employees_repo,
        attendance_repo,
        payroll_repo,
        leaves=leaves_repo,
        food_money=food_money_repo,
        calculator=calculator,
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        food_money_repo=food_money_repo,
        payroll_repo=payroll_repo,
        indemnity_repo=indemnity_repo,
        payroll_service=payroll_service,
        food_money_service=food_money_service,
        indemnity_service=indemnity_service,
        report_service=report_service,
    )

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class ReportRow:
    """Denormalized monthly row: employee + attendance + payroll."""

    emp_id: str
    month: str
    month_display: str
    name: str
    designation: str
    department: str
    accommodation: str
    category: str
    salary: Decimal
    worked_days: Decimal
    working_days: Decimal
    normal_ot: Decimal
    friday_ot: Decimal
    holiday_ot: Decimal
    salary_earned: Decimal
    allowances_earned: Decimal
    food_allow: Decimal
    not_earned: Decimal
    fot_earned: Decimal
    hot_earned: Decimal
    ot_amount: Decimal
    dues_earned: Decimal
    deductions: Decimal
    gross_salary: Decimal
    total_earnings: Decimal
    leave_days: int
    comments: str
    doj: Optional[date]
    from_saved_payroll: bool


REPORT_COLUMNS = (
    ("emp_id", "Emp ID"),
    ("month_display", "Month"),
    ("accommodation", "Accommodation"),
    ("department", "Project/Place"),
    ("name", "Name"),
    ("designation", "Designation"),
    ("category", "Category"),
    ("salary", "Salary"),
    ("worked_days", "Worked Days"),
    ("working_days", "Working Days"),
    ("normal_ot", "Normal OT"),
    ("friday_ot", "Friday OT"),
    ("holiday_ot", "Holiday OT"),
    ("salary_earned", "Salary Earned"),
    ("allowances_earned", "Allowances Earned"),
    ("food_allow", "Food Allow"),
    ("not_earned", "NOT Earned"),
    ("fot_earned", "FOT Earned"),
    ("hot_earned", "HOT Earned"),
    ("dues_earned", "Dues Earned"),
    ("deductions", "Deductions"),
    ("total_earnings", "Total Earnings"),
    ("leave_days", "Leave Days"),
    ("comments", "Comments"),
    ("doj", "DOJ"),
)

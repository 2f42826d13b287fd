from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, lower_eq
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_month(self, month: str, *, department: Optional[str] = None) -> Sequence[AttendanceRecord]:
        clauses = ["a.month=%s"]
        params: list[object] = [month]
        if department:
            clauses.append(lower_eq("e.department"))
            params.append(department)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    a.id, a.emp_id, a.month, a.working_days, a.present_days, a.absent_days,
                    a.round_off, a.ot_hours_normal, a.ot_hours_friday, a.ot_hours_holiday,
                    a.dues_earned, a.comments
                FROM attendance a
                LEFT JOIN employees e ON e.emp_id = a.emp_id
                WHERE {where}
                ORDER BY a.emp_id ASC, a.id ASC
                """,
                tuple(params),
            )
            rows = fetchall(cur)

            return [
                AttendanceRecord(
                    attendance_id=int(r["id"]),
                    emp_id=str(r["emp_id"]),
                    month=r["month"],
                    working_days=r.get("working_days"),
                    present_days=r.get("present_days"),
                    absent_days=r.get("absent_days"),
                    round_off=r.get("round_off"),
                    ot_hours_normal=r.get("ot_hours_normal"),
                    ot_hours_friday=r.get("ot_hours_friday"),
                    ot_hours_holiday=r.get("ot_hours_holiday"),
                    dues_earned=r.get("dues_earned"),
                    comments=r.get("comments"),
                )
                for r in rows
            ]

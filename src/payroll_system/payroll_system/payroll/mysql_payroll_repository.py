from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, executemany, fetchall, fetchone, in_clause, lower_eq
from .model import PayrollRecord
from .repository import PayrollRepository

_COLUMNS = (
    "emp_id",
    "month",
    "basic_salary",
    "other_allowance",
    "ot_amount",
    "food_allowance",
    "days_worked",
    "gross_salary",
    "deductions",
    "dues_earned",
    "net_salary",
    "comments",
)


def _to_record(r: dict) -> PayrollRecord:
    return PayrollRecord(
        emp_id=str(r["emp_id"]),
        month=r["month"],
        basic_salary=r["basic_salary"],
        other_allowance=r["other_allowance"],
        ot_amount=r["ot_amount"],
        food_allowance=r["food_allowance"],
        days_worked=r["days_worked"],
        gross_salary=r["gross_salary"],
        deductions=r["deductions"],
        dues_earned=r["dues_earned"],
        net_salary=r["net_salary"],
        comments=r.get("comments") or "",
    )


def _to_params(rec: PayrollRecord) -> tuple:
    return tuple(getattr(rec, col) for col in _COLUMNS)


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_payroll(
        self,
        *,
        month: Optional[str] = None,
        department: Optional[str] = None,
        emp_id: Optional[str] = None,
    ) -> Sequence[PayrollRecord]:
        clauses: list[str] = []
        params: list[object] = []
        if emp_id:
            clauses.append("p.emp_id=%s")
            params.append(emp_id)
        if month:
            clauses.append("p.month=%s")
            params.append(month)
        if department:
            clauses.append(lower_eq("e.department"))
            params.append(department)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        cols = ", ".join(f"p.{c}" for c in _COLUMNS)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {cols}
                FROM payroll p
                LEFT JOIN employees e ON e.emp_id = p.emp_id
                {where}
                ORDER BY p.month ASC, p.emp_id ASC
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get(self, emp_id: str, month: str) -> Optional[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {', '.join(_COLUMNS)} FROM payroll WHERE emp_id=%s AND month=%s",
                (emp_id, month),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def replace_month(
        self,
        month: str,
        records: Sequence[PayrollRecord],
        *,
        emp_ids: Optional[Sequence[str]] = None,
    ) -> int:
        # delete + insert share one connection, so they commit or roll back together
        with db_cursor(self._conn_factory) as (_, cur):
            if emp_ids is None:
                cur.execute("DELETE FROM payroll WHERE month=%s", (month,))
            else:
                clause, params = in_clause("emp_id", list(emp_ids))
                cur.execute(f"DELETE FROM payroll WHERE month=%s AND {clause}", (month, *params))

            placeholders = ", ".join(["%s"] * len(_COLUMNS))
            return executemany(
                cur,
                f"INSERT INTO payroll ({', '.join(_COLUMNS)}) VALUES ({placeholders})",
                (_to_params(rec) for rec in records),
            )

    def update(self, record: PayrollRecord) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE payroll
                SET food_allowance=%s, deductions=%s, gross_salary=%s, net_salary=%s, comments=%s
                WHERE emp_id=%s AND month=%s
                """,
                (
                    record.food_allowance,
                    record.deductions,
                    record.gross_salary,
                    record.net_salary,
                    record.comments,
                    record.emp_id,
                    record.month,
                ),
            )
            return cur.rowcount > 0

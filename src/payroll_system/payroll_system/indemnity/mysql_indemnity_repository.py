from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from ..core.enums import IndemnityStatus, parse_stored
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import IndemnityRecord
from .repository import IndemnityRepository


def _to_record(r: dict) -> IndemnityRecord:
    return IndemnityRecord(
        emp_id=str(r["emp_id"]),
        years_of_service=r["years_of_service"],
        indemnity_amount=r["indemnity_amount"],
        status=parse_stored(IndemnityStatus, r.get("status"), IndemnityStatus.ACTIVE),
        paid_at=r.get("paid_at"),
    )


class MySQLIndemnityRepository(IndemnityRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_indemnity(self) -> Sequence[IndemnityRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT emp_id, years_of_service, indemnity_amount, status, paid_at FROM indemnity ORDER BY emp_id ASC"
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_by_employee(self, emp_id: str) -> Optional[IndemnityRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT emp_id, years_of_service, indemnity_amount, status, paid_at FROM indemnity WHERE emp_id=%s",
                (emp_id,),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create(self, record: IndemnityRecord) -> IndemnityRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO indemnity(emp_id, years_of_service, indemnity_amount, status, paid_at)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (
                    record.emp_id,
                    record.years_of_service,
                    record.indemnity_amount,
                    record.status.value,
                    record.paid_at,
                ),
            )
        return record

    def update_amounts(self, emp_id: str, *, years_of_service: Decimal, indemnity_amount: Decimal) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE indemnity
                SET years_of_service=%s, indemnity_amount=%s, updated_at=CURRENT_TIMESTAMP
                WHERE emp_id=%s
                """,
                (years_of_service, indemnity_amount, emp_id),
            )
            return cur.rowcount > 0

    def mark_paid(self, emp_id: str, *, paid_at: datetime, indemnity_amount: Optional[Decimal] = None) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE indemnity
                SET status=%s, paid_at=%s,
                    indemnity_amount=COALESCE(%s, indemnity_amount),
                    updated_at=CURRENT_TIMESTAMP
                WHERE emp_id=%s
                """,
                (IndemnityStatus.PAID.value, paid_at, indemnity_amount, emp_id),
            )
            return cur.rowcount > 0

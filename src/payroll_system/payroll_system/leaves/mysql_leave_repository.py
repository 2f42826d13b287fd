from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import LeaveStatus, parse_stored
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Leave
from .repository import LeaveRepository


def _to_leave(r: dict) -> Leave:
    return Leave(
        leave_id=int(r["id"]),
        emp_id=str(r["emp_id"]),
        leave_type=r["leave_type"],
        start_date=r["start_date"],
        end_date=r["end_date"],
        days=int(r.get("days") or 0),
        reason=r.get("reason") or "",
        status=parse_stored(LeaveStatus, r.get("status"), LeaveStatus.PENDING),
        reviewed_by=r.get("reviewed_by"),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_leaves(self, *, status: Optional[LeaveStatus] = None) -> Sequence[Leave]:
        sql = """
            SELECT id, emp_id, leave_type, start_date, end_date, days, reason, status, reviewed_by
            FROM leaves
        """
        params: tuple = ()
        if status is not None:
            sql += " WHERE LOWER(TRIM(status))=LOWER(%s)"
            params = (status.value,)
        sql += " ORDER BY start_date ASC, id ASC"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [_to_leave(r) for r in fetchall(cur)]

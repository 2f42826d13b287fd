from __future__ import annotations

from decimal import Decimal
from typing import Mapping, Sequence

from ..common.money import to_decimal
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, executemany, fetchall, in_clause
from .model import FoodMoneyEntry
from .repository import FoodMoneyRepository


class MySQLFoodMoneyRepository(FoodMoneyRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def amounts_for_month(self, month: str) -> Mapping[str, Decimal]:
        return {e.emp_id: e.amount for e in self.list_for_month(month)}

    def list_for_month(self, month: str) -> Sequence[FoodMoneyEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT emp_id, month, SUM(amount) AS amount
                FROM food_money
                WHERE month=%s
                GROUP BY emp_id, month
                ORDER BY emp_id ASC
                """,
                (month,),
            )
            return [
                FoodMoneyEntry(emp_id=str(r["emp_id"]), month=r["month"], amount=to_decimal(r["amount"], "amount"))
                for r in fetchall(cur)
            ]

    def set_for_month(self, month: str, entries: Sequence[FoodMoneyEntry]) -> int:
        clause, params = in_clause("emp_id", [e.emp_id for e in entries])
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM food_money WHERE month=%s AND {clause}", (month, *params))
            return executemany(
                cur,
                "INSERT INTO food_money (emp_id, month, amount) VALUES (%s, %s, %s)",
                ((e.emp_id, month, e.amount) for e in entries),
            )

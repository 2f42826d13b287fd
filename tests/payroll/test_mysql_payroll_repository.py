from decimal import Decimal

import mysql.connector
import pytest

from src.payroll_system.payroll_system.core.exceptions import PersistenceError
from src.payroll_system.payroll_system.payroll.model import PayrollRecord
from src.payroll_system.payroll_system.payroll.mysql_payroll_repository import MySQLPayrollRepository


class StubCursor:
    def __init__(self, fail_on_insert):
        self.fail_on_insert = fail_on_insert
        self.executed = []
        self.closed = False
        self.rowcount = 0

    def execute(self, sql, params=()):
        self.executed.append((sql.strip(), params))

    def executemany(self, sql, rows):
        if self.fail_on_insert:
            raise mysql.connector.Error("Duplicate entry 'E1-01-2025'")
        self.executed.append((sql.strip(), rows))

    def close(self):
        self.closed = True


class StubConnection:
    def __init__(self, fail_on_insert=False):
        self.cur = StubCursor(fail_on_insert)
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=False):
        return self.cur

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class StubConnectionFactory:
    def __init__(self, conn):
        self.conn = conn

    def connect(self, *, with_database=True):
        return self.conn


def _record(emp_id):
    zero = Decimal("0.00")
    return PayrollRecord(
        emp_id=emp_id,
        month="01-2025",
        basic_salary=Decimal("520.00"),
        other_allowance=zero,
        ot_amount=zero,
        food_allowance=zero,
        days_worked=Decimal("26.00"),
        gross_salary=Decimal("520.00"),
        deductions=zero,
        dues_earned=zero,
        net_salary=Decimal("520.00"),
    )


def test_replace_month_commits_delete_and_insert_together():
    conn = StubConnection()

    saved = MySQLPayrollRepository(StubConnectionFactory(conn)).replace_month("01-2025", [_record("E1"), _record("E2")])

    assert saved == 2
    assert conn.committed and not conn.rolled_back
    assert conn.closed and conn.cur.closed
    delete_sql, delete_params = conn.cur.executed[0]
    assert delete_sql.startswith("DELETE FROM payroll") and delete_params == ("01-2025",)
    insert_sql, rows = conn.cur.executed[1]
    assert insert_sql.startswith("INSERT INTO payroll")
    assert [r[0] for r in rows] == ["E1", "E2"]


def test_replace_month_scoped_to_employees():
    conn = StubConnection()

    MySQLPayrollRepository(StubConnectionFactory(conn)).replace_month("01-2025", [_record("E1")], emp_ids=["E1", "E3"])

    delete_sql, delete_params = conn.cur.executed[0]
    assert "emp_id IN (%s, %s)" in delete_sql
    assert delete_params == ("01-2025", "E1", "E3")


def test_failed_insert_rolls_back_the_delete():
    conn = StubConnection(fail_on_insert=True)

    with pytest.raises(PersistenceError, match="Duplicate entry"):
        MySQLPayrollRepository(StubConnectionFactory(conn)).replace_month("01-2025", [_record("E1")])

    assert conn.rolled_back
    assert not conn.committed
    assert conn.closed

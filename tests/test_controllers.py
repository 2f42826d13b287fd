from datetime import date, datetime, timedelta
from decimal import Decimal
from types import SimpleNamespace

import pytest
from flask import Flask

from src.payroll_system.payroll_system.attendance.model import AttendanceRecord
from src.payroll_system.payroll_system.common.datetime_utils import FixedClock
from src.payroll_system.payroll_system.core.exceptions import PersistenceError
from src.payroll_system.payroll_system.employees.model import Employee
from src.payroll_system.payroll_system.food_money.controller import register as register_food_money
from src.payroll_system.payroll_system.food_money.service import FoodMoneyService
from src.payroll_system.payroll_system.indemnity.controller import register as register_indemnity
from src.payroll_system.payroll_system.indemnity.service import IndemnityService
from src.payroll_system.payroll_system.payroll.controller import register as register_payroll
from src.payroll_system.payroll_system.payroll.service import PayrollService
from src.payroll_system.payroll_system.reports.controller import register as register_reports
from src.payroll_system.payroll_system.reports.service import MonthlyReportService

NOW = datetime(2025, 2, 1, 8, 0)


class FakeEmployeeRepo:
    def __init__(self, employees):
        self.employees = employees

    def list_employees(self, *, department=None):
        return [e for e in self.employees if e.in_department(department)]


class FakeAttendanceRepo:
    def __init__(self, records):
        self.records = records

    def list_for_month(self, month, *, department=None):
        return [r for r in self.records if r.month == month]


class FakePayrollRepo:
    def __init__(self):
        self.rows = {}
        self.fail = False

    def list_payroll(self, *, month=None, department=None, emp_id=None):
        return [
            r
            for r in self.rows.values()
            if (month is None or r.month == month) and (emp_id is None or r.emp_id == emp_id)
        ]

    def get(self, emp_id, month):
        return self.rows.get((emp_id, month))

    def replace_month(self, month, records, *, emp_ids=None):
        if self.fail:
            raise PersistenceError("connection lost")
        self.rows = {k: r for k, r in self.rows.items() if r.month != month}
        self.rows.update({(r.emp_id, r.month): r for r in records})
        return len(records)

    def update(self, record):
        self.rows[(record.emp_id, record.month)] = record
        return True


class FakeFoodMoneyRepo:
    def __init__(self):
        self.rows = {}

    def amounts_for_month(self, month):
        return {e.emp_id: e.amount for e in self.list_for_month(month)}

    def list_for_month(self, month):
        return [e for (m, _), e in sorted(self.rows.items()) if m == month]

    def set_for_month(self, month, entries):
        for e in entries:
            self.rows[(month, e.emp_id)] = e
        return len(entries)


class FakeIndemnityRepo:
    def __init__(self):
        self.rows = {}

    def list_indemnity(self):
        return list(self.rows.values())

    def get_by_employee(self, emp_id):
        return self.rows.get(emp_id)

    def create(self, record):
        self.rows[record.emp_id] = record
        return record

    def update_amounts(self, emp_id, *, years_of_service, indemnity_amount):
        return True

    def mark_paid(self, emp_id, *, paid_at, indemnity_amount=None):
        return True


@pytest.fixture
def repos():
    employees = FakeEmployeeRepo(
        [
            Employee(
                emp_id="E1",
                name="Ali",
                basic_salary=Decimal("600"),
                department="Rehab",
                date_of_joining=NOW.date() - timedelta(days=1095),
            ),
            Employee(emp_id="E2", name="Sara", basic_salary=Decimal("520"), date_of_joining=date(2024, 2, 1)),
        ]
    )
    attendance = FakeAttendanceRepo(
        [AttendanceRecord(emp_id="E1", month="01-2025", working_days=26, present_days=26, comments="full")]
    )
    return SimpleNamespace(
        employees=employees,
        attendance=attendance,
        payroll=FakePayrollRepo(),
        indemnity=FakeIndemnityRepo(),
        food_money=FakeFoodMoneyRepo(),
    )


@pytest.fixture
def client(repos):
    container = SimpleNamespace(
        payroll_service=PayrollService(repos.employees, repos.attendance, repos.payroll, food_money=repos.food_money),
        food_money_service=FoodMoneyService(repos.food_money),
        indemnity_service=IndemnityService(repos.employees, repos.indemnity, clock=FixedClock(NOW)),
        report_service=MonthlyReportService(repos.employees, repos.attendance, repos.payroll),
    )
    app = Flask(__name__)
    app.config["TESTING"] = True
    register_payroll(app, container)
    register_food_money(app, container)
    register_indemnity(app, container)
    register_reports(app, container)
    return app.test_client()


def test_generate_payroll_returns_created_and_warnings(client):
    resp = client.post("/api/payroll/generate", json={"month": "01-2025"})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["count"] == 1
    assert body["created"][0]["emp_id"] == "E1"
    assert body["created"][0]["net_salary"] == "600.00"
    assert [w["code"] for w in body["warnings"]] == ["no_attendance"]
    assert "1 employee(s) skipped" in body["message"]


def test_generate_payroll_with_nothing_to_do_is_400(client):
    resp = client.post("/api/payroll/generate", json={"month": "03-2025"})

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["created"] == []
    assert len(body["warnings"]) == 2


def test_generate_payroll_bad_month_is_400(client):
    resp = client.post("/api/payroll/generate", json={"month": "2025-01"})

    assert resp.status_code == 400
    assert "MM-YYYY" in resp.get_json()["error"]


def test_generate_payroll_storage_failure_is_500(client, repos):
    repos.payroll.fail = True

    resp = client.post("/api/payroll/generate", json={"month": "01-2025"})

    assert resp.status_code == 500
    assert repos.payroll.rows == {}


def test_list_and_update_payroll(client):
    client.post("/api/payroll/generate", json={"month": "01-2025"})

    resp = client.patch("/api/payroll/E1", json={"month": "01-2025", "deductions": "100"})
    assert resp.status_code == 200
    assert resp.get_json()["net_salary"] == "500.00"

    listed = client.get("/api/payroll?month=01-2025").get_json()
    assert [r["emp_id"] for r in listed] == ["E1"]
    assert listed[0]["deductions"] == "100.00"


def test_update_missing_payroll_is_404(client):
    resp = client.patch("/api/payroll/E9", json={"month": "01-2025", "deductions": 1})

    assert resp.status_code == 404


def test_indemnity_calculate_and_pay(client):
    resp = client.post("/api/indemnity/calculate")
    records = {r["emp_id"]: r for r in resp.get_json()["records"]}

    assert resp.status_code == 200
    assert records["E1"]["indemnity_amount"] == "900.00"
    assert records["E1"]["status"] == "Active"

    paid = client.patch("/api/indemnity/E1/pay", json={})
    assert paid.status_code == 200
    assert paid.get_json()["status"] == "Paid"
    assert paid.get_json()["paid_at"] == "2025-02-01T08:00:00"


def test_pay_unknown_indemnity_is_404(client):
    resp = client.patch("/api/indemnity/E9/pay", json={})

    assert resp.status_code == 404


def test_monthly_report_json_and_csv(client):
    resp = client.get("/api/reports/monthly?month=01-2025")
    assert resp.status_code == 200
    assert [r["emp_id"] for r in resp.get_json()] == ["E1"]

    csv_resp = client.get("/api/reports/monthly.csv?month=01-2025")
    assert csv_resp.status_code == 200
    assert csv_resp.mimetype == "text/csv"
    assert "payroll_report_01-2025.csv" in csv_resp.headers["Content-Disposition"]
    assert csv_resp.get_data(as_text=True).splitlines()[0].startswith("Emp ID,")


def test_payroll_for_one_employee(client):
    client.post("/api/payroll/generate", json={"month": "01-2025"})

    resp = client.get("/api/payroll/E1")
    assert resp.status_code == 200
    assert [(r["emp_id"], r["month"]) for r in resp.get_json()] == [("E1", "01-2025")]

    assert client.get("/api/payroll/E1?month=02-2025").get_json() == []
    assert client.get("/api/payroll/E1?month=2025-02").status_code == 400


def test_indemnity_for_one_employee(client):
    assert client.get("/api/indemnity/E1").status_code == 404

    client.post("/api/indemnity/calculate")
    resp = client.get("/api/indemnity/E1")

    assert resp.status_code == 200
    assert resp.get_json()["indemnity_amount"] == "900.00"


def test_food_money_bulk_feeds_payroll(client):
    resp = client.post(
        "/api/food-money/bulk",
        json={"month": "01-2025", "entries": [{"emp_id": "E1", "amount": 35}, {"emp_id": "E2", "amount": "12.5"}]},
    )
    assert resp.status_code == 200
    assert resp.get_json()["count"] == 2

    listed = client.get("/api/food-money?month=01-2025").get_json()
    assert [(e["emp_id"], e["amount"]) for e in listed] == [("E1", "35.00"), ("E2", "12.50")]

    created = client.post("/api/payroll/generate", json={"month": "01-2025"}).get_json()["created"]
    assert created[0]["food_allowance"] == "35.00"
    assert created[0]["net_salary"] == "635.00"


def test_food_allowance_bulk_overwrites_an_employee(client):
    client.post("/api/food-allowance/bulk", json={"month": "01-2025", "entries": [{"emp_id": "E1", "amount": 35}]})
    client.post("/api/food-allowance/bulk", json={"month": "01-2025", "entries": [{"emp_id": "E1", "amount": 20}]})

    listed = client.get("/api/food-money?month=01-2025").get_json()

    assert listed == [{"emp_id": "E1", "month": "01-2025", "amount": "20.00"}]


@pytest.mark.parametrize(
    "payload",
    [
        {"month": "01-2025", "entries": []},
        {"month": "2025-01", "entries": [{"emp_id": "E1", "amount": 5}]},
        {"month": "01-2025", "entries": [{"emp_id": "", "amount": 5}]},
        {"month": "01-2025", "entries": [{"emp_id": "E1", "amount": -5}]},
        {"month": "01-2025", "entries": [{"emp_id": "E1", "amount": "lots"}]},
        {"month": "01-2025", "entries": ["E1"]},
    ],
)
def test_food_money_bulk_rejects_bad_payloads(client, repos, payload):
    resp = client.post("/api/food-money/bulk", json=payload)

    assert resp.status_code == 400
    assert repos.food_money.rows == {}

"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the payroll rules live in the services.
"""

import importlib

from config import get_settings_module

from src.payroll_system.payroll_system.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    result = container.payroll_service.preview_payroll("01-2025")
    for rec in result.created:
        print(rec.emp_id, rec.net_salary)
    for w in result.warnings:
        print("skipped", w.emp_id, w.reason)


if __name__ == "__main__":
    main()

"""Recalculate end-of-service indemnity for every employee.

    python scripts/recalculate_indemnity.py [--as-of YYYY-MM-DD]
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.payroll_system.payroll_system.common.datetime_utils import FixedClock, parse_iso_date
from src.payroll_system.payroll_system.container import build_container


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--as-of", default=None, help="reference date, defaults to today")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format="%(levelname)s [%(name)s] %(message)s")

    clock = FixedClock(parse_iso_date(args.as_of)) if args.as_of else None
    container = build_container(db_config=settings.DB_CONFIG, clock=clock)

    for rec in container.indemnity_service.recalculate_indemnity():
        print(f"{rec.emp_id}\tyears={rec.years_of_service}\tamount={rec.indemnity_amount}\t{getattr(rec.status, 'value', rec.status)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Generate (or preview) payroll for one month.

    python scripts/generate_payroll.py 01-2025 [--department Rehab] [--dry-run]
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

from src.payroll_system.payroll_system.container import build_container
from src.payroll_system.payroll_system.core.exceptions import DomainError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("month", help="MM-YYYY")
    parser.add_argument("--department", default=None)
    parser.add_argument("--dry-run", action="store_true", help="compute without saving")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format="%(levelname)s [%(name)s] %(message)s")
    container = build_container(db_config=settings.DB_CONFIG)

    service = container.payroll_service
    run = service.preview_payroll if args.dry_run else service.generate_payroll
    try:
        result = run(args.month, args.department)
    except DomainError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    for rec in result.created:
        print(f"{rec.emp_id}\tdays={rec.days_worked}\tgross={rec.gross_salary}\tnet={rec.net_salary}")
    for w in result.warnings:
        print(f"SKIPPED {w.emp_id} ({w.name}): {w.reason}", file=sys.stderr)
    print(f"{'Previewed' if args.dry_run else 'Generated'} {result.count} record(s), {len(result.warnings)} skipped")
    return 0 if result.created else 2


if __name__ == "__main__":
    sys.exit(main())

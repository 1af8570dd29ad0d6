"""Monthly payroll run: write every payslip to PAYSLIP_DIR and print the report.

Usage: python scripts/run_payroll.py MONTH YEAR [AS_OF]
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.payroll_system.payroll_system.common.datetime_utils import parse_iso_date
from src.payroll_system.payroll_system.container import build_container
from src.payroll_system.payroll_system.core.exceptions import DomainError
from src.payroll_system.payroll_system.payroll.rendering import write_payslip


def main(argv: list[str]) -> int:
    if len(argv) not in (2, 3):
        print(__doc__)
        return 2

    month, year = argv[0], argv[1]
    as_of = parse_iso_date(argv[2]) if len(argv) == 3 else None

    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)
    service = container.payroll_service
    service.load()

    try:
        report = service.payroll_report(month=month, year=year, as_of=as_of)
        for row in report.rows:
            slip = service.payslip(employee_id=row.employee_id, month=month, year=year, as_of=as_of)
            path = write_payslip(slip, container.payslip_dir)
            print(f"{row.name}: Salary=${row.salary:.2f}, Tax=${row.tax:.2f}, Bonus=${row.bonus:.2f} -> {path}")
    except DomainError as e:
        print(f"ERROR: {e}")
        return 1

    print("-----------------------------------")
    print(
        f"TOTAL: Salary=${report.total_salary:.2f}, Tax=${report.total_tax:.2f}, Bonus=${report.total_bonus:.2f}"
    )
    print(f"Net Payout: ${report.net_payout:.2f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))

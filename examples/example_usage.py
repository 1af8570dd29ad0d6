"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in the directory,
ledgers and pay strategies.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.payroll_system.payroll_system.container import build_container
from src.payroll_system.payroll_system.payroll.rendering import render_payslip


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)
    service = container.payroll_service
    service.load()
    service.seed_demo_employees()

    service.mark_attendance(employee_id=2, work_date=date(2025, 1, 6), present=True, hours=6)
    service.sync_part_time_hours(employee_id=2, month=1, year=2025)
    print(render_payslip(service.payslip(employee_id=4, month=1, year=2025, as_of=date(2025, 1, 31))))


if __name__ == "__main__":
    main()

from __future__ import annotations

import csv
import io
from decimal import Decimal
from pathlib import Path

from ..common.money import quantize
from .model import Payslip, PayrollReport

RULE = "-" * 29


def _money(value: Decimal) -> str:
    return f"${quantize(value):.2f}"


def payslip_filename(employee_id: int, month: int, year: int) -> str:
    return f"payslip_{employee_id}_{month}_{year}.txt"


def render_payslip(payslip: Payslip) -> str:
    b = payslip.breakdown
    lines = [
        "========== PAYSLIP ==========",
        f"Employee ID: {payslip.employee_id}",
        f"Name: {payslip.name}",
        f"Department: {payslip.department}",
        f"Position: {payslip.position}",
        f"Pay Period: {payslip.month}/{payslip.year}",
        f"Bank Account: {payslip.bank_account}",
        RULE,
        f"Gross Salary: {_money(b.gross_salary)}",
        f"Bonus: {_money(b.bonus)}",
        f"Tax: {_money(b.tax)}",
        f"PF Deduction: {_money(b.provident_fund_deduction)}",
        f"Other Deductions: {_money(Decimal('0'))}",
        f"Total Deductions: {_money(b.total_deductions)}",
        f"Net Salary: {_money(b.net_salary)}",
        "=============================",
    ]
    return "\n".join(lines) + "\n"


def write_payslip(payslip: Payslip, directory: str | Path) -> Path:
    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / payslip_filename(payslip.employee_id, payslip.month, payslip.year)
    path.write_text(render_payslip(payslip), encoding="utf-8")
    return path


REPORT_FIELDS = ["employee_id", "name", "kind", "salary", "tax", "bonus"]


def render_report_csv(report: PayrollReport) -> str:
    """Rows in report order followed by a TOTAL line."""
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=REPORT_FIELDS)
    writer.writeheader()
    for r in report.rows:
        writer.writerow(
            {
                "employee_id": r.employee_id,
                "name": r.name,
                "kind": r.kind.value,
                "salary": f"{r.salary:.2f}",
                "tax": f"{r.tax:.2f}",
                "bonus": f"{r.bonus:.2f}",
            }
        )
    writer.writerow(
        {
            "employee_id": "",
            "name": "TOTAL",
            "kind": "",
            "salary": f"{report.total_salary:.2f}",
            "tax": f"{report.total_tax:.2f}",
            "bonus": f"{report.total_bonus:.2f}",
        }
    )
    return out.getvalue()

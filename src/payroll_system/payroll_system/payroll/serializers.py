"""JSON views of domain objects for the HTTP layer."""

from __future__ import annotations

from decimal import Decimal

from ..attendance.model import AttendanceRecord
from ..common.money import quantize
from ..employees.model import Employee
from ..leave.model import LeaveRequest
from ..persistence.codec import policy_to_dict
from .model import Payslip, PayrollReport


def money(value: Decimal) -> str:
    return f"{quantize(value):.2f}"


def employee_view(e: Employee) -> dict:
    return {
        "employee_id": e.employee_id,
        "name": e.name,
        "email": e.email,
        "phone": e.phone,
        "hire_date": e.hire_date.isoformat(),
        "department": e.department,
        "position": e.position,
        "address": e.address,
        "bank_account": e.bank_account,
        "kind": e.kind.value,
        "compensation": policy_to_dict(e.policy),
        "present_days": e.attendance.present_days(),
        "absent_days": e.attendance.absent_days(),
        "available_leaves": e.available_leaves(),
    }


def attendance_view(r: AttendanceRecord) -> dict:
    return {"work_date": r.work_date.isoformat(), "present": r.present, "hours_worked": r.hours_worked}


def leave_view(r: LeaveRequest) -> dict:
    return {
        "request_id": r.request_id,
        "start_date": r.start_date.isoformat(),
        "end_date": r.end_date.isoformat(),
        "leave_days": r.leave_days,
        "reason": r.reason,
        "status": r.status.value,
    }


def payslip_view(p: Payslip) -> dict:
    b = p.breakdown
    return {
        "employee_id": p.employee_id,
        "name": p.name,
        "department": p.department,
        "position": p.position,
        "kind": p.kind.value,
        "month": p.month,
        "year": p.year,
        "gross_salary": money(b.gross_salary),
        "bonus": money(b.bonus),
        "tax": money(b.tax),
        "provident_fund_deduction": money(b.provident_fund_deduction),
        "total_deductions": money(b.total_deductions),
        "net_salary": money(b.net_salary),
    }


def report_view(r: PayrollReport) -> dict:
    return {
        "month": r.month,
        "year": r.year,
        "rows": [
            {
                "employee_id": row.employee_id,
                "name": row.name,
                "kind": row.kind.value,
                "salary": money(row.salary),
                "tax": money(row.tax),
                "bonus": money(row.bonus),
            }
            for row in r.rows
        ],
        "total_salary": money(r.total_salary),
        "total_tax": money(r.total_tax),
        "total_bonus": money(r.total_bonus),
        "net_payout": money(r.net_payout),
    }

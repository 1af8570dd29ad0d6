"""Plain-dict (JSON-safe) encoding of employees for snapshot stores.

Money is written as strings so Decimal values survive the round trip.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from ..attendance.ledger import AttendanceLedger
from ..attendance.model import AttendanceRecord
from ..compensation.policies.base import CompensationPolicy
from ..compensation.policies.contractor import ContractorPolicy
from ..compensation.policies.full_time import FullTimePolicy
from ..compensation.policies.manager import ManagerPolicy
from ..compensation.policies.part_time import PartTimePolicy
from ..core.constants import DEFAULT_ANNUAL_LEAVE_ALLOWANCE
from ..core.enums import EmploymentType, LeaveStatus
from ..employees.model import Employee
from ..leave.ledger import LeaveLedger
from ..leave.model import LeaveRequest

SCHEMA_VERSION = 1


def policy_to_dict(policy: CompensationPolicy) -> dict[str, Any]:
    if isinstance(policy, ManagerPolicy):
        return {
            "kind": policy.kind.value,
            "monthly_salary": str(policy.monthly_salary),
            "overtime_rate": str(policy.overtime_rate),
            "overtime_hours": policy.overtime_hours,
            "allowance": str(policy.allowance),
            "subordinate_ids": policy.subordinate_ids,
        }
    if isinstance(policy, FullTimePolicy):
        return {
            "kind": policy.kind.value,
            "monthly_salary": str(policy.monthly_salary),
            "overtime_rate": str(policy.overtime_rate),
            "overtime_hours": policy.overtime_hours,
        }
    if isinstance(policy, PartTimePolicy):
        return {
            "kind": policy.kind.value,
            "hourly_rate": str(policy.hourly_rate),
            "hours_worked": policy.hours_worked,
        }
    if isinstance(policy, ContractorPolicy):
        return {
            "kind": policy.kind.value,
            "contract_amount": str(policy.contract_amount),
            "contract_duration_months": policy.contract_duration_months,
        }
    raise TypeError(f"Unsupported policy type: {type(policy)!r}")


def policy_from_dict(data: dict[str, Any]) -> CompensationPolicy:
    kind = EmploymentType(data["kind"])
    if kind == EmploymentType.FULL_TIME:
        return FullTimePolicy(
            monthly_salary=data["monthly_salary"],
            overtime_rate=data.get("overtime_rate", "0"),
            overtime_hours=data.get("overtime_hours", 0),
        )
    if kind == EmploymentType.PART_TIME:
        return PartTimePolicy(hourly_rate=data["hourly_rate"], hours_worked=data.get("hours_worked", 0))
    if kind == EmploymentType.CONTRACTOR:
        return ContractorPolicy(
            contract_amount=data["contract_amount"],
            contract_duration_months=data["contract_duration_months"],
        )
    return ManagerPolicy(
        monthly_salary=data["monthly_salary"],
        overtime_rate=data.get("overtime_rate", "0"),
        allowance=data.get("allowance", "0"),
        overtime_hours=data.get("overtime_hours", 0),
        subordinate_ids=data.get("subordinate_ids", ()),
    )


def employee_to_dict(employee: Employee) -> dict[str, Any]:
    return {
        "employee_id": employee.employee_id,
        "name": employee.name,
        "email": employee.email,
        "phone": employee.phone,
        "hire_date": employee.hire_date.isoformat(),
        "department": employee.department,
        "position": employee.position,
        "address": employee.address,
        "bank_account": employee.bank_account,
        "annual_leave_allowance": employee.annual_leave_allowance,
        "policy": policy_to_dict(employee.policy),
        "attendance": [
            {"work_date": r.work_date.isoformat(), "present": r.present, "hours_worked": r.hours_worked}
            for r in employee.attendance.records()
        ],
        "leaves": [
            {
                "request_id": r.request_id,
                "start_date": r.start_date.isoformat(),
                "end_date": r.end_date.isoformat(),
                "reason": r.reason,
                "status": r.status.value,
            }
            for r in employee.leave.history()
        ],
    }


def employee_from_dict(data: dict[str, Any]) -> Employee:
    attendance = AttendanceLedger(
        AttendanceRecord(
            work_date=date.fromisoformat(r["work_date"]),
            present=bool(r["present"]),
            hours_worked=int(r.get("hours_worked", 0)),
        )
        for r in data.get("attendance", [])
    )
    leave = LeaveLedger(
        LeaveRequest(
            request_id=int(r["request_id"]),
            start_date=date.fromisoformat(r["start_date"]),
            end_date=date.fromisoformat(r["end_date"]),
            reason=r.get("reason", ""),
            status=LeaveStatus(r.get("status", LeaveStatus.PENDING.value)),
        )
        for r in data.get("leaves", [])
    )
    return Employee(
        employee_id=int(data["employee_id"]),
        name=data["name"],
        email=data.get("email", ""),
        phone=data.get("phone", ""),
        hire_date=date.fromisoformat(data["hire_date"]),
        department=data.get("department", ""),
        position=data.get("position", ""),
        address=data.get("address", ""),
        bank_account=data.get("bank_account", ""),
        annual_leave_allowance=int(data.get("annual_leave_allowance", DEFAULT_ANNUAL_LEAVE_ALLOWANCE)),
        policy=policy_from_dict(data["policy"]),
        attendance=attendance,
        leave=leave,
    )

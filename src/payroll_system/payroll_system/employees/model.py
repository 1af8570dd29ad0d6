from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..attendance.ledger import AttendanceLedger
from ..compensation.policies.base import CompensationPolicy
from ..core.constants import DEFAULT_ANNUAL_LEAVE_ALLOWANCE
from ..core.enums import EmploymentType
from ..leave.ledger import LeaveLedger

PROFILE_FIELDS = ("name", "email", "phone", "department", "position", "address", "bank_account")


@dataclass(eq=False)
class Employee:
    """Thực thể miền (domain): Nhân viên.

    Aggregates the profile, one attendance ledger, one leave ledger and the
    pay strategy. ``employee_id`` and ``hire_date`` never change after hire.
    """

    employee_id: int
    name: str
    hire_date: date
    policy: CompensationPolicy
    email: str = ""
    phone: str = ""
    department: str = ""
    position: str = ""
    address: str = ""
    bank_account: str = ""
    annual_leave_allowance: int = DEFAULT_ANNUAL_LEAVE_ALLOWANCE
    attendance: AttendanceLedger = field(default_factory=AttendanceLedger)
    leave: LeaveLedger = field(default_factory=LeaveLedger)

    @property
    def kind(self) -> EmploymentType:
        return self.policy.kind

    def update_profile(self, **changes: Optional[str]) -> None:
        unknown = set(changes) - set(PROFILE_FIELDS)
        if unknown:
            raise AttributeError(f"Not an editable profile field: {', '.join(sorted(unknown))}")
        for name, value in changes.items():
            if value is not None:
                setattr(self, name, value)

    def available_leaves(self) -> int:
        return self.leave.available_balance(self.annual_leave_allowance)

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..core.enums import EmploymentType


@dataclass(frozen=True)
class PayslipBreakdown:
    gross_salary: Decimal
    bonus: Decimal
    tax: Decimal
    provident_fund_deduction: Decimal
    net_salary: Decimal

    @property
    def total_deductions(self) -> Decimal:
        return self.tax + self.provident_fund_deduction


@dataclass(frozen=True)
class Payslip:
    """Read-model for one employee's pay period (rendering/export)."""

    employee_id: int
    name: str
    department: str
    position: str
    bank_account: str
    kind: EmploymentType
    month: int
    year: int
    breakdown: PayslipBreakdown


@dataclass(frozen=True)
class PayrollReportRow:
    employee_id: int
    name: str
    kind: EmploymentType
    salary: Decimal
    tax: Decimal
    bonus: Decimal


@dataclass(frozen=True)
class PayrollReport:
    month: int
    year: int
    rows: list[PayrollReportRow]
    total_salary: Decimal
    total_tax: Decimal
    total_bonus: Decimal

    @property
    def net_payout(self) -> Decimal:
        return self.total_salary + self.total_bonus - self.total_tax

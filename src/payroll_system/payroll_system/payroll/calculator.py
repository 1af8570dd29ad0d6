from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ..common.money import ZERO, quantize
from ..core.constants import PROVIDENT_FUND_RATE
from ..employees.model import Employee
from .model import PayslipBreakdown


@dataclass(frozen=True)
class PayComponents:
    gross_salary: Decimal
    tax: Decimal
    bonus: Decimal


def payslip_breakdown(gross_salary: Decimal, tax: Decimal, bonus: Decimal) -> PayslipBreakdown:
    """Same for every employment type: 12% provident fund on gross.

    Provident fund and net stay exact; rounding to cents happens on display.
    """
    gross_salary, tax, bonus = quantize(gross_salary), quantize(tax), quantize(bonus)
    provident_fund = gross_salary * PROVIDENT_FUND_RATE
    return PayslipBreakdown(
        gross_salary=gross_salary,
        bonus=bonus,
        tax=tax,
        provident_fund_deduction=provident_fund,
        net_salary=gross_salary + bonus - tax - provident_fund,
    )


class PayrollCalculator:
    """Applies an employee's pay strategy, counting absent capabilities as zero."""

    def components(self, employee: Employee, *, as_of: date) -> PayComponents:
        policy = employee.policy
        taxable = policy.taxable()
        bonus_eligible = policy.bonus_eligible()

        return PayComponents(
            gross_salary=policy.gross_salary(),
            tax=taxable.tax() if taxable else ZERO,
            bonus=bonus_eligible.bonus(hire_date=employee.hire_date, as_of=as_of) if bonus_eligible else ZERO,
        )

    def breakdown(self, employee: Employee, *, as_of: date) -> PayslipBreakdown:
        c = self.components(employee, as_of=as_of)
        return payslip_breakdown(c.gross_salary, c.tax, c.bonus)

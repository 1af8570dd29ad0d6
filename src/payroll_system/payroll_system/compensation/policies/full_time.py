from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ...common.datetime_utils import full_years_between
from ...common.money import Number, quantize, to_decimal
from ...core.enums import EmploymentType
from .base import BonusCapability, CompensationPolicy, TaxCapability

# (upper bound of annualized salary, rate applied to the monthly salary)
TAX_BANDS = (
    (Decimal("50000"), Decimal("0.10")),
    (Decimal("100000"), Decimal("0.15")),
)
TOP_TAX_RATE = Decimal("0.20")

# (years of service strictly below, bonus rate on the monthly salary)
BONUS_TIERS = (
    (1, Decimal("0.05")),
    (3, Decimal("0.10")),
    (5, Decimal("0.15")),
)
TOP_BONUS_RATE = Decimal("0.20")


def tax_rate_for_annual(annual: Decimal) -> Decimal:
    for upper, rate in TAX_BANDS:
        if annual <= upper:
            return rate
    return TOP_TAX_RATE


def bonus_rate_for_years(years: int) -> Decimal:
    for below, rate in BONUS_TIERS:
        if years < below:
            return rate
    return TOP_BONUS_RATE


@dataclass
class FullTimePolicy(CompensationPolicy, TaxCapability, BonusCapability):
    """Monthly salary plus paid overtime."""

    monthly_salary: Number
    overtime_rate: Number = Decimal("0")
    overtime_hours: int = 0

    kind = EmploymentType.FULL_TIME

    def __post_init__(self) -> None:
        self.monthly_salary = to_decimal(self.monthly_salary)
        self.overtime_rate = to_decimal(self.overtime_rate)
        self.overtime_hours = int(self.overtime_hours)

    def gross_salary(self) -> Decimal:
        return quantize(self.monthly_salary + self.overtime_hours * self.overtime_rate)

    def tax(self) -> Decimal:
        annual = self.monthly_salary * 12
        return quantize(self.monthly_salary * tax_rate_for_annual(annual))

    def bonus(self, *, hire_date: date, as_of: date) -> Decimal:
        years = full_years_between(hire_date, as_of)
        return quantize(self.monthly_salary * bonus_rate_for_years(years))

    def taxable(self) -> Optional[TaxCapability]:
        return self

    def bonus_eligible(self) -> Optional[BonusCapability]:
        return self

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ...common.money import Number, quantize, to_decimal
from ...core.enums import EmploymentType
from .base import CompensationPolicy, TaxCapability

LOW_EARNINGS_CEILING = Decimal("3000")
LOW_EARNINGS_RATE = Decimal("0.05")
STANDARD_RATE = Decimal("0.10")


@dataclass
class PartTimePolicy(CompensationPolicy, TaxCapability):
    """Hourly pay; taxed on the month's gross, no bonus."""

    hourly_rate: Number
    hours_worked: int = 0

    kind = EmploymentType.PART_TIME

    def __post_init__(self) -> None:
        self.hourly_rate = to_decimal(self.hourly_rate)
        self.hours_worked = int(self.hours_worked)

    def gross_salary(self) -> Decimal:
        return quantize(self.hourly_rate * self.hours_worked)

    def tax(self) -> Decimal:
        gross = self.gross_salary()
        rate = LOW_EARNINGS_RATE if gross <= LOW_EARNINGS_CEILING else STANDARD_RATE
        return quantize(gross * rate)

    def taxable(self) -> Optional[TaxCapability]:
        return self

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ...common.money import Number, quantize, to_decimal
from ...core.enums import EmploymentType
from .base import CompensationPolicy


@dataclass
class ContractorPolicy(CompensationPolicy):
    """Contract amount spread evenly over its duration. Not taxed here, no bonus."""

    contract_amount: Number
    contract_duration_months: int = 1

    kind = EmploymentType.CONTRACTOR

    def __post_init__(self) -> None:
        self.contract_amount = to_decimal(self.contract_amount)
        self.contract_duration_months = int(self.contract_duration_months)

    def gross_salary(self) -> Decimal:
        return quantize(self.contract_amount / self.contract_duration_months)

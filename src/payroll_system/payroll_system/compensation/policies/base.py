from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import Optional

from ...core.enums import EmploymentType


class TaxCapability(ABC):
    """Monthly tax deduction, present only for taxable employment types."""

    @abstractmethod
    def tax(self) -> Decimal:
        raise NotImplementedError


class BonusCapability(ABC):
    """Service-based bonus, present only for bonus-eligible employment types."""

    @abstractmethod
    def bonus(self, *, hire_date: date, as_of: date) -> Decimal:
        raise NotImplementedError


class CompensationPolicy(ABC):
    """Strategy Pattern: how one employment type is paid.

    Optional behaviours are queried through ``taxable()`` and
    ``bonus_eligible()``; ``None`` means the capability is absent and the
    amount counts as zero.
    """

    kind: EmploymentType

    @abstractmethod
    def gross_salary(self) -> Decimal:
        raise NotImplementedError

    def taxable(self) -> Optional[TaxCapability]:
        return None

    def bonus_eligible(self) -> Optional[BonusCapability]:
        return None

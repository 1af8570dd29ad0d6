from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from ...common.money import Number, quantize, to_decimal
from ...core.constants import MANAGER_BONUS_MULTIPLIER, PER_SUBORDINATE_ALLOWANCE
from ...core.enums import EmploymentType
from .base import BonusCapability, CompensationPolicy, TaxCapability
from .full_time import FullTimePolicy


class ManagerPolicy(CompensationPolicy, TaxCapability, BonusCapability):
    """Full-time pay plus an allowance and a per-subordinate supplement.

    Subordinates are kept as employee ids only; the directory owns the
    employees and resolves the ids when needed.
    """

    kind = EmploymentType.MANAGER

    def __init__(
        self,
        monthly_salary: Number,
        overtime_rate: Number = Decimal("0"),
        allowance: Number = Decimal("0"),
        *,
        overtime_hours: int = 0,
        subordinate_ids: Iterable[int] = (),
    ):
        self.base = FullTimePolicy(
            monthly_salary=monthly_salary,
            overtime_rate=overtime_rate,
            overtime_hours=overtime_hours,
        )
        self.allowance = to_decimal(allowance)
        # dict keeps insertion order and uniqueness
        self._subordinates: dict[int, None] = dict.fromkeys(int(i) for i in subordinate_ids)

    @property
    def subordinate_ids(self) -> list[int]:
        return list(self._subordinates)

    def add_subordinate(self, employee_id: int) -> bool:
        if int(employee_id) in self._subordinates:
            return False
        self._subordinates[int(employee_id)] = None
        return True

    def remove_subordinate(self, employee_id: int) -> bool:
        if int(employee_id) not in self._subordinates:
            return False
        del self._subordinates[int(employee_id)]
        return True

    @property
    def monthly_salary(self) -> Decimal:
        return self.base.monthly_salary

    @property
    def overtime_rate(self) -> Decimal:
        return self.base.overtime_rate

    @property
    def overtime_hours(self) -> int:
        return self.base.overtime_hours

    @overtime_hours.setter
    def overtime_hours(self, hours: int) -> None:
        self.base.overtime_hours = int(hours)

    def gross_salary(self) -> Decimal:
        supplement = PER_SUBORDINATE_ALLOWANCE * len(self._subordinates)
        return quantize(self.base.gross_salary() + self.allowance + supplement)

    def tax(self) -> Decimal:
        return self.base.tax()

    def bonus(self, *, hire_date: date, as_of: date) -> Decimal:
        return quantize(self.base.bonus(hire_date=hire_date, as_of=as_of) * MANAGER_BONUS_MULTIPLIER)

    def taxable(self) -> Optional[TaxCapability]:
        return self

    def bonus_eligible(self) -> Optional[BonusCapability]:
        return self

    def __repr__(self) -> str:
        return (
            f"ManagerPolicy(monthly_salary={self.base.monthly_salary!r}, allowance={self.allowance!r}, "
            f"subordinate_ids={self.subordinate_ids!r})"
        )

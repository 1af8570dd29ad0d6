from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..common.validators import require_amount, require_int
from ..core.enums import EmploymentType
from ..core.exceptions import ValidationError
from .policies.base import CompensationPolicy
from .policies.contractor import ContractorPolicy
from .policies.full_time import FullTimePolicy
from .policies.manager import ManagerPolicy
from .policies.part_time import PartTimePolicy


@dataclass
class CompensationPolicyFactory:
    """Factory Pattern: build the pay strategy for an employment type.

    ``fields`` comes from the boundary (form/JSON), so every amount is
    validated here before a policy is created.
    """

    def create(self, kind: EmploymentType | str, fields: Mapping[str, Any]) -> CompensationPolicy:
        try:
            kind = EmploymentType(kind)
        except ValueError:
            raise ValidationError(f"Unknown employment type {kind!r}")

        if kind == EmploymentType.FULL_TIME:
            return FullTimePolicy(
                monthly_salary=require_amount(fields.get("monthly_salary"), "Monthly salary"),
                overtime_rate=require_amount(fields.get("overtime_rate", 0), "Overtime rate", allow_zero=True),
                overtime_hours=require_int(fields.get("overtime_hours", 0), "Overtime hours", min_value=0),
            )

        if kind == EmploymentType.PART_TIME:
            return PartTimePolicy(
                hourly_rate=require_amount(fields.get("hourly_rate"), "Hourly rate"),
                hours_worked=require_int(fields.get("hours_worked", 0), "Hours worked", min_value=0),
            )

        if kind == EmploymentType.CONTRACTOR:
            return ContractorPolicy(
                contract_amount=require_amount(fields.get("contract_amount"), "Contract amount"),
                contract_duration_months=require_int(
                    fields.get("contract_duration_months"), "Contract duration (months)", min_value=1
                ),
            )

        return ManagerPolicy(
            monthly_salary=require_amount(fields.get("monthly_salary"), "Monthly salary"),
            overtime_rate=require_amount(fields.get("overtime_rate", 0), "Overtime rate", allow_zero=True),
            allowance=require_amount(fields.get("allowance", 0), "Allowance", allow_zero=True),
            overtime_hours=require_int(fields.get("overtime_hours", 0), "Overtime hours", min_value=0),
        )

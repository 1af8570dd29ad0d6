from datetime import date
from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.compensation.policies.contractor import ContractorPolicy
from src.payroll_system.payroll_system.compensation.policies.full_time import FullTimePolicy
from src.payroll_system.payroll_system.compensation.policies.manager import ManagerPolicy
from src.payroll_system.payroll_system.compensation.policies.part_time import PartTimePolicy

AS_OF = date(2025, 3, 15)


def test_full_time_gross_without_overtime():
    assert FullTimePolicy(monthly_salary=5000).gross_salary() == Decimal("5000.00")


def test_full_time_gross_includes_overtime():
    policy = FullTimePolicy(monthly_salary=5000, overtime_rate=25, overtime_hours=10)
    assert policy.gross_salary() == Decimal("5250.00")


@pytest.mark.parametrize(
    "monthly, expected",
    [
        (4000, "400.00"),   # annual 48,000 -> 10%
        (5000, "750.00"),   # annual 60,000 -> 15%
        (9000, "1800.00"),  # annual 108,000 -> 20%
    ],
)
def test_full_time_tax_bands_use_annualized_salary(monthly, expected):
    assert FullTimePolicy(monthly_salary=monthly).tax() == Decimal(expected)


def test_full_time_tax_ignores_overtime():
    policy = FullTimePolicy(monthly_salary=4000, overtime_rate=100, overtime_hours=50)
    assert policy.tax() == Decimal("400.00")


@pytest.mark.parametrize(
    "hire_date, expected",
    [
        (date(2024, 9, 1), "250.00"),   # < 1 year -> 5%
        (date(2024, 3, 15), "500.00"),  # exactly 1 year -> 10%
        (date(2022, 3, 16), "500.00"),  # one day short of 3 years -> 10%
        (date(2022, 3, 15), "750.00"),  # exactly 3 years -> 15%
        (date(2020, 3, 16), "750.00"),  # one day short of 5 years -> 15%
        (date(2020, 3, 15), "1000.00"), # exactly 5 years -> 20%
        (date(2010, 1, 1), "1000.00"),
    ],
)
def test_full_time_bonus_tiers_by_years_of_service(hire_date, expected):
    policy = FullTimePolicy(monthly_salary=5000)
    assert policy.bonus(hire_date=hire_date, as_of=AS_OF) == Decimal(expected)


def test_part_time_gross_and_low_tax_band():
    policy = PartTimePolicy(hourly_rate=20, hours_worked=100)
    assert policy.gross_salary() == Decimal("2000.00")
    assert policy.tax() == Decimal("100.00")


def test_part_time_tax_band_boundary():
    assert PartTimePolicy(hourly_rate=30, hours_worked=100).tax() == Decimal("150.00")
    assert PartTimePolicy(hourly_rate=20, hours_worked=200).tax() == Decimal("400.00")


def test_part_time_has_no_bonus_capability():
    policy = PartTimePolicy(hourly_rate=20)
    assert policy.taxable() is policy
    assert policy.bonus_eligible() is None


def test_contractor_gross_is_amount_spread_over_duration():
    policy = ContractorPolicy(contract_amount=30000, contract_duration_months=6)
    assert policy.gross_salary() == Decimal("5000.00")
    assert policy.taxable() is None
    assert policy.bonus_eligible() is None


def test_contractor_gross_rounds_to_cents():
    policy = ContractorPolicy(contract_amount=10000, contract_duration_months=3)
    assert policy.gross_salary() == Decimal("3333.33")


def test_manager_gross_adds_allowance_and_per_subordinate_supplement():
    manager = ManagerPolicy(monthly_salary=7000, overtime_rate=30, allowance=1000)
    base = manager.gross_salary()

    manager.add_subordinate(1)
    manager.add_subordinate(2)

    assert base == Decimal("8000.00")
    assert manager.gross_salary() == base + 100


def test_manager_subordinates_are_an_ordered_set():
    manager = ManagerPolicy(monthly_salary=7000)
    assert manager.add_subordinate(3) is True
    assert manager.add_subordinate(1) is True
    assert manager.add_subordinate(3) is False

    assert manager.subordinate_ids == [3, 1]
    assert manager.remove_subordinate(3) is True
    assert manager.remove_subordinate(3) is False
    assert manager.subordinate_ids == [1]


def test_manager_tax_matches_full_time_rules():
    manager = ManagerPolicy(monthly_salary=5000, allowance=2000, subordinate_ids=[1, 2, 3])
    assert manager.tax() == FullTimePolicy(monthly_salary=5000).tax()


def test_manager_bonus_is_one_and_a_half_times_full_time():
    hire = date(2022, 3, 15)
    manager = ManagerPolicy(monthly_salary=5000)
    full_time = FullTimePolicy(monthly_salary=5000)

    assert manager.bonus(hire_date=hire, as_of=AS_OF) == full_time.bonus(hire_date=hire, as_of=AS_OF) * Decimal("1.5")
    assert manager.bonus(hire_date=hire, as_of=AS_OF) == Decimal("1125.00")


def test_manager_overtime_hours_flow_into_gross():
    manager = ManagerPolicy(monthly_salary=7000, overtime_rate=30)
    manager.overtime_hours = 10
    assert manager.gross_salary() == Decimal("7300.00")

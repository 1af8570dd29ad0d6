from __future__ import annotations

import json
from datetime import date
from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.compensation.policies.full_time import FullTimePolicy
from src.payroll_system.payroll_system.core.enums import EmploymentType, LeaveStatus
from src.payroll_system.payroll_system.core.exceptions import (
    DuplicateIdentifier,
    EmployeeNotFound,
    InvalidLeaveRange,
    PersistenceFailure,
    ValidationError,
)
from src.payroll_system.payroll_system.directory.payroll_directory import PayrollDirectory
from src.payroll_system.payroll_system.directory.service import PayrollService
from src.payroll_system.payroll_system.employees.model import Employee
from src.payroll_system.payroll_system.persistence.json_repository import JsonFileEmployeeRepository


class InMemoryEmployees:
    def __init__(self, employees=()):
        self.stored = list(employees)
        self.saves = 0

    def load_all(self):
        return list(self.stored)

    def save_all(self, employees):
        self.saves += 1
        self.stored = list(employees)


class BrokenEmployees:
    def load_all(self):
        raise PersistenceFailure("disk gone")

    def save_all(self, employees):
        raise PersistenceFailure("disk gone")


def _service(repo=None):
    return PayrollService(PayrollDirectory(), repo or InMemoryEmployees(), clock=lambda: date(2025, 3, 15))


def _hire_full_time(service, employee_id=1, **overrides):
    kwargs = dict(
        employee_id=employee_id,
        kind="full_time",
        name="John Doe",
        hire_date=date(2022, 3, 15),
        compensation={"monthly_salary": "5000", "overtime_rate": "25"},
    )
    kwargs.update(overrides)
    return service.hire(**kwargs)


def test_hire_saves_snapshot_and_trims_profile():
    repo = InMemoryEmployees()
    service = _service(repo)

    employee = _hire_full_time(service, department="  IT ")

    assert employee.kind == EmploymentType.FULL_TIME
    assert employee.department == "IT"
    assert employee.annual_leave_allowance == 20
    assert repo.saves == 1
    assert [e.employee_id for e in repo.stored] == [1]


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": "   "},
        {"employee_id": 0},
        {"kind": "intern"},
        {"compensation": {"monthly_salary": "-1"}},
    ],
)
def test_hire_rejects_invalid_input(overrides):
    repo = InMemoryEmployees()
    service = _service(repo)

    with pytest.raises(ValidationError):
        _hire_full_time(service, **overrides)
    assert repo.saves == 0
    assert len(service.directory) == 0


def test_hire_duplicate_id_fails():
    service = _service()
    _hire_full_time(service)

    with pytest.raises(DuplicateIdentifier):
        _hire_full_time(service, name="Someone Else")


def test_dismiss_unknown_employee_raises():
    with pytest.raises(EmployeeNotFound):
        _service().dismiss(employee_id=42)


def test_load_failure_starts_with_empty_directory():
    service = _service(BrokenEmployees())

    assert service.load() == 0
    assert len(service.directory) == 0


def test_save_failure_is_reraised():
    service = _service(BrokenEmployees())

    with pytest.raises(PersistenceFailure):
        _hire_full_time(service)


def test_update_profile_rejects_unknown_field():
    service = _service()
    _hire_full_time(service)

    with pytest.raises(ValidationError):
        service.update_profile(employee_id=1, salary="1")

    employee = service.update_profile(employee_id=1, email="john@company.com", phone=None)
    assert employee.email == "john@company.com"
    assert employee.phone == ""


def test_mark_attendance_defaults_and_validates_hours():
    service = _service()
    _hire_full_time(service)

    service.mark_attendance(employee_id=1, work_date=date(2025, 1, 6), present=True)
    service.mark_attendance(employee_id=1, work_date=date(2025, 1, 7), present=False, hours=5)

    ledger = service.get_employee(1).attendance
    assert ledger.get(date(2025, 1, 6)).hours_worked == 8
    assert ledger.get(date(2025, 1, 7)).hours_worked == 0

    with pytest.raises(ValidationError):
        service.mark_attendance(employee_id=1, work_date=date(2025, 1, 8), present=True, hours=25)


def test_leave_flow_updates_balance():
    service = _service()
    _hire_full_time(service)

    first = service.apply_leave(employee_id=1, start_date=date(2025, 1, 10), end_date=date(2025, 1, 12), reason="Trip")
    second = service.apply_leave(employee_id=1, start_date=date(2025, 2, 1), end_date=date(2025, 2, 1), reason="Errand")

    assert [r.request_id for _, r in service.pending_leaves()] == [first.request_id, second.request_id]
    assert service.approve_leave(employee_id=1, request_id=first.request_id) is True
    assert service.reject_leave(employee_id=1, request_id=second.request_id) is True
    assert service.approve_leave(employee_id=1, request_id=999) is False

    employee = service.get_employee(1)
    assert employee.leave.get(first.request_id).status == LeaveStatus.APPROVED
    assert employee.available_leaves() == 17
    assert service.pending_leaves() == []


def test_apply_leave_validates_reason_and_range():
    service = _service()
    _hire_full_time(service)

    with pytest.raises(ValidationError):
        service.apply_leave(employee_id=1, start_date=date(2025, 1, 1), end_date=date(2025, 1, 1), reason="")
    with pytest.raises(InvalidLeaveRange):
        service.apply_leave(employee_id=1, start_date=date(2025, 1, 5), end_date=date(2025, 1, 1), reason="x")


def test_overtime_only_for_salaried_staff():
    service = _service()
    _hire_full_time(service)
    service.hire(
        employee_id=2,
        kind="contractor",
        name="Bob",
        hire_date=date(2022, 6, 1),
        compensation={"contract_amount": 30000, "contract_duration_months": 6},
    )

    service.set_overtime_hours(employee_id=1, hours=4)
    assert service.payslip(employee_id=1, month=3, year=2025).breakdown.gross_salary == Decimal("5100.00")

    with pytest.raises(ValidationError):
        service.set_overtime_hours(employee_id=2, hours=4)


def test_payslip_uses_clock_when_no_reference_date_given():
    service = _service()
    _hire_full_time(service)

    assert service.payslip(employee_id=1, month=3, year=2025).breakdown.bonus == Decimal("750.00")
    assert service.payslip(employee_id=1, month=3, year=2025, as_of=date(2023, 3, 14)).breakdown.bonus == Decimal("250.00")

    with pytest.raises(ValidationError):
        service.payslip(employee_id=1, month=13, year=2025)


def test_seed_demo_employees_only_on_empty_directory():
    service = _service()

    assert service.seed_demo_employees() == 4
    assert [e.name for e in service.list_employees()] == ["John Doe", "Jane Smith", "Bob Johnson", "Alice Brown"]
    assert [e.employee_id for e in service.directory.subordinates_of(4)] == [1, 2]
    assert service.seed_demo_employees() == 0


def test_load_with_duplicate_ids_starts_with_empty_directory():
    john = Employee(employee_id=1, name="John", hire_date=date(2022, 3, 15), policy=FullTimePolicy(monthly_salary=5000))
    twin = Employee(employee_id=1, name="Johnny", hire_date=date(2022, 3, 15), policy=FullTimePolicy(monthly_salary=5000))
    service = _service(InMemoryEmployees([john, twin]))

    assert service.load() == 0
    assert len(service.directory) == 0


def test_load_with_corrupt_amount_starts_with_empty_directory(tmp_path):
    path = tmp_path / "employees.json"
    path.write_text(
        json.dumps(
            {
                "version": 1,
                "employees": [
                    {
                        "employee_id": 1,
                        "name": "John",
                        "hire_date": "2022-03-15",
                        "policy": {"kind": "full_time", "monthly_salary": "abc"},
                    }
                ],
            }
        ),
        encoding="utf-8",
    )
    service = _service(JsonFileEmployeeRepository(path))

    assert service.load() == 0


def test_profile_values_are_stored_as_text():
    service = _service()

    employee = _hire_full_time(service, phone=1234567)
    assert employee.phone == "1234567"

    service.update_profile(employee_id=1, phone=7654321)
    assert employee.phone == "7654321"

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Mapping, Optional

from ..common.datetime_utils import today
from ..common.validators import require_hours, require_int, require_non_empty, require_period
from ..compensation.factory import CompensationPolicyFactory
from ..compensation.policies.full_time import FullTimePolicy
from ..compensation.policies.manager import ManagerPolicy
from ..compensation.policies.part_time import PartTimePolicy
from ..core.constants import DEFAULT_ANNUAL_LEAVE_ALLOWANCE
from ..core.enums import EmploymentType
from ..core.exceptions import DomainError, EmployeeNotFound, PersistenceFailure, ValidationError
from ..employees.model import Employee
from ..leave.model import LeaveRequest
from ..payroll.model import Payslip, PayrollReport
from ..persistence.repository import EmployeeRepository
from .payroll_directory import PayrollDirectory

logger = logging.getLogger(__name__)


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


class PayrollService:
    """Use cases over the directory, each mutation followed by a snapshot save.

    Input coming from the boundary (forms, JSON) is validated here; the
    directory and ledgers below trust their arguments.
    """

    def __init__(
        self,
        directory: PayrollDirectory,
        repository: EmployeeRepository,
        *,
        policy_factory: Optional[CompensationPolicyFactory] = None,
        annual_leave_allowance: int = DEFAULT_ANNUAL_LEAVE_ALLOWANCE,
        clock: Callable[[], date] = today,
    ):
        self._directory = directory
        self._repository = repository
        self._factory = policy_factory or CompensationPolicyFactory()
        self._annual_leave_allowance = int(annual_leave_allowance)
        self._clock = clock

    @property
    def directory(self) -> PayrollDirectory:
        return self._directory

    # Snapshot bracket
    def load(self) -> int:
        """Replace the directory with the stored snapshot.

        A failed load, or a snapshot that breaks directory rules (duplicate
        ids, invalid amounts), is logged and leaves an empty directory behind.
        """
        try:
            employees = self._repository.load_all()
            self._directory.replace_all(employees)
        except DomainError:
            logger.exception("Employee snapshot could not be loaded, starting with an empty directory")
            self._directory.replace_all([])
        return len(self._directory)

    def save(self) -> None:
        try:
            self._repository.save_all(self._directory.all())
        except PersistenceFailure:
            logger.error("Employee snapshot could not be saved", exc_info=True)
            raise

    # Employees
    def list_employees(self) -> list[Employee]:
        return self._directory.all()

    def get_employee(self, employee_id: int) -> Employee:
        return self._directory.get(employee_id)

    def hire(
        self,
        *,
        employee_id: Any,
        kind: EmploymentType | str,
        name: str,
        hire_date: date,
        compensation: Mapping[str, Any],
        email: str = "",
        phone: str = "",
        department: str = "",
        position: str = "",
        address: str = "",
        bank_account: str = "",
    ) -> Employee:
        employee = Employee(
            employee_id=require_int(employee_id, "Employee id", min_value=1),
            name=require_non_empty(name, "Name"),
            hire_date=hire_date,
            policy=self._factory.create(kind, compensation),
            email=_text(email),
            phone=_text(phone),
            department=_text(department),
            position=_text(position),
            address=_text(address),
            bank_account=_text(bank_account),
            annual_leave_allowance=self._annual_leave_allowance,
        )
        self._directory.add(employee)
        logger.info("Hired employee %s (%s) as %s", employee.employee_id, employee.name, employee.kind.value)
        self.save()
        return employee

    def dismiss(self, *, employee_id: int) -> None:
        if not self._directory.remove(employee_id):
            raise EmployeeNotFound(int(employee_id))
        logger.info("Removed employee %s", employee_id)
        self.save()

    def update_profile(self, *, employee_id: int, **changes: Optional[str]) -> Employee:
        employee = self._directory.get(employee_id)
        changes = {k: (None if v is None else _text(v)) for k, v in changes.items()}
        if changes.get("name") is not None:
            changes["name"] = require_non_empty(changes["name"], "Name")
        try:
            employee.update_profile(**changes)
        except AttributeError as e:
            raise ValidationError(str(e))
        self.save()
        return employee

    # Pay basis
    def set_overtime_hours(self, *, employee_id: int, hours: Any) -> None:
        employee = self._directory.get(employee_id)
        if not isinstance(employee.policy, (FullTimePolicy, ManagerPolicy)):
            raise ValidationError(f"Employee {employee_id} has no overtime pay")
        employee.policy.overtime_hours = require_int(hours, "Overtime hours", min_value=0)
        self.save()

    def set_part_time_hours(self, *, employee_id: int, hours: Any) -> None:
        employee = self._directory.get(employee_id)
        if not isinstance(employee.policy, PartTimePolicy):
            raise ValidationError(f"Employee {employee_id} is not part-time")
        employee.policy.hours_worked = require_int(hours, "Hours worked", min_value=0)
        self.save()

    def sync_part_time_hours(self, *, employee_id: int, month: Any, year: Any) -> int:
        month, year = require_period(month, year)
        hours = self._directory.sync_part_time_hours(employee_id, month, year)
        self.save()
        return hours

    def assign_subordinate(self, *, manager_id: int, subordinate_id: int) -> bool:
        added = self._directory.assign_subordinate(manager_id, subordinate_id)
        if added:
            logger.info("Employee %s now reports to manager %s", subordinate_id, manager_id)
            self.save()
        return added

    def unassign_subordinate(self, *, manager_id: int, subordinate_id: int) -> bool:
        removed = self._directory.unassign_subordinate(manager_id, subordinate_id)
        if removed:
            self.save()
        return removed

    # Attendance
    def mark_attendance(self, *, employee_id: int, work_date: date, present: bool, hours: Any = None) -> None:
        employee = self._directory.get(employee_id)
        if not present:
            hours = 0
        elif hours is not None:
            hours = require_hours(hours)
        employee.attendance.mark(work_date, present, hours)
        self.save()

    # Leave
    def apply_leave(self, *, employee_id: int, start_date: date, end_date: date, reason: str) -> LeaveRequest:
        employee = self._directory.get(employee_id)
        req = employee.leave.request(start_date, end_date, require_non_empty(reason, "Reason"))
        logger.info("Leave request %s submitted by employee %s", req.request_id, employee_id)
        self.save()
        return req

    def approve_leave(self, *, employee_id: int, request_id: int) -> bool:
        employee = self._directory.get(employee_id)
        ok = employee.leave.approve_request(request_id)
        if ok:
            logger.info("Leave request %s of employee %s approved", request_id, employee_id)
            self.save()
        return ok

    def reject_leave(self, *, employee_id: int, request_id: int) -> bool:
        employee = self._directory.get(employee_id)
        ok = employee.leave.reject_request(request_id)
        if ok:
            logger.info("Leave request %s of employee %s rejected", request_id, employee_id)
            self.save()
        return ok

    def pending_leaves(self) -> list[tuple[Employee, LeaveRequest]]:
        return self._directory.pending_leave_applications()

    # Payroll
    def payslip(self, *, employee_id: int, month: Any, year: Any, as_of: Optional[date] = None) -> Payslip:
        month, year = require_period(month, year)
        return self._directory.generate_payslip(employee_id, month, year, as_of or self._clock())

    def payroll_report(self, *, month: Any, year: Any, as_of: Optional[date] = None) -> PayrollReport:
        month, year = require_period(month, year)
        return self._directory.payroll_report(month, year, as_of or self._clock())

    def seed_demo_employees(self) -> int:
        """Populate an empty directory with the sample staff. Returns how many were added."""
        if len(self._directory):
            return 0

        samples = [
            dict(employee_id=1, kind=EmploymentType.FULL_TIME, name="John Doe", email="john@company.com",
                 phone="123-456-7890", hire_date=date(2020, 1, 15), department="IT", position="Developer",
                 address="123 Main St, City", bank_account="ACC123456",
                 compensation={"monthly_salary": 5000, "overtime_rate": 25}),
            dict(employee_id=2, kind=EmploymentType.PART_TIME, name="Jane Smith", email="jane@company.com",
                 phone="098-765-4321", hire_date=date(2021, 3, 10), department="Marketing", position="Assistant",
                 address="456 Oak St, Town", bank_account="ACC654321",
                 compensation={"hourly_rate": 20}),
            dict(employee_id=3, kind=EmploymentType.CONTRACTOR, name="Bob Johnson", email="bob@contractor.com",
                 phone="555-123-4567", hire_date=date(2022, 6, 1), department="Operations", position="Consultant",
                 address="789 Pine St, Village", bank_account="ACC987654",
                 compensation={"contract_amount": 30000, "contract_duration_months": 6}),
            dict(employee_id=4, kind=EmploymentType.MANAGER, name="Alice Brown", email="alice@company.com",
                 phone="555-987-6543", hire_date=date(2019, 8, 20), department="IT", position="Manager",
                 address="321 Elm St, Metropolis", bank_account="ACC456789",
                 compensation={"monthly_salary": 7000, "overtime_rate": 30, "allowance": 1000}),
        ]
        for s in samples:
            self.hire(**s)
        self.assign_subordinate(manager_id=4, subordinate_id=1)
        self.assign_subordinate(manager_id=4, subordinate_id=2)
        return len(samples)

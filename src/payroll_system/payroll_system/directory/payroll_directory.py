from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Iterator, Optional

from ..common.money import ZERO
from ..compensation.policies.manager import ManagerPolicy
from ..compensation.policies.part_time import PartTimePolicy
from ..core.exceptions import DuplicateIdentifier, EmployeeNotFound, ValidationError
from ..employees.model import Employee
from ..leave.model import LeaveRequest
from ..payroll.calculator import PayrollCalculator
from ..payroll.model import Payslip, PayrollReport, PayrollReportRow

logger = logging.getLogger(__name__)


class PayrollDirectory:
    """In-memory, insertion-ordered collection of employees keyed by id.

    The directory is the only owner of Employee objects. Managers refer to
    their team by id, and those ids are resolved here at read time.
    """

    def __init__(self, employees: Iterable[Employee] = (), *, calculator: Optional[PayrollCalculator] = None):
        self._employees: dict[int, Employee] = {}
        self._calculator = calculator or PayrollCalculator()
        for e in employees:
            self._insert(e)
        self._drop_unknown_subordinates()

    # Membership
    def add(self, employee: Employee) -> None:
        self._insert(employee)
        self._drop_unknown_subordinates()

    def _insert(self, employee: Employee) -> None:
        if employee.employee_id in self._employees:
            raise DuplicateIdentifier(f"Employee id {employee.employee_id} already exists")
        self._employees[employee.employee_id] = employee

    def _drop_unknown_subordinates(self) -> None:
        # A team only lists other employees of this directory.
        for e in self._employees.values():
            if not isinstance(e.policy, ManagerPolicy):
                continue
            for sub_id in e.policy.subordinate_ids:
                if sub_id == e.employee_id or sub_id not in self._employees:
                    e.policy.remove_subordinate(sub_id)
                    logger.warning("Dropped unknown subordinate %s from manager %s", sub_id, e.employee_id)

    def remove(self, employee_id: int) -> bool:
        """Remove an employee; returns False when the id is unknown."""
        if self._employees.pop(int(employee_id), None) is None:
            return False
        for e in self._employees.values():
            if isinstance(e.policy, ManagerPolicy):
                e.policy.remove_subordinate(employee_id)
        return True

    def find(self, employee_id: int) -> Optional[Employee]:
        return self._employees.get(int(employee_id))

    def get(self, employee_id: int) -> Employee:
        employee = self.find(employee_id)
        if employee is None:
            raise EmployeeNotFound(int(employee_id))
        return employee

    def all(self) -> list[Employee]:
        return list(self._employees.values())

    def replace_all(self, employees: Iterable[Employee]) -> None:
        fresh = PayrollDirectory(employees, calculator=self._calculator)
        self._employees = fresh._employees

    def __iter__(self) -> Iterator[Employee]:
        return iter(list(self._employees.values()))

    def __len__(self) -> int:
        return len(self._employees)

    def __contains__(self, employee_id: object) -> bool:
        try:
            return int(employee_id) in self._employees
        except (TypeError, ValueError):
            return False

    # Team structure
    def _manager_policy(self, manager_id: int) -> ManagerPolicy:
        manager = self.get(manager_id)
        if not isinstance(manager.policy, ManagerPolicy):
            raise ValidationError(f"Employee {manager_id} is not a manager")
        return manager.policy

    def assign_subordinate(self, manager_id: int, subordinate_id: int) -> bool:
        policy = self._manager_policy(manager_id)
        self.get(subordinate_id)
        if int(manager_id) == int(subordinate_id):
            raise ValidationError("A manager cannot manage themselves")
        return policy.add_subordinate(subordinate_id)

    def unassign_subordinate(self, manager_id: int, subordinate_id: int) -> bool:
        policy = self._manager_policy(manager_id)
        self.get(subordinate_id)
        return policy.remove_subordinate(subordinate_id)

    def subordinates_of(self, manager_id: int) -> list[Employee]:
        policy = self._manager_policy(manager_id)
        return [e for e in (self.find(i) for i in policy.subordinate_ids) if e is not None]

    # Attendance reconciliation
    def sync_part_time_hours(self, employee_id: int, month: int, year: int) -> int:
        """Copy the month's attended hours into a part-timer's pay basis."""
        employee = self.get(employee_id)
        if not isinstance(employee.policy, PartTimePolicy):
            raise ValidationError(f"Employee {employee_id} is not part-time")
        hours = employee.attendance.hours_in_month(month, year)
        employee.policy.hours_worked = hours
        return hours

    # Payroll
    def generate_payslip(self, employee_id: int, month: int, year: int, as_of: date) -> Payslip:
        employee = self.get(employee_id)
        return Payslip(
            employee_id=employee.employee_id,
            name=employee.name,
            department=employee.department,
            position=employee.position,
            bank_account=employee.bank_account,
            kind=employee.kind,
            month=int(month),
            year=int(year),
            breakdown=self._calculator.breakdown(employee, as_of=as_of),
        )

    def payroll_report(self, month: int, year: int, as_of: date) -> PayrollReport:
        """Rows follow directory order; callers needing another order sort themselves."""
        rows: list[PayrollReportRow] = []
        total_salary = total_tax = total_bonus = ZERO

        for e in self._employees.values():
            c = self._calculator.components(e, as_of=as_of)
            rows.append(
                PayrollReportRow(
                    employee_id=e.employee_id,
                    name=e.name,
                    kind=e.kind,
                    salary=c.gross_salary,
                    tax=c.tax,
                    bonus=c.bonus,
                )
            )
            total_salary += c.gross_salary
            total_tax += c.tax
            total_bonus += c.bonus

        return PayrollReport(
            month=int(month),
            year=int(year),
            rows=rows,
            total_salary=total_salary,
            total_tax=total_tax,
            total_bonus=total_bonus,
        )

    # Leave
    def pending_leave_applications(self) -> list[tuple[Employee, LeaveRequest]]:
        return [(e, req) for e in self._employees.values() for req in e.leave.pending()]

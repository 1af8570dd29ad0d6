class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidLeaveRange(ValidationError):
    """Raised when a leave request ends before it starts."""


class DuplicateIdentifier(DomainError):
    """Raised when an employee id is already present in the directory."""


class EmployeeNotFound(DomainError):
    """Raised when an operation targets an unknown employee id."""

    def __init__(self, employee_id: int):
        super().__init__(f"Employee {employee_id} not found")
        self.employee_id = employee_id


class PersistenceFailure(DomainError):
    """Raised when the employee snapshot cannot be loaded or saved."""

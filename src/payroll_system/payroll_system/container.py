from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .core.constants import DEFAULT_ANNUAL_LEAVE_ALLOWANCE, DEFAULT_DATA_FILE, DEFAULT_PAYSLIP_DIR
from .core.exceptions import ValidationError
from .database.connection import DBConfig, DatabaseConnection
from .directory.payroll_directory import PayrollDirectory
from .directory.service import PayrollService
from .persistence.json_repository import JsonFileEmployeeRepository
from .persistence.mysql_repository import MySQLEmployeeRepository
from .persistence.repository import EmployeeRepository


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employee_repo: EmployeeRepository
    directory: PayrollDirectory

    payroll_service: PayrollService
    payslip_dir: Path


def build_repository(settings: Any) -> tuple[EmployeeRepository, Optional[DatabaseConnection]]:
    backend = str(getattr(settings, "STORE_BACKEND", "json")).lower()
    if backend == "json":
        return JsonFileEmployeeRepository(getattr(settings, "DATA_FILE", DEFAULT_DATA_FILE)), None
    if backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        return MySQLEmployeeRepository(conn), conn
    raise ValidationError(f"Unknown STORE_BACKEND {backend!r}")


def build_container(*, settings: Any, repository: Optional[EmployeeRepository] = None) -> Container:
    conn = None
    if repository is None:
        repository, conn = build_repository(settings)

    directory = PayrollDirectory()
    payroll_service = PayrollService(
        directory,
        repository,
        annual_leave_allowance=int(getattr(settings, "ANNUAL_LEAVE_ALLOWANCE", DEFAULT_ANNUAL_LEAVE_ALLOWANCE)),
    )

    return Container(
        conn=conn,
        employee_repo=repository,
        directory=directory,
        payroll_service=payroll_service,
        payslip_dir=Path(getattr(settings, "PAYSLIP_DIR", DEFAULT_PAYSLIP_DIR)),
    )

from __future__ import annotations

import json
import logging
from typing import Iterable, Sequence

import mysql.connector

from ..core.exceptions import PersistenceFailure
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from ..employees.model import Employee
from .codec import employee_from_dict, employee_to_dict
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class MySQLEmployeeRepository(EmployeeRepository):
    """Snapshot rows in ``employee_snapshots``; save replaces the table in one transaction."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load_all(self) -> Sequence[Employee]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    SELECT employee_id, payload
                    FROM employee_snapshots
                    ORDER BY position_no ASC
                    """
                )
                rows = fetchall(cur)
        except mysql.connector.Error as e:
            raise PersistenceFailure(f"Cannot load employees from MySQL: {e}") from e

        try:
            employees = [employee_from_dict(json.loads(r["payload"])) for r in rows]
        except (ValueError, ArithmeticError, KeyError, TypeError) as e:
            raise PersistenceFailure(f"Corrupted employee snapshot: {e}") from e

        logger.info("Loaded %d employees from MySQL", len(employees))
        return employees

    def save_all(self, employees: Iterable[Employee]) -> None:
        params = [
            (
                e.employee_id,
                position,
                e.kind.value,
                e.name,
                json.dumps(employee_to_dict(e), ensure_ascii=False),
            )
            for position, e in enumerate(employees)
        ]
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("DELETE FROM employee_snapshots")
                if params:
                    cur.executemany(
                        """
                        INSERT INTO employee_snapshots(employee_id, position_no, kind, full_name, payload)
                        VALUES(%s,%s,%s,%s,%s)
                        """,
                        params,
                    )
        except mysql.connector.Error as e:
            raise PersistenceFailure(f"Cannot save employees to MySQL: {e}") from e

        logger.debug("Saved %d employees to MySQL", len(params))

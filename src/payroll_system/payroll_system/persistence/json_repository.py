from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, Sequence

from ..core.exceptions import PersistenceFailure
from ..employees.model import Employee
from .codec import SCHEMA_VERSION, employee_from_dict, employee_to_dict
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class JsonFileEmployeeRepository(EmployeeRepository):
    """Keeps the snapshot in one JSON file, replaced atomically on save."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load_all(self) -> Sequence[Employee]:
        if not self._path.exists():
            logger.info("No snapshot at %s, starting fresh", self._path)
            return []

        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
            employees = [employee_from_dict(d) for d in payload.get("employees", [])]
        except (OSError, ValueError, ArithmeticError, KeyError, TypeError) as e:
            raise PersistenceFailure(f"Cannot load employees from {self._path}: {e}") from e

        logger.info("Loaded %d employees from %s", len(employees), self._path)
        return employees

    def save_all(self, employees: Iterable[Employee]) -> None:
        payload = {
            "version": SCHEMA_VERSION,
            "employees": [employee_to_dict(e) for e in employees],
        }
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self._path.parent, prefix=self._path.name, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(payload, fh, ensure_ascii=False, indent=2)
                os.replace(tmp, self._path)
            except BaseException:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise PersistenceFailure(f"Cannot save employees to {self._path}: {e}") from e

        logger.debug("Saved %d employees to %s", len(payload["employees"]), self._path)

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..core.constants import DEFAULT_PRESENT_HOURS
from .model import AttendanceRecord


class AttendanceLedger:
    """Daily attendance for one employee, at most one record per date.

    Marking a date that already has a record replaces it. Hours are stored as
    given; range checks belong to the caller.
    """

    def __init__(self, records: Iterable[AttendanceRecord] = ()):
        self._by_date: dict[date, AttendanceRecord] = {}
        for r in records:
            self._by_date[r.work_date] = r

    def mark(self, work_date: date, present: bool, hours: Optional[int] = None) -> AttendanceRecord:
        if hours is None:
            hours = DEFAULT_PRESENT_HOURS if present else 0
        record = AttendanceRecord(work_date=work_date, present=bool(present), hours_worked=hours)
        self._by_date[work_date] = record
        return record

    def get(self, work_date: date) -> Optional[AttendanceRecord]:
        return self._by_date.get(work_date)

    def present_days(self) -> int:
        return sum(1 for r in self._by_date.values() if r.present)

    def absent_days(self) -> int:
        return sum(1 for r in self._by_date.values() if not r.present)

    def hours_in_month(self, month: int, year: int) -> int:
        return sum(
            r.hours_worked
            for r in self._by_date.values()
            if r.present and r.work_date.month == month and r.work_date.year == year
        )

    def records(self) -> list[AttendanceRecord]:
        return sorted(self._by_date.values(), key=lambda r: r.work_date)

    def __len__(self) -> int:
        return len(self._by_date)

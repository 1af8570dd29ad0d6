from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class LeaveRequest:
    request_id: int
    start_date: date
    end_date: date
    reason: str
    status: LeaveStatus = LeaveStatus.PENDING

    @property
    def leave_days(self) -> int:
        """Inclusive day span, so a single-day leave counts as 1."""
        return (self.end_date - self.start_date).days + 1

    @property
    def is_approved(self) -> bool:
        return self.status == LeaveStatus.APPROVED

from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Iterable, Optional

from ..core.enums import LeaveStatus
from ..core.exceptions import InvalidLeaveRange
from .model import LeaveRequest


class LeaveLedger:
    """Leave requests of one employee and the balance derived from them.

    Requests can be addressed by position (review-pass order) or by their
    stable ``request_id``. Positions shift after a rejection; ids never do.
    Unknown positions/ids are ignored and reported through the ``bool``
    return value.
    """

    def __init__(self, requests: Iterable[LeaveRequest] = ()):
        self._requests: list[LeaveRequest] = list(requests)
        self._next_id = max((r.request_id for r in self._requests), default=0) + 1

    def request(self, start: date, end: date, reason: str) -> LeaveRequest:
        if end < start:
            raise InvalidLeaveRange(f"Leave end date {end} is before start date {start}")

        req = LeaveRequest(request_id=self._next_id, start_date=start, end_date=end, reason=reason)
        self._next_id += 1
        self._requests.append(req)
        return req

    def approve(self, index: int) -> bool:
        if not 0 <= index < len(self._requests):
            return False
        req = self._requests[index]
        if req.status != LeaveStatus.APPROVED:
            self._requests[index] = replace(req, status=LeaveStatus.APPROVED)
        return True

    def reject(self, index: int) -> bool:
        if not 0 <= index < len(self._requests):
            return False
        del self._requests[index]
        return True

    def approve_request(self, request_id: int) -> bool:
        index = self._index_of(request_id)
        return index is not None and self.approve(index)

    def reject_request(self, request_id: int) -> bool:
        index = self._index_of(request_id)
        return index is not None and self.reject(index)

    def get(self, request_id: int) -> Optional[LeaveRequest]:
        index = self._index_of(request_id)
        return self._requests[index] if index is not None else None

    def used_days(self) -> int:
        return sum(r.leave_days for r in self._requests if r.is_approved)

    def available_balance(self, annual_allowance: int) -> int:
        # No clamping: over-approval shows up as a negative balance.
        return int(annual_allowance) - self.used_days()

    def history(self) -> list[LeaveRequest]:
        return list(self._requests)

    def pending(self) -> list[LeaveRequest]:
        return [r for r in self._requests if r.status == LeaveStatus.PENDING]

    def _index_of(self, request_id: int) -> Optional[int]:
        for i, r in enumerate(self._requests):
            if r.request_id == int(request_id):
                return i
        return None

    def __len__(self) -> int:
        return len(self._requests)

from __future__ import annotations

from enum import Enum


class EmploymentType(str, Enum):
    """Loại hợp đồng, quyết định cách tính lương."""

    FULL_TIME = "full_time"
    PART_TIME = "part_time"
    CONTRACTOR = "contractor"
    MANAGER = "manager"


class LeaveStatus(str, Enum):
    """Trạng thái đơn nghỉ phép. Từ chối thì xoá đơn, không có trạng thái riêng."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"

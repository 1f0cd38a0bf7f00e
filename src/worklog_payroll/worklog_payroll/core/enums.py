from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for permission checks."""

    SUPER = "super"
    ADMIN = "admin"
    EMPLOYEE = "employee"

    @property
    def is_manager(self) -> bool:
        return self in (Role.SUPER, Role.ADMIN)


class WorkType(str, Enum):
    WORK = "work"
    DAY_OFF = "day_off"


class WorkLogStatus(str, Enum):
    """Approval state of a work log. Only APPROVED hours are paid."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class DeductionType(str, Enum):
    FIXED = "fixed"
    PERCENTAGE = "percentage"

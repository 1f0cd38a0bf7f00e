from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional, Union

from ..core.enums import WorkLogStatus, WorkType


@dataclass(frozen=True)
class WorkShift:
    """A worked shift. clock_out earlier than clock_in means it ended after midnight."""

    clock_in: time
    clock_out: time

    work_type = WorkType.WORK


@dataclass(frozen=True)
class DayOff:
    reason: str

    work_type = WorkType.DAY_OFF


WorkEntry = Union[WorkShift, DayOff]


@dataclass(frozen=True)
class WorkLog:
    """Domain entity: one employee's work log for a calendar day."""

    log_id: int
    user_id: int
    work_date: date
    entry: WorkEntry
    status: WorkLogStatus

    @property
    def work_type(self) -> WorkType:
        return self.entry.work_type

    @property
    def clock_in(self) -> Optional[time]:
        return self.entry.clock_in if isinstance(self.entry, WorkShift) else None

    @property
    def clock_out(self) -> Optional[time]:
        return self.entry.clock_out if isinstance(self.entry, WorkShift) else None

    @property
    def day_off_reason(self) -> Optional[str]:
        return self.entry.reason if isinstance(self.entry, DayOff) else None


@dataclass(frozen=True)
class NewWorkLog:
    """Validated input for creating/updating a work log."""

    user_id: int
    work_date: date
    entry: WorkEntry
    status: WorkLogStatus = WorkLogStatus.PENDING

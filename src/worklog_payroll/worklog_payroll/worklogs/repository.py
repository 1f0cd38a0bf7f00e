from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import WorkLogStatus
from .model import NewWorkLog, WorkLog


class WorkLogRepository(Protocol):
    def get_by_id(self, log_id: int) -> Optional[WorkLog]:
        raise NotImplementedError

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[WorkLog]:
        raise NotImplementedError

    def list_for_user_between(self, *, user_id: int, start_date: date, end_date: date) -> Sequence[WorkLog]:
        """Logs in [start_date, end_date], newest date first."""

        raise NotImplementedError

    def list_by_status(self, status: WorkLogStatus) -> Sequence[WorkLog]:
        raise NotImplementedError

    def create(self, data: NewWorkLog) -> int:
        raise NotImplementedError

    def update(self, log_id: int, data: NewWorkLog) -> bool:
        raise NotImplementedError

    def update_status(self, log_id: int, status: WorkLogStatus) -> bool:
        raise NotImplementedError

    def delete(self, log_id: int) -> bool:
        raise NotImplementedError

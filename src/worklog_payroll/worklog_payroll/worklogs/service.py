from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_hhmm, month_range, parse_time_of_day
from ..common.validators import require_int
from ..core.constants import DEFAULT_DAY_OFF_REASON
from ..core.enums import Role, WorkLogStatus, WorkType
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..payroll.calculator.base import PayrollCalculator
from ..payroll.calculator.standard_calculator import StandardPayrollCalculator
from .model import DayOff, NewWorkLog, WorkLog, WorkShift
from .repository import WorkLogRepository

logger = logging.getLogger(__name__)


def _parse_enum(enum_cls, value, field_name: str):
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(f"Invalid {field_name}: {value!r}")


class WorkLogService:
    def __init__(self, worklogs: WorkLogRepository, *, calculator: Optional[PayrollCalculator] = None):
        self._worklogs = worklogs
        self._calculator = calculator or StandardPayrollCalculator()

    def _build(
        self,
        *,
        user_id: int,
        work_date: date,
        work_type,
        clock_in: Optional[str],
        clock_out: Optional[str],
        day_off_reason: Optional[str],
        status: WorkLogStatus,
    ) -> NewWorkLog:
        wt = _parse_enum(WorkType, work_type or WorkType.WORK.value, "work type")
        if wt == WorkType.DAY_OFF:
            entry = DayOff(reason=(day_off_reason or "").strip() or DEFAULT_DAY_OFF_REASON)
        else:
            if not clock_in or not clock_out:
                raise ValidationError("Clock-in and clock-out are required for a work day")
            start = parse_time_of_day(clock_in)
            end = parse_time_of_day(clock_out)
            if start == end:
                raise ValidationError("Clock-out must differ from clock-in")
            entry = WorkShift(clock_in=start, clock_out=end)
        return NewWorkLog(user_id=int(user_id), work_date=work_date, entry=entry, status=status)

    def _ensure_free_date(self, user_id: int, work_date: date, *, ignore_log_id: Optional[int] = None) -> None:
        existing = self._worklogs.get_for_user_and_date(int(user_id), work_date)
        if existing and existing.log_id != ignore_log_id:
            kind = "day-off" if existing.work_type == WorkType.DAY_OFF else "work"
            raise ValidationError(f"A {kind} log already exists for {work_date.isoformat()}")

    def _get(self, log_id: int) -> WorkLog:
        log = self._worklogs.get_by_id(int(log_id))
        if not log:
            raise NotFoundError("Work log not found")
        return log

    def register(
        self,
        *,
        current_user_id: int,
        current_role: Role,
        work_date: date,
        work_type: str = WorkType.WORK.value,
        clock_in: Optional[str] = None,
        clock_out: Optional[str] = None,
        day_off_reason: Optional[str] = None,
        user_id: Optional[int] = None,
        status: Optional[str] = None,
    ) -> int:
        """Create a log. Employees log their own days as PENDING; managers may
        log for anyone with any status (defaults to APPROVED)."""

        if user_id is None or user_id == "":
            target_user = int(current_user_id)
        else:
            target_user = require_int(user_id, "User id", minimum=1)
        if current_role.is_manager:
            new_status = _parse_enum(WorkLogStatus, status or WorkLogStatus.APPROVED.value, "status")
        else:
            if target_user != int(current_user_id):
                raise AuthorizationError("You can only register your own work logs")
            new_status = WorkLogStatus.PENDING

        data = self._build(
            user_id=target_user,
            work_date=work_date,
            work_type=work_type,
            clock_in=clock_in,
            clock_out=clock_out,
            day_off_reason=day_off_reason,
            status=new_status,
        )
        self._ensure_free_date(target_user, work_date)

        log_id = self._worklogs.create(data)
        logger.info("Work log %s created for user %s on %s (%s)", log_id, target_user, work_date, new_status.value)
        return log_id

    def update(
        self,
        *,
        current_user_id: int,
        current_role: Role,
        log_id: int,
        work_date: Optional[date] = None,
        work_type: Optional[str] = None,
        clock_in: Optional[str] = None,
        clock_out: Optional[str] = None,
        day_off_reason: Optional[str] = None,
        status: Optional[str] = None,
    ) -> None:
        """Edit a log. Fields left as None keep their stored value."""

        log = self._get(log_id)

        if current_role.is_manager:
            new_status = _parse_enum(WorkLogStatus, status, "status") if status else log.status
        else:
            if log.user_id != int(current_user_id):
                raise AuthorizationError("You can only edit your own work logs")
            if log.status != WorkLogStatus.PENDING:
                raise ValidationError("Only pending work logs can be edited")
            new_status = WorkLogStatus.PENDING

        new_date = work_date or log.work_date
        if clock_in is None and log.clock_in is not None:
            clock_in = log.clock_in.strftime("%H:%M:%S")
        if clock_out is None and log.clock_out is not None:
            clock_out = log.clock_out.strftime("%H:%M:%S")
        data = self._build(
            user_id=log.user_id,
            work_date=new_date,
            work_type=work_type or log.work_type.value,
            clock_in=clock_in,
            clock_out=clock_out,
            day_off_reason=log.day_off_reason if day_off_reason is None else day_off_reason,
            status=new_status,
        )
        self._ensure_free_date(log.user_id, new_date, ignore_log_id=log.log_id)
        self._worklogs.update(log.log_id, data)

    def _decide(self, *, current_role: Role, log_id: int, status: WorkLogStatus) -> None:
        if not current_role.is_manager:
            raise AuthorizationError("Permission denied")
        log = self._get(log_id)
        self._worklogs.update_status(log.log_id, status)
        logger.info("Work log %s marked %s", log.log_id, status.value)

    def approve(self, *, current_role: Role, log_id: int) -> None:
        self._decide(current_role=current_role, log_id=log_id, status=WorkLogStatus.APPROVED)

    def reject(self, *, current_role: Role, log_id: int) -> None:
        self._decide(current_role=current_role, log_id=log_id, status=WorkLogStatus.REJECTED)

    def delete(self, *, current_role: Role, log_id: int) -> None:
        if not current_role.is_manager:
            raise AuthorizationError("Permission denied")
        if not self._worklogs.delete(int(log_id)):
            raise NotFoundError("Work log not found")

    def list_month(self, user_id: int, month: str, *, status: Optional[str] = None) -> list[WorkLog]:
        start, end = month_range(month)
        logs = list(self._worklogs.list_for_user_between(user_id=int(user_id), start_date=start, end_date=end))
        if status and status != "all":
            wanted = _parse_enum(WorkLogStatus, status, "status")
            logs = [log for log in logs if log.status == wanted]
        return logs

    def list_pending(self, *, current_role: Role) -> list[WorkLog]:
        if not current_role.is_manager:
            raise AuthorizationError("Permission denied")
        return list(self._worklogs.list_by_status(WorkLogStatus.PENDING))

    def calendar(self, user_id: int, month: str) -> dict[str, dict]:
        """Per-date markers for a month view, keyed by YYYY-MM-DD."""

        marks: dict[str, dict] = {}
        for log in self.list_month(user_id, month):
            if log.work_type == WorkType.DAY_OFF:
                marker = "day_off"
            else:
                marker = log.status.value
            marks[log.work_date.isoformat()] = {
                **self.to_view(log),
                "marker": marker,
            }
        return marks

    def to_view(self, log: WorkLog) -> dict:
        return {
            "log_id": log.log_id,
            "user_id": log.user_id,
            "date": log.work_date.strftime("%Y-%m-%d"),
            "work_type": log.work_type.value,
            "clock_in": format_hhmm(log.clock_in),
            "clock_out": format_hhmm(log.clock_out),
            "day_off_reason": log.day_off_reason,
            "hours": self._calculator.worked_hours(log),
            "is_night_shift": self._calculator.is_night_shift(log.clock_in, log.clock_out),
            "status": log.status.value,
        }

"""In-memory repository fakes shared by the test suite."""
from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

from src.worklog_payroll.worklog_payroll.announcements.model import Announcement
from src.worklog_payroll.worklog_payroll.core.enums import DeductionType, Role, WorkLogStatus
from src.worklog_payroll.worklog_payroll.deductions.model import DeductionRule
from src.worklog_payroll.worklog_payroll.profiles.model import Profile
from src.worklog_payroll.worklog_payroll.worklogs.model import NewWorkLog, WorkLog


class InMemoryWorkLogs:
    def __init__(self, logs: Optional[list[WorkLog]] = None):
        self._logs: dict[int, WorkLog] = {log.log_id: log for log in (logs or [])}
        self._id = max(self._logs, default=0)
        self.last_range = None

    def get_by_id(self, log_id: int) -> Optional[WorkLog]:
        return self._logs.get(int(log_id))

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[WorkLog]:
        for log in self._logs.values():
            if log.user_id == user_id and log.work_date == work_date:
                return log
        return None

    def list_for_user_between(self, *, user_id: int, start_date: date, end_date: date):
        self.last_range = (user_id, start_date, end_date)
        items = [l for l in self._logs.values() if l.user_id == user_id and start_date <= l.work_date <= end_date]
        items.sort(key=lambda l: l.work_date, reverse=True)
        return items

    def list_by_status(self, status: WorkLogStatus):
        return [l for l in self._logs.values() if l.status == status]

    def create(self, data: NewWorkLog) -> int:
        self._id += 1
        self._logs[self._id] = WorkLog(
            log_id=self._id,
            user_id=data.user_id,
            work_date=data.work_date,
            entry=data.entry,
            status=data.status,
        )
        return self._id

    def update(self, log_id: int, data: NewWorkLog) -> bool:
        if log_id not in self._logs:
            return False
        self._logs[log_id] = WorkLog(
            log_id=log_id,
            user_id=data.user_id,
            work_date=data.work_date,
            entry=data.entry,
            status=data.status,
        )
        return True

    def update_status(self, log_id: int, status: WorkLogStatus) -> bool:
        log = self._logs.get(log_id)
        if not log:
            return False
        self._logs[log_id] = replace(log, status=status)
        return True

    def delete(self, log_id: int) -> bool:
        return self._logs.pop(int(log_id), None) is not None


class InMemoryDeductions:
    def __init__(self, rules: Optional[list[DeductionRule]] = None):
        self._rules: dict[int, DeductionRule] = {r.deduction_id: r for r in (rules or [])}
        self._id = max(self._rules, default=0)

    def get_by_id(self, deduction_id: int) -> Optional[DeductionRule]:
        return self._rules.get(int(deduction_id))

    def list_for_user(self, user_id: int, *, active_only: bool = False):
        return [r for r in self._rules.values() if r.user_id == user_id and (r.is_active or not active_only)]

    def create(self, *, user_id: int, name: str, type: DeductionType, amount: float, is_active: bool) -> int:
        self._id += 1
        self._rules[self._id] = DeductionRule(self._id, user_id, name, type, amount, is_active)
        return self._id

    def update(self, *, deduction_id: int, name: str, type: DeductionType, amount: float, is_active: bool) -> bool:
        rule = self._rules.get(deduction_id)
        if not rule:
            return False
        self._rules[deduction_id] = replace(rule, name=name, type=type, amount=amount, is_active=is_active)
        return True

    def set_active(self, deduction_id: int, is_active: bool) -> bool:
        rule = self._rules.get(deduction_id)
        if not rule:
            return False
        self._rules[deduction_id] = replace(rule, is_active=is_active)
        return True

    def delete(self, deduction_id: int) -> bool:
        return self._rules.pop(int(deduction_id), None) is not None


class InMemoryProfiles:
    def __init__(self, profiles: Optional[list[Profile]] = None):
        self._profiles: dict[int, Profile] = {p.user_id: p for p in (profiles or [])}

    def get_by_id(self, user_id: int) -> Optional[Profile]:
        return self._profiles.get(int(user_id))

    def get_by_email(self, email: str) -> Optional[Profile]:
        return next((p for p in self._profiles.values() if p.email == email), None)

    def list_employees(self):
        return [p for p in self._profiles.values() if p.role == Role.EMPLOYEE]

    def update_hourly_wage(self, user_id: int, hourly_wage: int) -> bool:
        profile = self._profiles.get(user_id)
        if not profile:
            return False
        self._profiles[user_id] = replace(profile, hourly_wage=hourly_wage)
        return True


class InMemoryAnnouncements:
    def __init__(self):
        self._items: dict[int, Announcement] = {}
        self._id = 0
        self._clock = datetime(2026, 3, 1, 9, 0)

    def get_by_id(self, announcement_id: int) -> Optional[Announcement]:
        return self._items.get(int(announcement_id))

    def list_ordered(self, *, active_only: bool):
        items = [a for a in self._items.values() if a.is_active or not active_only]
        items.sort(key=lambda a: (a.priority, a.created_at), reverse=True)
        return items

    def create(self, *, title: str, content: str, priority: int, author_id: int) -> int:
        self._id += 1
        # each insert is one minute later than the previous one
        self._clock = self._clock.replace(minute=self._clock.minute + 1)
        self._items[self._id] = Announcement(
            announcement_id=self._id,
            title=title,
            content=content,
            author_id=author_id,
            priority=priority,
            is_active=True,
            created_at=self._clock,
        )
        return self._id

    def update(self, *, announcement_id: int, title: str, content: str, priority: int) -> bool:
        item = self._items.get(announcement_id)
        if not item:
            return False
        self._items[announcement_id] = replace(item, title=title, content=content, priority=priority)
        return True

    def set_active(self, announcement_id: int, is_active: bool) -> bool:
        item = self._items.get(announcement_id)
        if not item:
            return False
        self._items[announcement_id] = replace(item, is_active=is_active)
        return True

    def delete(self, announcement_id: int) -> bool:
        return self._items.pop(int(announcement_id), None) is not None



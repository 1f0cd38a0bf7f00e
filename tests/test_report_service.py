from __future__ import annotations

from datetime import date, time

import pytest

from fakes import InMemoryDeductions, InMemoryProfiles, InMemoryWorkLogs
from src.worklog_payroll.worklog_payroll.core.enums import DeductionType, Role, WorkLogStatus
from src.worklog_payroll.worklog_payroll.core.exceptions import AuthorizationError
from src.worklog_payroll.worklog_payroll.deductions.model import DeductionRule
from src.worklog_payroll.worklog_payroll.payroll.service import PayrollReportService
from src.worklog_payroll.worklog_payroll.profiles.service import ProfileService
from src.worklog_payroll.worklog_payroll.worklogs.model import DayOff, WorkLog, WorkShift


def _log(log_id, day, entry, status=WorkLogStatus.APPROVED, user_id=1):
    return WorkLog(log_id=log_id, user_id=user_id, work_date=day, entry=entry, status=status)


@pytest.fixture
def march_logs():
    return [
        _log(1, date(2026, 3, 2), WorkShift(time(9, 0), time(18, 0))),
        _log(2, date(2026, 3, 3), WorkShift(time(22, 0), time(2, 0)), WorkLogStatus.PENDING),
        _log(3, date(2026, 3, 4), DayOff("family")),
        _log(4, date(2026, 2, 27), WorkShift(time(9, 0), time(18, 0))),
        _log(5, date(2026, 3, 5), WorkShift(time(9, 0), time(18, 0)), user_id=2),
    ]


def _service(worklogs_repo, deductions_repo, profiles_repo):
    return PayrollReportService(worklogs_repo, deductions_repo, ProfileService(profiles_repo))


def test_monthly_summary_uses_profile_wage_and_active_deductions(march_logs, profiles_repo):
    worklogs = InMemoryWorkLogs(march_logs)
    deductions = InMemoryDeductions(
        [
            DeductionRule(1, 1, "Meal", DeductionType.FIXED, 5000),
            DeductionRule(2, 1, "Tax", DeductionType.PERCENTAGE, 10),
            DeductionRule(3, 1, "Old", DeductionType.FIXED, 70000, is_active=False),
            DeductionRule(4, 2, "Other user", DeductionType.FIXED, 1000),
        ]
    )
    svc = _service(worklogs, deductions, profiles_repo)

    summary = svc.monthly_summary(1, "2026-03")

    assert worklogs.last_range == (1, date(2026, 3, 1), date(2026, 3, 31))
    assert summary.approved_hours == 9.0
    assert summary.pending_hours == 4.0
    assert summary.gross_pay == 90000
    assert summary.total_deductions == 14000
    assert summary.net_pay == 76000


def test_monthly_summary_falls_back_to_default_wage(march_logs, admin):
    # user 2 has no profile at all
    svc = _service(InMemoryWorkLogs(march_logs), InMemoryDeductions(), InMemoryProfiles([admin]))

    summary = svc.monthly_summary(2, "2026-03")

    assert summary.hourly_wage == 10030
    assert summary.gross_pay == 90270


def test_employee_detail_lists_rows_and_all_deductions(march_logs, profiles_repo):
    deductions = InMemoryDeductions(
        [
            DeductionRule(1, 1, "Tax", DeductionType.PERCENTAGE, 3),
            DeductionRule(2, 1, "Old", DeductionType.FIXED, 70000, is_active=False),
        ]
    )
    svc = _service(InMemoryWorkLogs(march_logs), deductions, profiles_repo)

    detail = svc.employee_detail(current_role=Role.ADMIN, user_id=1, month="2026-03")

    assert [r["date"] for r in detail.rows] == ["2026-03-04", "2026-03-03", "2026-03-02"]
    night = detail.rows[1]
    assert night["is_night_shift"] is True
    assert night["hours"] == 4.0
    assert night["daily_pay"] == 40000
    assert detail.rows[0]["clock_in"] == "-"

    assert detail.summary.total_deductions == 2700
    assert [d["computed_amount"] for d in detail.deductions] == [2700, 70000]
    assert detail.deductions[1]["is_active"] is False


def test_employee_detail_requires_manager(profiles_repo, worklogs_repo, deductions_repo):
    svc = _service(worklogs_repo, deductions_repo, profiles_repo)

    with pytest.raises(AuthorizationError):
        svc.employee_detail(current_role=Role.EMPLOYEE, user_id=1, month="2026-03")

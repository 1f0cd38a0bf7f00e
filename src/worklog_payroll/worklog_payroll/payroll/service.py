from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import format_hhmm, month_range
from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from ..deductions.repository import DeductionRepository
from ..profiles.service import ProfileService
from ..worklogs.repository import WorkLogRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayPeriodSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmployeePayrollDetail:
    summary: PayPeriodSummary
    rows: list[dict]
    deductions: list[dict]


class PayrollReportService:
    def __init__(
        self,
        worklogs: WorkLogRepository,
        deductions: DeductionRepository,
        profiles: ProfileService,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._worklogs = worklogs
        self._deductions = deductions
        self._profiles = profiles
        self._calculator = calculator or StandardPayrollCalculator()

    def _month_logs(self, user_id: int, month: str):
        start, end = month_range(month)
        return self._worklogs.list_for_user_between(user_id=int(user_id), start_date=start, end_date=end)

    def monthly_summary(self, user_id: int, month: str) -> PayPeriodSummary:
        logs = self._month_logs(user_id, month)
        wage = self._profiles.hourly_wage_for(user_id)
        rules = self._deductions.list_for_user(int(user_id), active_only=True)

        summary = self._calculator.summarize(logs, wage, rules)
        logger.debug(
            "Payroll user=%s month=%s gross=%s deductions=%s net=%s",
            user_id, month, summary.gross_pay, summary.total_deductions, summary.net_pay,
        )
        return summary

    def employee_detail(self, *, current_role: Role, user_id: int, month: str) -> EmployeePayrollDetail:
        if not current_role.is_manager:
            raise AuthorizationError("Permission denied")

        logs = self._month_logs(user_id, month)
        wage = self._profiles.hourly_wage_for(user_id)
        rules = self._deductions.list_for_user(int(user_id))

        summary = self._calculator.summarize(logs, wage, rules)

        rows: list[dict] = []
        for log in logs:
            hours = self._calculator.worked_hours(log)
            rows.append(
                {
                    "log_id": log.log_id,
                    "date": log.work_date.strftime("%Y-%m-%d"),
                    "work_type": log.work_type.value,
                    "clock_in": format_hhmm(log.clock_in),
                    "clock_out": format_hhmm(log.clock_out),
                    "day_off_reason": log.day_off_reason,
                    "hours": hours,
                    "is_night_shift": self._calculator.is_night_shift(log.clock_in, log.clock_out),
                    "daily_pay": self._calculator.daily_pay(hours, wage),
                    "status": log.status.value,
                }
            )

        deductions = [
            {
                "deduction_id": r.deduction_id,
                "name": r.name,
                "type": r.type.value,
                "amount": r.amount,
                "is_active": r.is_active,
                "computed_amount": self._calculator.deduction_amount(r, summary.gross_pay),
            }
            for r in rules
        ]

        return EmployeePayrollDetail(summary=summary, rows=rows, deductions=deductions)

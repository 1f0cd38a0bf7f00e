"""Worked-hours and pay arithmetic.

All currency results are truncated with ``math.floor``; hours are never
rounded.
"""
from __future__ import annotations

import math
from datetime import time
from typing import Iterable

from ...core.constants import MINUTES_PER_DAY
from ...core.enums import DeductionType, WorkLogStatus, WorkType
from ..model import DeductionLine, PayPeriodSummary
from .base import Deduction, PayrollCalculator, TimeOfDay, WorkRecord


def _minutes_since_midnight(value: TimeOfDay) -> float:
    if isinstance(value, time):
        return value.hour * 60 + value.minute + value.second / 60
    parts = str(value).strip().split(":")
    hours = int(parts[0])
    minutes = int(parts[1]) if len(parts) > 1 else 0
    seconds = int(parts[2]) if len(parts) > 2 and parts[2] else 0
    return hours * 60 + minutes + seconds / 60


def _hour_of(value: TimeOfDay) -> int:
    if isinstance(value, time):
        return value.hour
    return int(str(value).strip().split(":")[0])


def compute_hours(clock_in: TimeOfDay, clock_out: TimeOfDay, work_type: str = WorkType.WORK) -> float:
    """Hours between clock_in and clock_out, wrapping past midnight.

    22:00 -> 02:00 is 4.0 hours. Day-offs and missing clock values give 0.
    """
    if work_type == WorkType.DAY_OFF or not clock_in or not clock_out:
        return 0.0

    in_minutes = _minutes_since_midnight(clock_in)
    out_minutes = _minutes_since_midnight(clock_out)
    if out_minutes < in_minutes:
        out_minutes += MINUTES_PER_DAY

    total = out_minutes - in_minutes
    return total / 60 if total > 0 else 0.0


def is_night_shift(clock_in: TimeOfDay, clock_out: TimeOfDay) -> bool:
    if not clock_in or not clock_out:
        return False
    return _hour_of(clock_out) < _hour_of(clock_in)


def daily_pay(hours: float, hourly_wage: int) -> int:
    return math.floor(hours * hourly_wage)


def deduction_amount(deduction: Deduction, gross_pay: int) -> float:
    if deduction.type == DeductionType.FIXED:
        return deduction.amount
    return math.floor(gross_pay * deduction.amount / 100)


def compute_payroll(
    records: Iterable[WorkRecord],
    hourly_wage: int,
    deductions: Iterable[Deduction] = (),
) -> PayPeriodSummary:
    approved_hours = 0.0
    pending_hours = 0.0
    for record in records:
        if record.status == WorkLogStatus.APPROVED:
            approved_hours += compute_hours(record.clock_in, record.clock_out, record.work_type)
        elif record.status == WorkLogStatus.PENDING:
            pending_hours += compute_hours(record.clock_in, record.clock_out, record.work_type)

    gross_pay = math.floor(approved_hours * hourly_wage)

    lines = tuple(
        DeductionLine(
            name=d.name,
            type=DeductionType(d.type),
            rate=d.amount,
            amount=deduction_amount(d, gross_pay),
        )
        for d in deductions
        if d.is_active
    )
    total_deductions = sum(line.amount for line in lines)

    return PayPeriodSummary(
        total_hours=approved_hours + pending_hours,
        approved_hours=approved_hours,
        pending_hours=pending_hours,
        gross_pay=gross_pay,
        total_deductions=total_deductions,
        net_pay=math.floor(gross_pay - total_deductions),
        hourly_wage=hourly_wage,
        deduction_lines=lines,
    )


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: approved hours x wage, floored; fixed/percentage deductions."""

    def worked_hours(self, record: WorkRecord) -> float:
        return compute_hours(record.clock_in, record.clock_out, record.work_type)

    def is_night_shift(self, clock_in: TimeOfDay, clock_out: TimeOfDay) -> bool:
        return is_night_shift(clock_in, clock_out)

    def daily_pay(self, hours: float, hourly_wage: int) -> int:
        return daily_pay(hours, hourly_wage)

    def deduction_amount(self, deduction: Deduction, gross_pay: int) -> float:
        return deduction_amount(deduction, gross_pay)

    def summarize(
        self,
        records: Iterable[WorkRecord],
        hourly_wage: int,
        deductions: Iterable[Deduction] = (),
    ) -> PayPeriodSummary:
        return compute_payroll(records, hourly_wage, deductions)

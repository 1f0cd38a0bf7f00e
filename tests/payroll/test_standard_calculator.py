from datetime import date, time
from types import SimpleNamespace

import pytest

from src.worklog_payroll.worklog_payroll.core.enums import DeductionType, WorkLogStatus
from src.worklog_payroll.worklog_payroll.deductions.model import DeductionRule
from src.worklog_payroll.worklog_payroll.payroll.calculator.standard_calculator import (
    StandardPayrollCalculator,
    compute_hours,
    compute_payroll,
    daily_pay,
    is_night_shift,
)
from src.worklog_payroll.worklog_payroll.worklogs.model import DayOff, WorkLog, WorkShift


def record(clock_in="09:00", clock_out="18:00", status="approved", work_type="work"):
    return SimpleNamespace(clock_in=clock_in, clock_out=clock_out, status=status, work_type=work_type)


def rule(type, amount, is_active=True, name="rule"):
    return SimpleNamespace(name=name, type=type, amount=amount, is_active=is_active)


def test_day_shift_hours():
    assert compute_hours("09:00", "18:00", "work") == 9.0


def test_overnight_shift_wraps_past_midnight():
    assert compute_hours("22:00", "02:00", "work") == 4.0


def test_missing_clock_values_give_zero():
    assert compute_hours(None, "18:00", "work") == 0
    assert compute_hours("09:00", None, "work") == 0


def test_day_off_gives_zero_even_with_times():
    assert compute_hours("09:00", "18:00", "day_off") == 0


def test_identical_times_give_zero():
    assert compute_hours("09:00", "09:00", "work") == 0


def test_accepts_time_objects_and_seconds():
    assert compute_hours(time(8, 30), time(17, 0), "work") == 8.5
    assert compute_hours("09:00:00", "09:00:30", "work") == pytest.approx(0.5 / 60)


@pytest.mark.parametrize("start", ["00:00", "07:15", "12:00", "23:59"])
@pytest.mark.parametrize("end", ["00:00", "06:45", "12:00", "23:59"])
def test_hours_never_negative(start, end):
    hours = compute_hours(start, end, "work")
    assert 0 <= hours < 24


def test_night_shift_classifier():
    assert is_night_shift("22:00", "02:00") is True
    assert is_night_shift("09:00", "18:00") is False
    assert is_night_shift(None, "02:00") is False


def test_gross_and_net_without_deductions():
    summary = compute_payroll([record()], 10000, [])

    assert summary.approved_hours == 9.0
    assert summary.gross_pay == 90000
    assert summary.total_deductions == 0
    assert summary.net_pay == 90000


def test_fixed_deduction():
    summary = compute_payroll([record()], 10000, [rule("fixed", 5000)])

    assert summary.total_deductions == 5000
    assert summary.net_pay == 85000


def test_percentage_deduction_is_floored():
    summary = compute_payroll([record()], 10000, [rule("percentage", 10)])
    assert summary.total_deductions == 9000
    assert summary.net_pay == 81000

    # 90000 * 3.545 / 100 = 3190.5
    summary = compute_payroll([record()], 10000, [rule("percentage", 3.545)])
    assert summary.total_deductions == 3190
    assert summary.net_pay == 86810


def test_inactive_deductions_contribute_nothing():
    summary = compute_payroll([record()], 10000, [rule("fixed", 999999, is_active=False)])

    assert summary.total_deductions == 0
    assert summary.net_pay == 90000
    assert summary.deduction_lines == ()


def test_only_approved_hours_are_paid():
    records = [
        record(status="approved"),
        record("22:00", "02:00", status="pending"),
        record("10:00", "12:00", status="rejected"),
    ]
    summary = compute_payroll(records, 10000, [])

    assert summary.approved_hours == 9.0
    assert summary.pending_hours == 4.0
    assert summary.total_hours == 13.0
    assert summary.gross_pay == 90000


def test_gross_pay_is_floored():
    # 7.5h * 10030 = 75225; 0.25h * 10030 = 2507.5
    summary = compute_payroll([record("09:00", "16:30"), record("10:00", "10:15")], 10030, [])
    assert summary.gross_pay == 77732


def test_empty_records_give_zero_summary():
    summary = compute_payroll([], 10000, [rule("percentage", 10)])

    assert summary.total_hours == 0
    assert summary.approved_hours == 0
    assert summary.pending_hours == 0
    assert summary.gross_pay == 0
    assert summary.total_deductions == 0
    assert summary.net_pay == 0


def test_same_inputs_same_output():
    records = [record(), record("22:00", "02:00")]
    deductions = [rule("fixed", 5000), rule("percentage", 3.3)]

    assert compute_payroll(records, 10030, deductions) == compute_payroll(records, 10030, deductions)


def test_calculator_reads_work_logs():
    logs = [
        WorkLog(1, 1, date(2026, 3, 2), WorkShift(time(22, 0), time(6, 0)), WorkLogStatus.APPROVED),
        WorkLog(2, 1, date(2026, 3, 3), DayOff("rest"), WorkLogStatus.APPROVED),
    ]
    deductions = [DeductionRule(1, 1, "Income tax", DeductionType.PERCENTAGE, 3)]

    calc = StandardPayrollCalculator()
    summary = calc.summarize(logs, 10000, deductions)

    assert calc.worked_hours(logs[0]) == 8.0
    assert calc.worked_hours(logs[1]) == 0
    assert summary.gross_pay == 80000
    assert summary.total_deductions == 2400
    assert summary.deduction_lines[0].name == "Income tax"


def test_daily_pay_floors():
    assert daily_pay(0.25, 10030) == 2507

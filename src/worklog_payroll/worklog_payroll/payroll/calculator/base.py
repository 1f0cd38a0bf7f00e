from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import time
from typing import Iterable, Protocol, Union

from ..model import PayPeriodSummary

TimeOfDay = Union[time, str, None]


class WorkRecord(Protocol):
    """What the calculator reads from a work log."""

    clock_in: TimeOfDay
    clock_out: TimeOfDay
    work_type: str
    status: str


class Deduction(Protocol):
    name: str
    type: str
    amount: float
    is_active: bool


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def worked_hours(self, record: WorkRecord) -> float:
        raise NotImplementedError

    @abstractmethod
    def is_night_shift(self, clock_in: TimeOfDay, clock_out: TimeOfDay) -> bool:
        raise NotImplementedError

    @abstractmethod
    def daily_pay(self, hours: float, hourly_wage: int) -> int:
        raise NotImplementedError

    @abstractmethod
    def deduction_amount(self, deduction: Deduction, gross_pay: int) -> float:
        raise NotImplementedError

    @abstractmethod
    def summarize(
        self,
        records: Iterable[WorkRecord],
        hourly_wage: int,
        deductions: Iterable[Deduction] = (),
    ) -> PayPeriodSummary:
        raise NotImplementedError

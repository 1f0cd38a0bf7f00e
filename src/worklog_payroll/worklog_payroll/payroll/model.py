from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import DeductionType


@dataclass(frozen=True)
class DeductionLine:
    name: str
    type: DeductionType
    rate: float
    amount: float


@dataclass(frozen=True)
class PayPeriodSummary:
    """Derived pay figures for one employee and period (never persisted)."""

    total_hours: float = 0.0
    approved_hours: float = 0.0
    pending_hours: float = 0.0
    gross_pay: int = 0
    total_deductions: float = 0
    net_pay: int = 0
    hourly_wage: int = 0
    deduction_lines: tuple[DeductionLine, ...] = field(default_factory=tuple)

    def as_dict(self) -> dict:
        return {
            "total_hours": self.total_hours,
            "approved_hours": self.approved_hours,
            "pending_hours": self.pending_hours,
            "gross_pay": self.gross_pay,
            "total_deductions": self.total_deductions,
            "net_pay": self.net_pay,
            "hourly_wage": self.hourly_wage,
            "deductions": [
                {"name": d.name, "type": d.type.value, "rate": d.rate, "amount": d.amount}
                for d in self.deduction_lines
            ],
        }

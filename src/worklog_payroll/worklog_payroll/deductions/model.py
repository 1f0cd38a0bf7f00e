from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import DeductionType


@dataclass(frozen=True)
class DeductionRule:
    """Domain entity: a salary deduction applied to one employee.

    `amount` is a currency amount for FIXED rules and a rate (0-100) for
    PERCENTAGE rules.
    """

    deduction_id: int
    user_id: int
    name: str
    type: DeductionType
    amount: float
    is_active: bool = True


@dataclass(frozen=True)
class DeductionPreset:
    name: str
    type: DeductionType
    amount: float


PRESET_DEDUCTIONS: tuple[DeductionPreset, ...] = (
    DeductionPreset("Income tax", DeductionType.PERCENTAGE, 3),
    DeductionPreset("Local income tax", DeductionType.PERCENTAGE, 0.3),
    DeductionPreset("National pension", DeductionType.PERCENTAGE, 4.5),
    DeductionPreset("Health insurance", DeductionType.PERCENTAGE, 3.545),
    DeductionPreset("Long-term care insurance", DeductionType.PERCENTAGE, 0.4091),
    DeductionPreset("Employment insurance", DeductionType.PERCENTAGE, 0.9),
    DeductionPreset("Meal allowance", DeductionType.FIXED, 100000),
    DeductionPreset("Transport allowance", DeductionType.FIXED, 50000),
)

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import DeductionType
from .model import DeductionRule


class DeductionRepository(Protocol):
    def get_by_id(self, deduction_id: int) -> Optional[DeductionRule]:
        raise NotImplementedError

    def list_for_user(self, user_id: int, *, active_only: bool = False) -> Sequence[DeductionRule]:
        raise NotImplementedError

    def create(self, *, user_id: int, name: str, type: DeductionType, amount: float, is_active: bool) -> int:
        raise NotImplementedError

    def update(self, *, deduction_id: int, name: str, type: DeductionType, amount: float, is_active: bool) -> bool:
        raise NotImplementedError

    def set_active(self, deduction_id: int, is_active: bool) -> bool:
        raise NotImplementedError

    def delete(self, deduction_id: int) -> bool:
        raise NotImplementedError

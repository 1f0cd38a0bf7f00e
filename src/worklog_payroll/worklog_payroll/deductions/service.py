from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_deduction_amount, require_non_empty
from ..core.enums import DeductionType, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import PRESET_DEDUCTIONS, DeductionRule
from .repository import DeductionRepository

logger = logging.getLogger(__name__)


def _require_manager(role: Role) -> None:
    if not role.is_manager:
        raise AuthorizationError("Permission denied")


def _parse_type(value) -> DeductionType:
    try:
        return DeductionType(value)
    except ValueError:
        raise ValidationError(f"Invalid deduction type: {value!r}")


class DeductionService:
    def __init__(self, deductions: DeductionRepository):
        self._deductions = deductions

    def list_for_user(self, user_id: int, *, active_only: bool = False) -> Sequence[DeductionRule]:
        return self._deductions.list_for_user(int(user_id), active_only=active_only)

    def presets(self) -> list[dict]:
        return [{"name": p.name, "type": p.type.value, "amount": p.amount} for p in PRESET_DEDUCTIONS]

    def create(
        self,
        *,
        current_role: Role,
        user_id: int,
        name: str,
        type: str,
        amount,
        is_active: bool = True,
    ) -> int:
        _require_manager(current_role)
        d_type = _parse_type(type)
        deduction_id = self._deductions.create(
            user_id=int(user_id),
            name=require_non_empty(name, "Name"),
            type=d_type,
            amount=require_deduction_amount(amount, d_type),
            is_active=bool(is_active),
        )
        logger.info("Deduction %s added for user %s", deduction_id, user_id)
        return deduction_id

    def update(
        self,
        *,
        current_role: Role,
        deduction_id: int,
        name: Optional[str] = None,
        type: Optional[str] = None,
        amount=None,
        is_active: Optional[bool] = None,
    ) -> None:
        """Edit a rule. Fields left as None keep their stored value."""
        _require_manager(current_role)
        rule = self._get(deduction_id)
        d_type = rule.type if type is None else _parse_type(type)
        self._deductions.update(
            deduction_id=int(deduction_id),
            name=rule.name if name is None else require_non_empty(name, "Name"),
            type=d_type,
            amount=require_deduction_amount(rule.amount if amount is None else amount, d_type),
            is_active=rule.is_active if is_active is None else bool(is_active),
        )

    def toggle(self, *, current_role: Role, deduction_id: int) -> bool:
        """Flip is_active and return the new value."""
        _require_manager(current_role)
        rule = self._get(deduction_id)
        self._deductions.set_active(rule.deduction_id, not rule.is_active)
        return not rule.is_active

    def delete(self, *, current_role: Role, deduction_id: int) -> None:
        _require_manager(current_role)
        if not self._deductions.delete(int(deduction_id)):
            raise NotFoundError("Deduction not found")

    def _get(self, deduction_id: int) -> DeductionRule:
        rule = self._deductions.get_by_id(int(deduction_id))
        if not rule:
            raise NotFoundError("Deduction not found")
        return rule

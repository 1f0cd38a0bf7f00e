from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Profile:
    """Domain entity: an employee/admin profile.

    Note: Plain data object (no DB access code).
    """

    user_id: int
    full_name: str
    email: str
    password_hash: str
    role: Role
    hourly_wage: Optional[int] = None
    is_active: bool = True

from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash

from ..common.validators import require_int, require_non_empty
from ..core.constants import DEFAULT_HOURLY_WAGE
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError
from .model import Profile
from .repository import ProfileRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    full_name: str
    role: Role


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, profiles: ProfileRepository):
        self._profiles = profiles

    def authenticate(self, email: str, password: str) -> SessionUser:
        email = require_non_empty(email, "Email")
        profile = self._profiles.get_by_email(email)
        if not profile or not profile.is_active:
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(profile.password_hash, password or "")
        except ValueError:
            # placeholder hashes like 'CHANGE_ME'
            ok = False

        if not ok:
            logger.info("Rejected login for %s", email)
            raise AuthenticationError("Invalid email or password")

        return SessionUser(user_id=profile.user_id, full_name=profile.full_name, role=profile.role)


class ProfileService:
    def __init__(self, profiles: ProfileRepository, *, default_hourly_wage: int = DEFAULT_HOURLY_WAGE):
        self._profiles = profiles
        self._default_hourly_wage = int(default_hourly_wage)

    def get(self, user_id: int) -> Profile:
        profile = self._profiles.get_by_id(int(user_id))
        if not profile:
            raise NotFoundError("Employee not found")
        return profile

    def hourly_wage_for(self, user_id: int) -> int:
        """Profile wage, or the default when unset/zero."""
        profile = self._profiles.get_by_id(int(user_id))
        if profile and profile.hourly_wage:
            return int(profile.hourly_wage)
        return self._default_hourly_wage

    def list_employees(self, *, current_role: Role) -> list[dict]:
        if not current_role.is_manager:
            raise AuthorizationError("Permission denied")
        return [
            {
                "user_id": p.user_id,
                "full_name": p.full_name,
                "email": p.email,
                "hourly_wage": p.hourly_wage or self._default_hourly_wage,
                "is_active": p.is_active,
            }
            for p in self._profiles.list_employees()
        ]

    def set_hourly_wage(self, *, current_role: Role, user_id: int, hourly_wage) -> None:
        if not current_role.is_manager:
            raise AuthorizationError("Permission denied")
        wage = require_int(hourly_wage, "Hourly wage", minimum=1)

        self.get(user_id)
        self._profiles.update_hourly_wage(int(user_id), wage)
        logger.info("Hourly wage of user %s set to %s", user_id, wage)

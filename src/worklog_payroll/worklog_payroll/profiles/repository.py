from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Profile


class ProfileRepository(Protocol):
    def get_by_id(self, user_id: int) -> Optional[Profile]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Profile]:
        raise NotImplementedError

    def list_employees(self) -> Sequence[Profile]:
        raise NotImplementedError

    def update_hourly_wage(self, user_id: int, hourly_wage: int) -> bool:
        raise NotImplementedError

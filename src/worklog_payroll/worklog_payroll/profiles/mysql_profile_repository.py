from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, db_cursor, fetchall, fetchone
from .model import Profile
from .repository import ProfileRepository

_COLUMNS = "user_id, full_name, email, password_hash, role, hourly_wage, is_active"


def _row_to_profile(r: Dict[str, Any]) -> Profile:
    wage = r.get("hourly_wage")
    return Profile(
        user_id=int(r["user_id"]),
        full_name=r["full_name"],
        email=r["email"],
        password_hash=r["password_hash"],
        role=Role(r["role"]),
        hourly_wage=int(wage) if wage is not None else None,
        is_active=as_bool(r.get("is_active")),
    )


class MySQLProfileRepository(ProfileRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM profiles WHERE user_id=%s", (int(user_id),))
            r = fetchone(cur)
            return _row_to_profile(r) if r else None

    def get_by_email(self, email: str) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM profiles WHERE email=%s", (email,))
            r = fetchone(cur)
            return _row_to_profile(r) if r else None

    def list_employees(self) -> Sequence[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM profiles WHERE role=%s ORDER BY full_name",
                (Role.EMPLOYEE.value,),
            )
            return [_row_to_profile(r) for r in fetchall(cur)]

    def update_hourly_wage(self, user_id: int, hourly_wage: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE profiles SET hourly_wage=%s WHERE user_id=%s", (int(hourly_wage), int(user_id)))
            return cur.rowcount > 0

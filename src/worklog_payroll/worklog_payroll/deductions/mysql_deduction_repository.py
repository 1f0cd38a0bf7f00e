from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import DeductionType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, db_cursor, fetchall, fetchone
from .model import DeductionRule
from .repository import DeductionRepository


def _row_to_rule(r: Dict[str, Any]) -> DeductionRule:
    return DeductionRule(
        deduction_id=int(r["deduction_id"]),
        user_id=int(r["user_id"]),
        name=r["name"],
        type=DeductionType(r["type"]),
        amount=float(r["amount"]),
        is_active=as_bool(r.get("is_active")),
    )


class MySQLDeductionRepository(DeductionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, deduction_id: int) -> Optional[DeductionRule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT deduction_id, user_id, name, type, amount, is_active
                FROM salary_deductions
                WHERE deduction_id=%s
                """,
                (int(deduction_id),),
            )
            r = fetchone(cur)
            return _row_to_rule(r) if r else None

    def list_for_user(self, user_id: int, *, active_only: bool = False) -> Sequence[DeductionRule]:
        sql = """
            SELECT deduction_id, user_id, name, type, amount, is_active
            FROM salary_deductions
            WHERE user_id=%s
        """
        params: list = [int(user_id)]
        if active_only:
            sql += " AND is_active=1"
        sql += " ORDER BY deduction_id"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_row_to_rule(r) for r in fetchall(cur)]

    def create(self, *, user_id: int, name: str, type: DeductionType, amount: float, is_active: bool) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO salary_deductions (user_id, name, type, amount, is_active)
                VALUES (%s, %s, %s, %s, %s)
                """,
                (int(user_id), name, type.value, amount, 1 if is_active else 0),
            )
            return int(cur.lastrowid)

    def update(self, *, deduction_id: int, name: str, type: DeductionType, amount: float, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE salary_deductions
                SET name=%s, type=%s, amount=%s, is_active=%s
                WHERE deduction_id=%s
                """,
                (name, type.value, amount, 1 if is_active else 0, int(deduction_id)),
            )
            return cur.rowcount > 0

    def set_active(self, deduction_id: int, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE salary_deductions SET is_active=%s WHERE deduction_id=%s",
                (1 if is_active else 0, int(deduction_id)),
            )
            return cur.rowcount > 0

    def delete(self, deduction_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM salary_deductions WHERE deduction_id=%s", (int(deduction_id),))
            return cur.rowcount > 0

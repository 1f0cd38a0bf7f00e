from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.enums import WorkLogStatus, WorkType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import DayOff, NewWorkLog, WorkLog, WorkShift
from .repository import WorkLogRepository

_COLUMNS = "log_id, user_id, work_date, work_type, clock_in, clock_out, day_off_reason, status"


def _row_to_log(r: Dict[str, Any]) -> WorkLog:
    if WorkType(r["work_type"]) == WorkType.DAY_OFF:
        entry = DayOff(reason=r.get("day_off_reason") or "")
    else:
        entry = WorkShift(
            clock_in=normalize_mysql_time(r["clock_in"]),
            clock_out=normalize_mysql_time(r["clock_out"]),
        )
    return WorkLog(
        log_id=int(r["log_id"]),
        user_id=int(r["user_id"]),
        work_date=r["work_date"],
        entry=entry,
        status=WorkLogStatus(r["status"]),
    )


def _entry_params(data: NewWorkLog) -> tuple:
    entry = data.entry
    if isinstance(entry, WorkShift):
        return (WorkType.WORK.value, entry.clock_in, entry.clock_out, None)
    return (WorkType.DAY_OFF.value, None, None, entry.reason)


class MySQLWorkLogRepository(WorkLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, log_id: int) -> Optional[WorkLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM work_logs WHERE log_id=%s", (int(log_id),))
            r = fetchone(cur)
            return _row_to_log(r) if r else None

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[WorkLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM work_logs WHERE user_id=%s AND work_date=%s",
                (int(user_id), work_date),
            )
            r = fetchone(cur)
            return _row_to_log(r) if r else None

    def list_for_user_between(self, *, user_id: int, start_date: date, end_date: date) -> Sequence[WorkLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM work_logs
                WHERE user_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date DESC
                """,
                (int(user_id), start_date, end_date),
            )
            return [_row_to_log(r) for r in fetchall(cur)]

    def list_by_status(self, status: WorkLogStatus) -> Sequence[WorkLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM work_logs WHERE status=%s ORDER BY work_date DESC, log_id DESC",
                (status.value,),
            )
            return [_row_to_log(r) for r in fetchall(cur)]

    def create(self, data: NewWorkLog) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO work_logs (user_id, work_date, work_type, clock_in, clock_out, day_off_reason, status)
                VALUES (%s, %s, %s, %s, %s, %s, %s)
                """,
                (int(data.user_id), data.work_date, *_entry_params(data), data.status.value),
            )
            return int(cur.lastrowid)

    def update(self, log_id: int, data: NewWorkLog) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE work_logs
                SET user_id=%s, work_date=%s, work_type=%s, clock_in=%s, clock_out=%s, day_off_reason=%s, status=%s
                WHERE log_id=%s
                """,
                (int(data.user_id), data.work_date, *_entry_params(data), data.status.value, int(log_id)),
            )
            return cur.rowcount > 0

    def update_status(self, log_id: int, status: WorkLogStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE work_logs SET status=%s WHERE log_id=%s", (status.value, int(log_id)))
            return cur.rowcount > 0

    def delete(self, log_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM work_logs WHERE log_id=%s", (int(log_id),))
            return cur.rowcount > 0

from __future__ import annotations

import calendar
from datetime import date, datetime, time

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_time_of_day(value: str) -> time:
    """Parse HH:MM or HH:MM:SS into a time, raising ValidationError otherwise."""
    v = str(value or "").strip()
    for fmt in ("%H:%M:%S", "%H:%M"):
        try:
            return datetime.strptime(v, fmt).time()
        except ValueError:
            continue
    raise ValidationError(f"Invalid time of day (HH:MM): {value!r}")


def month_range(month: str) -> tuple[date, date]:
    """Return the first and last day of a 'YYYY-MM' month."""
    try:
        first = datetime.strptime(month, "%Y-%m").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid month (YYYY-MM): {month!r}")
    last_day = calendar.monthrange(first.year, first.month)[1]
    return first, first.replace(day=last_day)


def current_month(today: date | None = None) -> str:
    today = today or now_local().date()
    return today.strftime("%Y-%m")


def format_hhmm(value: time | None) -> str:
    return value.strftime("%H:%M") if value else "-"


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()

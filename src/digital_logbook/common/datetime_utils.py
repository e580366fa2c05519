from __future__ import annotations

from datetime import date, datetime

from ..core.constants import DATE_FORMAT, DATETIME_FORMAT, TIME_FORMAT


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now()


def today_iso() -> str:
    return now_local().strftime(DATE_FORMAT)


def format_date(value) -> str:
    if value is None:
        return ""
    if isinstance(value, (date, datetime)):
        return value.strftime(DATE_FORMAT)
    return str(value)[:10]


def format_datetime(value) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.strftime(DATETIME_FORMAT)
    return str(value)


def format_time(value) -> str:
    """Render a TIME column (already normalized to datetime.time) as HH:MM:SS."""
    if value is None:
        return ""
    return value.strftime(TIME_FORMAT)

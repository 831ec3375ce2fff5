"""Datetime utilities.

Stored timestamps are timezone-aware UTC. Calendar questions ("today",
"this week", the default time of day) are answered in the application
timezone from settings.
"""

from datetime import date, datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

from config.settings import settings


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def _zone(tz_name: str) -> tzinfo:
    # UTC needs no tz database; other names resolve through zoneinfo
    if tz_name.upper() in ("UTC", "ETC/UTC", "Z"):
        return timezone.utc
    return ZoneInfo(tz_name)


def local_now(tz_name: str | None = None) -> datetime:
    """Return now in the application timezone (or tz_name)."""
    return utc_now().astimezone(_zone(tz_name or settings.APP_TIMEZONE))


def current_time_hhmm(tz_name: str | None = None) -> str:
    return local_now(tz_name).strftime("%H:%M")


def start_of_week(day: date) -> date:
    """Weeks start on Monday."""
    return day - timedelta(days=day.weekday())


def start_of_month(day: date) -> date:
    return day.replace(day=1)


def start_of_year(day: date) -> date:
    return day.replace(month=1, day=1)


def parse_business_date(raw: str) -> date:
    """Parse '2024-03-01' or a full ISO datetime ('2024-03-01T10:00:00Z').

    A datetime contributes its calendar date as written, without timezone
    conversion. Raises ValueError on anything else.
    """
    raw = raw.strip()
    try:
        return date.fromisoformat(raw)
    except ValueError:
        return datetime.fromisoformat(raw).date()

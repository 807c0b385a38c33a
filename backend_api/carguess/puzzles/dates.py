from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional, Union
from zoneinfo import ZoneInfo

from django.conf import settings
from django.utils import timezone

DEFAULT_TIME_ZONE = "Europe/Paris"
DATE_KEY_FORMAT = "%Y-%m-%d"


def puzzle_time_zone() -> ZoneInfo:
    """Canonical zone in which "today" rolls over."""
    return ZoneInfo(getattr(settings, "CARGUESS_TIME_ZONE", DEFAULT_TIME_ZONE))


# PUBLIC_INTERFACE
def format_date_key(value: datetime, tz: Optional[Union[str, ZoneInfo]] = None) -> str:
    """Render an aware datetime as YYYY-MM-DD in the puzzle time zone.

    Naive datetimes are interpreted as UTC.
    """
    if isinstance(tz, str):
        tz = ZoneInfo(tz)
    if timezone.is_naive(value):
        value = timezone.make_aware(value, ZoneInfo("UTC"))
    return value.astimezone(tz or puzzle_time_zone()).strftime(DATE_KEY_FORMAT)


# PUBLIC_INTERFACE
def get_date_key(now: Optional[datetime] = None) -> str:
    """Date key for "today" (or for now when given)."""
    return format_date_key(now or timezone.now())


def parse_date_key(date_key: str) -> date:
    """Parse a YYYY-MM-DD key, raising ValueError on malformed input."""
    return datetime.strptime(date_key, DATE_KEY_FORMAT).date()


def shift_date_key(date_key: str, days: int) -> str:
    """Return the key days away from date_key (negative for the past)."""
    return (parse_date_key(date_key) + timedelta(days=days)).strftime(DATE_KEY_FORMAT)

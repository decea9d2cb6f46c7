"""
Utility functions for the application.
"""
from typing import Optional
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo
from moodwall.core.config import settings

MINUTES_IN_DAY = 1440
MINUTES_IN_MONTH = 43200
MINUTES_IN_YEAR = 525600


def utcnow() -> datetime:
    """Timezone-aware current time in UTC."""
    return datetime.now(timezone.utc)


def ensure_aware(value: datetime) -> datetime:
    """Treat naive datetimes coming back from the store as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def local_zone() -> ZoneInfo:
    return ZoneInfo(settings.TIMEZONE)


def to_local_date(value: datetime) -> date:
    """Normalize a stored timestamp to its calendar day in the configured zone."""
    return ensure_aware(value).astimezone(local_zone()).date()


def local_today(now: Optional[datetime] = None) -> date:
    return to_local_date(now or utcnow())


def local_day_bounds(day: date) -> tuple:
    """Return [start, end) of a local calendar day as UTC datetimes."""
    start = datetime(day.year, day.month, day.day, tzinfo=local_zone())
    end = datetime.fromordinal(day.toordinal() + 1).replace(tzinfo=local_zone())
    return start.astimezone(timezone.utc), end.astimezone(timezone.utc)


def time_ago(value: datetime, now: Optional[datetime] = None) -> str:
    """
    Human readable distance between a timestamp and now, with suffix.

    Buckets follow the usual "distance in words" rounding:
    "less than a minute ago", "5 minutes ago", "about 2 hours ago",
    "3 days ago", "about 1 month ago", "over 1 year ago", ...
    """
    now = ensure_aware(now or utcnow())
    value = ensure_aware(value)
    seconds = (now - value).total_seconds()
    future = seconds < 0
    seconds = abs(seconds)
    minutes = round(seconds / 60)

    if minutes < 1:
        words = "less than a minute"
    elif minutes < 45:
        words = "1 minute" if minutes == 1 else f"{minutes} minutes"
    elif minutes < 90:
        words = "about 1 hour"
    elif minutes < MINUTES_IN_DAY:
        words = f"about {round(minutes / 60)} hours"
    elif minutes < 2520:
        words = "1 day"
    elif minutes < MINUTES_IN_MONTH:
        words = f"{round(minutes / MINUTES_IN_DAY)} days"
    elif minutes < 64800:
        words = "about 1 month"
    elif minutes < 86400:
        words = "about 2 months"
    elif minutes < MINUTES_IN_YEAR:
        words = f"{round(minutes / MINUTES_IN_MONTH)} months"
    else:
        years = int(minutes // MINUTES_IN_YEAR)
        remainder = minutes % MINUTES_IN_YEAR
        if remainder < MINUTES_IN_YEAR / 4:
            words = f"about {years} year" + ("s" if years > 1 else "")
        elif remainder < MINUTES_IN_YEAR * 3 / 4:
            words = f"over {years} year" + ("s" if years > 1 else "")
        else:
            words = f"almost {years + 1} years"

    return f"in {words}" if future else f"{words} ago"

"""Time zone helpers shared by order placement and reporting."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

from eelhouse.core.config import settings


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Return value as an aware UTC datetime.

    SQLite drops the offset of stored timestamps, and every timestamp is written
    in UTC, so naive values read back from the database are treated as UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def report_timezone() -> tzinfo:
    """Return the time zone used to cut report data into calendar days."""
    if settings.report_timezone.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(settings.report_timezone)


def local_date(value: datetime, tz: tzinfo | None = None) -> date:
    """Return the calendar date of a stored timestamp in the report time zone."""
    return as_utc(value).astimezone(tz or report_timezone()).date()


def day_start(day: date, tz: tzinfo | None = None) -> datetime:
    """Return midnight at the start of day, in UTC."""
    return datetime.combine(day, time.min, tzinfo=tz or report_timezone()).astimezone(timezone.utc)


def days_window(first_day: date, last_day: date, tz: tzinfo | None = None) -> tuple[datetime, datetime]:
    """Return UTC boundaries covering first_day through last_day.

    The start is inclusive and the end is the exclusive midnight after last_day.
    """
    zone = tz or report_timezone()
    return day_start(first_day, zone), day_start(last_day + timedelta(days=1), zone)

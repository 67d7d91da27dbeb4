"""Human-facing date formatting for client display.

These helpers never touch the wire format; see
:mod:`recipekit.domain.wire` for that.
"""

from __future__ import annotations

from datetime import UTC, datetime

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def short_date_format(value: datetime) -> str:
    """``"Jan 14, 2024"``"""
    return f"{_MONTHS[value.month - 1]} {value.day}, {value.year}"


def display_format(value: datetime) -> str:
    """``"Jan 14, 2024 at 10:30 AM"``"""
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{short_date_format(value)} at {hour}:{value.minute:02d} {meridiem}"


def _plural(count: int, unit: str) -> str:
    return f"1 {unit} ago" if count == 1 else f"{count} {unit}s ago"


def relative_format(value: datetime, now: datetime | None = None) -> str:
    """Coarse "time ago" string (``"just now"``, ``"3 days ago"``, ...).

    Months are 30 days and years 365 days.  Naive datetimes are treated
    as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    current = now or datetime.now(UTC)
    if current.tzinfo is None:
        current = current.replace(tzinfo=UTC)

    seconds = int((current - value).total_seconds())
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24
    weeks = days // 7
    months = days // 30
    years = days // 365

    if seconds < 60:
        return "just now" if seconds <= 1 else f"{seconds} seconds ago"
    if minutes < 60:
        return _plural(minutes, "minute")
    if hours < 24:
        return _plural(hours, "hour")
    if days < 7:
        return _plural(days, "day")
    if weeks < 4:
        return _plural(weeks, "week")
    if months < 12:
        return _plural(months, "month")
    return _plural(max(years, 1), "year")

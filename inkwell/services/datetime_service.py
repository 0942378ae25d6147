"""Date parsing: lax input -> calendar dates."""

from __future__ import annotations

from datetime import date, datetime

import pendulum

# Display format used on post cards: M/D/YYYY (no zero padding)
DISPLAY_FORMAT = "M/D/YYYY"


def parse_date(value: str | date | datetime, default_tz: str = "UTC") -> date:
    """Parse a lax date or datetime value into a calendar date.

    Accepts various formats:
    - 2024-01-15
    - 2024-01-15 10:30
    - 2024-01-15T10:30:00+02:00
    - date and datetime objects

    Datetimes with a timezone are converted to ``default_tz`` before the
    date is taken; naive ones are assumed to already be in ``default_tz``.
    Raises ``ValueError`` for strings that are not dates.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return pendulum.instance(value).in_timezone(default_tz).date()
        return value.date()
    if isinstance(value, date):
        return value

    value_str = value.strip()
    try:
        parsed = pendulum.parse(value_str, tz=default_tz, strict=False)
    except ValueError as exc:
        msg = f"Invalid date: {value_str!r}"
        raise ValueError(msg) from exc
    if isinstance(parsed, pendulum.DateTime):
        return parsed.in_timezone(default_tz).date()
    if isinstance(parsed, pendulum.Date):
        return date(parsed.year, parsed.month, parsed.day)
    msg = f"Invalid date: {value_str!r}"
    raise ValueError(msg)


def today(tz: str = "UTC") -> date:
    """Return the current calendar date in ``tz``."""
    now = pendulum.now(tz)
    return date(now.year, now.month, now.day)


def format_display_date(value: date) -> str:
    """Format a date the way post cards show it, e.g. ``1/15/2024``."""
    return pendulum.date(value.year, value.month, value.day).format(DISPLAY_FORMAT)


def format_iso_date(value: date) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return value.isoformat()

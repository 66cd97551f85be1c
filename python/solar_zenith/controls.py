"""Date and time selection for callers that take user text input.

Malformed input is rejected here with ValueError so that geometry functions
only ever see well-formed UTC instants.
"""

import logging
import re
from datetime import date as Date, datetime as DateTime, timedelta, timezone

from .geometry import to_utc

logger = logging.getLogger(__name__)

_DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
_TIME_PATTERN = re.compile(r"^([0-9]{1,2}):([0-9]{2})$")


def parse_date(text: str) -> Date:
    """Parse a 'YYYY-MM-DD' date."""
    text = text.strip()
    if _DATE_PATTERN.match(text) is None:
        logger.warning("rejected date input %r", text)
        raise ValueError(f"Invalid date {text!r}, expected YYYY-MM-DD")
    try:
        return DateTime.strptime(text, "%Y-%m-%d").date()
    except ValueError as exc:
        logger.warning("rejected date input %r", text)
        raise ValueError(f"Invalid date {text!r}, expected YYYY-MM-DD") from exc


def parse_time(text: str) -> tuple[int, int]:
    """Parse a 24-hour 'HH:MM' time into (hour, minute)."""
    match = _TIME_PATTERN.match(text.strip())
    if match is None:
        logger.warning("rejected time input %r", text)
        raise ValueError(f"Invalid time {text!r}, expected HH:MM")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        logger.warning("rejected time input %r", text)
        raise ValueError(f"Invalid time {text!r}, hour or minute out of range")
    return (hour, minute)


def combine(date_text: str, time_text: str) -> DateTime:
    """Build a UTC instant from date and time text."""
    d = parse_date(date_text)
    hour, minute = parse_time(time_text)
    return DateTime(d.year, d.month, d.day, hour, minute, tzinfo=timezone.utc)


def with_date(instant: DateTime, date_text: str) -> DateTime:
    """Move the selection to another date, keeping its time of day."""
    d = parse_date(date_text)
    utc = to_utc(instant)
    return utc.replace(year=d.year, month=d.month, day=d.day, tzinfo=timezone.utc)


def with_time(instant: DateTime, time_text: str) -> DateTime:
    """Move the selection to another time of day, keeping its date."""
    hour, minute = parse_time(time_text)
    utc = to_utc(instant)
    return utc.replace(hour=hour, minute=minute, second=0, microsecond=0, tzinfo=timezone.utc)


def shift_days(instant: DateTime, days: int) -> DateTime:
    """Step the selection forward (positive) or back (negative) by whole days."""
    return to_utc(instant) + timedelta(days=days)


def now() -> DateTime:
    """Current UTC instant truncated to the minute."""
    return DateTime.now(timezone.utc).replace(second=0, microsecond=0)


def format_date_value(instant: DateTime) -> str:
    utc = to_utc(instant)
    return f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"


def format_time_value(instant: DateTime) -> str:
    return f"{to_utc(instant):%H:%M}"

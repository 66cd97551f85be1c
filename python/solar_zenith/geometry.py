"""Subsolar point and zenith line for a UTC instant.

All angles in degrees and all times in UTC unless otherwise noted.
Naive datetimes are taken to already be in UTC.
"""

import logging
import math
from datetime import date as Date, datetime as DateTime, timedelta, timezone

from ._types import GeoPoint, SolarSnapshot

logger = logging.getLogger(__name__)

EARTH_AXIAL_TILT = 23.45
DEGREES_PER_HOUR = 15.0
ZENITH_LINE_STEP = 1


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (math.pi / 180.0)


def to_utc(instant: DateTime) -> DateTime:
    """Return the UTC view of an instant."""
    if instant.tzinfo is None:
        return instant
    return instant.astimezone(timezone.utc)


def utc_fields(instant: DateTime) -> tuple[int, int, int, int, int]:
    """Return (year, month, day, hour, minute) of the instant in UTC.

    An offset can carry an instant on the first or last day datetime
    supports into year 0 or year 10000; those dates are still reported.
    """
    offset = instant.utcoffset()
    if offset is None:
        return (instant.year, instant.month, instant.day, instant.hour, instant.minute)
    try:
        utc = instant.astimezone(timezone.utc)
    except OverflowError:
        return _carry_past_range(instant, offset)
    return (utc.year, utc.month, utc.day, utc.hour, utc.minute)


def _carry_past_range(instant: DateTime, offset: timedelta) -> tuple[int, int, int, int, int]:
    elapsed = (
        timedelta(
            hours=instant.hour,
            minutes=instant.minute,
            seconds=instant.second,
            microseconds=instant.microsecond,
        )
        - offset
    )
    # Offsets are under a day, so elapsed.days is -1, 0 or 1
    ordinal = instant.toordinal() + elapsed.days
    hour, minute = elapsed.seconds // 3600, elapsed.seconds % 3600 // 60
    if ordinal < 1:
        return (0, 12, 31, hour, minute)
    if ordinal > DateTime.max.toordinal():
        return (10000, 1, 1, hour, minute)
    d = Date.fromordinal(ordinal)
    return (d.year, d.month, d.day, hour, minute)


def leap_year(year: int) -> bool:
    """Returns True if year is a leap year."""
    return (year % 400 == 0) or (year % 4 == 0 and year % 100 != 0)


def days_in_months(year: int) -> list[int]:
    """Returns a list of days per month for the given year."""
    return [31, 29 if leap_year(year) else 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


def day_of_year(instant: DateTime) -> int:
    """Day of year (1-366) of the instant's UTC calendar date."""
    year, month, day, _, _ = utc_fields(instant)
    return sum(days_in_months(year)[: month - 1]) + day


def declination(instant: DateTime) -> float:
    """Solar declination in degrees.

    Ranges from -23.45 deg (December solstice) to +23.45 deg (June solstice).
    The year is always taken as 365 days long, leap years included.
    """
    n = day_of_year(instant)
    return EARTH_AXIAL_TILT * math.sin(deg_to_rad(360.0 * (284 + n) / 365.0))


def equation_of_time(instant: DateTime) -> float:
    """Equation of time in minutes for the instant's UTC date."""
    b = deg_to_rad((360.0 / 365.0) * (day_of_year(instant) - 81))
    return 9.87 * math.sin(2 * b) - 7.53 * math.cos(b) - 1.5 * math.sin(b)


def normalize_longitude(lng: float) -> float:
    """Normalize longitude to the (-180, 180] degree range."""
    normalized = ((lng + 180.0) % 360.0) - 180.0
    if normalized == -180.0:
        return 180.0
    return normalized


def solar_noon_longitude(instant: DateTime) -> float:
    """Longitude of the meridian where it is solar noon at the instant.

    The solar noon meridian sweeps west at 15 deg per hour; the equation of
    time moves true solar noon away from 12:00 UTC. Seconds are ignored.
    """
    _, _, _, hour, minute = utc_fields(instant)
    time_in_hours = hour + minute / 60.0
    solar_noon_hours = 12.0 + equation_of_time(instant) / 60.0
    return normalize_longitude((time_in_hours - solar_noon_hours) * DEGREES_PER_HOUR)


def subsolar_point(instant: DateTime) -> GeoPoint:
    """The point where the sun is at the zenith at the instant."""
    return GeoPoint(lat=declination(instant), lng=solar_noon_longitude(instant))


def zenith_line(instant: DateTime, step: int = ZENITH_LINE_STEP) -> tuple[GeoPoint, ...]:
    """Points at the declination latitude from -180 through 180 deg longitude.

    With the default step of 1 deg this is 361 points in ascending longitude.
    """
    if step <= 0 or 360 % step != 0:
        raise ValueError(f"step must be a positive divisor of 360, got {step}")
    lat = declination(instant)
    return tuple(GeoPoint(lat=lat, lng=float(lng)) for lng in range(-180, 181, step))


def get_solar_info(instant: DateTime) -> SolarSnapshot:
    """Compute the full solar snapshot for an instant."""
    snapshot = SolarSnapshot(
        declination=declination(instant),
        equation_of_time=equation_of_time(instant),
        subsolar_point=subsolar_point(instant),
        zenith_line=zenith_line(instant),
    )
    logger.debug(
        "solar snapshot for %04d-%02d-%02d %02d:%02d UTC: "
        "declination=%.4f eot=%.4f subsolar=(%.4f, %.4f)",
        *utc_fields(instant),
        snapshot.declination,
        snapshot.equation_of_time,
        snapshot.subsolar_point.lat,
        snapshot.subsolar_point.lng,
    )
    return snapshot

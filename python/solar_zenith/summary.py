"""Human-readable text for a solar snapshot.

Formats coordinates, declination and the season implied by the declination,
the same strings an info panel next to a globe or map shows.
"""

from datetime import datetime as DateTime

from ._types import GeoPoint, Season, SolarSnapshot
from .geometry import utc_fields

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

SOLSTICE_THRESHOLD = 20.0
EQUINOX_THRESHOLD = 2.0


def format_coordinate(value: float, is_latitude: bool) -> str:
    """Format a latitude or longitude as e.g. '23.44° N' or '71.88° W'."""
    if is_latitude:
        direction = "N" if value >= 0 else "S"
    else:
        direction = "E" if value >= 0 else "W"
    return f"{abs(value):.2f}° {direction}"


def format_point(point: GeoPoint) -> str:
    return f"{format_coordinate(point.lat, True)}, {format_coordinate(point.lng, False)}"


def format_declination(declination: float) -> str:
    if declination >= 0:
        return f"{declination:.2f}° North"
    return f"{abs(declination):.2f}° South"


def classify_season(declination: float) -> Season:
    """Classify the season from the declination, Northern Hemisphere naming."""
    if declination > SOLSTICE_THRESHOLD:
        return Season.SUMMER_SOLSTICE
    if declination < -SOLSTICE_THRESHOLD:
        return Season.WINTER_SOLSTICE
    if abs(declination) < EQUINOX_THRESHOLD:
        return Season.EQUINOX
    if declination > 0:
        return Season.SPRING_SUMMER
    return Season.AUTUMN_WINTER


def format_utc(instant: DateTime) -> str:
    """Format an instant as e.g. 'March 21, 2026, 12:00 UTC'."""
    year, month, day, hour, minute = utc_fields(instant)
    return f"{MONTH_NAMES[month - 1]} {day}, {year}, {hour:02d}:{minute:02d} UTC"


def describe(snapshot: SolarSnapshot, instant: DateTime) -> list[str]:
    """Lines of the info panel for a snapshot computed at instant."""
    return [
        f"Selected date: {format_utc(instant)}",
        f"Solar declination: {format_declination(snapshot.declination)}",
        f"Equation of time: {snapshot.equation_of_time:.2f} minutes",
        f"Subsolar point: {format_point(snapshot.subsolar_point)}",
        f"Season: {classify_season(snapshot.declination)}",
    ]

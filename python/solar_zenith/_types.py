"""Frozen dataclasses for all structured return types."""

from dataclasses import dataclass
from enum import StrEnum


class Season(StrEnum):
    """Season as read from the declination, named for the Northern Hemisphere."""

    SUMMER_SOLSTICE = "summer solstice"
    WINTER_SOLSTICE = "winter solstice"
    EQUINOX = "equinox"
    SPRING_SUMMER = "spring/summer"
    AUTUMN_WINTER = "autumn/winter"


@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lng: float


@dataclass(frozen=True)
class SolarSnapshot:
    declination: float
    equation_of_time: float
    subsolar_point: GeoPoint
    zenith_line: tuple[GeoPoint, ...]

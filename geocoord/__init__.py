"""Points on the Earth's surface and the facts derived from them.

geocoord models a latitude/longitude point with exact rational storage and
answers questions about it: great-circle distance and initial bearing to
another point, the destination reached by heading and distance, whether a
point lies within a radius, sunrise and sunset times, and conversion between
decimal degrees and degrees/minutes/seconds.

Package Components:
    Geographic Types (geocoord.geo):
        • Coordinate: Immutable point, exact Fraction latitude/longitude
        • HasCoordinate: Protocol for located objects usable as points
        • normalize_point: Point argument normalization

    DMS Conversion (geocoord.dms):
        • decimal_from_dms / decimal_to_dms with hemisphere letters

    Engines (geocoord.engines):
        • GeodeticEngine: pyproj great-circle solver on a sphere
        • SolarEngine: Almanac sunrise/sunset equation

    Measurements (geocoord.unit):
        • Kilometer, Meter, Mile, NauticalMile, Degree, Radian

    Configuration (geocoord.config):
        • GeoConfig: Distance units, Earth radius and solar zenith

Usage:
    >>> from datetime import date
    >>> from geocoord import Coordinate
    >>>
    >>> kyiv = Coordinate(50.45, 30.52)
    >>> kyiv.describe()
    '(50°27′0″N, 30°31′12″E)'
    >>> kyiv.sunrise(date(2016, 3, 31)) < kyiv.sunset(date(2016, 3, 31))
    True
"""

import logging

from .config import GeoConfig
from .dms import decimal_from_dms, decimal_to_dms
from .engines import GeodeticEngine, SolarEngine
from .errors import GeoError, ParseError
from .geo import Coordinate, HasCoordinate, normalize_point
from .links import map_links

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Coordinate",
    "HasCoordinate",
    "normalize_point",
    "decimal_from_dms",
    "decimal_to_dms",
    "GeodeticEngine",
    "SolarEngine",
    "GeoConfig",
    "GeoError",
    "ParseError",
    "map_links",
]

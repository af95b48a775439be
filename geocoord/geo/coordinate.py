"""The ``Coordinate`` value type and point normalization."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from fractions import Fraction
from typing import Union

from ..dms import (
    LATITUDE_HEMISPHERES,
    LONGITUDE_HEMISPHERES,
    DMSTuple,
    decimal_from_dms,
    decimal_to_dms,
    format_dms,
    to_fraction,
)
from ..engines import GeodeticEngine, SolarEngine, default_geodetic_engine, default_solar_engine
from ..links import map_links
from ..unit import Degree, UnitFloat
from .protocols import HasCoordinate

logger = logging.getLogger(__name__)

PointLike = Union["Coordinate", HasCoordinate]


@dataclass(frozen=True, repr=False)
class Coordinate:
    """A point on the Earth's surface.

    Latitude and longitude are stored as exact ``Fraction`` degrees. Decimal
    and DMS renderings are derived from them on demand, so any number of
    conversions in either direction never accumulates rounding error. Ranges
    are not enforced.

    Instances are immutable and hashable; two coordinates are equal only when
    both exact components are equal.

    Geometry is delegated to a :class:`GeodeticEngine` and sunrise/sunset to a
    :class:`SolarEngine`. Each operation takes an optional ``engine`` keyword;
    without it the shared default engines (kilometres, spherical Earth of mean
    radius) are used.

    Attributes:
        lat (Fraction): Latitude in degrees, positive north.
        lng (Fraction): Longitude in degrees, positive east.

    Example:
        >>> kyiv = Coordinate(50.45, 30.52)
        >>> kyiv
        Coordinate(50°27′0″N, 30°31′12″E)
        >>> kyiv == Coordinate.from_dms([50, 27, 0, "N"], [30, 31, 12, "E"])
        True
        >>> kyiv.endpoint(90, 100).lat < kyiv.lat
        True
    """

    lat: Fraction
    lng: Fraction

    def __post_init__(self):
        object.__setattr__(self, "lat", to_fraction(self.lat))
        object.__setattr__(self, "lng", to_fraction(self.lng))

    @classmethod
    def from_dms(cls, lat: DMSTuple | list, lng: DMSTuple | list) -> Coordinate:
        """Create a Coordinate from two DMS tuples.

        Args:
            lat: e.g. ``[50, 27, 0, "N"]`` or ``[-33, 52, 4]``.
            lng: e.g. ``[30, 31, 24, "E"]``.

        Raises:
            ParseError: If a hemisphere letter is not one of N, S, E, W.
        """
        return cls(decimal_from_dms(lat), decimal_from_dms(lng))

    @property
    def latitude(self) -> Fraction:
        return self.lat

    @property
    def longitude(self) -> Fraction:
        return self.lng

    # -------------------------------- Geometry --------------------------------
    def distance_to(self, point: PointLike, *, engine: GeodeticEngine | None = None) -> UnitFloat:
        """Great-circle distance to ``point``, in the engine's units (km by default).

        Args:
            point: A Coordinate or any object implementing ``HasCoordinate``.
        """
        engine = engine or default_geodetic_engine
        return engine.distance(self.to_canonical_string(), normalize_point(point).to_canonical_string())

    def direction_to(self, point: PointLike, *, engine: GeodeticEngine | None = None) -> Degree:
        """Initial compass bearing towards ``point``, in ``[0, 360)`` degrees."""
        engine = engine or default_geodetic_engine
        return engine.bearing(self.to_canonical_string(), normalize_point(point).to_canonical_string())

    def endpoint(self, direction, distance, *, engine: GeodeticEngine | None = None) -> Coordinate:
        """Point reached by travelling ``distance`` along the initial bearing ``direction``.

        Args:
            direction: Degrees clockwise from north, e.g. ``90`` means east.
            distance: In the engine's units (km by default), or a length unit
                such as ``Meter(500)``.

        Returns:
            Coordinate: A new point; this one is unchanged.
        """
        engine = engine or default_geodetic_engine
        lat, lng = engine.destination(self.to_canonical_string(), direction, distance)
        return Coordinate(lat, lng)

    def close_to(self, point: PointLike, radius, *, engine: GeodeticEngine | None = None) -> bool:
        """True if ``point`` is within ``radius`` (engine units or a length unit)."""
        engine = engine or default_geodetic_engine
        return engine.contains(self.to_canonical_string(), radius, normalize_point(point).to_canonical_string())

    # -------------------------------- Sun --------------------------------
    def sunrise(self, on: date | datetime | None = None, *, engine: SolarEngine | None = None) -> datetime | None:
        """UTC sunrise on ``on`` (engine's today if omitted), or None during polar day/night."""
        engine = engine or default_solar_engine
        return engine.sunrise(on, float(self.lat), float(self.lng))

    def sunset(self, on: date | datetime | None = None, *, engine: SolarEngine | None = None) -> datetime | None:
        """UTC sunset on ``on`` (engine's today if omitted), or None during polar day/night."""
        engine = engine or default_solar_engine
        return engine.sunset(on, float(self.lat), float(self.lng))

    # -------------------------------- Rendering --------------------------------
    def lat_dms(self, direction: bool = True) -> DMSTuple:
        """Latitude as ``(d, m, s, "N"|"S")``, or signed ``(d, m, s)`` without direction."""
        return decimal_to_dms(self.lat, direction, LATITUDE_HEMISPHERES)

    def lng_dms(self, direction: bool = True) -> DMSTuple:
        """Longitude as ``(d, m, s, "E"|"W")``, or signed ``(d, m, s)`` without direction."""
        return decimal_to_dms(self.lng, direction, LONGITUDE_HEMISPHERES)

    def to_canonical_string(self) -> str:
        """``"lat,lng"`` in decimal degrees; the form handed to the geodetic engine."""
        return f"{float(self.lat)},{float(self.lng)}"

    @property
    def latlng(self) -> str:
        return self.to_canonical_string()

    def to_mapping(self) -> dict[str, float]:
        return {"lat": float(self.lat), "lng": float(self.lng)}

    def describe(self) -> str:
        """Human-readable DMS form, e.g. ``(33°0′0″N, 90°0′0″W)``."""
        return f"({format_dms(self.lat_dms())}, {format_dms(self.lng_dms())})"

    def links(self) -> dict[str, str]:
        """Map viewer URLs with this point marked; see :func:`geocoord.links.map_links`."""
        return map_links(self)

    def __str__(self) -> str:
        return self.to_canonical_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self.describe()}"


def normalize_point(point: PointLike) -> Coordinate:
    """Reduce a point argument to a ``Coordinate``.

    A Coordinate is returned unchanged; an object implementing
    ``HasCoordinate`` is asked for its ``coord()``.

    Raises:
        TypeError: For anything else, or when ``coord()`` does not return a
            Coordinate.
    """
    if isinstance(point, Coordinate):
        return point
    if isinstance(point, HasCoordinate):
        coord = point.coord()
        if not isinstance(coord, Coordinate):
            raise TypeError(
                f"{type(point).__name__}.coord() returned {type(coord).__name__}, expected Coordinate"
            )
        return coord
    logger.debug("Rejected point argument of type %s", type(point).__name__)
    raise TypeError(f"not a coordinate-like value: {point!r}")

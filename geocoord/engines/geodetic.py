"""Great-circle geometry on a spherical Earth.

The engine speaks canonical ``"lat,lng"`` strings, the form every
``Coordinate`` renders itself to, and answers with unit-typed values. The
geodesic solver is ``pyproj.Geod`` built on a sphere of the configured radius,
so distances and bearings are exact great-circle values rather than WGS84
ellipsoid ones.

Example:
    >>> engine = GeodeticEngine()
    >>> round(engine.distance("0.0,0.0", "0.0,1.0").value, 1)
    111.2
    >>> engine.bearing("0.0,0.0", "0.0,10.0").value
    90.0
"""

from __future__ import annotations

import logging

from pyproj import Geod

from ..config import GeoConfig
from ..errors import ParseError
from ..unit import Degree, Meter, Unit, UnitFloat

logger = logging.getLogger(__name__)


class GeodeticEngine:
    """Distance, bearing, destination and containment between canonical points.

    Args:
        config: Units for returned distances and the sphere radius. Defaults to
            ``GeoConfig()`` (kilometres, IUGG mean radius).
    """

    __slots__ = ("config", "_geod")

    def __init__(self, config: GeoConfig | None = None):
        self.config = config or GeoConfig()
        radius_m = float(self.config.earth_radius)
        self._geod = Geod(a=radius_m, f=0.0)
        logger.debug(
            "Geodetic engine on sphere r=%s, distances in %s",
            self.config.earth_radius,
            self.config.units.SYMBOL,
        )

    def __repr__(self) -> str:
        return f"GeodeticEngine(units={self.config.units.__name__}, earth_radius={self.config.earth_radius})"

    @staticmethod
    def parse_point(point: str) -> tuple[float, float]:
        """Parse a canonical ``"lat,lng"`` string into floats.

        Raises:
            ParseError: If the string does not hold exactly two numbers.
        """
        try:
            lat_text, lng_text = point.split(",")
            return float(lat_text), float(lng_text)
        except (AttributeError, ValueError):
            raise ParseError(f"not a canonical lat,lng point: {point!r}") from None

    def to_meters(self, distance) -> float:
        """Convert a distance to meters.

        Plain numbers are read in the configured units; length units convert
        themselves.

        Raises:
            TypeError: If ``distance`` is a unit of another family.
        """
        if isinstance(distance, Unit):
            Meter._check_same_root(type(distance))
            return float(distance)
        return float(distance) * self.config.units.SCALE_TO_SI

    def _inverse(self, a: str, b: str) -> tuple[float, float]:
        lat1, lng1 = self.parse_point(a)
        lat2, lng2 = self.parse_point(b)
        azimuth, _back_azimuth, meters = self._geod.inv(lng1, lat1, lng2, lat2)
        return azimuth, meters

    def distance(self, a: str, b: str) -> UnitFloat:
        """Great-circle distance from ``a`` to ``b`` in the configured units."""
        _azimuth, meters = self._inverse(a, b)
        return self.config.units.from_si(meters)

    def bearing(self, a: str, b: str) -> Degree:
        """Initial bearing of the great-circle path from ``a`` to ``b``, in ``[0, 360)``."""
        azimuth, _meters = self._inverse(a, b)
        return Degree(azimuth).normalized()

    def destination(self, origin: str, bearing, distance) -> tuple[float, float]:
        """Point reached from ``origin`` along ``bearing`` after ``distance``.

        Args:
            origin: Canonical start point.
            bearing: Degrees clockwise from north, or an angle unit.
            distance: Configured units, or a length unit.

        Returns:
            ``(lat, lng)`` in decimal degrees, longitude within ``[-180, 180]``.
        """
        lat, lng = self.parse_point(origin)
        azimuth = bearing.to(Degree) if isinstance(bearing, Unit) else float(bearing)
        lng2, lat2, _back_azimuth = self._geod.fwd(lng, lat, azimuth, self.to_meters(distance))
        if not -180.0 <= lng2 <= 180.0:
            lng2 = (lng2 + 180.0) % 360.0 - 180.0
        return lat2, lng2

    def contains(self, center: str, radius, point: str) -> bool:
        """True iff ``point`` lies within ``radius`` of ``center`` (boundary included)."""
        _azimuth, meters = self._inverse(center, point)
        return meters <= self.to_meters(radius)

"""Geographic coordinate value type.

Components:
    Coordinate: Immutable latitude/longitude point with exact storage
    HasCoordinate: Protocol for located objects accepted wherever a point is
    normalize_point: Reduces a Coordinate or HasCoordinate to a Coordinate

Typical Usage:
    >>> from geocoord.geo import Coordinate
    >>> from geocoord.unit import Kilometer
    >>>
    >>> kyiv = Coordinate(50.45, 30.52)
    >>> london = Coordinate.from_dms([51, 30, 26, "N"], [0, 7, 39, "W"])
    >>> kyiv.distance_to(london).to(Kilometer) > 2000
    True
    >>> kyiv.close_to(london, Kilometer(100))
    False
"""

from .coordinate import Coordinate, PointLike, normalize_point
from .protocols import HasCoordinate

__all__ = ["Coordinate", "HasCoordinate", "PointLike", "normalize_point"]

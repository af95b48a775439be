"""Capability interface for objects that have a location."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .coordinate import Coordinate


@runtime_checkable
class HasCoordinate(Protocol):
    """Anything located on the Earth's surface: a city, a station, a vehicle.

    Implementers return their position from ``coord()``; every ``Coordinate``
    operation that takes a point accepts such objects in place of a
    ``Coordinate``.

    Example:
        >>> class City:
        ...     def __init__(self, name, lat, lng):
        ...         self.name = name
        ...         self._coord = Coordinate(lat, lng)
        ...     def coord(self):
        ...         return self._coord
        >>> isinstance(City("Kyiv", 50.45, 30.52), HasCoordinate)
        True
    """

    def coord(self) -> Coordinate: ...

"""Computation engines behind ``Coordinate``.

Exports:
    GeodeticEngine: Great-circle distance, bearing, destination, containment
    SolarEngine: Sunrise and sunset instants
    SolarEvent: Rise/set selector for ``SolarEngine.calculate``
    default_geodetic_engine / default_solar_engine: Shared engines built from
        ``GeoConfig()``, used when a caller does not pass one explicitly
"""

from .geodetic import GeodeticEngine
from .solar import SolarEngine, SolarEvent

default_geodetic_engine = GeodeticEngine()
default_solar_engine = SolarEngine()

__all__ = [
    "GeodeticEngine",
    "SolarEngine",
    "SolarEvent",
    "default_geodetic_engine",
    "default_solar_engine",
]

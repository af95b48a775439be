"""Distance units for great-circle measurements.

All distance measurements are internally stored in meters (the SI base unit)
while supporting input and display in the scales a geodetic engine may be
configured with.

Classes:
    Meter: Base distance unit in meters (SI unit).
    Kilometer: 1000 meters; the default unit of ``GeoConfig``.
    Mile: International statute mile (1609.344 meters).
    NauticalMile: International nautical mile (1852 meters).

Type Aliases:
    Length: Union type for all distance units.

Example:
    >>> flight_range = Kilometer(25.5)
    >>> print(flight_range)  # "25.5 km"
    >>> print(float(flight_range))  # 25500.0 (meters in SI)
    >>> round(flight_range.to(Mile), 3)
    15.845
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Distance unit: Meter (SI base unit for length)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Distance unit: Kilometer (1000 meters).

    Example:
        >>> mission_range = Kilometer(50.2)
        >>> print(mission_range)  # "50.2 km"
        >>> print(float(mission_range))  # 50200.0 (meters)
    """

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


class Mile(Meter):
    """Distance unit: international statute mile."""

    SCALE_TO_SI = 1609.344
    SYMBOL = "mi"


class NauticalMile(Meter):
    """Distance unit: international nautical mile, one arcminute of latitude."""

    SCALE_TO_SI = 1852.0
    SYMBOL = "nmi"


Length = Meter | Kilometer | Mile | NauticalMile

UNITS_BY_SYMBOL: dict[str, type[Meter]] = {
    unit.SYMBOL: unit for unit in (Meter, Kilometer, Mile, NauticalMile)
}

"""Type-safe measurements returned by coordinate operations.

Every geometry operation wraps its numeric result in a unit: distances are
length units (``Kilometer`` unless the geodetic engine is configured
otherwise) and bearings are ``Degree``. Units store their SI value and remember
their native scale and symbol.

Modules:
    - unit_base: Foundation Unit class with family management system
    - unit_float: Float-based units with automatic SI conversion
    - unit_angle: Angular units (Radian, Degree) for bearings
    - unit_distance: Distance units (Meter, Kilometer, Mile, NauticalMile)

Unit Families:
    - Angle Family: Radian (root), Degree
    - Distance Family: Meter (root), Kilometer, Mile, NauticalMile

Example:
    >>> from geocoord.unit import Kilometer, Meter, Degree
    >>>
    >>> radius = Kilometer(5.2)
    >>> total = radius + Meter(150)  # both distances
    >>> print(total)  # "5.35 km"
    >>>
    >>> # Cross-family operations are rejected
    >>> # Degree(45) + radius  -> TypeError
"""

from .unit_angle import Angle, Degree, Radian
from .unit_base import Unit
from .unit_distance import UNITS_BY_SYMBOL, Kilometer, Length, Meter, Mile, NauticalMile
from .unit_float import UnitFloat

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Radian",
    "Degree",
    "Angle",
    # Distance units
    "Meter",
    "Kilometer",
    "Mile",
    "NauticalMile",
    "Length",
    "UNITS_BY_SYMBOL",
]

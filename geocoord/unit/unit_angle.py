"""Angular units for bearings and headings.

All angular measurements are internally stored in radians (the SI base unit)
while supporting input and display in degrees. Bearings returned by
``Coordinate.direction_to`` are ``Degree`` instances.

Classes:
    Radian: Base angular unit in radians (SI unit).
    Degree: Angular unit in degrees with automatic radian conversion.

Type Aliases:
    Angle: Union type for all angular units (Radian | Degree).

Example:
    >>> heading = Degree(45)  # 45 degrees
    >>> print(heading)  # "45.0 °"
    >>> print(float(heading))  # 0.7854 (radians in SI)
    >>> heading.value
    45.0
"""

from __future__ import annotations

from math import pi

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angular unit: Radian (SI base unit for angles).

    Attributes:
        IS_FAMILY_ROOT (bool): True, indicating this is the root angular unit.
        SCALE_TO_SI (float): 1.0, no conversion needed for SI base unit.
        SYMBOL (str): "rad", the standard symbol for radians.
    """

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"


class Degree(Radian):
    """Angular unit: Degree (1/360 of a full rotation).

    Example:
        >>> bearing = Degree(90)  # due east
        >>> print(bearing)  # "90.0 °"
        >>> print(bearing.to(Radian))  # 1.5708
    """

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"

    def normalized(self) -> Degree:
        """Return the equivalent compass heading in ``[0, 360)`` degrees."""
        heading = self.value % 360.0
        # -1e-17 % 360.0 rounds up to exactly 360.0
        if heading >= 360.0:
            heading = 0.0
        return Degree(heading)


Angle = Radian | Degree  # Type alias for any angle unit

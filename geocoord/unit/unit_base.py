"""Base class for the measurement types returned by coordinate operations.

Every measurement produced by ``geocoord`` (a distance, a bearing, an Earth
radius) belongs to a unit *family*. Units inside one family (Meter and
Kilometer, Radian and Degree) convert into each other and can be combined;
units from different families cannot.

Key Concepts:
- ROOT Class: Each unit family has a root class that defines the family
- IS_FAMILY_ROOT: Boolean flag marking the base unit of each family
- Automatic Assignment: ROOT classes are determined automatically via MRO

Example:
    >>> class Length(Unit):
    ...     IS_FAMILY_ROOT = True  # This becomes the ROOT for length units
    >>> class Meter(Length):
    ...     pass  # Automatically gets ROOT = Length
    >>> # Meter and any other Length subclass share a ROOT
"""

from __future__ import annotations

from typing import ClassVar


class Unit:
    """Base class for all unit types.

    Concrete unit classes inherit from UnitFloat rather than directly from
    this class.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Set ROOT to the nearest ancestor flagged IS_FAMILY_ROOT."""
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def same_family(cls, unit_type: type[Unit]) -> bool:
        """Return True if ``unit_type`` measures the same quantity as this class."""
        return isinstance(unit_type, type) and getattr(unit_type, "ROOT", None) is cls.ROOT

    @classmethod
    def _check_same_root(cls, unit_type: type[Unit]):
        """Check if two unit types belong to the same physical quantity family.

        Args:
            unit_type: The other unit type to check compatibility with.

        Raises:
            TypeError: If the units belong to different physical quantity families.
        """
        if not cls.same_family(unit_type):
            msg = f"incompatible units: {cls.ROOT.__name__} and {getattr(unit_type, '__name__', unit_type)}"
            raise TypeError(msg)

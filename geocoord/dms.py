"""Degrees/minutes/seconds conversion.

Coordinates are kept as exact ``Fraction`` values, so converting to DMS and
back never drifts. A DMS tuple is ``(degrees, minutes, seconds)`` or
``(degrees, minutes, seconds, hemisphere)`` where hemisphere is one of
``N``, ``S``, ``E``, ``W``.

Example:
    >>> decimal_from_dms([50, 27, 0, "N"])
    Fraction(1009, 20)
    >>> decimal_to_dms(Fraction(-611, 20), with_direction=True, hemispheres=("E", "W"))
    (30, 33, 0.0, 'W')
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from decimal import Decimal
from fractions import Fraction
from numbers import Rational, Real

from .errors import ParseError

DIRECTIONS = {
    "N": +1,
    "S": -1,
    "E": +1,
    "W": -1,
}

LATITUDE_HEMISPHERES = ("N", "S")
LONGITUDE_HEMISPHERES = ("E", "W")

DMSTuple = tuple[int, int, float] | tuple[int, int, float, str]


def to_fraction(value) -> Fraction:
    """Convert a number to an exact ``Fraction``.

    Floats go through their shortest ``repr`` so that ``50.45`` becomes
    ``1009/20`` rather than the nearest binary fraction. The plain float
    ``repr`` is used, so float subclasses such as ``numpy.float64`` convert
    the same way. Integers, decimals,
    rationals and numeric strings convert exactly.

    Raises:
        TypeError: If ``value`` is not a number or numeric string.
        ValueError: If ``value`` is NaN, infinite or an unparseable string.
    """
    if isinstance(value, bool):
        raise TypeError(f"expected a number, got {value!r}")
    if isinstance(value, Fraction):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"coordinate component must be finite, got {value!r}")
        return Fraction(float.__repr__(value))
    if isinstance(value, (int, Decimal, str)):
        return Fraction(value)
    if isinstance(value, Rational):
        return Fraction(value.numerator, value.denominator)
    if isinstance(value, Real):
        return to_fraction(float(value))
    raise TypeError(f"expected a number, got {type(value).__name__}")


def parse_direction(letter: str) -> int:
    """Return the sign (+1 or -1) for a hemisphere letter.

    Raises:
        ParseError: If ``letter`` is not one of N, S, E, W.
    """
    try:
        return DIRECTIONS[letter]
    except KeyError:
        raise ParseError(f"Undefined coordinates direction: {letter!r}") from None


def decimal_from_dms(parts: Sequence) -> Fraction:
    """Convert a DMS tuple to exact decimal degrees.

    When the last element is a string it is taken as the hemisphere letter and
    decides the sign. Without a letter the sign of the degrees component is
    used, zero counting as positive. Only the degrees are truncated to an
    integer; minutes and seconds keep their fractional parts.

    Args:
        parts: ``[d]``, ``[d, m]``, ``[d, m, s]``, optionally followed by a
            hemisphere letter. The sequence itself is left untouched.

    Raises:
        ParseError: On an unknown hemisphere letter or a tuple with no
            numeric components or more than three of them.
    """
    components = list(parts)
    if components and isinstance(components[-1], str):
        sign = parse_direction(components.pop())
    else:
        sign = None

    if not components:
        raise ParseError(f"DMS value has no degrees component: {parts!r}")
    if len(components) > 3:
        raise ParseError(f"DMS value has too many components: {parts!r}")

    degrees, minutes, seconds = (components + [0, 0])[:3]
    degrees = to_fraction(degrees)
    if sign is None:
        sign = -1 if degrees < 0 else +1

    return sign * (abs(int(degrees)) + to_fraction(minutes) / 60 + to_fraction(seconds) / 3600)


def decimal_to_dms(
    value,
    with_direction: bool = False,
    hemispheres: tuple[str, str] = LATITUDE_HEMISPHERES,
) -> DMSTuple:
    """Split decimal degrees into degrees, minutes and seconds.

    Args:
        value: Decimal degrees; converted exactly with :func:`to_fraction`.
        with_direction: Emit unsigned degrees plus a hemisphere letter instead
            of signed degrees.
        hemispheres: ``(positive, negative)`` letters, ``("N", "S")`` for
            latitude and ``("E", "W")`` for longitude.

    Returns:
        ``(d, m, s)`` or ``(|d|, m, s, letter)``. Seconds are a float.
    """
    value = to_fraction(value)
    degrees = int(value)
    frac_seconds = (abs(value) % 1) * 3600
    minutes = int(frac_seconds // 60)
    seconds = float(frac_seconds % 60)

    if with_direction:
        positive, negative = hemispheres
        # sign of the value, not of the truncated degrees: -0.5 lies south
        return abs(degrees), minutes, seconds, positive if value >= 0 else negative
    return degrees, minutes, seconds


def format_dms(parts: DMSTuple) -> str:
    """Render a directed DMS tuple as ``D°M′S″H`` with whole seconds.

    Seconds are rounded with ``%.0f`` and do not carry into the minutes, so
    ``(59, 59, 59.9999, "N")`` renders as ``59°59′60″N``.
    """
    return "%i°%i′%.0f″%s" % tuple(parts)

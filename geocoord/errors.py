"""Exceptions raised by geocoord."""


class GeoError(Exception):
    """Base class for all geocoord errors."""


class ParseError(GeoError, ValueError):
    """Raised when coordinate input cannot be interpreted.

    Covers unknown hemisphere letters in DMS tuples, empty DMS tuples and
    malformed canonical ``"lat,lng"`` strings.
    """

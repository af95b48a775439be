"""Links to public map viewers with a point marked."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .geo import Coordinate

EXTERNAL_LINKS = {
    "osm": "https://www.openstreetmap.org/?mlat={lat}&mlon={lng}&zoom=12&layers=M",
    "google": "https://maps.google.com/maps?ll={latlng}&q={latlng}&hl=en&t=m&z=12",
    "wikimapia": "http://wikimapia.org/#lang=en&lat={lat}&lon={lng}&z=12&m=w",
}


def map_links(coord: Coordinate) -> dict[str, str]:
    """Return ``{provider: url}`` for OpenStreetMap, Google Maps and Wikimapia.

    Example:
        >>> map_links(Coordinate(50.45, 30.52))["osm"]
        'https://www.openstreetmap.org/?mlat=50.45&mlon=30.52&zoom=12&layers=M'
    """
    params = {
        "lat": float(coord.lat),
        "lng": float(coord.lng),
        "latlng": coord.to_canonical_string(),
    }
    return {provider: pattern.format(**params) for provider, pattern in EXTERNAL_LINKS.items()}

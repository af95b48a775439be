"""Configuration shared by the geodetic and solar engines.

``GeoConfig`` is handed to an engine at construction time. There is no
process-wide default unit setting: code that wants miles builds an engine with
``GeoConfig(units=Mile)`` and passes it where it is needed.

Example:
    >>> from geocoord.config import GeoConfig
    >>> from geocoord.unit import Mile
    >>> config = GeoConfig(units=Mile)
    >>> config.units.SYMBOL
    'mi'
"""

from dataclasses import dataclass, field

from .unit import Kilometer, Meter, UnitFloat

# IUGG mean Earth radius R1 = (2a + b) / 3
MEAN_EARTH_RADIUS_KM = 6371.0088

# Official sunrise/sunset: 90° plus refraction and solar semi-diameter
OFFICIAL_ZENITH = 90.83333


@dataclass(frozen=True)
class GeoConfig:
    """Settings for geodetic and solar calculations."""

    units: type[UnitFloat] = Kilometer
    earth_radius: UnitFloat = field(default_factory=lambda: Kilometer(MEAN_EARTH_RADIUS_KM))
    zenith: float = OFFICIAL_ZENITH

    def __post_init__(self):
        Meter._check_same_root(self.units)
        Meter._check_same_root(type(self.earth_radius))
        if float(self.earth_radius) <= 0:
            raise ValueError(f"earth_radius must be positive, got {self.earth_radius}")

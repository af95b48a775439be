"""Sunrise and sunset times.

Implements the sunrise equation from the *Almanac for Computers* (U.S. Naval
Observatory, 1990), accurate to about a minute for latitudes outside the
polar circles. Results are timezone-aware UTC datetimes, or ``None`` when the
sun stays above or below the horizon for the whole day.

Example:
    >>> engine = SolarEngine()
    >>> engine.sunrise(date(2016, 3, 31), 50.45, 30.52).strftime("%H:%M")
    '03:35'
    >>> engine.sunset(date(2016, 12, 21), 78.22, 15.65) is None
    True
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from datetime import date, datetime, timedelta, timezone
from enum import Enum

from ..config import GeoConfig

logger = logging.getLogger(__name__)

DEGREES_PER_HOUR = 360.0 / 24.0


class SolarEvent(Enum):
    RISE = "rise"
    SET = "set"


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def _sin(degrees: float) -> float:
    return math.sin(math.radians(degrees))


def _wrap_degrees(degrees: float) -> float:
    return degrees % 360.0


class SolarEngine:
    """Computes sunrise/sunset instants for a calendar date and location.

    Args:
        config: Supplies the solar zenith that defines rise/set.
        today: Returns the date used when a caller passes ``on=None``.
            Defaults to the current UTC date.
    """

    __slots__ = ("config", "today")

    def __init__(self, config: GeoConfig | None = None, today: Callable[[], date] = _utc_today):
        self.config = config or GeoConfig()
        self.today = today
        logger.debug("Solar engine with zenith %.5f°", self.config.zenith)

    def __repr__(self) -> str:
        return f"SolarEngine(zenith={self.config.zenith})"

    def sunrise(self, on: date | datetime | None, lat: float, lng: float) -> datetime | None:
        """UTC instant of sunrise on ``on`` at (lat, lng), or None if the sun does not rise."""
        return self.calculate(SolarEvent.RISE, on, lat, lng)

    def sunset(self, on: date | datetime | None, lat: float, lng: float) -> datetime | None:
        """UTC instant of sunset on ``on`` at (lat, lng), or None if the sun does not set."""
        return self.calculate(SolarEvent.SET, on, lat, lng)

    def calculate(
        self, event: SolarEvent, on: date | datetime | None, lat: float, lng: float
    ) -> datetime | None:
        """Compute a rise or set event.

        The event is the one belonging to the local solar day of ``on`` at
        ``lng``; east or west of Greenwich its UTC instant may fall on the
        previous or next UTC date.
        """
        if on is None:
            on = self.today()
        day = on.date() if isinstance(on, datetime) else on

        utc_hours = self._event_hours(event, day, float(lat), float(lng))
        if utc_hours is None:
            logger.debug("No sun%s on %s at %s,%s", event.value, day, lat, lng)
            return None

        midnight = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
        return midnight + timedelta(hours=utc_hours)

    def _event_hours(self, event: SolarEvent, day: date, lat: float, lng: float) -> float | None:
        """Hours after UTC midnight of ``day`` at which ``event`` happens, possibly outside 0-24."""
        longitude_hour = lng / DEGREES_PER_HOUR

        base_time = 6.0 if event is SolarEvent.RISE else 18.0
        approximate_time = day.timetuple().tm_yday + (base_time - longitude_hour) / 24.0

        mean_anomaly = 0.9856 * approximate_time - 3.289

        true_longitude = _wrap_degrees(
            mean_anomaly
            + 1.916 * _sin(mean_anomaly)
            + 0.020 * _sin(2 * mean_anomaly)
            + 282.634
        )

        right_ascension = _wrap_degrees(
            math.degrees(math.atan(0.91764 * math.tan(math.radians(true_longitude))))
        )
        # right ascension must sit in the same quadrant as the true longitude
        right_ascension += math.floor(true_longitude / 90.0) * 90.0 - math.floor(right_ascension / 90.0) * 90.0
        right_ascension_hours = right_ascension / DEGREES_PER_HOUR

        sin_declination = 0.39782 * _sin(true_longitude)
        cos_declination = math.cos(math.asin(sin_declination))

        cos_local_hour_angle = (
            math.cos(math.radians(self.config.zenith)) - sin_declination * _sin(lat)
        ) / (cos_declination * math.cos(math.radians(lat)))

        # > 1: the sun never rises; < -1: the sun never sets
        if not -1.0 <= cos_local_hour_angle <= 1.0:
            return None

        local_hour_angle = math.degrees(math.acos(cos_local_hour_angle))
        if event is SolarEvent.RISE:
            local_hour_angle = 360.0 - local_hour_angle

        local_mean_time = (
            local_hour_angle / DEGREES_PER_HOUR
            + right_ascension_hours
            - 0.06571 * approximate_time
            - 6.622
        ) % 24.0
        return local_mean_time - longitude_hour

"""
Sun and Moon ephemeris collaborators for cosmic_core.

The snapshot API consumes Sun/Moon directions through the SunMoonEphemeris
protocol. Implementations report azimuth in the south-referenced convention
(0 = South, positive toward West, range (-π, π]); the core converts to its
north-referenced convention by adding π (to_north_referenced).

SkyfieldEphemeris is the default source: apparent topocentric positions from
the JPL kernel configured through cosmic_core.state (DE421 unless changed
with set_ephemeris_file()). The kernel is loaded on first use, not when the
ephemeris object is created.
"""

from datetime import datetime
from typing import Protocol

from skyfield.api import wgs84

from .constants import SOUTH_TO_NORTH_AZIMUTH_OFFSET
from .models import HorizonDirection
from .state import get_planets, get_timescale
from .time_utils import to_utc
from .utils import normalize_radians, normalize_signed_radians


class SunMoonEphemeris(Protocol):
    """Source of south-referenced Sun/Moon horizon positions."""

    def position_of_sun(self, instant: datetime, lat: float, lon: float) -> HorizonDirection:
        ...

    def position_of_moon(self, instant: datetime, lat: float, lon: float) -> HorizonDirection:
        ...


def to_north_referenced(direction: HorizonDirection) -> HorizonDirection:
    """South-referenced azimuth -> north-referenced azimuth in [0, 2π)."""
    return HorizonDirection(
        normalize_radians(direction.azimuth_rad + SOUTH_TO_NORTH_AZIMUTH_OFFSET),
        direction.altitude_rad,
    )


def to_south_referenced(direction: HorizonDirection) -> HorizonDirection:
    """North-referenced azimuth -> south-referenced azimuth in (-π, π]."""
    return HorizonDirection(
        normalize_signed_radians(direction.azimuth_rad - SOUTH_TO_NORTH_AZIMUTH_OFFSET),
        direction.altitude_rad,
    )


class SkyfieldEphemeris:
    """
    Apparent topocentric Sun/Moon positions from a JPL kernel.

    Uses the kernel configured via set_ephemeris_file()/set_ephe_path()
    (DE421 by default, downloaded on first use if not found locally).
    No atmospheric refraction is applied.
    """

    SUN = "sun"
    MOON = "moon"

    def _position(self, body: str, instant: datetime, lat: float, lon: float) -> HorizonDirection:
        planets = get_planets()
        t = get_timescale().from_datetime(to_utc(instant))

        observer = planets["earth"] + wgs84.latlon(latitude_degrees=lat, longitude_degrees=lon)
        alt, az, _ = observer.at(t).observe(planets[body]).apparent().altaz()

        return to_south_referenced(HorizonDirection(az.radians, alt.radians))

    def position_of_sun(self, instant: datetime, lat: float, lon: float) -> HorizonDirection:
        return self._position(self.SUN, instant, lat, lon)

    def position_of_moon(self, instant: datetime, lat: float, lon: float) -> HorizonDirection:
        return self._position(self.MOON, instant, lat, lon)

"""
Stellar position calculations for cosmic_core.

Converts a fixed equatorial target (RA/Dec) into the observer's horizon
frame at a given instant. This is the single reusable primitive for
"where in the sky is fixed point X right now"; the galactic alignment and
every fixed-target motion model are built on it.

Algorithm:
    1. Days since J2000.0 (UTC)
    2. Local sidereal time for the observer longitude
    3. Hour angle of the target's right ascension
    4. Altitude, then azimuth (sign-disambiguated by the hour angle)
"""

from datetime import datetime, timezone
from typing import Optional, Tuple

from .coordinates import (
    calc_altitude,
    calc_azimuth,
    hour_angle,
    local_sidereal_time,
    to_degrees,
    to_radians,
)
from .models import CelestialTarget, GeoObserver, HorizonDirection
from .time_utils import days_since_j2000


def locate(
    observer: GeoObserver, target: CelestialTarget, instant: datetime
) -> HorizonDirection:
    """
    Horizon-frame direction of a fixed sky target.

    Args:
        observer: Observer latitude/longitude
        target: Right ascension (hours) and declination (degrees)
        instant: Time of observation (UTC; naive is taken as UTC)

    Returns:
        HorizonDirection: azimuth in [0, 2π), altitude in [-π/2, π/2]

    Example:
        >>> vega = CelestialTarget(ra_hours=18.6156, dec_deg=38.7837)
        >>> rome = GeoObserver(41.9, 12.5)
        >>> direction = locate(rome, vega, datetime(2024, 8, 1, 21, tzinfo=timezone.utc))
        >>> direction.is_above_horizon
        True
    """
    d = days_since_j2000(instant)
    lst_deg = local_sidereal_time(d, observer.longitude_deg)

    obs_lat_rad = observer.latitude_rad
    dec_rad = to_radians(target.dec_deg)
    ha_rad = to_radians(hour_angle(lst_deg, target.ra_degrees))

    alt_rad = calc_altitude(obs_lat_rad, dec_rad, ha_rad)
    az_rad = calc_azimuth(obs_lat_rad, dec_rad, alt_rad, ha_rad)

    return HorizonDirection(az_rad, alt_rad)


def calc_star_location(
    obs_lat_deg: float,
    obs_lon_deg: float,
    star_ra_hours: float,
    star_dec_deg: float,
    instant: Optional[datetime] = None,
) -> Tuple[float, float]:
    """
    Degree-valued convenience wrapper around locate().

    Args:
        obs_lat_deg: Observer latitude in degrees
        obs_lon_deg: Observer longitude in degrees
        star_ra_hours: Right ascension in hours
        star_dec_deg: Declination in degrees
        instant: Time of observation (default: now, UTC)

    Returns:
        Tuple[float, float]: (altitude_deg, azimuth_deg)

    Raises:
        ValueError: If the observer coordinates are out of range
    """
    if instant is None:
        instant = datetime.now(timezone.utc)

    direction = locate(
        GeoObserver(obs_lat_deg, obs_lon_deg),
        CelestialTarget(star_ra_hours, star_dec_deg),
        instant,
    )
    return to_degrees(direction.altitude_rad), to_degrees(direction.azimuth_rad)

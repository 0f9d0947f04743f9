"""
Coordinate transforms for cosmic_core.

Pure spherical-astronomy functions used by every direction-producing
component:
- Angle unit conversion (degrees <-> radians)
- Local sidereal time and hour angle
- Altitude/azimuth of an equatorial target
- Great-circle angle between two horizon points
- Ecliptic -> equatorial and equatorial -> horizontal rotations

FIXME: Precision - Mean sidereal time only (no nutation, no UT1-UTC),
J2000 coordinates are not precessed to date. Expect errors of a few tenths
of a degree for dates decades away from J2000. Fine for a compass overlay,
not for telescope pointing.

References:
- Meeus "Astronomical Algorithms" (1998), Ch. 12 (sidereal time),
  Ch. 13 (transformation of coordinates)
"""

import math
from typing import Tuple

from .constants import GMST_J2000_DEG, SIDEREAL_DEG_PER_DAY, DEG_PER_RAD
from .models import HorizonDirection
from .utils import clamp_unit, normalize_degrees, normalize_radians

# Below this, cos(lat)·cos(alt) makes the acos azimuth ill-conditioned
_DEGENERATE_DENOMINATOR = 1e-12


def to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees / DEG_PER_RAD


def to_degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * DEG_PER_RAD


def local_sidereal_time(days_since_j2000: float, lon_deg: float) -> float:
    """
    Calculate Local Mean Sidereal Time.

    Args:
        days_since_j2000: Fractional days since J2000.0 (UTC)
        lon_deg: Observer longitude in degrees (East positive)

    Returns:
        float: LST in degrees, [0, 360)

    Note:
        LST = 280.46061837 + 360.98564736629·d + lon, wrapped with a
        double modulo so negative days/longitudes wrap correctly.
    """
    lst = GMST_J2000_DEG + SIDEREAL_DEG_PER_DAY * days_since_j2000 + lon_deg
    return normalize_degrees(lst)


def hour_angle(lst_deg: float, ra_deg: float) -> float:
    """
    Calculate the hour angle of a target.

    Args:
        lst_deg: Local sidereal time in degrees, [0, 360)
        ra_deg: Target right ascension in degrees, [0, 360)

    Returns:
        float: Hour angle in degrees, [0, 360); west of the meridian is positive

    Examples:
        >>> hour_angle(100, 50)
        50
        >>> hour_angle(50, 100)
        310
    """
    ha = lst_deg - ra_deg
    if ha < 0:
        ha += 360
    return ha


def calc_altitude(obs_lat_rad: float, dec_rad: float, ha_rad: float) -> float:
    """
    Altitude of a target above the horizon.

    Args:
        obs_lat_rad: Observer latitude (radians)
        dec_rad: Target declination (radians)
        ha_rad: Target hour angle (radians)

    Returns:
        float: Altitude in radians, [-π/2, π/2]

    Formula:
        sin(alt) = sin(φ)·sin(δ) + cos(φ)·cos(δ)·cos(H)
    """
    sin_alt = math.sin(obs_lat_rad) * math.sin(dec_rad) + math.cos(
        obs_lat_rad
    ) * math.cos(dec_rad) * math.cos(ha_rad)
    return math.asin(clamp_unit(sin_alt))


def calc_azimuth(
    obs_lat_rad: float, dec_rad: float, alt_rad: float, ha_rad: float
) -> float:
    """
    Azimuth of a target, measured from North through East.

    Args:
        obs_lat_rad: Observer latitude (radians)
        dec_rad: Target declination (radians)
        alt_rad: Target altitude (radians), from calc_altitude()
        ha_rad: Target hour angle (radians)

    Returns:
        float: Azimuth in radians, [0, 2π)

    Algorithm:
        cos(A) = (sin(δ) - sin(φ)·sin(alt)) / (cos(φ)·cos(alt))

        acos() only yields [0, π], so the side of the meridian is taken
        from sin(H): sin(H) < 0 means the target is east of the meridian
        (rising) and A = acos(...); otherwise it is west (setting) and
        A = 2π - acos(...).

    Note:
        With the observer at a pole or the target at the zenith the
        denominator vanishes; the atan2 form is used there instead.
    """
    denominator = math.cos(obs_lat_rad) * math.cos(alt_rad)
    if abs(denominator) < _DEGENERATE_DENOMINATOR:
        az = math.atan2(
            -math.sin(ha_rad) * math.cos(dec_rad),
            math.sin(dec_rad) * math.cos(obs_lat_rad)
            - math.cos(dec_rad) * math.sin(obs_lat_rad) * math.cos(ha_rad),
        )
        return normalize_radians(az)

    cos_az = (math.sin(dec_rad) - math.sin(obs_lat_rad) * math.sin(alt_rad)) / denominator
    az = math.acos(clamp_unit(cos_az))
    if math.sin(ha_rad) < 0:
        return az
    return normalize_radians(2 * math.pi - az)


def angle_between_points(az1: float, alt1: float, az2: float, alt2: float) -> float:
    """
    Great-circle angle between two horizon-frame points.

    Args:
        az1, alt1: First point azimuth/altitude in degrees
        az2, alt2: Second point azimuth/altitude in degrees

    Returns:
        float: Separation in degrees, [0, 180]

    Formula (haversine):
        θ = 2·asin(√(sin²(Δalt/2) + cos(alt1)·cos(alt2)·sin²(Δaz/2)))
    """
    alt1_rad = to_radians(alt1)
    az1_rad = to_radians(az1)
    alt2_rad = to_radians(alt2)
    az2_rad = to_radians(az2)

    haversine_alt = math.sin((alt2_rad - alt1_rad) / 2) ** 2
    haversine_az = math.sin((az2_rad - az1_rad) / 2) ** 2
    h = haversine_alt + math.cos(alt1_rad) * math.cos(alt2_rad) * haversine_az
    angle = 2 * math.asin(math.sqrt(min(1.0, max(0.0, h))))

    return to_degrees(angle)


def ecliptic_to_equatorial(
    lambda_rad: float, beta_rad: float, obliquity_rad: float
) -> Tuple[float, float]:
    """
    Rotate ecliptic coordinates into equatorial coordinates.

    Args:
        lambda_rad: Ecliptic longitude (radians)
        beta_rad: Ecliptic latitude (radians)
        obliquity_rad: Obliquity of the ecliptic (radians)

    Returns:
        Tuple[float, float]: (ra, dec) in radians, ra in [0, 2π)

    Formula:
        tan(α) = (sin(λ)·cos(ε) - tan(β)·sin(ε)) / cos(λ)
        sin(δ) = sin(β)·cos(ε) + cos(β)·sin(ε)·sin(λ)
    """
    sin_eps = math.sin(obliquity_rad)
    cos_eps = math.cos(obliquity_rad)

    ra = math.atan2(
        math.sin(lambda_rad) * cos_eps - math.tan(beta_rad) * sin_eps,
        math.cos(lambda_rad),
    )
    dec = math.asin(
        clamp_unit(
            math.sin(beta_rad) * cos_eps
            + math.cos(beta_rad) * sin_eps * math.sin(lambda_rad)
        )
    )
    return normalize_radians(ra), dec


def equatorial_to_horizontal(
    ha_rad: float, dec_rad: float, lat_rad: float
) -> HorizonDirection:
    """
    Rotate equatorial coordinates into the local horizon frame.

    Args:
        ha_rad: Hour angle (radians), any range
        dec_rad: Declination (radians)
        lat_rad: Observer latitude (radians)

    Returns:
        HorizonDirection: azimuth from North through East in [0, 2π), altitude

    Formula:
        tan(A_s) = sin(H) / (cos(H)·sin(φ) - tan(δ)·cos(φ))   (A_s from South)
        A = A_s + π
    """
    altitude = calc_altitude(lat_rad, dec_rad, ha_rad)
    az_south = math.atan2(
        math.sin(ha_rad),
        math.cos(ha_rad) * math.sin(lat_rad) - math.tan(dec_rad) * math.cos(lat_rad),
    )
    return HorizonDirection(normalize_radians(az_south + math.pi), altitude)

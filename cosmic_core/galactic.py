"""
Galactic center alignment for cosmic_core.

Locates Sagittarius A* and derives the yaw/pitch/roll needed to orient a
galactic skybox texture for the rendering layer. No rendering happens here.

Algorithm:
    1. Horizon position of Sagittarius A* (yaw = azimuth, pitch = altitude)
    2. Apparent galactic pole, 90° from Sagittarius A* along its vertical:
       - Sgr A* below horizon: pole az = az(Sgr A*),       alt = 90 + alt(Sgr A*)
       - otherwise:            pole az = az(Sgr A*) + 180, alt = 90 - alt(Sgr A*)
    3. Roll = great-circle angle between that pole and a reference star
       near the true galactic north pole (RA 12.81h, Dec +27.4°)

FIXME: Precision - The pole is taken on Sgr A*'s vertical circle, not from
the full galactic frame rotation, so roll is only a visual alignment aid.
"""

from datetime import datetime

from .constants import (
    SGR_A_RA_HOURS,
    SGR_A_DEC_DEG,
    GALACTIC_ROLL_REF_RA_HOURS,
    GALACTIC_ROLL_REF_DEC_DEG,
    GALACTIC_NORTH_POLE_RA_HOURS,
    GALACTIC_NORTH_POLE_DEC_DEG,
)
from .coordinates import angle_between_points
from .models import CelestialTarget, GalacticAlignment, GeoObserver, HorizonDirection
from .stellar import locate

SAGITTARIUS_A_STAR = CelestialTarget(SGR_A_RA_HOURS, SGR_A_DEC_DEG)
GALACTIC_ROLL_REFERENCE = CelestialTarget(
    GALACTIC_ROLL_REF_RA_HOURS, GALACTIC_ROLL_REF_DEC_DEG
)
GALACTIC_NORTH_POLE = CelestialTarget(
    GALACTIC_NORTH_POLE_RA_HOURS, GALACTIC_NORTH_POLE_DEC_DEG
)


def locate_galactic_center_alignment(
    observer: GeoObserver, instant: datetime
) -> GalacticAlignment:
    """
    Yaw/pitch/roll aligning a galactic skybox for this observer and instant.

    Args:
        observer: Observer latitude/longitude
        instant: Time of observation (UTC)

    Returns:
        GalacticAlignment: (azimuth_deg, altitude_deg, roll_deg) where
        azimuth/altitude are those of Sagittarius A*
    """
    sag_a = locate(observer, SAGITTARIUS_A_STAR, instant)
    reference = locate(observer, GALACTIC_ROLL_REFERENCE, instant)

    sag_az = sag_a.azimuth_deg
    sag_alt = sag_a.altitude_deg

    if sag_alt < 0:
        pole_az = sag_az
        pole_alt = 90 + sag_alt
    else:
        pole_az = sag_az + 180
        pole_alt = 90 - sag_alt

    roll = angle_between_points(
        pole_az, pole_alt, reference.azimuth_deg, reference.altitude_deg
    )

    return GalacticAlignment(azimuth_deg=sag_az, altitude_deg=sag_alt, roll_deg=roll)


def locate_galactic_north_pole(
    observer: GeoObserver, instant: datetime
) -> HorizonDirection:
    """Horizon position of the galactic north pole (J2000 RA 12h51m26s, Dec +27°08')."""
    return locate(observer, GALACTIC_NORTH_POLE, instant)

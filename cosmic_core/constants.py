"""
Constants for cosmic_core.

Epoch and sidereal-time coefficients, physical speeds, fixed sky anchors
used by the galactic alignment, and the numbering/ids of the eight cosmic
motion levels.
"""

import math
from datetime import datetime, timezone

# =============================================================================
# TIME
# =============================================================================

J2000_JD = 2451545.0  # Julian Day of J2000.0
J2000_EPOCH = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)  # J2000.0 (UTC)

# Greenwich mean sidereal time: GMST = 280.46061837 + 360.98564736629 * d
GMST_J2000_DEG = 280.46061837
SIDEREAL_DEG_PER_DAY = 360.98564736629

# =============================================================================
# ANGLES
# =============================================================================

TWO_PI = 2.0 * math.pi
DEG_PER_RAD = 180.0 / math.pi
DEG_PER_HOUR = 15.0  # Right ascension hours -> degrees
OBLIQUITY_DEG = 23.44  # Mean obliquity of the ecliptic (low-order)

# South-referenced azimuth (Sun/Moon collaborators) -> north-referenced
SOUTH_TO_NORTH_AZIMUTH_OFFSET = math.pi

# =============================================================================
# PHYSICAL SPEEDS (km/s)
# =============================================================================

EARTH_EQUATORIAL_SPEED_KMS = 0.465
EARTH_ORBITAL_SPEED_KMS = 29.8
CMB_DIPOLE_SPEED_KMS = 369.82  # Planck measurement (verification only)

# Below this a resultant is treated as zero (exact cancellation)
ZERO_MAGNITUDE_KMS = 1e-12

# =============================================================================
# SKY ANCHORS (J2000 RA hours, Dec degrees)
# =============================================================================

SGR_A_RA_HOURS = 17.7611  # 17h 45m 40.04s
SGR_A_DEC_DEG = -28.992  # -29 00' 28.1"

# Reference star near the galactic north pole, used to fix the skybox roll
GALACTIC_ROLL_REF_RA_HOURS = 12.81
GALACTIC_ROLL_REF_DEC_DEG = 27.4

GALACTIC_NORTH_POLE_RA_HOURS = 12.8573  # 12h 51m 26.28s
GALACTIC_NORTH_POLE_DEC_DEG = 27.1283  # +27 07' 41.7"

# =============================================================================
# OBSERVER BOUNDS
# =============================================================================

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

# =============================================================================
# COSMIC LEVELS
# =============================================================================

MIN_LEVEL = 1
MAX_LEVEL = 8

LEVEL_EARTH_ROTATION = 1
LEVEL_EARTH_ORBIT = 2
LEVEL_SOLAR_ORBIT = 3
LEVEL_LOCAL_GROUP = 4
LEVEL_LOCAL_VOID = 5
LEVEL_VIRGO_PULL = 6
LEVEL_LARGE_SCALE_FLOW = 7
LEVEL_CMB_DIPOLE = 8

ID_EARTH_ROTATION = "earthRotation"
ID_EARTH_ORBIT = "earthOrbit"
ID_SOLAR_ORBIT = "solarOrbit"
ID_LOCAL_GROUP = "localGroupMotion"
ID_LOCAL_VOID = "localVoidPush"
ID_VIRGO_PULL = "virgoPull"
ID_LARGE_SCALE_FLOW = "largeScaleFlow"
ID_CMB_DIPOLE = "cmbDipole"

from .constants import *
from .time_utils import days_since_j2000, days_since_epoch, julian_day, to_utc
from .coordinates import (
    to_radians,
    to_degrees,
    local_sidereal_time,
    hour_angle,
    calc_altitude,
    calc_azimuth,
    angle_between_points,
    ecliptic_to_equatorial,
    equatorial_to_horizontal,
)
from .models import (
    LevelRole,
    ModelKind,
    GeoObserver,
    HorizonDirection,
    CelestialTarget,
    CartesianVector,
    MotionVector,
    Resultant,
    LevelMotion,
    GalacticAlignment,
    CelestialPositions,
    Snapshot,
)
from .stellar import locate, calc_star_location
from .galactic import (
    SAGITTARIUS_A_STAR,
    GALACTIC_NORTH_POLE,
    locate_galactic_center_alignment,
    locate_galactic_north_pole,
)
from .levels import (
    MotionLevel,
    COSMIC_LEVELS,
    get_level,
    get_level_by_number,
    get_level_coordinates,
    get_levels_up_to,
    implemented_only,
    unimplemented_only,
    additive_only,
    get_scale_range,
)
from .motion import EarthRotation, EarthOrbit, CosmicMotion, build_model
from .vector_sum import VectorSum, spherical_to_cartesian, cartesian_to_spherical
from .ephemeris import (
    SunMoonEphemeris,
    SkyfieldEphemeris,
    to_north_referenced,
    to_south_referenced,
)
from .state import set_ephe_path, set_ephemeris_file, get_ephemeris_file
from .context import CosmicContext
from .calculations import (
    compute_celestial_positions,
    compute_motion_vectors,
    compute_vector_sum,
    compute_snapshot,
)
from .utils import difdeg2n


# =============================================================================
# SHORT ALIASES
# =============================================================================
# Shorter names for the catalog and snapshot entry points

by_number = get_level_by_number
by_id = get_level
up_to = get_levels_up_to
star_location = calc_star_location
galactic_alignment = locate_galactic_center_alignment
snapshot = compute_snapshot

__version__ = "0.1.0"
__license__ = "LGPL-3.0"

__all__ = [
    # Context API
    "CosmicContext",
    "compute_celestial_positions",
    "compute_motion_vectors",
    "compute_vector_sum",
    "compute_snapshot",
    "snapshot",
    # Time
    "to_utc",
    "days_since_j2000",
    "days_since_epoch",
    "julian_day",
    # Coordinates
    "to_radians",
    "to_degrees",
    "local_sidereal_time",
    "hour_angle",
    "calc_altitude",
    "calc_azimuth",
    "angle_between_points",
    "ecliptic_to_equatorial",
    "equatorial_to_horizontal",
    "difdeg2n",
    # Data model
    "LevelRole",
    "ModelKind",
    "GeoObserver",
    "HorizonDirection",
    "CelestialTarget",
    "CartesianVector",
    "MotionVector",
    "Resultant",
    "LevelMotion",
    "GalacticAlignment",
    "CelestialPositions",
    "Snapshot",
    # Stellar / galactic
    "locate",
    "calc_star_location",
    "star_location",
    "SAGITTARIUS_A_STAR",
    "GALACTIC_NORTH_POLE",
    "locate_galactic_center_alignment",
    "locate_galactic_north_pole",
    "galactic_alignment",
    # Levels
    "MotionLevel",
    "COSMIC_LEVELS",
    "get_level",
    "get_level_by_number",
    "get_level_coordinates",
    "get_levels_up_to",
    "by_number",
    "by_id",
    "up_to",
    "implemented_only",
    "unimplemented_only",
    "additive_only",
    "get_scale_range",
    # Motion
    "EarthRotation",
    "EarthOrbit",
    "CosmicMotion",
    "build_model",
    # Vector sum
    "VectorSum",
    "spherical_to_cartesian",
    "cartesian_to_spherical",
    # Ephemeris
    "SunMoonEphemeris",
    "SkyfieldEphemeris",
    "to_north_referenced",
    "to_south_referenced",
    "set_ephe_path",
    "set_ephemeris_file",
    "get_ephemeris_file",
]

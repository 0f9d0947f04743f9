"""
Motion models for cosmic_core.

Each model answers two questions for one component of Earth's motion:
- get_velocity(observer) -> speed in km/s
- get_direction(observer, instant) -> HorizonDirection of travel

Models:
- EarthRotation: v = v_eq·cos(latitude), constant horizon direction (due East)
- EarthOrbit: constant speed, direction tangent to the ecliptic
- CosmicMotion: constant speed toward a fixed RA/Dec target (levels 3-8)

build_model() resolves a catalog level's ModelKind to a fresh instance;
no model is kept between calls.
"""

import math
from datetime import datetime
from typing import Callable, Dict, Optional, Protocol

from .constants import (
    EARTH_EQUATORIAL_SPEED_KMS,
    EARTH_ORBITAL_SPEED_KMS,
    OBLIQUITY_DEG,
    ZERO_MAGNITUDE_KMS,
)
from .coordinates import (
    ecliptic_to_equatorial,
    equatorial_to_horizontal,
    local_sidereal_time,
    to_radians,
)
from .levels import MotionLevel
from .models import CelestialTarget, GeoObserver, HorizonDirection, ModelKind
from .stellar import locate
from .time_utils import days_since_j2000


class MotionModel(Protocol):
    """Velocity/direction provider for one motion component."""

    def get_velocity(self, observer: GeoObserver) -> float:
        ...

    def get_direction(self, observer: GeoObserver, instant: datetime) -> HorizonDirection:
        ...

    def get_info(self) -> Dict[str, str]:
        ...


class _LevelBoundModel:
    """Keeps the catalog level a model was built from, for get_info()."""

    level: Optional[MotionLevel] = None

    def get_info(self) -> Dict[str, str]:
        if self.level is None:
            return {"name": type(self).__name__}
        return self.level.get_info()


class EarthRotation(_LevelBoundModel):
    """Surface speed due to Earth's spin."""

    def __init__(
        self,
        equatorial_speed: float = EARTH_EQUATORIAL_SPEED_KMS,
        direction: Optional[HorizonDirection] = None,
    ):
        self.equatorial_speed = equatorial_speed
        self.direction = direction if direction is not None else HorizonDirection(math.pi / 2, 0.0)

    def get_velocity(self, observer: GeoObserver) -> float:
        """
        Rotational speed at the observer's latitude.

        Full speed at the equator, zero at the poles. cos(±90°) evaluates to
        ~6e-17, so the pole value is clamped to exactly 0.
        """
        velocity = self.equatorial_speed * math.cos(observer.latitude_rad)
        if velocity <= ZERO_MAGNITUDE_KMS:
            return 0.0
        return velocity

    def get_direction(
        self, observer: Optional[GeoObserver] = None, instant: Optional[datetime] = None
    ) -> HorizonDirection:
        """Constant horizon direction (due East unless the level says otherwise)."""
        return self.direction


class EarthOrbit(_LevelBoundModel):
    """
    Earth's orbital motion around the Sun.

    FIXME: Precision - First-order geometric approximation:
    - Circular orbit in the ecliptic plane
    - Direction placed apex_offset_deg from the Sun's true ecliptic longitude
    - Low-order solar longitude (mean longitude + equation of centre)
    True elliptical motion deviates by up to ~1° seasonally. Suitable for
    visualization, not astrometry.
    """

    def __init__(
        self,
        orbital_speed: float = EARTH_ORBITAL_SPEED_KMS,
        obliquity_deg: float = OBLIQUITY_DEG,
        apex_offset_deg: float = 90.0,
    ):
        self.orbital_speed = orbital_speed
        self.obliquity = to_radians(obliquity_deg)
        self.apex_offset = to_radians(apex_offset_deg)

    def get_velocity(self, observer: Optional[GeoObserver] = None) -> float:
        """Orbital speed is the same for every observer."""
        return self.orbital_speed

    def sun_true_longitude(self, days: float) -> float:
        """
        Sun's true ecliptic longitude in radians.

        Args:
            days: Days since J2000.0

        Formula:
            L = 280.460° + 0.9856474°·d      (mean longitude)
            g = 357.528° + 0.9856003°·d      (mean anomaly)
            λ = L + 1.915°·sin(g) + 0.020°·sin(2g)
        """
        mean_longitude = to_radians(280.460 + 0.9856474 * days)
        mean_anomaly = to_radians(357.528 + 0.9856003 * days)
        return mean_longitude + to_radians(
            1.915 * math.sin(mean_anomaly) + 0.020 * math.sin(2 * mean_anomaly)
        )

    def get_direction(self, observer: GeoObserver, instant: datetime) -> HorizonDirection:
        """
        Apparent sky direction of Earth's orbital velocity.

        Algorithm:
            1. Sun's true ecliptic longitude λ
            2. Apex longitude λ + apex offset, on the ecliptic (β = 0)
            3. Ecliptic -> equatorial (RA/Dec)
            4. Hour angle from local sidereal time
            5. Equatorial -> horizontal
        """
        days = days_since_j2000(instant)

        lambda_apex = (self.sun_true_longitude(days) + self.apex_offset) % (2 * math.pi)
        ra, dec = ecliptic_to_equatorial(lambda_apex, 0.0, self.obliquity)

        lst_rad = to_radians(local_sidereal_time(days, observer.longitude_deg))
        ha = lst_rad - ra

        return equatorial_to_horizontal(ha, dec, observer.latitude_rad)


class CosmicMotion(_LevelBoundModel):
    """
    Constant-velocity motion toward a fixed RA/Dec target.

    Used for every catalog level whose direction is just a point on the sky
    (solar apex, Local Group barycenter, Virgo, ...). The only real work is
    the coordinate transform done by stellar.locate().
    """

    def __init__(self, velocity: float, target: CelestialTarget):
        self.velocity = velocity
        self.target = target

    def get_velocity(self, observer: Optional[GeoObserver] = None) -> float:
        return self.velocity

    def get_direction(self, observer: GeoObserver, instant: datetime) -> HorizonDirection:
        return locate(observer, self.target, instant)


def _earth_rotation(level: MotionLevel) -> MotionModel:
    return EarthRotation(equatorial_speed=level.velocity_km_s, direction=level.fixed_direction)


def _earth_orbit(level: MotionLevel) -> MotionModel:
    return EarthOrbit(orbital_speed=level.velocity_km_s)


def _fixed_target(level: MotionLevel) -> MotionModel:
    if level.target is None:
        raise ValueError(
            f"Level {level.number} ({level.id}) is a fixed-target motion without a target"
        )
    return CosmicMotion(velocity=level.velocity_km_s, target=level.target)


_MODEL_FACTORIES: Dict[ModelKind, Callable[[MotionLevel], MotionModel]] = {
    ModelKind.EARTH_ROTATION: _earth_rotation,
    ModelKind.EARTH_ORBIT: _earth_orbit,
    ModelKind.FIXED_TARGET: _fixed_target,
}


def build_model(level: MotionLevel) -> MotionModel:
    """
    Build a fresh motion model for a catalog level.

    Args:
        level: Catalog entry

    Returns:
        MotionModel: Instance implementing get_velocity/get_direction

    Raises:
        ValueError: If the level's kind has no model or its payload is missing
    """
    factory = _MODEL_FACTORIES.get(level.kind)
    if factory is None:
        raise ValueError(
            f"No motion model for kind {level.kind!r} (level {level.number}, {level.id})"
        )
    model = factory(level)
    model.level = level
    return model

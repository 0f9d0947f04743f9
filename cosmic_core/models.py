"""
Data model definitions for cosmic_core.

Plain frozen dataclasses passed between the coordinate layer, the motion
models, the vector summation engine and the snapshot API. Angles are stored
in radians; degree properties are a display convenience.

Conventions (local horizon frame):
- Azimuth: 0 = North, π/2 = East, increasing eastward, in [0, 2π)
- Altitude: 0 = horizon, +π/2 = zenith
- Cartesian: x = East, y = North, z = Up
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from .constants import (
    DEG_PER_HOUR,
    MIN_LATITUDE,
    MAX_LATITUDE,
    MIN_LONGITUDE,
    MAX_LONGITUDE,
)

_COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)


class LevelRole(Enum):
    """Whether a catalog level contributes to the vector sum."""

    ADDITIVE = "additive"
    REFERENCE_ONLY = "reference_only"  # Expected total, never summed


class ModelKind(Enum):
    """Motion model bound to a catalog level."""

    EARTH_ROTATION = "earth_rotation"
    EARTH_ORBIT = "earth_orbit"
    FIXED_TARGET = "fixed_target"


@dataclass(frozen=True)
class GeoObserver:
    """
    Observer position on Earth.

    Attributes:
        latitude_deg: Geographic latitude, North positive, in [-90, 90]
        longitude_deg: Geographic longitude, East positive, in [-180, 180]

    Raises:
        ValueError: On construction with a non-finite or out-of-range value
    """

    latitude_deg: float
    longitude_deg: float

    def __post_init__(self):
        for name, value, low, high in (
            ("latitude", self.latitude_deg, MIN_LATITUDE, MAX_LATITUDE),
            ("longitude", self.longitude_deg, MIN_LONGITUDE, MAX_LONGITUDE),
        ):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value!r}")
            if not low <= value <= high:
                raise ValueError(
                    f"{name} {value} out of range [{low:g}, {high:g}] degrees"
                )
        object.__setattr__(self, "latitude_deg", float(self.latitude_deg))
        object.__setattr__(self, "longitude_deg", float(self.longitude_deg))

    @property
    def latitude_rad(self) -> float:
        return math.radians(self.latitude_deg)

    @property
    def longitude_rad(self) -> float:
        return math.radians(self.longitude_deg)


@dataclass(frozen=True)
class HorizonDirection:
    """Direction in the observer's local horizon frame (radians)."""

    azimuth_rad: float
    altitude_rad: float

    @classmethod
    def from_degrees(cls, azimuth_deg: float, altitude_deg: float) -> "HorizonDirection":
        return cls(math.radians(azimuth_deg), math.radians(altitude_deg))

    @property
    def azimuth_deg(self) -> float:
        return math.degrees(self.azimuth_rad)

    @property
    def altitude_deg(self) -> float:
        return math.degrees(self.altitude_rad)

    @property
    def is_above_horizon(self) -> bool:
        return self.altitude_rad > 0

    @property
    def compass_direction(self) -> str:
        """16-point compass label for the azimuth (N, NNE, ... NNW)."""
        index = round((self.azimuth_deg % 360.0) / 22.5) % 16
        return _COMPASS_POINTS[index]

    def to_dict(self) -> Dict[str, float]:
        return {
            "azimuth_rad": self.azimuth_rad,
            "altitude_rad": self.altitude_rad,
            "azimuth_deg": self.azimuth_deg,
            "altitude_deg": self.altitude_deg,
        }


@dataclass(frozen=True)
class CelestialTarget:
    """Fixed equatorial sky coordinate (J2000, treated as epoch-invariant)."""

    ra_hours: float
    dec_deg: float

    @property
    def ra_degrees(self) -> float:
        return self.ra_hours * DEG_PER_HOUR


@dataclass(frozen=True)
class CartesianVector:
    """Vector in the East-North-Up frame (km/s)."""

    x: float
    y: float
    z: float

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}


@dataclass(frozen=True)
class MotionVector:
    """
    One velocity component owned by a VectorSum.

    metadata is stored as a read-only copy and is left out of the hash.
    """

    name: str
    magnitude_km_s: float
    direction: HorizonDirection
    cartesian: CartesianVector
    metadata: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "magnitude_km_s": self.magnitude_km_s,
            "direction": self.direction.to_dict(),
            "cartesian": self.cartesian.to_dict(),
            "metadata": dict(self.metadata),
        }


@dataclass(frozen=True)
class Resultant:
    """Combined velocity re-derived from the Cartesian sum."""

    magnitude_km_s: float
    direction: HorizonDirection
    cartesian: CartesianVector

    def to_dict(self) -> Dict[str, Any]:
        return {
            "magnitude_km_s": self.magnitude_km_s,
            "direction": self.direction.to_dict(),
            "cartesian": self.cartesian.to_dict(),
        }


@dataclass(frozen=True)
class LevelMotion:
    """
    Per-level result of running a catalog entry through its motion model.

    velocity_km_s and direction are None when error is set.
    """

    level: int
    id: str
    name: str
    kind: ModelKind
    role: LevelRole
    implemented: bool
    velocity_km_s: Optional[float] = None
    direction: Optional[HorizonDirection] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def is_verification_only(self) -> bool:
        return self.role is LevelRole.REFERENCE_ONLY

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level": self.level,
            "id": self.id,
            "name": self.name,
            "kind": self.kind.value,
            "role": self.role.value,
            "implemented": self.implemented,
            "velocity_km_s": self.velocity_km_s,
            "direction": self.direction.to_dict() if self.direction else None,
            "error": self.error,
        }


@dataclass(frozen=True)
class GalacticAlignment:
    """
    Skybox orientation derived from Sagittarius A*.

    Attributes:
        azimuth_deg: Yaw, azimuth of Sagittarius A*
        altitude_deg: Pitch, altitude of Sagittarius A*
        roll_deg: Roll, angle between the derived galactic pole and the
            reference star
    """

    azimuth_deg: float
    altitude_deg: float
    roll_deg: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.azimuth_deg, self.altitude_deg, self.roll_deg)


@dataclass(frozen=True)
class CelestialPositions:
    """Orientation data for the rendering layer."""

    sun: HorizonDirection
    moon: HorizonDirection
    galactic_alignment: GalacticAlignment
    galactic_north_pole: HorizonDirection
    days_since_j2000: float
    local_sidereal_time_deg: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sun": self.sun.to_dict(),
            "moon": self.moon.to_dict(),
            "galactic_alignment": list(self.galactic_alignment.as_tuple()),
            "galactic_north_pole": self.galactic_north_pole.to_dict(),
            "debug": {
                "days_since_j2000": self.days_since_j2000,
                "local_sidereal_time_deg": self.local_sidereal_time_deg,
            },
        }


@dataclass(frozen=True)
class Snapshot:
    """Consolidated result of one compute_snapshot call."""

    observer: GeoObserver
    instant: datetime
    max_level: int
    celestial: CelestialPositions
    motion_vectors: Tuple[LevelMotion, ...]
    active_vectors: Tuple[MotionVector, ...]
    resultant: Optional[Resultant]
    summary: Dict[str, Any] = field(default_factory=dict)

    @property
    def sun_direction(self) -> HorizonDirection:
        return self.celestial.sun

    @property
    def moon_direction(self) -> HorizonDirection:
        return self.celestial.moon

    @property
    def galactic_alignment(self) -> GalacticAlignment:
        return self.celestial.galactic_alignment

    @property
    def failed_levels(self) -> Tuple[LevelMotion, ...]:
        return tuple(m for m in self.motion_vectors if not m.ok)

    def to_dict(self) -> Dict[str, Any]:
        """Plain nested data for the rendering layer (JSON-serializable)."""
        return {
            "input": {
                "latitude": self.observer.latitude_deg,
                "longitude": self.observer.longitude_deg,
                "instant": self.instant.isoformat(),
                "max_level": self.max_level,
            },
            "celestial": self.celestial.to_dict(),
            "motion_vectors": [m.to_dict() for m in self.motion_vectors],
            "active_vectors": [v.to_dict() for v in self.active_vectors],
            "resultant": self.resultant.to_dict() if self.resultant else None,
            "summary": self.summary,
        }

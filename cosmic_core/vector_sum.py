"""
3D velocity vector summation for cosmic_core.

Combines motion components given as (magnitude, azimuth, altitude) in the
observer's local horizon frame into a single resultant.

Frames:
- Spherical: (magnitude, azimuth, altitude); azimuth 0 = North, π/2 = East
- Cartesian: x = East, y = North, z = Up

Invariants:
- The Cartesian sum is always the componentwise sum of every added
  vector's Cartesian form (math.fsum, so insertion order does not matter).
- The spherical resultant is re-derived from that sum after each insertion,
  never accumulated in spherical form.
- Components add in quadrature: three roughly orthogonal ~200-450 km/s
  flows combine to ~560 km/s, not ~900 km/s.

A VectorSum is owned by one computation; do not share it across threads.
"""

import math
from typing import Any, Dict, List, Optional, Tuple

from .constants import ZERO_MAGNITUDE_KMS
from .models import CartesianVector, HorizonDirection, MotionVector, Resultant
from .utils import clamp_unit, normalize_radians


def spherical_to_cartesian(
    magnitude: float, azimuth: float, altitude: float
) -> CartesianVector:
    """
    Convert (magnitude, azimuth, altitude) to East-North-Up components.

    Formula:
        x = m·cos(alt)·sin(az)
        y = m·cos(alt)·cos(az)
        z = m·sin(alt)
    """
    x = magnitude * math.cos(altitude) * math.sin(azimuth)
    y = magnitude * math.cos(altitude) * math.cos(azimuth)
    z = magnitude * math.sin(altitude)
    return CartesianVector(x, y, z)


def cartesian_to_spherical(
    x: float, y: float, z: float
) -> Optional[Tuple[float, float, float]]:
    """
    Convert East-North-Up components to (magnitude, azimuth, altitude).

    Returns:
        (magnitude, azimuth in [0, 2π), altitude), or None when the
        magnitude is zero (no direction exists and asin(z/0) is undefined)
    """
    magnitude = math.sqrt(x * x + y * y + z * z)
    if magnitude <= ZERO_MAGNITUDE_KMS:
        return None
    azimuth = normalize_radians(math.atan2(x, y))
    altitude = math.asin(clamp_unit(z / magnitude))
    return magnitude, azimuth, altitude


class VectorSum:
    """
    Running sum of motion vectors.

    Example:
        >>> vs = VectorSum()
        >>> vs.add_vector("Earth Rotation", 0.465, math.pi / 2, 0.0)
        >>> round(vs.get_resultant().magnitude_km_s, 3)
        0.465
    """

    spherical_to_cartesian = staticmethod(spherical_to_cartesian)
    cartesian_to_spherical = staticmethod(cartesian_to_spherical)

    def __init__(self):
        self._vectors: List[MotionVector] = []
        self._resultant: Optional[Resultant] = None

    def __len__(self) -> int:
        return len(self._vectors)

    def add_vector(
        self,
        name: str,
        magnitude: float,
        azimuth: float,
        altitude: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Add a velocity vector to the sum.

        Args:
            name: Human-readable name (e.g. "Earth Rotation")
            magnitude: Speed in km/s
            azimuth: Direction azimuth in radians
            altitude: Direction altitude in radians
            metadata: Extra info kept on the vector (level, id, ...)
        """
        vector = MotionVector(
            name=name,
            magnitude_km_s=magnitude,
            direction=HorizonDirection(azimuth, altitude),
            cartesian=spherical_to_cartesian(magnitude, azimuth, altitude),
            metadata=metadata or {},
        )
        self._vectors.append(vector)
        self._calculate_resultant()

    def _calculate_resultant(self) -> None:
        sum_x = math.fsum(v.cartesian.x for v in self._vectors)
        sum_y = math.fsum(v.cartesian.y for v in self._vectors)
        sum_z = math.fsum(v.cartesian.z for v in self._vectors)

        spherical = cartesian_to_spherical(sum_x, sum_y, sum_z)
        if spherical is None:
            self._resultant = None
            return

        magnitude, azimuth, altitude = spherical
        self._resultant = Resultant(
            magnitude_km_s=magnitude,
            direction=HorizonDirection(azimuth, altitude),
            cartesian=CartesianVector(sum_x, sum_y, sum_z),
        )

    def get_resultant(self) -> Optional[Resultant]:
        """Resultant vector, or None when empty or perfectly cancelled."""
        return self._resultant

    def get_vectors(self) -> List[MotionVector]:
        """Copy of the added vectors, in insertion order."""
        return list(self._vectors)

    def clear(self) -> None:
        self._vectors = []
        self._resultant = None

    def get_summary(self) -> Dict[str, Any]:
        """
        Rounded summary for display.

        Returns:
            dict: vector_count, per-vector magnitude/direction text and the
            rounded resultant; {"vector_count": 0, "resultant": None} when
            there is no resultant
        """
        if self._resultant is None:
            return {"vector_count": 0, "resultant": None}

        direction = self._resultant.direction
        return {
            "vector_count": len(self._vectors),
            "vectors": [
                {
                    "name": v.name,
                    "magnitude": round(v.magnitude_km_s, 2),
                    "direction": (
                        f"{round(v.direction.azimuth_deg)}° az, "
                        f"{round(v.direction.altitude_deg)}° alt"
                    ),
                }
                for v in self._vectors
            ],
            "resultant": {
                "magnitude": round(self._resultant.magnitude_km_s, 2),
                "azimuth": round(direction.azimuth_deg, 2),
                "altitude": round(direction.altitude_deg, 2),
                "direction": (
                    f"{round(direction.azimuth_deg)}° az, "
                    f"{round(direction.altitude_deg)}° alt"
                ),
            },
        }

    def get_contributions(self) -> List[Dict[str, Any]]:
        """
        Each vector's magnitude as a percentage of the resultant magnitude.

        Percentages can sum past 100 since components partially cancel.
        """
        if self._resultant is None:
            return []

        total = self._resultant.magnitude_km_s
        return [
            {
                "name": v.name,
                "magnitude": v.magnitude_km_s,
                "percentage": round(v.magnitude_km_s / total * 100, 2),
            }
            for v in self._vectors
        ]

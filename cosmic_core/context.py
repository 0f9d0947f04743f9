"""
Calculation context for cosmic_core.

A CosmicContext bundles the two collaborators a snapshot needs:
- a Sun/Moon ephemeris (SunMoonEphemeris protocol)
- a level catalog (tuple of MotionLevel)

and runs the orchestration: celestial positions, per-level motion records,
vector summation and the consolidated Snapshot.

Contexts hold no per-call state. Every compute_* call builds fresh motion
models and a fresh VectorSum, so one context can serve any number of
threads (e.g. one snapshot per observer in a thread pool).

Usage:
    ctx = CosmicContext()                               # JPL kernel via skyfield
    ctx = CosmicContext(ephemeris=my_source)            # any SunMoonEphemeris
    snap = ctx.compute_snapshot((53.35, -6.26), datetime(2025, 1, 1, 12, tzinfo=timezone.utc))
"""

import logging
import math
from datetime import datetime
from typing import Iterable, Optional, Sequence, Tuple, Union

from .constants import MAX_LEVEL, MIN_LEVEL
from .coordinates import local_sidereal_time
from .ephemeris import SkyfieldEphemeris, SunMoonEphemeris, to_north_referenced
from .galactic import locate_galactic_center_alignment, locate_galactic_north_pole
from .levels import (
    COSMIC_LEVELS,
    MotionLevel,
    additive_only,
    get_levels_up_to,
    implemented_only,
)
from .models import CelestialPositions, GeoObserver, LevelMotion, Snapshot
from .motion import build_model
from .time_utils import days_since_j2000, to_utc
from .vector_sum import VectorSum

logger = logging.getLogger(__name__)

ObserverLike = Union[GeoObserver, Tuple[float, float]]


def as_observer(observer: ObserverLike) -> GeoObserver:
    """
    Accept a GeoObserver or a (latitude, longitude) pair in degrees.

    Raises:
        ValueError: If the coordinates are invalid
    """
    if isinstance(observer, GeoObserver):
        return observer
    try:
        lat, lon = observer
    except (TypeError, ValueError):
        raise ValueError(
            f"observer must be a GeoObserver or a (latitude, longitude) pair, got {observer!r}"
        )
    return GeoObserver(lat, lon)


def validate_max_level(max_level: int) -> int:
    """
    Raises:
        ValueError: If max_level is not an int in MIN_LEVEL..MAX_LEVEL
    """
    if isinstance(max_level, bool) or not isinstance(max_level, int):
        raise ValueError(f"max_level must be an integer, got {max_level!r}")
    if not MIN_LEVEL <= max_level <= MAX_LEVEL:
        raise ValueError(
            f"max_level {max_level} out of range [{MIN_LEVEL}, {MAX_LEVEL}]"
        )
    return max_level


class CosmicContext:
    """
    Injected collaborators for snapshot computation.

    Args:
        ephemeris: Sun/Moon source (default: SkyfieldEphemeris)
        levels: Level catalog (default: COSMIC_LEVELS)
    """

    def __init__(
        self,
        ephemeris: Optional[SunMoonEphemeris] = None,
        levels: Iterable[MotionLevel] = COSMIC_LEVELS,
    ):
        self._ephemeris = ephemeris if ephemeris is not None else SkyfieldEphemeris()
        self._levels = tuple(levels)

    @property
    def ephemeris(self) -> SunMoonEphemeris:
        return self._ephemeris

    @property
    def levels(self) -> Tuple[MotionLevel, ...]:
        return self._levels

    def compute_celestial_positions(
        self, observer: ObserverLike, instant: datetime
    ) -> CelestialPositions:
        """
        Sun, Moon and galactic orientation for the rendering layer.

        Sun/Moon azimuths arrive south-referenced from the ephemeris and are
        shifted by π into the north-referenced convention used everywhere
        else.
        """
        observer = as_observer(observer)
        instant = to_utc(instant)
        lat, lon = observer.latitude_deg, observer.longitude_deg

        sun = to_north_referenced(self._ephemeris.position_of_sun(instant, lat, lon))
        moon = to_north_referenced(self._ephemeris.position_of_moon(instant, lat, lon))

        days = days_since_j2000(instant)
        return CelestialPositions(
            sun=sun,
            moon=moon,
            galactic_alignment=locate_galactic_center_alignment(observer, instant),
            galactic_north_pole=locate_galactic_north_pole(observer, instant),
            days_since_j2000=days,
            local_sidereal_time_deg=local_sidereal_time(days, lon),
        )

    def _compute_level(
        self, level: MotionLevel, observer: GeoObserver, instant: datetime
    ) -> LevelMotion:
        try:
            model = build_model(level)
            velocity = model.get_velocity(observer)
            direction = model.get_direction(observer, instant)
            values = (velocity, direction.azimuth_rad, direction.altitude_rad)
            if not all(math.isfinite(v) for v in values):
                raise ValueError(f"non-finite motion result {values}")
        except Exception as exc:
            logger.warning(
                "Motion level %d (%s) failed: %s", level.number, level.id, exc
            )
            return LevelMotion(
                level=level.number,
                id=level.id,
                name=level.name,
                kind=level.kind,
                role=level.role,
                implemented=False,
                error=f"{type(exc).__name__}: {exc}",
            )

        return LevelMotion(
            level=level.number,
            id=level.id,
            name=level.name,
            kind=level.kind,
            role=level.role,
            implemented=True,
            velocity_km_s=velocity,
            direction=direction,
        )

    def compute_motion_vectors(
        self, observer: ObserverLike, instant: datetime
    ) -> Tuple[LevelMotion, ...]:
        """
        One record per implemented catalog level, in catalog order.

        A level whose model raises (or returns NaN/inf) gets a record with
        error set and implemented=False; the other levels are unaffected.
        Levels marked implemented=False in the catalog are skipped silently.
        """
        observer = as_observer(observer)
        instant = to_utc(instant)
        return tuple(
            self._compute_level(level, observer, instant)
            for level in implemented_only(self._levels)
        )

    def compute_vector_sum(
        self,
        observer: ObserverLike,
        instant: datetime,
        max_level: int = MAX_LEVEL,
        motion_vectors: Optional[Sequence[LevelMotion]] = None,
    ) -> VectorSum:
        """
        Sum the additive, successfully computed levels up to max_level.

        Args:
            observer: GeoObserver or (lat, lon)
            instant: Time of observation (UTC)
            max_level: Highest level number to include (1-8)
            motion_vectors: Records from compute_motion_vectors() to reuse;
                computed when omitted

        Returns:
            VectorSum: Fresh engine holding the active vectors

        Raises:
            ValueError: If max_level is invalid
        """
        max_level = validate_max_level(max_level)
        if motion_vectors is None:
            motion_vectors = self.compute_motion_vectors(observer, instant)
        by_number = {m.level: m for m in motion_vectors}

        vs = VectorSum()
        for level in additive_only(implemented_only(get_levels_up_to(max_level, self._levels))):
            motion = by_number.get(level.number)
            if motion is None or not motion.ok:
                continue
            vs.add_vector(
                level.name,
                motion.velocity_km_s,
                motion.direction.azimuth_rad,
                motion.direction.altitude_rad,
                metadata={"level": level.number, "id": level.id},
            )
        return vs

    def compute_snapshot(
        self, observer: ObserverLike, instant: datetime, max_level: int = MAX_LEVEL
    ) -> Snapshot:
        """
        Everything the rendering layer needs for one observer and instant.

        Args:
            observer: GeoObserver or (lat, lon) in degrees
            instant: Time of observation (naive is taken as UTC)
            max_level: Highest level number in the resultant (1-8); level 8
                is reference-only and never summed

        Returns:
            Snapshot: Celestial positions, per-level records, active vectors
            and resultant (None when there is nothing to sum)

        Raises:
            ValueError: If the observer or max_level is invalid
            TypeError: If instant is not a datetime
        """
        observer = as_observer(observer)
        instant = to_utc(instant)
        max_level = validate_max_level(max_level)

        celestial = self.compute_celestial_positions(observer, instant)
        motion_vectors = self.compute_motion_vectors(observer, instant)
        vs = self.compute_vector_sum(observer, instant, max_level, motion_vectors)
        resultant = vs.get_resultant()

        logger.debug(
            "Snapshot lat=%.4f lon=%.4f at %s up to level %d: %d vectors, resultant %s km/s",
            observer.latitude_deg,
            observer.longitude_deg,
            instant.isoformat(),
            max_level,
            len(vs),
            f"{resultant.magnitude_km_s:.2f}" if resultant else None,
        )

        return Snapshot(
            observer=observer,
            instant=instant,
            max_level=max_level,
            celestial=celestial,
            motion_vectors=motion_vectors,
            active_vectors=tuple(vs.get_vectors()),
            resultant=resultant,
            summary=vs.get_summary(),
        )

"""
Top-level calculation API for cosmic_core.

Module-level shortcuts around a shared default CosmicContext (skyfield
Sun/Moon, full catalog). Pass ephemeris= to use another Sun/Moon source
for a single call, or build a CosmicContext to change the catalog too.
"""

from datetime import datetime
from typing import Optional, Tuple

from .constants import MAX_LEVEL
from .context import CosmicContext, ObserverLike
from .ephemeris import SunMoonEphemeris
from .models import CelestialPositions, LevelMotion, Snapshot
from .vector_sum import VectorSum

_DEFAULT_CONTEXT = CosmicContext()


def _context(ephemeris: Optional[SunMoonEphemeris]) -> CosmicContext:
    if ephemeris is None:
        return _DEFAULT_CONTEXT
    return CosmicContext(ephemeris=ephemeris)


def get_default_context() -> CosmicContext:
    return _DEFAULT_CONTEXT


def compute_celestial_positions(
    observer: ObserverLike,
    instant: datetime,
    ephemeris: Optional[SunMoonEphemeris] = None,
) -> CelestialPositions:
    """Sun, Moon, galactic alignment and galactic north pole."""
    return _context(ephemeris).compute_celestial_positions(observer, instant)


def compute_motion_vectors(
    observer: ObserverLike, instant: datetime
) -> Tuple[LevelMotion, ...]:
    """Per-level velocity/direction records for every implemented level."""
    return _DEFAULT_CONTEXT.compute_motion_vectors(observer, instant)


def compute_vector_sum(
    observer: ObserverLike, instant: datetime, max_level: int = MAX_LEVEL
) -> VectorSum:
    return _DEFAULT_CONTEXT.compute_vector_sum(observer, instant, max_level)


def compute_snapshot(
    observer: ObserverLike,
    instant: datetime,
    max_level: int = MAX_LEVEL,
    ephemeris: Optional[SunMoonEphemeris] = None,
) -> Snapshot:
    """
    Compute a full snapshot with the default catalog.

    Args:
        observer: GeoObserver or (lat, lon) in degrees
        instant: Time of observation (naive is taken as UTC)
        max_level: Highest level in the resultant (1-8)
        ephemeris: Sun/Moon source override (default: SkyfieldEphemeris)

    Returns:
        Snapshot

    Example:
        >>> from datetime import datetime, timezone
        >>> snap = compute_snapshot((53.35, -6.26), datetime(2025, 1, 1, 12, tzinfo=timezone.utc))
        >>> len(snap.active_vectors)
        7
    """
    return _context(ephemeris).compute_snapshot(observer, instant, max_level)

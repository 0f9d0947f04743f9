"""
Cosmic level catalog for cosmic_core.

The eight levels of Earth's motion through space, ordered by spatial scale
from Earth's rotation to motion relative to the Cosmic Microwave Background.

Each level binds a model kind (ModelKind) plus its parameter payload; the
concrete model is built per call by motion.build_model(). Level 8 (CMB
dipole) is LevelRole.REFERENCE_ONLY: it is the measured total that levels
1-7 should reproduce, never an additive component.

The catalog is an immutable module-level tuple, built once at import and
safe to share across threads.

References:
- Tully et al. (2008), ApJ, 676, 184 (levels 5-7 decomposition)
- Makarov et al. (2025), A&A (level 4)
- Planck Collaboration (2020) (level 8)
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple, Union

from .constants import (
    CMB_DIPOLE_SPEED_KMS,
    EARTH_EQUATORIAL_SPEED_KMS,
    EARTH_ORBITAL_SPEED_KMS,
    LEVEL_EARTH_ROTATION,
    LEVEL_EARTH_ORBIT,
    LEVEL_SOLAR_ORBIT,
    LEVEL_LOCAL_GROUP,
    LEVEL_LOCAL_VOID,
    LEVEL_VIRGO_PULL,
    LEVEL_LARGE_SCALE_FLOW,
    LEVEL_CMB_DIPOLE,
    ID_EARTH_ROTATION,
    ID_EARTH_ORBIT,
    ID_SOLAR_ORBIT,
    ID_LOCAL_GROUP,
    ID_LOCAL_VOID,
    ID_VIRGO_PULL,
    ID_LARGE_SCALE_FLOW,
    ID_CMB_DIPOLE,
)
from .models import CelestialTarget, HorizonDirection, LevelRole, ModelKind


@dataclass(frozen=True)
class MotionLevel:
    """
    One catalog entry.

    Attributes:
        number: Level number, 1..8, in scale order
        id: Stable identifier (e.g. "earthRotation")
        name: Display name
        velocity_km_s: Nominal speed in km/s
        kind: Motion model bound to this level
        role: ADDITIVE, or REFERENCE_ONLY for the verification target
        target: RA/Dec payload for ModelKind.FIXED_TARGET
        fixed_direction: Constant horizon direction (Earth rotation)
        implemented: False levels are skipped without error

    Note:
        The remaining fields are descriptive metadata carried through to
        the rendering layer.
    """

    number: int
    id: str
    name: str
    velocity_km_s: float
    kind: ModelKind
    role: LevelRole = LevelRole.ADDITIVE
    target: Optional[CelestialTarget] = None
    fixed_direction: Optional[HorizonDirection] = None
    implemented: bool = True
    description: str = ""
    velocity_description: str = ""
    direction_description: str = ""
    period: str = ""
    scale_ly: float = 0.0
    scale_description: str = ""
    galactic: str = ""
    discoverer: str = ""
    references: str = ""

    @property
    def is_verification_only(self) -> bool:
        return self.role is LevelRole.REFERENCE_ONLY

    def get_info(self) -> Dict[str, str]:
        """Display text for the level (name, speed, period, direction, ...)."""
        return {
            "name": self.name,
            "speed": self.velocity_description,
            "period": self.period,
            "direction": self.direction_description,
            "description": self.description,
            "coordinates": self.galactic,
            "discoverer": self.discoverer,
        }


COSMIC_LEVELS: Tuple[MotionLevel, ...] = (
    MotionLevel(
        number=LEVEL_EARTH_ROTATION,
        id=ID_EARTH_ROTATION,
        name="Earth Rotation",
        velocity_km_s=EARTH_EQUATORIAL_SPEED_KMS,  # at equator
        kind=ModelKind.EARTH_ROTATION,
        fixed_direction=HorizonDirection(math.pi / 2, 0.0),  # due East
        description="Earth rotates eastward, creating day/night cycles",
        velocity_description="~465 m/s at equator",
        direction_description="Eastward (toward sunrise)",
        period="24 hours",
        scale_ly=0.0000000013,
        scale_description="Earth diameter = 0.0000000013 light-years (~13,000 km)",
        discoverer="Leon Foucault (1851) - first direct experimental proof with pendulum",
        references="Foucault, L. (1851), Comptes rendus; Copernicus, N. (1543), De revolutionibus",
    ),
    MotionLevel(
        number=LEVEL_EARTH_ORBIT,
        id=ID_EARTH_ORBIT,
        name="Earth's Orbit Around Sun",
        velocity_km_s=EARTH_ORBITAL_SPEED_KMS,
        kind=ModelKind.EARTH_ORBIT,
        description="Earth orbits the Sun along the ecliptic plane",
        velocity_description="~30 km/s",
        direction_description="Eastward along ecliptic",
        period="365.25 days",
        scale_ly=0.00003,
        scale_description="Orbital diameter = 0.00003 light-years (~2 AU, 300 million km)",
        discoverer="Nicolaus Copernicus (1543) - heliocentric model; Johannes Kepler (1609-1619) - elliptical orbits",
        references="Copernicus (1543), De revolutionibus; Kepler (1609), Astronomia nova",
    ),
    MotionLevel(
        number=LEVEL_SOLAR_ORBIT,
        id=ID_SOLAR_ORBIT,
        name="Solar System's Galactic Orbit",
        velocity_km_s=220.0,
        kind=ModelKind.FIXED_TARGET,
        target=CelestialTarget(ra_hours=18.8167, dec_deg=35.7983),  # Solar apex, Lyra
        description="Solar System orbits around the Milky Way center while oscillating above/below the galactic plane",
        velocity_description="~220 km/s",
        direction_description="Toward Lyra/Hercules (Solar Apex)",
        period="~230 million years (orbital) + ~30 million years (galactic plane oscillation)",
        scale_ly=52000.0,
        scale_description="Galactic orbit diameter = ~52,000 light-years",
        discoverer="William Herschel (1783) - solar apex direction; Jan Oort (1927) - galactic rotation",
        references="Herschel, W. (1783); Oort, J. (1927), Bull. Astron. Inst. Netherlands, 3, 275; Dehnen & Binney (1998), MNRAS, 298, 387",
    ),
    MotionLevel(
        number=LEVEL_LOCAL_GROUP,
        id=ID_LOCAL_GROUP,
        name="Milky Way in Local Group",
        velocity_km_s=62.0,
        kind=ModelKind.FIXED_TARGET,
        target=CelestialTarget(ra_hours=0.756, dec_deg=41.36),  # LG barycenter, near M31
        description="Milky Way falls toward Local Group barycenter (on MW-Andromeda axis)",
        velocity_description="~63 km/s",
        direction_description="Toward Local Group barycenter (near M31)",
        period="~4.5 billion years until MW-M31 collision",
        scale_ly=10000000.0,
        scale_description="Local Group diameter = ~10 million light-years",
        galactic="l = 121.7°, b = -21.5°",
        discoverer="Vesto Slipher (1912) - detected Andromeda's blueshift",
        references="Makarov et al. (2025), A&A; van der Marel et al. (2012), ApJ",
    ),
    MotionLevel(
        number=LEVEL_LOCAL_VOID,
        id=ID_LOCAL_VOID,
        name="Local Void Push",
        velocity_km_s=259.0,
        kind=ModelKind.FIXED_TARGET,
        target=CelestialTarget(ra_hours=6.649, dec_deg=1.70),  # away from Local Void
        description="Local Sheet of galaxies repelled away from the underdense Local Void",
        velocity_description="~259 km/s",
        direction_description="Away from Local Void center",
        period="N/A (ongoing repulsion)",
        scale_ly=100000000.0,
        scale_description="Local Void diameter = ~100 million light-years",
        galactic="l = 210°, b = -2°",
        discoverer="Brent Tully et al. (2008) - identified void repulsion as major component",
        references="Tully et al. (2008), ApJ, 676, 184",
    ),
    MotionLevel(
        number=LEVEL_VIRGO_PULL,
        id=ID_VIRGO_PULL,
        name="Virgo Cluster Pull",
        velocity_km_s=185.0,
        kind=ModelKind.FIXED_TARGET,
        target=CelestialTarget(ra_hours=12.514, dec_deg=12.39),  # M87
        description="Local Group pulled toward Virgo Cluster (Tully 2008 component)",
        velocity_description="~185 km/s",
        direction_description="Toward M87 (Virgo Cluster center)",
        period="N/A (ongoing infall)",
        scale_ly=110000000.0,
        scale_description="Virgo Supercluster diameter = ~110 million light-years",
        galactic="l = 283.8°, b = +74.5°",
        discoverer="Marc Aaronson et al. (1982); Tully et al. (2008) quantified component",
        references="Tully et al. (2008), ApJ, 676, 184; Aaronson et al. (1982), ApJ, 258, 64",
    ),
    MotionLevel(
        number=LEVEL_LARGE_SCALE_FLOW,
        id=ID_LARGE_SCALE_FLOW,
        name="Large-Scale Flow",
        velocity_km_s=455.0,
        kind=ModelKind.FIXED_TARGET,
        target=CelestialTarget(ra_hours=12.481, dec_deg=-47.70),  # Centaurus / GA / Shapley
        description="Combined pull from Great Attractor, Shapley, and Centaurus structures",
        velocity_description="~455 km/s",
        direction_description="Toward Centaurus/Great Attractor/Shapley region",
        period="N/A (ongoing flow)",
        scale_ly=650000000.0,
        scale_description="Flow extends to Shapley Concentration at ~650 million light-years",
        galactic="l = 299°, b = +15°",
        discoverer="Tully et al. (2008) - decomposed bulk flow; Dressler (1987) - Great Attractor",
        references="Tully et al. (2008), ApJ, 676, 184; Dressler (1987), ApJ; Tully et al. (2014), Nature, 513, 71",
    ),
    MotionLevel(
        number=LEVEL_CMB_DIPOLE,
        id=ID_CMB_DIPOLE,
        name="CMB Dipole / Cosmic Rest Frame",
        velocity_km_s=CMB_DIPOLE_SPEED_KMS,
        kind=ModelKind.FIXED_TARGET,
        role=LevelRole.REFERENCE_ONLY,
        target=CelestialTarget(ra_hours=11.2, dec_deg=-7.0),  # 11h 12m, -7°
        description="Measured total motion relative to CMB - verification of vector sum, not an additive component",
        velocity_description="~370 km/s (measured total)",
        direction_description="Toward Leo/Crater boundary",
        period="N/A (cosmic reference frame)",
        scale_ly=93000000000.0,
        scale_description="Observable universe diameter = ~93 billion light-years",
        galactic="l = 264°, b = +48°",
        discoverer="Edward Conklin (1969) - first detection; Paul Henry (1971) - declination; Brian Corey & David Wilkinson (1976) - confirmation",
        references="Conklin (1969), Nature, 222, 971; Henry (1971), Nature, 231, 516; Kogut et al. (1993), ApJ, 419, 1; Planck (2020)",
    ),
)


def get_level_by_number(
    number: int, levels: Iterable[MotionLevel] = COSMIC_LEVELS
) -> MotionLevel:
    """
    Look up a level by its number.

    Raises:
        ValueError: If no level has that number
    """
    for level in levels:
        if level.number == number:
            return level
    raise ValueError(f"Unknown cosmic level number: {number}")


def get_level(level_id: str, levels: Iterable[MotionLevel] = COSMIC_LEVELS) -> MotionLevel:
    """
    Look up a level by its id (e.g. "virgoPull").

    Raises:
        ValueError: If no level has that id
    """
    for level in levels:
        if level.id == level_id:
            return level
    raise ValueError(f"Unknown cosmic level id: {level_id!r}")


def get_level_coordinates(
    level: MotionLevel,
) -> Optional[Union[HorizonDirection, CelestialTarget]]:
    """
    Direction payload of a level.

    Returns:
        HorizonDirection for a fixed horizon direction, CelestialTarget for
        an RA/Dec target, or None when the direction is computed by the
        model (Earth's orbit)
    """
    if level.fixed_direction is not None:
        return level.fixed_direction
    return level.target


def get_levels_up_to(
    max_level: int, levels: Iterable[MotionLevel] = COSMIC_LEVELS
) -> Tuple[MotionLevel, ...]:
    """Levels with number <= max_level, in catalog order."""
    return tuple(level for level in levels if level.number <= max_level)


def implemented_only(levels: Iterable[MotionLevel]) -> Tuple[MotionLevel, ...]:
    return tuple(level for level in levels if level.implemented)


def unimplemented_only(levels: Iterable[MotionLevel]) -> Tuple[MotionLevel, ...]:
    return tuple(level for level in levels if not level.implemented)


def additive_only(levels: Iterable[MotionLevel]) -> Tuple[MotionLevel, ...]:
    """Drop REFERENCE_ONLY levels; what remains may enter the vector sum."""
    return tuple(level for level in levels if level.role is LevelRole.ADDITIVE)


def get_scale_range(
    levels: Iterable[MotionLevel] = COSMIC_LEVELS,
) -> Tuple[float, float, float]:
    """
    Spatial scale covered by the catalog.

    Returns:
        Tuple[float, float, float]: (min_ly, max_ly, max/min span)
    """
    scales = [level.scale_ly for level in levels]
    smallest = min(scales)
    largest = max(scales)
    return smallest, largest, largest / smallest

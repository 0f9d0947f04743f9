"""
Global state management for cosmic_core.

This module holds the lazily-created singletons used by the skyfield-backed
Sun/Moon ephemeris:
- Ephemeris data loader (Skyfield Loader)
- Planetary ephemeris (DE421 or other JPL files)
- Timescale (for UTC/TT conversions)

The coordinate math, motion models and level catalog never read this state;
they are pure functions of their inputs. Only SkyfieldEphemeris does.
"""

import os
from typing import Optional
from skyfield.api import Loader
from skyfield.timelib import Timescale
from skyfield.jpllib import SpiceKernel

# =============================================================================
# GLOBAL STATE VARIABLES
# =============================================================================

DEFAULT_EPHEMERIS_FILE = "de421.bsp"

_EPHEMERIS_PATH: Optional[str] = None  # Custom ephemeris directory
_EPHEMERIS_FILE: str = DEFAULT_EPHEMERIS_FILE  # Ephemeris file to use
_LOADER: Optional[Loader] = None  # Skyfield data loader
_PLANETS: Optional[SpiceKernel] = None  # Loaded planetary ephemeris
_TS: Optional[Timescale] = None  # Timescale object


def _data_dir() -> str:
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def get_loader() -> Loader:
    """
    Get or create the Skyfield data loader.

    Returns:
        Loader: Skyfield Loader instance for downloading/caching ephemeris files

    Note:
        Data files are cached in the parent directory of this package by default.
    """
    global _LOADER
    if _LOADER is None:
        _LOADER = Loader(_data_dir())
    return _LOADER


def get_timescale() -> Timescale:
    """
    Get or create the Skyfield timescale object.

    Returns:
        Timescale: Skyfield timescale for time conversions (UTC, TT, etc.)
    """
    global _TS
    if _TS is None:
        _TS = get_loader().timescale()
    return _TS


def get_planets() -> SpiceKernel:
    """
    Get or load the planetary ephemeris (DE421 by default).

    Returns:
        SpiceKernel: Loaded JPL ephemeris kernel containing Sun/Moon/Earth

    Raises:
        OSError: If the ephemeris file cannot be found or downloaded

    Note:
        Searches in the path set via set_ephe_path() first, then the
        repository root, then downloads.
    """
    global _PLANETS
    if _PLANETS is None:
        load = get_loader()

        if _EPHEMERIS_PATH:
            bsp_path = os.path.join(_EPHEMERIS_PATH, _EPHEMERIS_FILE)
            if os.path.exists(bsp_path):
                _PLANETS = load(bsp_path)
                return _PLANETS

        bsp_path = os.path.join(_data_dir(), _EPHEMERIS_FILE)
        if os.path.exists(bsp_path):
            _PLANETS = load(bsp_path)
        else:
            _PLANETS = load(_EPHEMERIS_FILE)
    return _PLANETS


def get_ephemeris_file() -> str:
    """Name of the JPL kernel that get_planets() will load."""
    return _EPHEMERIS_FILE


def get_ephe_path() -> Optional[str]:
    """Custom ephemeris directory, or None when unset."""
    return _EPHEMERIS_PATH


def set_ephe_path(path: Optional[str]) -> None:
    """
    Set the directory searched first for the ephemeris file.

    Args:
        path: Directory containing ephemeris files, or None to clear.

    Note:
        Clears the cached kernel so the next get_planets() call reloads.
    """
    global _EPHEMERIS_PATH, _PLANETS
    _EPHEMERIS_PATH = path
    _PLANETS = None


def set_ephemeris_file(filename: str) -> None:
    """
    Set the JPL ephemeris file used for Sun/Moon positions.

    Args:
        filename: Name of the kernel (e.g., "de421.bsp", "de440s.bsp")

    Note:
        - de421.bsp: 1900-2050 (default, 16 MB)
        - de440s.bsp: 1849-2150 (32 MB)
        - de430.bsp: 1550-2650 (128 MB)

        Changing the file clears the cached kernel and forces a reload.
    """
    global _EPHEMERIS_FILE, _PLANETS
    _EPHEMERIS_FILE = filename
    _PLANETS = None


def reset_state() -> None:
    """Restore default configuration and drop every cached object."""
    global _EPHEMERIS_PATH, _EPHEMERIS_FILE, _LOADER, _PLANETS, _TS
    _EPHEMERIS_PATH = None
    _EPHEMERIS_FILE = DEFAULT_EPHEMERIS_FILE
    _LOADER = None
    _PLANETS = None
    _TS = None

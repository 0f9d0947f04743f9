"""
Shared utilities for comparison scripts.

This module provides common classes, functions, and constants used across
the cosmic_core vs pyswisseph comparison scripts.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

import swisseph as swe

# ============================================================================
# TOLERANCE THRESHOLDS
# ============================================================================


class Tolerances:
    """Tolerance thresholds for different comparison types (degrees)."""

    # Fixed RA/Dec target -> horizon; mean vs apparent sidereal time
    HORIZON = 0.1

    # JPL (skyfield, topocentric) vs Swiss Ephemeris (geocentric)
    SUN = 0.05
    MOON = 1.5

    # Azimuth is not compared above this altitude
    ZENITH_CUTOFF = 85.0


# ============================================================================
# TEST SUBJECTS
# ============================================================================

# Format: (Name, Year, Month, Day, Hour, Lat, Lon)
STANDARD_SUBJECTS = [
    ("Standard J2000", 2000, 1, 1, 12.0, 0.0, 0.0),
    ("Rome", 1980, 5, 20, 14.5, 41.9028, 12.4964),
    ("New York", 2024, 11, 5, 9.0, 40.7128, -74.0060),
    ("Sydney", 1950, 10, 15, 22.0, -33.8688, 151.2093),
    ("Dublin", 2025, 1, 1, 12.0, 53.35, -6.26),
]

HIGH_LATITUDE_SUBJECTS = [
    ("Tromso (Arctic)", 1990, 1, 15, 12.0, 69.6492, 18.9553),
    ("McMurdo (Antarctic)", 2005, 6, 21, 0.0, -77.8463, 166.6681),
]

EQUATORIAL_SUBJECTS = [
    ("Equator", 1975, 3, 21, 12.0, 0.0, 45.0),
]

ALL_SUBJECTS = STANDARD_SUBJECTS + HIGH_LATITUDE_SUBJECTS + EQUATORIAL_SUBJECTS

# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================


def angular_diff(val1: float, val2: float) -> float:
    """Calculate angular difference accounting for 360° wrap."""
    d = abs(val1 - val2) % 360.0
    if d > 180:
        d = 360 - d
    return d


def subject_datetime(year: int, month: int, day: int, hour: float) -> datetime:
    """Aware UTC datetime for a (year, month, day, decimal hour) subject."""
    seconds = round(hour * 3600)
    return datetime(
        year, month, day, seconds // 3600, (seconds % 3600) // 60, seconds % 60,
        tzinfo=timezone.utc,
    )


def swe_horizon(jd_ut: float, lat: float, lon: float, mode: int, coords) -> tuple:
    """
    Swiss Ephemeris horizon position, azimuth converted to North-through-East.

    Returns:
        (azimuth_deg, true_altitude_deg)
    """
    az_south, true_alt, _ = swe.azalt(jd_ut, mode, (lon, lat, 0.0), 0.0, 0.0, coords)
    return (az_south + 180.0) % 360.0, true_alt


def format_coord(value: float, decimals: int = 4, width: int = 10) -> str:
    """Format coordinate value with consistent width."""
    return f"{value:{width}.{decimals}f}"


def format_diff(value: float, decimals: int = 6, width: int = 10) -> str:
    """Format difference value with consistent width."""
    return f"{value:{width}.{decimals}f}"


def format_status(passed: bool) -> str:
    """Format pass/fail status."""
    return "✓" if passed else "✗"


# ============================================================================
# COMPARISON RESULT CLASSES
# ============================================================================


@dataclass
class HorizonResult:
    """Stores a horizon-position comparison result."""

    az_swe: float = 0.0
    alt_swe: float = 0.0
    az_py: float = 0.0
    alt_py: float = 0.0

    diff_az: float = 0.0
    diff_alt: float = 0.0

    passed: bool = False
    error_swe: Optional[str] = None
    error_py: Optional[str] = None

    def calculate_diffs(self):
        """Calculate all differences."""
        self.diff_az = angular_diff(self.az_swe, self.az_py)
        self.diff_alt = abs(self.alt_swe - self.alt_py)

    def check_passed(self, tolerance: float) -> bool:
        """Check if within tolerance; azimuth is skipped near the zenith."""
        if self.error_swe or self.error_py:
            self.passed = False
            return False
        az_ok = abs(self.alt_swe) > Tolerances.ZENITH_CUTOFF or self.diff_az < tolerance
        self.passed = az_ok and self.diff_alt < tolerance
        return self.passed

    @property
    def max_diff(self) -> float:
        if abs(self.alt_swe) > Tolerances.ZENITH_CUTOFF:
            return self.diff_alt
        return max(self.diff_az, self.diff_alt)


# ============================================================================
# SUMMARY STATISTICS
# ============================================================================


class TestStatistics:
    """Tracks and reports test statistics."""

    __test__ = False  # not a pytest class

    def __init__(self):
        self.total = 0
        self.passed = 0
        self.failed = 0
        self.errors = 0
        self.max_diff = 0.0
        self.diff_sum = 0.0

    def add_result(self, passed: bool, diff: float = 0.0, error: bool = False):
        """Add a test result."""
        self.total += 1
        if error:
            self.errors += 1
        elif passed:
            self.passed += 1
        else:
            self.failed += 1

        if not error:
            self.max_diff = max(self.max_diff, diff)
            self.diff_sum += diff

    def merge(self, other: "TestStatistics") -> None:
        self.total += other.total
        self.passed += other.passed
        self.failed += other.failed
        self.errors += other.errors
        self.max_diff = max(self.max_diff, other.max_diff)
        self.diff_sum += other.diff_sum

    def avg_diff(self) -> float:
        """Calculate average difference (excluding errors)."""
        count = self.total - self.errors
        return self.diff_sum / count if count > 0 else 0.0

    def pass_rate(self) -> float:
        """Calculate pass rate (excluding errors)."""
        count = self.total - self.errors
        return (self.passed / count * 100) if count > 0 else 0.0

    def print_summary(self, title: str = "SUMMARY"):
        """Print formatted summary."""
        print()
        print("=" * 80)
        print(title)
        print("=" * 80)
        print(f"Total tests:   {self.total}")
        print(f"Passed:        {self.passed} ✓")
        print(f"Failed:        {self.failed} ✗")
        print(f"Errors:        {self.errors}")
        if self.total > self.errors:
            print(f"Pass rate:     {self.pass_rate():.1f}%")
            print(f"Max diff:      {self.max_diff:.6f}")
            print(f"Avg diff:      {self.avg_diff():.6f}")
        print("=" * 80)


# ============================================================================
# COMMAND LINE HELPERS
# ============================================================================


def parse_args(args: List[str]) -> dict:
    """Parse common command line arguments."""
    return {
        "verbose": "--verbose" in args or "-v" in args,
        "quiet": "--quiet" in args or "-q" in args,
        "help": "--help" in args or "-h" in args,
    }


def print_header(title: str):
    """Print formatted header."""
    print("=" * 80)
    print(title)
    print("=" * 80)
    print()

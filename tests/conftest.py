"""
pytest configuration and shared fixtures for cosmic_core tests.
"""

import math
from datetime import datetime, timezone

import pytest
import swisseph as swe

import cosmic_core as cosmic
from cosmic_core import state


# ============================================================================
# TEST DATA FIXTURES
# ============================================================================


@pytest.fixture
def j2000():
    """J2000.0 as an aware UTC datetime."""
    return datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_instant():
    """Reference instant used by the end-to-end snapshot tests."""
    return datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def dublin():
    """Dublin, Ireland."""
    return cosmic.GeoObserver(53.35, -6.26)


@pytest.fixture
def test_dates():
    """Collection of UTC instants spanning different eras."""
    return [
        datetime(2000, 1, 1, 12, tzinfo=timezone.utc),
        datetime(1980, 5, 20, 0, tzinfo=timezone.utc),
        datetime(2024, 11, 5, 18, tzinfo=timezone.utc),
        datetime(2010, 6, 21, 3, 30, tzinfo=timezone.utc),
    ]


@pytest.fixture
def test_locations():
    """Collection of test locations with various latitudes."""
    return [
        ("Rome", 41.9028, 12.4964),
        ("London", 51.5074, -0.1278),
        ("New York", 40.7128, -74.0060),
        ("Sydney", -33.8688, 151.2093),
        ("Tromso", 69.6492, 18.9553),  # Arctic
        ("McMurdo", -77.8419, 166.6863),  # Antarctic
        ("Equator", 0.0, 0.0),
    ]


@pytest.fixture
def bright_stars():
    """(name, RA hours, Dec degrees), J2000."""
    return [
        ("Vega", 18.6156, 38.7837),
        ("Sirius", 6.7525, -16.7161),
        ("Polaris", 2.5303, 89.2641),
        ("Canopus", 6.3992, -52.6957),
        ("Arcturus", 14.2610, 19.1824),
        ("Betelgeuse", 5.9195, 7.4071),
    ]


# ============================================================================
# TOLERANCE FIXTURES
# ============================================================================


@pytest.fixture
def default_tolerances():
    """Default tolerance values for comparisons."""
    return {
        "exact": 1e-9,  # degrees, pure identities
        "sidereal": 0.01,  # degrees, GMST vs GAST
        "horizon": 1.0,  # degrees, mean vs apparent sidereal time
        "sun": 0.05,  # degrees, JPL (topocentric) vs Swiss Ephemeris (geocentric)
        "moon": 1.5,  # degrees, lunar parallax between the two
    }


# ============================================================================
# COMPARISON FIXTURES
# ============================================================================


@pytest.fixture
def swisseph_horizon():
    """Horizon position of an RA/Dec target computed by Swiss Ephemeris."""

    def _horizon(instant, lat, lon, ra_hours, dec_deg):
        """
        Returns:
            (azimuth_deg, altitude_deg): azimuth from North through East
        """
        hour = instant.hour + instant.minute / 60.0 + instant.second / 3600.0
        jd_ut = swe.julday(instant.year, instant.month, instant.day, hour)
        az_south, true_alt, _ = swe.azalt(
            jd_ut, swe.EQU2HOR, (lon, lat, 0.0), 0.0, 0.0, (ra_hours * 15.0, dec_deg, 1.0)
        )
        # Swiss Ephemeris measures azimuth from South, westward
        return (az_south + 180.0) % 360.0, true_alt

    return _horizon


@pytest.fixture
def skyfield_planets():
    """Loaded JPL kernel; skips the test when it cannot be loaded (offline)."""
    try:
        return state.get_planets()
    except Exception as exc:
        pytest.skip(f"JPL ephemeris unavailable: {exc}")


# ============================================================================
# EPHEMERIS FIXTURES
# ============================================================================


class StaticEphemeris:
    """Offline Sun/Moon source: Sun due South at 20°, Moon due West at -5°."""

    def __init__(self):
        self.calls = []

    def position_of_sun(self, instant, lat, lon):
        self.calls.append(("sun", instant, lat, lon))
        return cosmic.HorizonDirection(0.0, math.radians(20.0))

    def position_of_moon(self, instant, lat, lon):
        self.calls.append(("moon", instant, lat, lon))
        return cosmic.HorizonDirection(math.pi / 2, math.radians(-5.0))


@pytest.fixture
def static_ephemeris():
    """Sun/Moon source that needs no JPL kernel; records its calls."""
    return StaticEphemeris()


@pytest.fixture
def offline_context(static_ephemeris):
    """Full catalog with the offline Sun/Moon source."""
    return cosmic.CosmicContext(ephemeris=static_ephemeris)


# ============================================================================
# SETUP/TEARDOWN
# ============================================================================


@pytest.fixture(autouse=True)
def reset_ephemeris_state():
    """Reset ephemeris configuration around each test."""
    state.reset_state()

    yield

    state.reset_state()


# ============================================================================
# MARKERS
# ============================================================================


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")

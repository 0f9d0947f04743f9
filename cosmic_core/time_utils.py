"""
Time conversion utilities for cosmic_core.

All formulas work on UTC. The J2000.0 reference is built as an explicit UTC
instant (2000-01-01T12:00Z), so results never depend on the host timezone.

Functions:
- to_utc: normalize a datetime to an aware UTC datetime
- days_since_j2000: signed fractional days since J2000.0
- julian_day: Julian Day on the UTC scale
"""

from datetime import datetime, timedelta, timezone

from .constants import J2000_EPOCH, J2000_JD

_ONE_DAY = timedelta(days=1)


def to_utc(instant: datetime) -> datetime:
    """
    Normalize an instant to an aware UTC datetime.

    Args:
        instant: Aware datetime in any zone, or naive datetime

    Returns:
        datetime: Same instant with tzinfo=UTC

    Raises:
        TypeError: If instant is not a datetime

    Note:
        Naive datetimes are taken to already be UTC. They are never
        interpreted as host-local wall-clock time.
    """
    if not isinstance(instant, datetime):
        raise TypeError(
            f"instant must be a datetime, got {type(instant).__name__}: {instant!r}"
        )
    if instant.tzinfo is None or instant.tzinfo.utcoffset(instant) is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def days_since_j2000(instant: datetime) -> float:
    """
    Signed fractional days between instant and J2000.0.

    Args:
        instant: Datetime (see to_utc for naive handling)

    Returns:
        float: (instant - J2000.0) in days; negative before the epoch

    Note:
        Exactly 0 at the epoch, exactly 1 one day later. The value is linear
        in elapsed time, keeping sub-day precision for sidereal time.

    Example:
        >>> days_since_j2000(datetime(2001, 1, 1, 12, tzinfo=timezone.utc))
        366.0
    """
    return (to_utc(instant) - J2000_EPOCH) / _ONE_DAY


days_since_epoch = days_since_j2000


def julian_day(instant: datetime) -> float:
    """
    Julian Day (UTC scale) of an instant.

    Note:
        JD 2451545.0 = 2000-01-01 12:00 (J2000.0). No UT1/TT distinction is
        made; this package's precision goals do not need it.
    """
    return J2000_JD + days_since_j2000(instant)

"""
Utility functions for cosmic_core.

Angle normalization and numeric domain guards shared by the coordinate
transforms and the vector summation engine.
"""

import math

from .constants import TWO_PI


def difdeg2n(p1: float, p2: float) -> float:
    """
    Calculate distance in degrees p1 - p2 normalized to [-180;180].

    Computes the signed angular difference, handling 360° wrapping.

    Args:
        p1: First angle in degrees
        p2: Second angle in degrees

    Returns:
        Normalized difference in range [-180, 180]

    Examples:
        >>> difdeg2n(10, 20)
        -10.0
        >>> difdeg2n(350, 10)
        -20.0
        >>> difdeg2n(10, 350)
        20.0
        >>> difdeg2n(180, 0)
        180.0
    """
    diff = (p1 - p2) % 360.0
    if diff > 180.0:
        diff -= 360.0
    return diff


def normalize_degrees(angle: float) -> float:
    """
    Wrap an angle into [0, 360).

    Uses a double modulo so negative inputs wrap correctly.
    """
    wrapped = ((angle % 360.0) + 360.0) % 360.0
    # -1e-17 % 360 rounds to 360.0
    return 0.0 if wrapped >= 360.0 else wrapped


def normalize_radians(angle: float) -> float:
    """Wrap an angle into [0, 2π)."""
    wrapped = angle % TWO_PI
    return 0.0 if wrapped >= TWO_PI else wrapped


def normalize_signed_radians(angle: float) -> float:
    """Wrap an angle into (-π, π]."""
    wrapped = normalize_radians(angle)
    if wrapped > math.pi:
        wrapped -= TWO_PI
    return wrapped


def clamp_unit(value: float) -> float:
    """
    Clamp a value into [-1, 1] before asin/acos.

    sin²x + cos²x can evaluate to 1.0000000000000002, which math.asin
    rejects with a domain error.
    """
    return max(-1.0, min(1.0, value))

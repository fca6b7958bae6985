"""Conversions between the two angle conventions used by the game.

Game angles are radians measured counter-clockwise from +x, as returned by
``atan2``. User angles are compass degrees, clockwise from north (+y).

    game (radians)              user (degrees)

    3/4 PI   PI/2   PI/4        315     0     45
    PI/-PI    o      0          270     o     90
    -3/4 PI -PI/2  -PI/4        225    180   135
"""
import math

import numpy as np
from numba import njit

TAU = 2.0 * math.pi


@njit(cache=True)
def wrap_degrees(degrees):
    """Wrap an angle in degrees into [0, 360)."""
    degrees = float(degrees)
    if not math.isfinite(degrees):
        return math.nan
    degrees = np.fmod(degrees, 360.0)
    while degrees < 0.0:
        degrees += 360.0
    while degrees >= 360.0:
        degrees -= 360.0
    return degrees


@njit(cache=True)
def wrap_radians(radians):
    """Wrap an angle in radians into (-pi, pi]."""
    radians = float(radians)
    if not math.isfinite(radians):
        return math.nan
    radians = np.fmod(radians, TAU)
    while radians <= -math.pi:
        radians += TAU
    while radians > math.pi:
        radians -= TAU
    return radians


@njit(cache=True)
def game_to_user(radians):
    """Convert a game angle (radians) into a user angle (degrees).

    Args:
        radians (float): Counter-clockwise angle from +x.

    Returns:
        float: Clockwise angle from north, in [0, 360).
    """
    return wrap_degrees(90.0 - math.degrees(radians))


@njit(cache=True)
def user_to_game(degrees):
    """Convert a user angle (degrees) into a game angle (radians).

    Args:
        degrees (float): Clockwise angle from north.

    Returns:
        float: Counter-clockwise angle from +x, in (-pi, pi].
    """
    return wrap_radians(math.radians(90.0 - degrees))

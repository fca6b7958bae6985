"""Compiled loops over (N, 2) float32 point arrays.

Every kernel writes into a caller supplied `out` array; see `batch` for
the allocating wrappers. `error_model="numpy"` keeps 0/0 as nan instead of
raising, matching `Point.unit`.
"""
import math

import numpy as np
from numba import njit
from numpy.typing import NDArray

from gamephysics.angles import game_to_user


@njit(cache=True, error_model="numpy")
def squared(
    points_in: NDArray[np.float32],
    out: NDArray[np.float32]
):
    for i in np.arange(points_in.shape[0]):
        x = points_in[i, 0]
        y = points_in[i, 1]
        out[i] = x * x + y * y


@njit(cache=True, error_model="numpy")
def magnitudes(
    points_in: NDArray[np.float32],
    out: NDArray[np.float32]
):
    for i in np.arange(points_in.shape[0]):
        x = points_in[i, 0]
        y = points_in[i, 1]
        out[i] = math.sqrt(x * x + y * y)


@njit(cache=True, error_model="numpy")
def units(
    points_in: NDArray[np.float32],
    out: NDArray[np.float32]
):
    for i in np.arange(points_in.shape[0]):
        x = points_in[i, 0]
        y = points_in[i, 1]
        n = math.sqrt(x * x + y * y)
        out[i, 0] = x / n
        out[i, 1] = y / n


@njit(cache=True, error_model="numpy")
def distances(
    origin: NDArray[np.float32],
    targets_in: NDArray[np.float32],
    out: NDArray[np.float32]
):
    for i in np.arange(targets_in.shape[0]):
        dx = origin[0] - targets_in[i, 0]
        dy = origin[1] - targets_in[i, 1]
        out[i] = math.sqrt(dx * dx + dy * dy)


@njit(cache=True, error_model="numpy")
def angles_to(
    origin: NDArray[np.float32],
    targets_in: NDArray[np.float32],
    out: NDArray[np.float32]
):
    for i in np.arange(targets_in.shape[0]):
        dx = targets_in[i, 0] - origin[0]
        dy = targets_in[i, 1] - origin[1]
        out[i] = math.atan2(dy, dx)


@njit(cache=True, error_model="numpy")
def movements_to(
    origin: NDArray[np.float32],
    targets_in: NDArray[np.float32],
    out: NDArray[np.float32]
):
    for i in np.arange(targets_in.shape[0]):
        dx = targets_in[i, 0] - origin[0]
        dy = targets_in[i, 1] - origin[1]
        a = math.atan2(dy, dx)
        out[i, 0] = math.cos(a)
        out[i, 1] = math.sin(a)


@njit(cache=True, error_model="numpy")
def rotated(
    points_in: NDArray[np.float32],
    radians: np.float64,
    out: NDArray[np.float32]
):
    c = math.cos(radians)
    s = math.sin(radians)
    for i in np.arange(points_in.shape[0]):
        x = points_in[i, 0]
        y = points_in[i, 1]
        out[i, 0] = x * c - y * s
        out[i, 1] = x * s + y * c


@njit(cache=True, error_model="numpy")
def user_angles(
    points_in: NDArray[np.float32],
    out: NDArray[np.float32]
):
    for i in np.arange(points_in.shape[0]):
        x = points_in[i, 0]
        y = points_in[i, 1]
        if x == 0 and y == 0:
            out[i] = 0.0
            continue
        out[i] = game_to_user(math.atan2(y, x))
        # 359.99999... rounds up to 360 in single precision
        if out[i] >= 360.0:
            out[i] = 0.0

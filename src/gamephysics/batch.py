"""Point operations over many points at once.

Points are held in (N, 2) float32 arrays: column 0 is x, column 1 is y.
Each function mirrors the `Point` method of the same meaning, copies its
inputs and returns a new array unless an `out` buffer is supplied.
"""
import logging
from typing import Iterable

import numpy as np
from numpy.typing import NDArray

from gamephysics import logger, kernel
from gamephysics.point import Point

Points_T = NDArray[np.float32]


def pack(points:Iterable[Point | tuple[float, float]]) -> Points_T:
    """Pack points (or (x, y) pairs) into a new (N, 2) float32 array."""
    rows = [p.as_tuple() if isinstance(p, Point) else tuple(p) for p in points]
    if not rows:
        return np.empty((0, 2), dtype=np.float32)
    return as_points(np.array(rows, dtype=np.float32))


def unpack(points:Points_T) -> list[Point]:
    points = as_points(points)
    return [Point(x, y) for x, y in points]


def as_points(points) -> Points_T:
    """Validate and copy an array-like of points into (N, 2) float32."""
    arr = np.array(points, dtype=np.float32, order="C", copy=True)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected an (N, 2) array of points, got shape {arr.shape}.")
    return arr


def as_origin(origin:Point | NDArray) -> NDArray[np.float32]:
    if isinstance(origin, Point):
        return np.array(origin.as_tuple(), dtype=np.float32)
    arr = np.array(origin, dtype=np.float32, order="C", copy=True)
    if arr.shape != (2,):
        raise ValueError(f"Expected a (2,) origin, got shape {arr.shape}.")
    return arr


def _out(out:NDArray|None, shape:tuple[int, ...]) -> NDArray[np.float32]:
    if out is None:
        return np.empty(shape, dtype=np.float32)
    if out.shape != shape or out.dtype != np.float32 or not out.flags.c_contiguous:
        raise ValueError(
            f"Output buffer must be C-contiguous float32 with shape {shape}, "
            f"got {out.dtype} {out.shape}."
        )
    return out


### LENGTHS ###


def squared(points, out=None) -> NDArray[np.float32]:
    points = as_points(points)
    out = _out(out, (points.shape[0],))
    kernel.squared(points, out)
    return out


def magnitudes(points, out=None) -> NDArray[np.float32]:
    points = as_points(points)
    out = _out(out, (points.shape[0],))
    kernel.magnitudes(points, out)
    return out


def units(points, out=None) -> Points_T:
    """Unit vectors; rows of zero length become nan like `Point.unit`."""
    points = as_points(points)
    out = _out(out, points.shape)
    kernel.units(points, out)
    if logger.isEnabledFor(logging.DEBUG):
        zero = int(np.count_nonzero((points[:, 0] == 0) & (points[:, 1] == 0)))
        if zero:
            logger.debug("units() got %s zero vectors out of %s", zero, points.shape[0])
    return out


def distances(origin, targets, out=None) -> NDArray[np.float32]:
    origin = as_origin(origin)
    targets = as_points(targets)
    out = _out(out, (targets.shape[0],))
    kernel.distances(origin, targets, out)
    return out


### ANGLES ###


def angles_to(origin, targets, out=None) -> NDArray[np.float32]:
    """Game angle (radians) from origin to each target."""
    origin = as_origin(origin)
    targets = as_points(targets)
    out = _out(out, (targets.shape[0],))
    kernel.angles_to(origin, targets, out)
    return out


def movements_to(origin, targets, out=None) -> Points_T:
    """Unit steps from origin towards each target, (1, 0) for coincident ones."""
    origin = as_origin(origin)
    targets = as_points(targets)
    out = _out(out, targets.shape)
    kernel.movements_to(origin, targets, out)
    return out


def rotated(points, radians:float, out=None) -> Points_T:
    points = as_points(points)
    out = _out(out, points.shape)
    kernel.rotated(points, float(radians), out)
    return out


def user_angles(points, out=None) -> NDArray[np.float32]:
    """Compass headings in degrees; zero rows point north."""
    points = as_points(points)
    out = _out(out, (points.shape[0],))
    kernel.user_angles(points, out)
    return out

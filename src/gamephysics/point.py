"""Single precision 2D point/vector for game movement code.

A `Point` is either a position or a displacement; the type does not tell
them apart. All operations return new instances.
"""
import numbers
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from gamephysics import logger
from gamephysics.angles import game_to_user, user_to_game
from gamephysics.fmt import point_format

# Default threshold for `Point.try_unit`
UNIT_EPSILON = 1e-7


@dataclass(frozen=True, eq=False, repr=False)
class Point:
    x: np.float32
    y: np.float32

    def __post_init__(self):
        object.__setattr__(self, "x", np.float32(self.x))
        object.__setattr__(self, "y", np.float32(self.y))

    @classmethod
    def from_tuple(cls, pair) -> "Point":
        if len(pair) != 2:
            raise ValueError(f"Expected an (x, y) pair, got {len(pair)} values.")
        return cls(pair[0], pair[1])

    @classmethod
    def from_complex(cls, z:complex) -> "Point":
        """Point from the x+yj form used for positions in numpy arrays."""
        return cls(z.real, z.imag)

    @classmethod
    def from_polar(cls, length:float, radians:float) -> "Point":
        """Point at `length` along a game angle."""
        theta = np.float32(radians)
        length = np.float32(length)
        return cls(length * np.cos(theta), length * np.sin(theta))

    @classmethod
    def from_user_angle(cls, degrees:float, length:float = 1.0) -> "Point":
        """Point at `length` along a compass heading (0 = north, 90 = east)."""
        return cls.from_polar(length, user_to_game(degrees))

    def as_tuple(self) -> Tuple[float, float]:
        return (float(self.x), float(self.y))

    def to_complex(self) -> complex:
        return complex(self.x, self.y)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return bool(self.x == other.x and self.y == other.y)

    def __hash__(self):
        return hash((float(self.x), float(self.y)))

    def __str__(self):
        return point_format(self.x, self.y)

    def __repr__(self):
        return f"Point({float(self.x)!r}, {float(self.y)!r})"

    ### ARITHMETIC ###

    def add(self, other:"Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def sub(self, other:"Point") -> "Point":
        """Elementwise self - other (vector from other to self)."""
        return Point(self.x - other.x, self.y - other.y)

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.sub(other)

    def __neg__(self):
        return Point(-self.x, -self.y)

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        s = np.float32(scalar)
        return Point(self.x * s, self.y * s)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        s = np.float32(scalar)
        with np.errstate(divide="ignore", invalid="ignore"):
            return Point(self.x / s, self.y / s)

    def __abs__(self):
        return self.abs()

    def dot(self, other:"Point") -> np.float32:
        return self.x * other.x + self.y * other.y

    def cross(self, other:"Point") -> np.float32:
        """2D cross product returning a scalar (z-component)."""
        return self.x * other.y - self.y * other.x

    ### LENGTH ###

    def squared(self) -> np.float32:
        """Squared length, x² + y². Overflows to inf for huge components."""
        with np.errstate(over="ignore"):
            return self.x * self.x + self.y * self.y

    def abs(self) -> np.float32:
        """Euclidean length of the vector."""
        return np.sqrt(self.squared())

    def unit(self) -> "Point":
        """Vector of length 1 in the same direction.

        The zero vector has no direction: the result is (nan, nan). Use
        `try_unit` to get None instead.
        """
        n = self.abs()
        if n == 0:
            logger.debug("unit() of zero vector %s yields nan", self)
        return self / n

    def try_unit(self, eps:float = UNIT_EPSILON) -> Optional["Point"]:
        """Like `unit`, but None when the length is below `eps` or nan.

        `eps` defaults to `UNIT_EPSILON`.
        """
        n = self.abs()
        if not n >= eps:
            return None
        return self / n

    def distance_to(self, other:"Point") -> np.float32:
        return self.sub(other).abs()

    ### ANGLES ###

    def angle(self) -> np.float32:
        """Game angle of the vector in radians, in (-pi, pi]."""
        return np.arctan2(self.y, self.x)

    def angle_to(self, other:"Point") -> np.float32:
        """Game angle in radians of the direction from self to other.

        Coincident points give 0.0.
        """
        return other.sub(self).angle()

    def movement_to(self, other:"Point") -> "Point":
        """Unit step from self towards other, (1, 0) if they coincide."""
        a = self.angle_to(other)
        return Point(np.cos(a), np.sin(a))

    def rotated(self, radians:float) -> "Point":
        """Rotate counter-clockwise around the origin."""
        theta = np.float32(radians)
        c, s = np.cos(theta), np.sin(theta)
        return Point(self.x * c - self.y * s, self.x * s + self.y * c)

    def user_angle(self) -> np.float32:
        """Compass heading in degrees: 0 north, 90 east, 180 south, 270 west.

        The zero vector points north.
        """
        if self.x == 0 and self.y == 0:
            return np.float32(0.0)
        degrees = np.float32(game_to_user(self.angle()))
        # 359.99999... rounds up to 360 in single precision
        if degrees >= 360:
            return np.float32(0.0)
        return degrees

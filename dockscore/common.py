"""Basic numeric types and helpers shared by the scoring code."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Union

Number = Union[int, float]

PI = 3.1415926535897931
MAX_FL = sys.float_info.max
EPSILON_FL = sys.float_info.epsilon
FL_TOLERANCE = 0.001
NOT_A_NUM = math.nan

# Multiply pK by this to get free energy in kcal/mol:
#   E = RT ln(K) = -RT * ln(10) * pK
PK_TO_ENERGY_FACTOR = -8.31 * 0.001 * 300 / 4.184 * math.log(10.0)


class InternalError(Exception):
    """Raised when an internal consistency check fails."""


@dataclass(frozen=True)
class Vec:
    """An immutable three-dimensional vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __getitem__(self, i: int) -> float:
        return (self.x, self.y, self.z)[i]

    def norm_sqr(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def norm(self) -> float:
        return math.sqrt(self.norm_sqr())

    def dot(self, other: Vec) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def __add__(self, other: Union[Vec, Number]) -> Vec:
        if isinstance(other, Vec):
            return Vec(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, (int, float)):
            return Vec(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __sub__(self, other: Union[Vec, Number]) -> Vec:
        if isinstance(other, Vec):
            return Vec(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, (int, float)):
            return Vec(self.x - other, self.y - other, self.z - other)
        return NotImplemented

    def __mul__(self, s: Number) -> Vec:
        if isinstance(s, (int, float)):
            return Vec(self.x * s, self.y * s, self.z * s)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> Vec:
        return Vec(-self.x, -self.y, -self.z)


ZERO_VEC = Vec(0.0, 0.0, 0.0)
MAX_VEC = Vec(MAX_FL, MAX_FL, MAX_FL)


@dataclass(frozen=True)
class Mat:
    """A 3x3 matrix given row by row."""

    xx: float
    xy: float
    xz: float
    yx: float
    yy: float
    yz: float
    zx: float
    zy: float
    zz: float

    def _rows(self) -> tuple[tuple[float, float, float], ...]:
        return (
            (self.xx, self.xy, self.xz),
            (self.yx, self.yy, self.yz),
            (self.zx, self.zy, self.zz),
        )

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        return self._rows()[i][j]

    def apply(self, v: Vec) -> Vec:
        """Return the product of this matrix with ``v``."""
        r = self._rows()
        return Vec(*(row[0] * v.x + row[1] * v.y + row[2] * v.z for row in r))

    def scaled(self, s: float) -> Mat:
        return Mat(*(value * s for row in self._rows() for value in row))

    def __matmul__(self, v: Vec) -> Vec:
        return self.apply(v)


def cross_product(a: Vec, b: Vec) -> Vec:
    return Vec(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def elementwise_product(a: Vec, b: Vec) -> Vec:
    return Vec(a.x * b.x, a.y * b.y, a.z * b.z)


def fl_to_sz(x: float, max_sz: int) -> int:
    """Convert ``x`` to a non-negative integer clamped to ``[0, max_sz]``."""
    if x <= 0:
        return 0
    if x >= max_sz:
        return max_sz
    return min(int(x), max_sz)


def eq(a, b) -> bool:
    """Compare numbers, vectors or sequences within ``FL_TOLERANCE``."""
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return abs(a - b) < FL_TOLERANCE
    a_items = list(a)
    b_items = list(b)
    return len(a_items) == len(b_items) and all(
        eq(x, y) for x, y in zip(a_items, b_items)
    )


def not_max(x: float) -> bool:
    return x < 0.1 * MAX_FL


def vec_distance_sqr(a: Vec, b: Vec) -> float:
    return (a.x - b.x) ** 2 + (a.y - b.y) ** 2 + (a.z - b.z) ** 2


def find_min(values: Sequence) -> int:
    """Index of the first smallest element, or ``len(values)`` when empty."""
    return min(range(len(values)), key=values.__getitem__, default=len(values))


def normalized_angle(x: float) -> float:
    """Return ``x`` shifted by whole turns into ``[-pi, pi]``."""
    while True:
        if x > 3 * PI:
            x -= 2 * PI * math.ceil((x - PI) / (2 * PI))
        elif x < -3 * PI:
            x += 2 * PI * math.ceil((-x - PI) / (2 * PI))
        elif x > PI:
            return x - 2 * PI
        elif x < -PI:
            return x + 2 * PI
        else:
            return x


def pk_to_energy(pk: float) -> float:
    return PK_TO_ENERGY_FACTOR * pk


def vec_sum(vectors: Iterable[Vec]) -> Vec:
    total = ZERO_VEC
    for v in vectors:
        total = total + v
    return total
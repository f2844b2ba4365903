"""Trilinearly interpolated energy grid over a box."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from .array3d import Array3D
from .common import ZERO_VEC, Vec, elementwise_product
from .curl import curl, curl_deriv
from .grid_dim import GridDim


class Grid:
    """Energy values sampled on a regular grid, with interpolation.

    Points outside the box are clamped to its surface, and a linear penalty
    of ``slope`` per unit of distance outside is added.
    """

    def __init__(self, gd: Optional[Sequence[GridDim]] = None) -> None:
        self._init = ZERO_VEC
        self._range = Vec(1.0, 1.0, 1.0)
        self._factor = Vec(1.0, 1.0, 1.0)
        self._dim_fl_minus_1 = Vec(-1.0, -1.0, -1.0)
        self._factor_inv = Vec(1.0, 1.0, 1.0)
        self.data = Array3D()
        if gd is not None:
            self.init(gd)

    def init(self, gd: Sequence[GridDim]) -> None:
        """Size the grid to ``gd``: ``n + 1`` sample points along each axis."""
        dims = list(gd)
        if len(dims) != 3:
            raise ValueError(f"a grid needs three dimensions, got {len(dims)}")
        spans = [d.span() for d in dims]
        if any(not span > 0 for span in spans):
            raise ValueError(f"grid spans must be positive, got {spans}")
        self.data.resize(*(d.n + 1 for d in dims))
        self._init = Vec(*(d.begin for d in dims))
        self._range = Vec(*spans)
        self._dim_fl_minus_1 = Vec(*(self.data.dim(i) - 1.0 for i in range(3)))
        factors = [m / r for m, r in zip(self._dim_fl_minus_1, self._range)]
        self._factor = Vec(*factors)
        self._factor_inv = Vec(*(1 / f if f else math.inf for f in factors))

    def index_to_argument(self, x: int, y: int, z: int) -> Vec:
        """Coordinates of the sample point with indexes ``(x, y, z)``."""
        return Vec(
            self._init.x + self._factor_inv.x * x,
            self._init.y + self._factor_inv.y * y,
            self._init.z + self._factor_inv.z * z,
        )

    def initialized(self) -> bool:
        return self.data.dim0 > 0 and self.data.dim1 > 0 and self.data.dim2 > 0

    def evaluate(self, location: Vec, slope: float, v: float) -> float:
        """Interpolated energy at ``location``, softly capped by ``v``."""
        value, _ = self._evaluate(location, slope, v, want_deriv=False)
        return value

    def evaluate_deriv(self, location: Vec, slope: float, v: float) -> tuple[float, Vec]:
        """Interpolated energy at ``location`` and its gradient."""
        value, deriv = self._evaluate(location, slope, v, want_deriv=True)
        assert deriv is not None
        return value, deriv

    def _evaluate(
        self, location: Vec, slope: float, v: float, want_deriv: bool
    ) -> tuple[float, Optional[Vec]]:
        if not all(self.data.dim(i) >= 2 for i in range(3)):
            raise ValueError("grid is not initialized")

        s = elementwise_product(location - self._init, self._factor)
        miss: list[float] = []
        region: list[int] = []
        base: list[int] = []
        frac: list[float] = []
        for i in range(3):
            si = s[i]
            top = self._dim_fl_minus_1[i]
            if si < 0:
                miss.append(-si)
                region.append(-1)
                base.append(0)
                frac.append(0.0)
            elif si >= top:
                miss.append(si - top)
                region.append(1)
                base.append(self.data.dim(i) - 2)
                frac.append(1.0)
            else:
                index = int(si)
                miss.append(0.0)
                region.append(0)
                base.append(index)
                frac.append(si - index)

        penalty = slope * Vec(*miss).dot(self._factor_inv)

        x0, y0, z0 = base
        x1, y1, z1 = x0 + 1, y0 + 1, z0 + 1
        d = self.data
        f000 = d[x0, y0, z0]
        f100 = d[x1, y0, z0]
        f010 = d[x0, y1, z0]
        f110 = d[x1, y1, z0]
        f001 = d[x0, y0, z1]
        f101 = d[x1, y0, z1]
        f011 = d[x0, y1, z1]
        f111 = d[x1, y1, z1]

        x, y, z = frac
        mx, my, mz = 1 - x, 1 - y, 1 - z

        f = (
            f000 * mx * my * mz
            + f100 * x * my * mz
            + f010 * mx * y * mz
            + f110 * x * y * mz
            + f001 * mx * my * z
            + f101 * x * my * z
            + f011 * mx * y * z
            + f111 * x * y * z
        )

        if not want_deriv:
            return curl(f, v) + penalty, None

        x_g = (
            my * mz * (f100 - f000)
            + y * mz * (f110 - f010)
            + my * z * (f101 - f001)
            + y * z * (f111 - f011)
        )
        y_g = (
            mx * mz * (f010 - f000)
            + x * mz * (f110 - f100)
            + mx * z * (f011 - f001)
            + x * z * (f111 - f101)
        )
        z_g = (
            mx * my * (f001 - f000)
            + x * my * (f101 - f100)
            + mx * y * (f011 - f010)
            + x * y * (f111 - f110)
        )
        f, gradient = curl_deriv(f, Vec(x_g, y_g, z_g), v)
        deriv = Vec(
            *(
                self._factor[i] * (gradient[i] if region[i] == 0 else 0.0)
                + slope * region[i]
                for i in range(3)
            )
        )
        return f + penalty, deriv
"""Extents and sampling of a three-dimensional search grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .common import Vec, eq


@dataclass
class GridDim:
    """One axis of a grid: its range and number of intervals."""

    begin: float = 0.0
    end: float = 0.0
    n: int = 0

    def span(self) -> float:
        return self.end - self.begin

    def enabled(self) -> bool:
        return self.n > 0

    def approx_eq(self, other: GridDim) -> bool:
        return self.n == other.n and eq(self.begin, other.begin) and eq(self.end, other.end)


GridDims = Sequence[GridDim]


def grid_dims_eq(a: GridDims, b: GridDims) -> bool:
    """Compare two grids, axis by axis, within tolerance."""
    return len(a) == len(b) and all(x.approx_eq(y) for x, y in zip(a, b))


def grid_dims_begin(gd: GridDims) -> Vec:
    return Vec(*(d.begin for d in gd))


def grid_dims_end(gd: GridDims) -> Vec:
    return Vec(*(d.end for d in gd))


def format_grid_dims(gd: GridDims) -> str:
    """One line per axis: ``n [begin .. end]``."""
    return "".join(f"{d.n} [{d.begin:g} .. {d.end:g}]\n" for d in gd)
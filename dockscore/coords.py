"""Poses and a bounded, diversity-filtered collection of them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Sequence

from .common import MAX_FL, Vec, vec_distance_sqr


@dataclass(frozen=True)
class Pose:
    """A scored result: its energy, its heavy-atom coordinates and its conformation."""

    e: float
    coords: tuple[Vec, ...] = ()
    conf: Any = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "coords", tuple(self.coords))


def rmsd_upper_bound(a: Sequence[Vec], b: Sequence[Vec]) -> float:
    """Root mean square distance between paired coordinates."""
    if len(a) != len(b):
        raise ValueError(f"coordinate count mismatch: {len(a)} != {len(b)}")
    if not a:
        return 0.0
    return math.sqrt(sum(vec_distance_sqr(p, q) for p, q in zip(a, b)) / len(a))


def find_closest(a: Sequence[Vec], outputs: Sequence[Pose]) -> tuple[int, float]:
    """Index and RMSD of the pose nearest to ``a``; ``(len, MAX_FL)`` if empty."""
    best = (len(outputs), MAX_FL)
    for i, pose in enumerate(outputs):
        res = rmsd_upper_bound(a, pose.coords)
        if i == 0 or res < best[1]:
            best = (i, res)
    return best


def add_to_output_container(
    out: list[Pose], t: Pose, min_rmsd: float, max_size: int
) -> None:
    """Insert ``t`` into ``out``, keeping it diverse, bounded and sorted by energy.

    A pose within ``min_rmsd`` of an existing one replaces it only if it is
    better. Otherwise it is appended, or replaces the worst pose when ``out``
    is full.
    """
    index, distance = find_closest(t.coords, out)
    if index < len(out) and distance < min_rmsd:
        if t.e < out[index].e:
            out[index] = t
    elif len(out) < max_size:
        out.append(t)
    elif out and t.e < out[-1].e:
        out[-1] = t
    out.sort(key=lambda pose: pose.e)
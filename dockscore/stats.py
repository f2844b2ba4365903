"""Simple descriptive statistics and correlation coefficients."""

from __future__ import annotations

import math
from typing import Sequence

from .common import EPSILON_FL


def _check_same_length(a: Sequence[float], b: Sequence[float]) -> None:
    if len(a) != len(b):
        raise ValueError(f"length mismatch: {len(a)} != {len(b)}")


def mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def deviation(values: Sequence[float]) -> float:
    """Population standard deviation; 0 for an empty sequence."""
    if not values:
        return 0.0
    m = mean(values)
    return math.sqrt(sum((v - m) ** 2 for v in values) / len(values))


def rmsd(a: Sequence[float], b: Sequence[float]) -> float:
    _check_same_length(a, b)
    if not a:
        return 0.0
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)) / len(a))


def average_difference(b: Sequence[float], a: Sequence[float]) -> float:
    """Mean of ``b - a``."""
    _check_same_length(a, b)
    if not a:
        return 0.0
    return sum(y - x for x, y in zip(a, b)) / len(a)


def pearson(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson correlation; 0 when either sequence has no spread."""
    _check_same_length(x, y)
    n = len(x)
    if n == 0:
        return 0.0
    mean_x = sum(x) / n
    mean_y = sum(y) / n
    # Rounding can make the variance slightly negative; treat it as zero.
    var_x = max(0.0, sum(v * v for v in x) / n - mean_x * mean_x)
    var_y = max(0.0, sum(v * v for v in y) / n - mean_y * mean_y)
    cov = sum(a * b for a, b in zip(x, y)) / n - mean_x * mean_y
    denominator = math.sqrt(var_x) * math.sqrt(var_y)
    if abs(denominator) < EPSILON_FL:
        return 0.0
    return cov / denominator


def get_rankings(x: Sequence[float]) -> list[float]:
    """Rank of each element (0 for the smallest) in sorted order."""
    ranks = [0.0] * len(x)
    for rank, index in enumerate(sorted(range(len(x)), key=x.__getitem__)):
        ranks[index] = float(rank)
    return ranks


def spearman(x: Sequence[float], y: Sequence[float]) -> float:
    return pearson(get_rankings(x), get_rankings(y))
"""Soft capping of large positive energies."""

from __future__ import annotations

from typing import TypeVar, Union

from .common import EPSILON_FL, Vec, not_max

D = TypeVar("D", float, Vec)


def _factor(e: float, v: float) -> Union[float, None]:
    if e > 0 and not_max(v):
        return 0.0 if v < EPSILON_FL else v / (v + e)
    return None


def curl(e: float, v: float) -> float:
    """Return ``e`` softly capped by ``v``."""
    tmp = _factor(e, v)
    return e if tmp is None else e * tmp


def curl_deriv(e: float, deriv: D, v: float) -> tuple[float, D]:
    """Cap ``e`` by ``v`` and scale its derivative to match."""
    tmp = _factor(e, v)
    if tmp is None:
        return e, deriv
    return e * tmp, deriv * (tmp * tmp)
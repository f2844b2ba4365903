"""Individual scoring-function terms and the default weighted set."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator

from .atom_constants import (
    AD_TYPE_SIZE,
    METAL_SOLVATION_PARAMETER,
    XS_TYPE_Met_D,
    XS_TYPE_SIZE,
    AtomBase,
    ad_type_property,
    xs_h_bond_possible,
    xs_is_hydrophobic,
    xs_radius,
)
from .common import EPSILON_FL, MAX_FL, PI, InternalError, not_max

DEFAULT_CUTOFF = 8.0

_CURRENT_WEIGHTS: tuple[float, ...] = (
    -0.035579,  # gauss(o=0, w=0.5)
    -0.005156,  # gauss(o=3, w=2)
    0.840245,  # repulsion(o=0)
    -0.035069,  # hydrophobic(g=0.5, b=1.5)
    -0.587439,  # non_dir_h_bond(g=-0.7, b=0)
    1.923,  # num_tors_div
)


def _fmt(x) -> str:
    """Format a parameter the way term names show it."""
    if isinstance(x, bool):
        return "1" if x else "0"
    if isinstance(x, int):
        return str(x)
    return f"{x:g}"


def gaussian(x: float, width: float) -> float:
    return math.exp(-((x / width) ** 2))


def slope_step(x_bad: float, x_good: float, x: float) -> float:
    """Linear ramp from 0 at ``x_bad`` to 1 at ``x_good``, clamped outside."""
    if x_bad < x_good:
        if x <= x_bad:
            return 0.0
        if x >= x_good:
            return 1.0
    else:
        if x >= x_bad:
            return 0.0
        if x <= x_good:
            return 1.0
    return (x - x_bad) / (x_good - x_bad)


def smooth_div(x: float, y: float) -> float:
    """Divide, returning 0 for a tiny numerator and +-MAX_FL for a tiny divisor."""
    if abs(x) < EPSILON_FL:
        return 0.0
    if abs(y) < EPSILON_FL:
        return MAX_FL if x * y > 0 else -MAX_FL
    return x / y


def optimal_distance(t1: int, t2: int) -> float:
    """Sum of the X-Score van der Waals radii of two types."""
    return xs_radius(t1) + xs_radius(t2)


def solvation_parameter(atom: AtomBase) -> float:
    if atom.ad < AD_TYPE_SIZE:
        return ad_type_property(atom.ad).solvation
    if atom.xs == XS_TYPE_Met_D:
        return METAL_SOLVATION_PARAMETER
    raise InternalError(f"no solvation parameter for atom {atom}")


def volume(atom: AtomBase) -> float:
    if atom.ad < AD_TYPE_SIZE:
        return ad_type_property(atom.ad).volume
    if atom.xs < XS_TYPE_SIZE:
        return 4 * PI / 3 * xs_radius(atom.xs) ** 3
    raise InternalError(f"no volume for atom {atom}")


def find_vdw_coefficients(
    n: int, m: int, position: float, depth: float
) -> tuple[float, float]:
    """Coefficients ``(c_n, c_m)`` of ``c_n/r^n + c_m/r^m`` with minimum ``-depth`` at ``position``."""
    if n == m:
        raise ValueError("the two exponents must differ")
    c_n = position**n * depth * m / (float(n) - float(m))
    c_m = position**m * depth * n / (float(m) - float(n))
    return c_n, c_m


@dataclass
class ConfIndependentInputs:
    """Ligand properties used by the conformation-independent terms."""

    num_tors: float = 0.0
    num_heavy_atoms: float = 0.0
    num_hydrophobic_atoms: float = 0.0
    ligand_lengths_sum: float = 0.0
    num_ligands: float = 0.0


class DistanceAdditive(ABC):
    """A pairwise term that depends on the two atoms and their distance."""

    def __init__(self, cutoff: float) -> None:
        self.cutoff = cutoff
        self.name = ""

    @abstractmethod
    def eval(self, a: AtomBase, b: AtomBase, r: float) -> float:
        """Energy of the pair at distance ``r``."""


class Usable(ABC):
    """A pairwise term that depends on the X-Score types and distance."""

    def __init__(self, cutoff: float) -> None:
        self.cutoff = cutoff
        self.name = ""

    @abstractmethod
    def eval(self, t1: int, t2: int, r: float) -> float:
        """Energy of the type pair at distance ``r``."""


class ConfIndependent(ABC):
    """A term that adjusts the total energy from ligand-wide properties."""

    name = ""
    size = 1

    @abstractmethod
    def eval(
        self, inputs: ConfIndependentInputs, x: float, weights: Iterator[float]
    ) -> float:
        """Adjust ``x``, consuming ``size`` values from ``weights``."""


class Electrostatic(DistanceAdditive):
    def __init__(self, i: int, cap: float, cutoff: float) -> None:
        super().__init__(cutoff)
        self.i = i
        self.cap = cap
        self.name = f"electrostatic(i={_fmt(i)}, ^={_fmt(cap)}, c={_fmt(cutoff)})"

    def eval(self, a: AtomBase, b: AtomBase, r: float) -> float:
        r_i = r**self.i
        q1q2 = a.charge * b.charge
        if r_i < EPSILON_FL:
            return q1q2 * self.cap
        return q1q2 * min(self.cap, 1 / r_i)


class AD4Solvation(DistanceAdditive):
    def __init__(
        self,
        desolvation_sigma: float,
        solvation_q: float,
        charge_dependent: bool,
        cutoff: float,
    ) -> None:
        super().__init__(cutoff)
        self.desolvation_sigma = desolvation_sigma
        self.solvation_q = solvation_q
        self.charge_dependent = charge_dependent
        self.name = (
            f"ad4_solvation(d-sigma={_fmt(desolvation_sigma)}, s/q={_fmt(solvation_q)}, "
            f"q={_fmt(bool(charge_dependent))}, c={_fmt(cutoff)})"
        )

    def eval(self, a: AtomBase, b: AtomBase, r: float) -> float:
        q1, q2 = a.charge, b.charge
        if not (not_max(q1) and not_max(q2)):
            raise InternalError("atom charge out of range")
        my_solv = self.solvation_q if self.charge_dependent else 0.0
        tmp = (
            (solvation_parameter(a) + my_solv * abs(q1)) * volume(b)
            + (solvation_parameter(b) + my_solv * abs(q2)) * volume(a)
        ) * math.exp(-((r / (2 * self.desolvation_sigma)) ** 2))
        if not not_max(tmp):
            raise InternalError("solvation energy out of range")
        return tmp


class Gauss(Usable):
    def __init__(self, offset: float, width: float, cutoff: float) -> None:
        super().__init__(cutoff)
        self.offset = offset
        self.width = width
        self.name = f"gauss(o={_fmt(offset)}, w={_fmt(width)}, c={_fmt(cutoff)})"

    def eval(self, t1: int, t2: int, r: float) -> float:
        return gaussian(r - (optimal_distance(t1, t2) + self.offset), self.width)


class Repulsion(Usable):
    def __init__(self, offset: float, cutoff: float) -> None:
        super().__init__(cutoff)
        self.offset = offset
        self.name = f"repulsion(o={_fmt(offset)})"

    def eval(self, t1: int, t2: int, r: float) -> float:
        d = r - (optimal_distance(t1, t2) + self.offset)
        return 0.0 if d > 0 else d * d


class Hydrophobic(Usable):
    def __init__(self, good: float, bad: float, cutoff: float) -> None:
        super().__init__(cutoff)
        self.good = good
        self.bad = bad
        self.name = f"hydrophobic(g={_fmt(good)}, b={_fmt(bad)}, c={_fmt(cutoff)})"

    def eval(self, t1: int, t2: int, r: float) -> float:
        if xs_is_hydrophobic(t1) and xs_is_hydrophobic(t2):
            return slope_step(self.bad, self.good, r - optimal_distance(t1, t2))
        return 0.0


class NonHydrophobic(Usable):
    def __init__(self, good: float, bad: float, cutoff: float) -> None:
        super().__init__(cutoff)
        self.good = good
        self.bad = bad
        self.name = f"non_hydrophobic(g={_fmt(good)}, b={_fmt(bad)}, c={_fmt(cutoff)})"

    def eval(self, t1: int, t2: int, r: float) -> float:
        if not xs_is_hydrophobic(t1) and not xs_is_hydrophobic(t2):
            return slope_step(self.bad, self.good, r - optimal_distance(t1, t2))
        return 0.0


class Vdw(Usable):
    def __init__(self, i: int, j: int, smoothing: float, cap: float, cutoff: float) -> None:
        if i == j:
            raise ValueError("the two exponents must differ")
        super().__init__(cutoff)
        self.i = i
        self.j = j
        self.smoothing = smoothing
        self.cap = cap
        self.name = (
            f"vdw(i={_fmt(i)}, j={_fmt(j)}, s={_fmt(smoothing)}, "
            f"^={_fmt(cap)}, c={_fmt(cutoff)})"
        )

    def eval(self, t1: int, t2: int, r: float) -> float:
        d0 = optimal_distance(t1, t2)
        c_i, c_j = find_vdw_coefficients(self.i, self.j, d0, 1.0)
        if r > d0 + self.smoothing:
            r -= self.smoothing
        elif r < d0 - self.smoothing:
            r += self.smoothing
        else:
            r = d0
        r_i = r**self.i
        r_j = r**self.j
        if r_i > EPSILON_FL and r_j > EPSILON_FL:
            return min(self.cap, c_i / r_i + c_j / r_j)
        return self.cap


class NonDirHBond(Usable):
    def __init__(self, good: float, bad: float, cutoff: float) -> None:
        super().__init__(cutoff)
        self.good = good
        self.bad = bad
        self.name = f"non_dir_h_bond(g={_fmt(good)}, b={_fmt(bad)})"

    def eval(self, t1: int, t2: int, r: float) -> float:
        if xs_h_bond_possible(t1, t2):
            return slope_step(self.bad, self.good, r - optimal_distance(t1, t2))
        return 0.0


class NumTorsAdd(ConfIndependent):
    name = "num_tors_add"

    def eval(self, inputs, x, weights):
        w = next(weights)
        return x + w * inputs.num_tors


class NumTorsSqr(ConfIndependent):
    name = "num_tors_sqr"

    def eval(self, inputs, x, weights):
        w = 0.1 * next(weights)
        return x + w * float(inputs.num_tors) ** 2 / 5


class NumTorsSqrt(ConfIndependent):
    name = "num_tors_sqrt"

    def eval(self, inputs, x, weights):
        w = 0.1 * next(weights)
        return x + w * math.sqrt(float(inputs.num_tors)) / math.sqrt(5.0)


class NumTorsDiv(ConfIndependent):
    name = "num_tors_div"

    def eval(self, inputs, x, weights):
        w = 0.1 * (next(weights) + 1)
        return smooth_div(x, 1 + w * inputs.num_tors / 5.0)


class LigandLength(ConfIndependent):
    name = "ligand_length"

    def eval(self, inputs, x, weights):
        w = next(weights)
        return x + w * inputs.ligand_lengths_sum


class NumLigands(ConfIndependent):
    name = "num_ligands"

    def eval(self, inputs, x, weights):
        w = next(weights)
        return x + w * inputs.num_ligands


class NumHeavyAtomsDiv(ConfIndependent):
    name = "num_heavy_atoms_div"

    def eval(self, inputs, x, weights):
        w = 0.05 * next(weights)
        return smooth_div(x, 1 + w * inputs.num_heavy_atoms)


class NumHeavyAtoms(ConfIndependent):
    name = "num_heavy_atoms"

    def eval(self, inputs, x, weights):
        w = 0.05 * next(weights)
        return x + w * inputs.num_heavy_atoms


class NumHydrophobicAtoms(ConfIndependent):
    name = "num_hydrophobic_atoms"

    def eval(self, inputs, x, weights):
        w = 0.05 * next(weights)
        return x + w * inputs.num_hydrophobic_atoms


def default_terms() -> list:
    """The enabled terms of the default scoring function, in weight order."""
    return [
        Gauss(0, 0.5, DEFAULT_CUTOFF),
        Gauss(3, 2.0, DEFAULT_CUTOFF),
        Repulsion(0.0, DEFAULT_CUTOFF),
        Hydrophobic(0.5, 1.5, DEFAULT_CUTOFF),
        NonDirHBond(-0.7, 0, DEFAULT_CUTOFF),
        NumTorsDiv(),
    ]


def current_weights(num_terms: int) -> list[float]:
    """Weights of the default terms; ``num_terms`` must match their count."""
    if len(_CURRENT_WEIGHTS) != num_terms:
        raise InternalError(
            f"expected weights for {num_terms} terms, have {len(_CURRENT_WEIGHTS)}"
        )
    return list(_CURRENT_WEIGHTS)
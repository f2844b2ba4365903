"""Atom type tables for the element, AutoDock4, X-Score and DrugScore typings."""

from __future__ import annotations

from dataclasses import dataclass

from .common import InternalError

# Element types (as the DrugScore types, but including hydrogen).
EL_TYPE_H = 0
EL_TYPE_C = 1
EL_TYPE_N = 2
EL_TYPE_O = 3
EL_TYPE_S = 4
EL_TYPE_P = 5
EL_TYPE_F = 6
EL_TYPE_Cl = 7
EL_TYPE_Br = 8
EL_TYPE_I = 9
EL_TYPE_Met = 10
EL_TYPE_SIZE = 11

# AutoDock4 types.
AD_TYPE_C = 0
AD_TYPE_A = 1
AD_TYPE_N = 2
AD_TYPE_O = 3
AD_TYPE_P = 4
AD_TYPE_S = 5
AD_TYPE_H = 6  # non-polar hydrogen
AD_TYPE_F = 7
AD_TYPE_I = 8
AD_TYPE_NA = 9
AD_TYPE_OA = 10
AD_TYPE_SA = 11
AD_TYPE_HD = 12
AD_TYPE_Mg = 13
AD_TYPE_Mn = 14
AD_TYPE_Zn = 15
AD_TYPE_Ca = 16
AD_TYPE_Fe = 17
AD_TYPE_Cl = 18
AD_TYPE_Br = 19
AD_TYPE_SIZE = 20

# X-Score types.
XS_TYPE_C_H = 0
XS_TYPE_C_P = 1
XS_TYPE_N_P = 2
XS_TYPE_N_D = 3
XS_TYPE_N_A = 4
XS_TYPE_N_DA = 5
XS_TYPE_O_P = 6
XS_TYPE_O_D = 7
XS_TYPE_O_A = 8
XS_TYPE_O_DA = 9
XS_TYPE_S_P = 10
XS_TYPE_P_P = 11
XS_TYPE_F_H = 12
XS_TYPE_Cl_H = 13
XS_TYPE_Br_H = 14
XS_TYPE_I_H = 15
XS_TYPE_Met_D = 16
XS_TYPE_SIZE = 17

# DrugScore-CSD types.
SY_TYPE_C_3 = 0
SY_TYPE_C_2 = 1
SY_TYPE_C_ar = 2
SY_TYPE_C_cat = 3
SY_TYPE_N_3 = 4
SY_TYPE_N_ar = 5
SY_TYPE_N_am = 6
SY_TYPE_N_pl3 = 7
SY_TYPE_O_3 = 8
SY_TYPE_O_2 = 9
SY_TYPE_O_co2 = 10
SY_TYPE_S = 11
SY_TYPE_P = 12
SY_TYPE_F = 13
SY_TYPE_Cl = 14
SY_TYPE_Br = 15
SY_TYPE_I = 16
SY_TYPE_Met = 17
SY_TYPE_SIZE = 18


@dataclass(frozen=True)
class AtomKind:
    """Force-field parameters of one AutoDock4 atom type."""

    name: str
    radius: float
    depth: float
    solvation: float
    volume: float
    covalent_radius: float


ATOM_KIND_DATA: tuple[AtomKind, ...] = (
    AtomKind("C", 2.00000, 0.15000, -0.00143, 33.51030, 0.77),
    AtomKind("A", 2.00000, 0.15000, -0.00052, 33.51030, 0.77),
    AtomKind("N", 1.75000, 0.16000, -0.00162, 22.44930, 0.75),
    AtomKind("O", 1.60000, 0.20000, -0.00251, 17.15730, 0.73),
    AtomKind("P", 2.10000, 0.20000, -0.00110, 38.79240, 1.06),
    AtomKind("S", 2.00000, 0.20000, -0.00214, 33.51030, 1.02),
    AtomKind("H", 1.00000, 0.02000, 0.00051, 0.00000, 0.37),
    AtomKind("F", 1.54500, 0.08000, -0.00110, 15.44800, 0.71),
    AtomKind("I", 2.36000, 0.55000, -0.00110, 55.05850, 1.33),
    AtomKind("NA", 1.75000, 0.16000, -0.00162, 22.44930, 0.75),
    AtomKind("OA", 1.60000, 0.20000, -0.00251, 17.15730, 0.73),
    AtomKind("SA", 2.00000, 0.20000, -0.00214, 33.51030, 1.02),
    AtomKind("HD", 1.00000, 0.02000, 0.00051, 0.00000, 0.37),
    AtomKind("Mg", 0.65000, 0.87500, -0.00110, 1.56000, 1.30),
    AtomKind("Mn", 0.65000, 0.87500, -0.00110, 2.14000, 1.39),
    AtomKind("Zn", 0.74000, 0.55000, -0.00110, 1.70000, 1.31),
    AtomKind("Ca", 0.99000, 0.55000, -0.00110, 2.77000, 1.74),
    AtomKind("Fe", 0.65000, 0.01000, -0.00110, 1.84000, 1.25),
    AtomKind("Cl", 2.04500, 0.27600, -0.00110, 35.82350, 0.99),
    AtomKind("Br", 2.16500, 0.38900, -0.00110, 42.56610, 1.14),
)

METAL_SOLVATION_PARAMETER = -0.00110
METAL_COVALENT_RADIUS = 1.75  # for metals not in the table

# Names treated as another AutoDock4 type.
ATOM_EQUIVALENCES: dict[str, str] = {"Se": "S"}


@dataclass(frozen=True)
class AcceptorKind:
    """Hydrogen-bond acceptor parameters of an AutoDock4 type."""

    ad_type: int
    radius: float
    depth: float


ACCEPTOR_KIND_DATA: tuple[AcceptorKind, ...] = (
    AcceptorKind(AD_TYPE_NA, 1.9, 5.0),
    AcceptorKind(AD_TYPE_OA, 1.9, 5.0),
    AcceptorKind(AD_TYPE_SA, 2.5, 1.0),
)

XS_VDW_RADII: tuple[float, ...] = (
    1.9,  # C_H
    1.9,  # C_P
    1.8,  # N_P
    1.8,  # N_D
    1.8,  # N_A
    1.8,  # N_DA
    1.7,  # O_P
    1.7,  # O_D
    1.7,  # O_A
    1.7,  # O_DA
    2.0,  # S_P
    2.1,  # P_P
    1.5,  # F_H
    1.8,  # Cl_H
    2.0,  # Br_H
    2.2,  # I_H
    1.2,  # Met_D
)

NON_AD_METAL_NAMES: frozenset[str] = frozenset(
    {"Cu", "Fe", "Na", "K", "Hg", "Co", "U", "Cd", "Ni"}
)

_AD_TO_EL: tuple[int, ...] = (
    EL_TYPE_C,    # C
    EL_TYPE_C,    # A
    EL_TYPE_N,    # N
    EL_TYPE_O,    # O
    EL_TYPE_P,    # P
    EL_TYPE_S,    # S
    EL_TYPE_H,    # H
    EL_TYPE_F,    # F
    EL_TYPE_I,    # I
    EL_TYPE_N,    # NA
    EL_TYPE_O,    # OA
    EL_TYPE_S,    # SA
    EL_TYPE_H,    # HD
    EL_TYPE_Met,  # Mg
    EL_TYPE_Met,  # Mn
    EL_TYPE_Met,  # Zn
    EL_TYPE_Met,  # Ca
    EL_TYPE_Met,  # Fe
    EL_TYPE_Cl,   # Cl
    EL_TYPE_Br,   # Br
    EL_TYPE_SIZE,  # AD_TYPE_SIZE
)

_HYDROPHOBIC = frozenset({XS_TYPE_C_H, XS_TYPE_F_H, XS_TYPE_Cl_H, XS_TYPE_Br_H, XS_TYPE_I_H})
_ACCEPTORS = frozenset({XS_TYPE_N_A, XS_TYPE_N_DA, XS_TYPE_O_A, XS_TYPE_O_DA})
_DONORS = frozenset({XS_TYPE_N_D, XS_TYPE_N_DA, XS_TYPE_O_D, XS_TYPE_O_DA, XS_TYPE_Met_D})


@dataclass
class AtomBase:
    """An atom's type under each typing scheme, and its partial charge."""

    el: int = EL_TYPE_SIZE
    ad: int = AD_TYPE_SIZE
    xs: int = XS_TYPE_SIZE
    sy: int = SY_TYPE_SIZE
    charge: float = 0.0


def ad_is_hydrogen(ad: int) -> bool:
    return ad in (AD_TYPE_H, AD_TYPE_HD)


def ad_is_heteroatom(ad: int) -> bool:
    """True for non-carbon, non-hydrogen types; False for unknown types."""
    return ad not in (AD_TYPE_A, AD_TYPE_C, AD_TYPE_H, AD_TYPE_HD) and 0 <= ad < AD_TYPE_SIZE


def ad_type_to_el_type(t: int) -> int:
    if not 0 <= t < len(_AD_TO_EL):
        raise InternalError(f"unknown AutoDock type {t}")
    return _AD_TO_EL[t]


def xs_radius(t: int) -> float:
    if not 0 <= t < XS_TYPE_SIZE:
        raise IndexError(f"X-Score type {t} out of range")
    return XS_VDW_RADII[t]


def is_non_ad_metal_name(name: str) -> bool:
    return name in NON_AD_METAL_NAMES


def xs_is_hydrophobic(xs: int) -> bool:
    return xs in _HYDROPHOBIC


def xs_is_acceptor(xs: int) -> bool:
    return xs in _ACCEPTORS


def xs_is_donor(xs: int) -> bool:
    return xs in _DONORS


def xs_donor_acceptor(t1: int, t2: int) -> bool:
    return xs_is_donor(t1) and xs_is_acceptor(t2)


def xs_h_bond_possible(t1: int, t2: int) -> bool:
    return xs_donor_acceptor(t1, t2) or xs_donor_acceptor(t2, t1)


def ad_type_property(i: int) -> AtomKind:
    if not 0 <= i < len(ATOM_KIND_DATA):
        raise IndexError(f"AutoDock type {i} out of range")
    return ATOM_KIND_DATA[i]


def string_to_ad_type(name: str) -> int:
    """Look up an AutoDock type by name; ``AD_TYPE_SIZE`` if unknown."""
    for index, kind in enumerate(ATOM_KIND_DATA):
        if kind.name == name:
            return index
    if name in ATOM_EQUIVALENCES:
        return string_to_ad_type(ATOM_EQUIVALENCES[name])
    return AD_TYPE_SIZE


def max_covalent_radius() -> float:
    return max((kind.covalent_radius for kind in ATOM_KIND_DATA), default=0.0)
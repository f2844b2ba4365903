import math

import pytest

from dockscore.common import (
    EPSILON_FL,
    MAX_FL,
    PI,
    PK_TO_ENERGY_FACTOR,
    Mat,
    Vec,
    cross_product,
    elementwise_product,
    eq,
    find_min,
    fl_to_sz,
    normalized_angle,
    not_max,
    pk_to_energy,
    vec_distance_sqr,
)


def test_vec_norm_consistent_with_norm_sqr():
    v = Vec(1.5, -2.0, 0.25)
    assert math.isclose(v.norm() ** 2, v.norm_sqr())
    assert math.isclose(v.norm_sqr(), v.dot(v))


def test_vec_arithmetic_round_trip():
    a = Vec(1.0, 2.0, 3.0)
    b = Vec(-4.0, 0.5, 7.0)
    assert (a + b) - b == a
    assert (a + 2.0) - 2.0 == a
    assert 2 * a == a * 2
    assert -(-a) == a


def test_vec_indexing_and_iteration():
    v = Vec(4.0, 5.0, 6.0)
    assert list(v) == [v[0], v[1], v[2]]
    assert len(v) == 3


def test_cross_product_orthogonal_and_anticommutative():
    a = Vec(1.0, 2.0, 3.0)
    b = Vec(-1.0, 0.5, 2.0)
    c = cross_product(a, b)
    assert math.isclose(c.dot(a), 0.0, abs_tol=1e-12)
    assert math.isclose(c.dot(b), 0.0, abs_tol=1e-12)
    assert cross_product(b, a) == -c


def test_elementwise_product_matches_components():
    a = Vec(1.0, 2.0, 3.0)
    b = Vec(4.0, 5.0, 6.0)
    p = elementwise_product(a, b)
    assert list(p) == [x * y for x, y in zip(a, b)]


def test_mat_identity_and_scaling():
    identity = Mat(1, 0, 0, 0, 1, 0, 0, 0, 1)
    v = Vec(1.0, -2.0, 3.0)
    assert identity.apply(v) == v
    assert identity.scaled(2.0).apply(v) == v * 2.0
    m = Mat(1, 2, 3, 4, 5, 6, 7, 8, 9)
    assert m[0, 1] == 2
    assert m[1, 0] == 4
    assert (m @ Vec(1.0, 0.0, 0.0)) == Vec(m[0, 0], m[1, 0], m[2, 0])


def test_fl_to_sz_clamps():
    assert fl_to_sz(-1.5, 10) == 0
    assert fl_to_sz(25.0, 10) == 10
    assert fl_to_sz(3.7, 10) == 3


def test_eq_tolerance():
    assert eq(1.0, 1.0005)
    assert not eq(1.0, 1.002)
    assert eq(Vec(1.0, 2.0, 3.0), Vec(1.0002, 2.0, 2.9999))
    assert not eq([1.0, 2.0], [1.0])


def test_not_max():
    assert not_max(1000.0)
    assert not not_max(MAX_FL)


def test_vec_distance_sqr_symmetric():
    a = Vec(1.0, 2.0, 3.0)
    b = Vec(0.0, -1.0, 5.0)
    assert vec_distance_sqr(a, b) == vec_distance_sqr(b, a)
    assert math.isclose(vec_distance_sqr(a, b), (a - b).norm_sqr())
    assert vec_distance_sqr(a, a) == 0


def test_find_min():
    assert find_min([]) == 0
    values = [5.0, 2.0, 9.0, 2.0]
    assert find_min(values) == values.index(min(values))


@pytest.mark.parametrize("x", [0.0, 1.0, -3.0, 4.0, -7.5, 20.0, -100.0, 1e4])
def test_normalized_angle_range_and_turns(x):
    y = normalized_angle(x)
    assert -PI - EPSILON_FL <= y <= PI + EPSILON_FL
    turns = (x - y) / (2 * PI)
    assert math.isclose(turns, round(turns), abs_tol=1e-6)


def test_pk_to_energy_linear():
    assert pk_to_energy(1.0) == PK_TO_ENERGY_FACTOR
    assert math.isclose(pk_to_energy(3.0), 3 * pk_to_energy(1.0))
    assert pk_to_energy(2.0) < 0
import math

import pytest

from dockscore.common import MAX_FL, Vec
from dockscore.curl import curl, curl_deriv


@pytest.mark.parametrize("e", [0.0, -1.0, -50.0])
def test_non_positive_energy_unchanged(e):
    assert curl(e, 10.0) == e
    assert curl_deriv(e, 3.0, 10.0) == (e, 3.0)


def test_max_cap_leaves_energy_unchanged():
    assert curl(5.0, MAX_FL) == 5.0
    assert curl_deriv(5.0, Vec(1.0, 2.0, 3.0), MAX_FL) == (5.0, Vec(1.0, 2.0, 3.0))


def test_zero_cap_kills_energy():
    assert curl(5.0, 0.0) == 0.0
    e, d = curl_deriv(5.0, 2.0, 0.0)
    assert (e, d) == (0.0, 0.0)


@pytest.mark.parametrize("e,v", [(1.0, 10.0), (100.0, 10.0), (3.0, 1000.0)])
def test_capped_energy_bounded(e, v):
    capped = curl(e, v)
    assert 0 < capped < e
    assert capped < v


def test_deriv_version_agrees_with_plain():
    e, v = 7.0, 3.0
    capped, d = curl_deriv(e, 1.0, v)
    assert capped == curl(e, v)
    assert math.isclose(d, (capped / e) ** 2)


def test_deriv_vector_scaled_uniformly():
    e, v = 4.0, 2.0
    _, scalar = curl_deriv(e, 1.0, v)
    _, vec = curl_deriv(e, Vec(1.0, -2.0, 0.5), v)
    assert vec == Vec(1.0, -2.0, 0.5) * scalar
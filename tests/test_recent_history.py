import pytest

from dockscore.recent_history import RecentHistory


def test_initial_state():
    h = RecentHistory(0, 10, 10)
    assert h.estimate == 0
    assert h.error_estimate_sqr == 100


def test_possibly_smaller_than_initial():
    h = RecentHistory(0, 10, 10)
    assert h.possibly_smaller_than(1)
    assert h.possibly_smaller_than(-15)
    assert not h.possibly_smaller_than(-25)


def test_converges_to_repeated_value():
    h = RecentHistory(0, 10, 10)
    for _ in range(500):
        h.add(5.0)
    assert h.estimate == pytest.approx(5.0)
    assert h.error_estimate_sqr == pytest.approx(0.0, abs=1e-9)
    assert h.possibly_smaller_than(6.0)
    assert not h.possibly_smaller_than(4.0)


def test_short_lifetime_is_clamped():
    short = RecentHistory(1.0, 2.0, 0.5)
    clamped = RecentHistory(1.0, 2.0, 1.5)
    for x in (3.0, -2.0, 7.5):
        short.add(x)
        clamped.add(x)
    assert short.estimate == pytest.approx(clamped.estimate)
    assert short.error_estimate_sqr == pytest.approx(clamped.error_estimate_sqr)


def test_estimate_moves_towards_added_value():
    h = RecentHistory(0.0, 1.0, 4.0)
    h.add(8.0)
    assert 0.0 < h.estimate < 8.0
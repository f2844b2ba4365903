import pytest

from dockscore.stats import (
    average_difference,
    deviation,
    get_rankings,
    mean,
    pearson,
    rmsd,
    spearman,
)

DATA = [3.5, -1.0, 2.25, 8.0, 0.5]


def test_empty_inputs_give_zero():
    assert mean([]) == 0
    assert deviation([]) == 0
    assert rmsd([], []) == 0
    assert pearson([], []) == 0


def test_mean_of_constant():
    assert mean([4.5] * 6) == pytest.approx(4.5)


def test_deviation_of_constant_is_zero():
    assert deviation([2.0] * 5) == pytest.approx(0.0)


def test_deviation_is_shift_invariant():
    shifted = [v + 10.0 for v in DATA]
    assert deviation(shifted) == pytest.approx(deviation(DATA))


def test_rmsd_identity_and_symmetry():
    other = [v * 2 for v in DATA]
    assert rmsd(DATA, DATA) == 0
    assert rmsd(DATA, other) == pytest.approx(rmsd(other, DATA))


def test_rmsd_length_mismatch():
    with pytest.raises(ValueError):
        rmsd([1.0], [1.0, 2.0])


def test_average_difference():
    shifted = [v + 3.0 for v in DATA]
    assert average_difference(shifted, DATA) == pytest.approx(3.0)
    assert average_difference(DATA, shifted) == pytest.approx(-3.0)
    with pytest.raises(ValueError):
        average_difference([1.0], [])


def test_pearson_perfect_correlations():
    assert pearson(DATA, [2 * v + 1 for v in DATA]) == pytest.approx(1.0)
    assert pearson(DATA, [-v for v in DATA]) == pytest.approx(-1.0)


def test_pearson_no_spread_is_zero():
    assert pearson(DATA, [7.0] * len(DATA)) == 0


def test_pearson_is_symmetric():
    other = [v * v for v in DATA]
    assert pearson(DATA, other) == pytest.approx(pearson(other, DATA))


def test_rankings_are_a_permutation_in_order():
    ranks = get_rankings(DATA)
    assert sorted(ranks) == list(range(len(DATA)))
    by_rank = sorted(range(len(DATA)), key=ranks.__getitem__)
    assert [DATA[i] for i in by_rank] == sorted(DATA)


def test_spearman_monotone_transform():
    cubed = [v ** 3 for v in DATA]
    assert spearman(DATA, cubed) == pytest.approx(spearman(DATA, DATA))
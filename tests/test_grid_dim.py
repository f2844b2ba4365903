from dockscore.common import Vec
from dockscore.grid_dim import (
    GridDim,
    format_grid_dims,
    grid_dims_begin,
    grid_dims_end,
    grid_dims_eq,
)


def _dims():
    return [GridDim(-1.0, 2.0, 8), GridDim(0.0, 1.5, 4), GridDim(3.0, 6.0, 8)]


def test_default_grid_dim_disabled():
    d = GridDim()
    assert not d.enabled()
    assert d.span() == 0


def test_span_and_enabled():
    d = GridDim(1.0, 4.5, 3)
    assert d.span() == d.end - d.begin
    assert d.enabled()


def test_grid_dims_eq_tolerance():
    a = _dims()
    b = [GridDim(d.begin + 0.0005, d.end - 0.0005, d.n) for d in a]
    assert grid_dims_eq(a, b)
    c = [GridDim(d.begin, d.end, d.n + 1) for d in a]
    assert not grid_dims_eq(a, c)
    shifted = [GridDim(d.begin + 0.01, d.end, d.n) for d in a]
    assert not grid_dims_eq(a, shifted)


def test_begin_and_end_vectors():
    gd = _dims()
    assert grid_dims_begin(gd) == Vec(-1.0, 0.0, 3.0)
    assert grid_dims_end(gd) == Vec(2.0, 1.5, 6.0)


def test_format_grid_dims():
    text = format_grid_dims([GridDim(0.0, 1.5, 4)])
    assert text == "4 [0 .. 1.5]\n"
    assert format_grid_dims(_dims()).count("\n") == 3
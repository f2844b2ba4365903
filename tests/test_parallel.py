import io

import pytest

from dockscore.parallel import ParallelProgress, parallel_for, parallel_iter


@pytest.mark.parametrize("num_threads", [1, 2, 5, 16])
def test_parallel_for_visits_every_index_once(num_threads):
    seen = []
    parallel_for(seen.append, 37, num_threads)
    assert sorted(seen) == list(range(37))


def test_parallel_for_empty_calls_nothing():
    seen = []
    parallel_for(seen.append, 0, 4)
    assert seen == []


def test_parallel_for_rejects_zero_threads():
    with pytest.raises(ValueError):
        parallel_for(lambda i: None, 3, 0)


def test_parallel_for_propagates_exception():
    def boom(i):
        if i == 3:
            raise KeyError(i)

    with pytest.raises(KeyError):
        parallel_for(boom, 10, 3)


def test_parallel_iter_applies_to_each_item():
    items = [{"value": v} for v in range(20)]

    def double(item):
        item["value"] *= 2

    parallel_iter(double, items, 4)
    assert [item["value"] for item in items] == [2 * v for v in range(20)]


def test_progress_before_init_writes_nothing():
    out = io.StringIO()
    p = ParallelProgress(out)
    p.increment()
    assert out.getvalue() == ""
    assert p.count == 0


def test_progress_draws_scale_on_init():
    out = io.StringIO()
    p = ParallelProgress(out)
    p.init(10)
    lines = out.getvalue().split("\n")
    assert lines[1].startswith("0%")
    assert lines[1].endswith("100%")
    assert lines[2].startswith("|----")
    assert "*" not in out.getvalue()


def test_progress_full_bar_from_threads():
    out = io.StringIO()
    p = ParallelProgress(out)
    p.init(10)
    parallel_for(lambda i: p.increment(), 10, 4)
    assert p.count == 10
    text = out.getvalue()
    assert text.count("*") == 51
    assert text.endswith("*\n")


def test_progress_stars_never_decrease():
    out = io.StringIO()
    p = ParallelProgress(out)
    p.init(7)
    counts = []
    for _ in range(7):
        p.increment()
        counts.append(out.getvalue().count("*"))
    assert counts == sorted(counts)
    assert counts[0] >= 1
    assert counts[-1] == 51
    assert out.getvalue().endswith("\n")
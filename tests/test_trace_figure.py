from random import Random

import pytest

from quick3way.Config import COLOR_ACTIVE, COLOR_EQUAL, COLOR_OUTSIDE
from quick3way.samplers import SAMPLERS
from quick3way.sorting_algorithms.sorting_algorithms import sorting_algorithms
from quick3way.trace_figure import main, row_colors, trace_figure, trace_rows
from quick3way.TraceSink import PartitionStep


def test_trace_rows_are_framed_by_input_and_output():
    values = [5, 3, 5, 1, 5, 2]
    rows, stats = trace_rows(values)
    assert values == [5, 3, 5, 1, 5, 2]
    assert len(rows) == 9
    assert rows[0] == (tuple(values), 0, 0, -1, 5)
    assert rows[-1] == ((1, 2, 3, 5, 5, 5), 0, 0, -1, 5)
    assert stats.partitions == 3


def test_row_colors():
    step = PartitionStep((0.1, 0.2, 0.3, 0.3, 0.9, 0.5), 1, 2, 3, 4)
    assert row_colors(step).tolist() == [COLOR_OUTSIDE, COLOR_ACTIVE, COLOR_EQUAL, COLOR_EQUAL, COLOR_ACTIVE, COLOR_OUTSIDE]
    assert set(row_colors(PartitionStep((0.5, 0.5), 0, 0, -1, 1)).tolist()) == {COLOR_ACTIVE}


def test_trace_figure_has_one_trace_per_row():
    rows, _ = trace_rows([0.25, 0.75, 0.5, 0.25])
    fig = trace_figure(rows)
    assert len(fig.data) == len(rows)
    assert fig.data[0].base == len(rows) - 1
    assert fig.data[-1].base == 0
    assert list(fig.data[0].y) == pytest.approx([1 / 3, 0.5, 1.25 / 3, 1 / 3])


def test_main_writes_html(tmp_path, capsys):
    out = tmp_path / "trace.html"
    main(["trace_figure", "3", "20", str(out)])
    assert out.exists()
    assert "20 values" in capsys.readouterr().out


@pytest.mark.parametrize("sampler_name", list(SAMPLERS))
def test_bars_fit_their_row_for_every_input(sampler_name):
    rows, _ = trace_rows(SAMPLERS[sampler_name](40, Random(1)))
    fig = trace_figure(rows)
    for trace in fig.data:
        assert 0 < min(trace.y)
        assert max(trace.y) <= 1


def test_random_pivot_trace_is_reproducible_with_rng():
    values = SAMPLERS["permutation"](30, Random(2))
    first, _ = trace_rows(values, sorting_algorithms[1], Random(5))
    second, _ = trace_rows(values, sorting_algorithms[1], Random(5))
    assert first == second

import pandas as pd
import pytest

from quick3way import generate_statistics as gs
from quick3way.sorting_algorithms.SortingAlgorithm import SortingAlgorithm
from quick3way.sorting_algorithms.sorting_algorithms import sorting_algorithms


def test_all_equal_case_is_linear():
    s = gs.get_case_statistics(sorting_algorithms[0], "all equal", 50, samples=3)
    assert s.samples == 3
    assert s.best == s.worst == 100
    assert s.avg_partitions == 1
    assert s.max_depth == 1


def test_descending_case_is_quadratic():
    N = 20
    s = gs.get_case_statistics(sorting_algorithms[0], "descending", N, samples=2)
    assert s.best == s.worst == N * (N + 1) - 2
    assert s.max_depth == N


def test_validate_rejects_bad_results():
    broken = SortingAlgorithm("broken", lambda arr, key, sink: arr.reverse())
    with pytest.raises(gs.InvalidSortResultError, match="non-decreasing"):
        gs.validate(broken, [1, 2, 3], [3, 2, 1])
    with pytest.raises(gs.InvalidSortResultError, match="permutation"):
        gs.validate(broken, [1, 2], [1, 1])
    gs.validate(broken, [2, 1], [1, 2])


def test_work_row_matches_columns():
    row = gs._work((0, "permutation", 10)).split(",")
    assert len(row) == len(gs.COLUMNS)
    assert row[:3] == ["3-way quick sort", "permutation", "10"]


def test_sort_result_splits_per_algorithm(tmp_path, monkeypatch):
    result = tmp_path / "statistics.csv"
    monkeypatch.setattr(gs, "RESULT_DIR", result)
    rows = [gs._work((i, "all equal", N)) for i in range(len(sorting_algorithms)) for N in (8, 2)]
    result.write_text(",".join(gs.COLUMNS) + "\n" + "\n".join(rows) + "\n")

    gs.sort_result()

    df = pd.read_csv(result)
    assert list(df["N"]) == [2, 8] * len(sorting_algorithms)
    for algo in sorting_algorithms:
        per_algo = pd.read_csv(tmp_path / f"{algo.name}.csv")
        assert "name" not in per_algo.columns
        assert len(per_algo) == 2


def test_random_pivot_case_is_reproducible():
    first = gs.get_case_statistics(sorting_algorithms[1], "permutation", 200, samples=5)
    second = gs.get_case_statistics(sorting_algorithms[1], "permutation", 200, samples=5)
    assert first == second


def test_work_propagates_invalid_result(monkeypatch, capsys):
    broken = SortingAlgorithm("broken", lambda arr, key, sink, rng: arr.reverse())
    monkeypatch.setattr(gs, "sorting_algorithms", [broken])
    with pytest.raises(gs.InvalidSortResultError, match="broken"):
        gs._work((0, "ascending", 5))
    assert "InvalidSortResultError" in capsys.readouterr().err

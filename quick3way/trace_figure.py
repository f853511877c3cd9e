import sys
from collections.abc import Sequence
from random import Random
from typing import Optional

import numpy as np
import plotly.graph_objs as go

from .Config import *
from .quick_sort_3way import SortStats
from .samplers import count_distinct, distinct_values
from .sorting_algorithms.SortingAlgorithm import SortingAlgorithm
from .sorting_algorithms.sorting_algorithms import sorting_algorithms
from .TraceSink import PartitionStep, RecordingTraceSink


def trace_rows(
    values: Sequence[float],
    sorting_algorithm: SortingAlgorithm = sorting_algorithms[0],
    rng: Optional[Random] = None,
) -> tuple[list[PartitionStep], SortStats]:
    "Sort a copy of ``values`` and return one row per snapshot, framed by the unsorted and sorted input"
    arr = list(values)
    sink = RecordingTraceSink()
    stats = sorting_algorithm.func(arr, None, sink, rng)
    hi = len(arr) - 1
    rows = [PartitionStep(tuple(values), 0, 0, -1, hi), *sink.steps, PartitionStep(tuple(arr), 0, 0, -1, hi)]
    return rows, stats


def row_colors(step: PartitionStep) -> np.ndarray:
    k = np.arange(len(step.values))
    return np.select(
        [(k < step.lo) | (k > step.hi), (k >= step.lt) & (k <= step.gt)],
        [COLOR_OUTSIDE, COLOR_EQUAL],
        default=COLOR_ACTIVE,
    )


def value_range(rows: list[PartitionStep]) -> tuple[float, float]:
    values = [v for step in rows for v in step.values]
    if not values:
        return 0.0, 0.0
    return float(np.min(values)), float(np.max(values))


def bar_heights(step: PartitionStep, vmin: float, vmax: float) -> np.ndarray:
    "Heights in (0, 0.5], so the bars of one row never reach the next"
    return 0.5 * (np.asarray(step.values, dtype=np.float64) - vmin + 1) / (vmax - vmin + 1)


def trace_figure(rows: list[PartitionStep]) -> go.Figure:
    fig = go.Figure()
    vmin, vmax = value_range(rows)
    for row, step in enumerate(rows):
        y = len(rows) - row - 1
        heights = bar_heights(step, vmin, vmax)
        fig.add_trace(
            go.Bar(
                x=np.arange(len(step.values)),
                y=heights,
                base=y,
                width=0.5,
                marker_color=row_colors(step).tolist(),
                hovertext=[f"lo={step.lo} lt={step.lt} gt={step.gt} hi={step.hi}"] * len(step.values),
                showlegend=False,
            )
        )
    n = len(rows[0].values) if rows else 0
    fig.update_layout(
        barmode="overlay",
        width=TRACE_CANVAS_WIDTH,
        height=max(1, len(rows)) * TRACE_ROW_HEIGHT,
        plot_bgcolor="white",
        margin=dict(l=10, r=10, t=10, b=10),
    )
    fig.update_xaxes(range=[-1, n], visible=False)
    fig.update_yaxes(range=[-0.5, len(rows)], visible=False)
    return fig


def main(argv: list[str]) -> None:
    if len(argv) not in (3, 4):
        print(f"usage: {argv[0]} M N [OUT.html]")
        sys.exit(1)
    m, n = int(argv[1]), int(argv[2])
    values = distinct_values(m)(n, Random(SAMPLE_SEED))
    rows, stats = trace_rows(values)
    print(f"{n} values, {count_distinct(values)} distinct, {len(rows)} rows, {stats}")
    fig = trace_figure(rows)
    if len(argv) == 4:
        fig.write_html(argv[3])
    else:
        fig.show()


if __name__ == "__main__":
    main(sys.argv)

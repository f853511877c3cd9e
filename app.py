import inspect
from random import Random
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash, Input, Output, State, callback, dash_table, dcc, html

from quick3way.Config import *
from quick3way import quick_sort_3way
from quick3way.samplers import SAMPLERS, count_distinct, distinct_values
from quick3way.sorting_algorithms.sorting_algorithms import sorting_algorithms
from quick3way.trace_figure import trace_figure, trace_rows


@callback(
    Output("trace_graph", "figure"),
    Output("statistics_table", "data"),
    Output("input_N", "invalid"),
    Output("notifications_container", "children"),
    Input("sorting_algorithm", "value"),
    Input("sampler", "value"),
    Input("input_N", "value"),
    Input("input_M", "value"),
    Input("reshuffle", "n_clicks"),
)
def on_data(sorting_algorithm_i: str, sampler_name: str, input_N: Optional[int], input_M: Optional[int], n_clicks: Optional[int]):
    if input_N is None or input_M is None or int(input_M) < 1:
        return [{}, [], input_N is None, ""]
    N, M = int(input_N), int(input_M)
    if N > MAX_TRACE_N:
        return [{}, [], True, dbc.Alert(f"Input `N={N}` is too large, the trace is limited to {MAX_TRACE_N} elements.", color="warning")]

    r = Random(SAMPLE_SEED + (n_clicks or 0))
    sampler = distinct_values(M) if sampler_name == "distinct values" else SAMPLERS[sampler_name]
    values = sampler(N, r)
    rows, stats = trace_rows(values, sorting_algorithms[int(sorting_algorithm_i)], r)
    table = [
        {
            "N": N,
            "Distinct": count_distinct(values),
            "Rows": len(rows),
            "Partitions": stats.partitions,
            "Trivial": stats.trivial,
            "Max Depth": stats.max_depth,
            "Swaps": stats.swaps,
        }
    ]
    return [trace_figure(rows), table, False, ""]


def algorithm_source(sorting_algorithm_i: int) -> str:
    sorting_algo = sorting_algorithms[sorting_algorithm_i]
    return inspect.getsource(quick_sort_3way).strip() + "\n\n\n" + inspect.getsource(sorting_algo.func).strip()


@callback(
    Output("code_modal", "is_open"),
    Output("code_modal", "children"),
    Input("show_code", "n_clicks"),
    State("sorting_algorithm", "value"),
    prevent_initial_call=True,
)
def on_show_code(_show_code: int, sorting_algorithm_i: str):
    sorting_algo = sorting_algorithms[int(sorting_algorithm_i)]
    code = algorithm_source(int(sorting_algorithm_i))
    children = [
        dbc.ModalHeader(dbc.ModalTitle(sorting_algo.name)),
        dbc.ModalBody(dcc.Markdown(f"```python\n{code}\n```"), style={"margin": "auto"}),
    ]
    return [True, children]


def _labelled(label: str, component) -> dbc.Row:
    return dbc.Row([label, component], style={"column-gap": "0", "display": "flex", "align-items": "center", "padding": "0.5rem"})


control_panel = html.Div(
    [
        _labelled(
            "Sorting Algorithm:",
            dbc.Select(
                options=[{"label": sorting_algo.name, "value": i} for i, sorting_algo in enumerate(sorting_algorithms)],
                id="sorting_algorithm",
                style={"width": "16rem"},
                value=str(SORTING_ALGORITHM_I),
                persistence=True,
                persistence_type=USER_STATE_STORAGE_TYPE,
            ),
        ),
        dbc.Button("Show Code", id="show_code"),
        _labelled(
            "Input:",
            dbc.Select(
                options=[{"label": name, "value": name} for name in SAMPLERS],
                id="sampler",
                style={"width": "10rem"},
                value=SAMPLER_NAME,
                persistence=True,
                persistence_type=USER_STATE_STORAGE_TYPE,
            ),
        ),
        _labelled(
            f"N(0~{MAX_TRACE_N}):",
            dbc.Input(
                id="input_N",
                type="number",
                min=0,
                step=1,
                style={"width": "5rem"},
                debounce=True,
                value=INPUT_N,
                persistence=True,
                persistence_type=USER_STATE_STORAGE_TYPE,
            ),
        ),
        _labelled(
            "M(>0):",
            dbc.Input(
                id="input_M",
                type="number",
                min=1,
                step=1,
                style={"width": "5rem"},
                debounce=True,
                value=INPUT_M,
                persistence=True,
                persistence_type=USER_STATE_STORAGE_TYPE,
            ),
        ),
        dbc.Button("Reshuffle", id="reshuffle"),
    ],
    style={"column-gap": "1rem", "display": "flex", "align-items": "center", "margin": "1rem", "flex-wrap": "wrap"},
)
statistics_table = dash_table.DataTable(
    id="statistics_table",
    style_cell={"textAlign": "center"},
    columns=[{"name": x, "id": x} for x in ("N", "Distinct", "Rows", "Partitions", "Trivial", "Max Depth", "Swaps")],
)
code_modal = dbc.Modal(id="code_modal", is_open=False, scrollable=True)

app = Dash(
    __name__,
    external_stylesheets=[dbc.themes.BOOTSTRAP],
    title="3-Way Quick Sort Trace",
    update_title=None,
)
app.layout = html.Div(
    [html.Div(id="notifications_container"), control_panel, statistics_table, dcc.Loading(dcc.Graph(id="trace_graph")), code_modal],
    style={"width": "98vw", "margin": "auto"},
)
server = app.server

if __name__ == "__main__":
    app.run(debug=True)

"""
test_truthtable_visualization.py

Tests for the text grid, the Plotly figures, the exports and the Dash app.
"""

import csv

import pytest
from dash import Dash

from truthtable_core import generate_table, EntailmentPoset
from truthtable_visualization import (
    table_to_string, create_table_figure, create_entailment_graph,
    compute_layout, export_to_csv, export_to_dot,
)
from truthtable_notebook_apps import compute_app_outputs, create_truth_table_app


def test_table_to_string():
    text = table_to_string(generate_table("p ∨ q"))
    assert text.splitlines() == [
        "-----------",
        "|p|q|p ∨ q|",
        "-----------",
        "|0|0|  0  |",
        "|0|1|  1  |",
        "|1|0|  1  |",
        "|1|1|  1  |",
        "-----------",
    ]


def test_table_to_string_with_letters_and_reversed_rows():
    text = table_to_string(generate_table("A = ¬p", ordered=False), 'T', 'F')
    assert text.splitlines()[1] == "|p|A = ¬p|"
    assert text.splitlines()[3:5] == ["|T|   F  |", "|F|   T  |"]


def test_table_figure():
    fig = create_table_figure(generate_table("p ∧ q"), 'T', 'F')
    trace = fig.data[0]
    assert list(trace.header.values) == ['p', 'q', 'p ∧ q']
    assert list(trace.cells.values[2]) == ['F', 'F', 'F', 'T']


@pytest.mark.parametrize("layout", ['hierarchical', 'force', 'circular'])
def test_entailment_graph(layout):
    poset = EntailmentPoset(generate_table("p ∧ q, p ∨ q")).transitive_reduction()
    fig = create_entailment_graph(poset, layout=layout)
    assert len(fig.data) == 2
    assert len(fig.data[1].x) == len(poset.class_list)


def test_unknown_layout():
    poset = EntailmentPoset(generate_table("p"))
    with pytest.raises(ValueError):
        compute_layout(poset.graph, 'spiral')


def test_export_to_csv(tmp_path):
    filename = tmp_path / "table.csv"
    export_to_csv(generate_table("¬p"), filename)
    with open(filename, newline='', encoding='utf-8') as f:
        assert list(csv.reader(f)) == [['p', '¬p'], ['0', '1'], ['1', '0']]


def test_export_to_dot(tmp_path):
    poset = EntailmentPoset(generate_table("p ∧ q, p")).transitive_reduction()
    dot = export_to_dot(poset)
    assert dot.startswith('digraph G {')
    assert 'label="p ∧ q"' in dot
    assert '->' in dot

    filename = tmp_path / "poset.dot"
    assert export_to_dot(poset, filename) is None
    assert filename.read_text(encoding='utf-8') == dot


def test_app_outputs():
    table_fig, graph_fig, status, error = compute_app_outputs("p ∧ q")
    assert error == ""
    assert status == "3 columns, 4 rows"
    assert list(table_fig.data[0].header.values) == ['p', 'q', 'p ∧ q']

    _, _, status, _ = compute_app_outputs("p -> p")
    assert status.endswith("tautologies: p -> p")


def test_app_outputs_on_error():
    _, _, status, error = compute_app_outputs("p ∧")
    assert status == ""
    assert error.startswith("Error: ")
    assert "column 4" in error


def test_app_outputs_on_empty_input():
    _, _, status, error = compute_app_outputs("   ")
    assert (status, error) == ("", "")


def test_create_app():
    app = create_truth_table_app("p v q")
    assert isinstance(app, Dash)
    assert app.layout is not None

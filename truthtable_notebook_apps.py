"""
truthtable_notebook_apps.py

Dash/Plotly interactive application for truth tables.
This module provides a ready-to-use app for Jupyter notebooks.

Main components:
- compute_app_outputs(): everything the app displays for one input
- create_truth_table_app(): text box, option toggles, table and entailment diagram
"""

from dash import Dash, dcc, html, Input, Output
import plotly.graph_objects as go

from truthtable_core import TruthTableCalculator, EntailmentPoset

from truthtable_visualization import create_table_figure, create_entailment_graph


DEFAULT_EXPRESSION = 'A = p v q, B = p ^ q, A v ¬B'


def create_empty_figure(message=''):
    """Blank figure used while there is nothing to show."""
    fig = go.Figure()
    fig.update_layout(
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        plot_bgcolor='white',
        margin=dict(b=10, l=5, r=5, t=10),
        annotations=[dict(text=message, showarrow=False, font=dict(size=14, color='#999'))]
        if message else []
    )
    return fig


def compute_app_outputs(text, numeric=True, ordered=True, calculator=None):
    """
    Compute what the app shows for an input.

    Args:
        text: comma separated propositions
        numeric: show 0/1 instead of letters
        ordered: rows in enumeration order, or reversed
        calculator: Optional TruthTableCalculator to reuse

    Returns:
        tuple of (table figure, entailment figure, status message, error message)
    """
    if not text or not text.strip():
        return (create_empty_figure("Enter a proposition"), create_empty_figure(),
                "", "")

    if calculator is None:
        calculator = TruthTableCalculator()
    calculator.numeric_truth_values = bool(numeric)
    calculator.ordered_rows = bool(ordered)

    result = calculator.compute(text)
    if not result.ok:
        e = result.error
        return (create_empty_figure(), create_empty_figure(), "",
                f"Error: {e.message} at line {e.line}, column {e.column}")

    table = result.table
    symbols = (result.true_symbol, result.false_symbol)
    poset = EntailmentPoset(table).transitive_reduction()

    status = f"{len(table)} columns, {table.rows} rows"
    tautologies = poset.tautologies()
    if tautologies:
        status += " | tautologies: " + ", ".join(c.display_name for c in tautologies)

    return (create_table_figure(table, *symbols),
            create_entailment_graph(poset, true_symbol=symbols[0], false_symbol=symbols[1]),
            status, "")


def create_truth_table_app(initial_text=DEFAULT_EXPRESSION):
    """
    Create the interactive truth table Dash app.

    Features:
    - Free text input of comma separated, optionally named, propositions
    - Toggles for numeric/lettered truth values and row order
    - Table view and Hasse diagram of entailment between the columns

    Args:
        initial_text: expression shown when the app starts

    Returns:
        Dash app ready to run with app.run(jupyter_mode='inline', ...)
    """
    calculator = TruthTableCalculator()
    table_fig, graph_fig, status, error = compute_app_outputs(initial_text, calculator=calculator)

    app = Dash(__name__)

    app.layout = html.Div([
        html.H4("Truth tables", style={'marginBottom': '6px'}),
        html.P("Separate propositions with commas; name them with '='. "
               "Operators: ¬ ∧ ⊻ ∨ → ↔ (or not, and, xor, or, ->, <->).",
               style={'fontSize': '11px', 'color': '#666', 'marginBottom': '5px'}),
        dcc.Textarea(
            id='expression-input',
            value=initial_text,
            style={'width': '100%', 'height': '60px', 'fontFamily': 'monospace', 'fontSize': '13px'}
        ),
        html.Div([
            dcc.Checklist(
                id='options',
                options=[
                    {'label': ' Numeric values (0/1)', 'value': 'numeric'},
                    {'label': ' Enumeration order', 'value': 'ordered'},
                ],
                value=['numeric', 'ordered'], inline=True,
                style={'fontSize': '11px'}
            ),
        ], style={'marginTop': '4px', 'marginBottom': '4px'}),
        html.Div([
            html.Span(id='status-msg', children=status,
                      style={'fontSize': '11px', 'color': '#28a745', 'marginRight': '10px'}),
            html.Span(id='error-msg', children=error,
                      style={'fontSize': '11px', 'color': 'red'}),
        ]),
        html.Div([
            html.Div([
                dcc.Graph(id='table-graph', figure=table_fig, config={'displayModeBar': False}),
            ], style={'width': '55%', 'display': 'inline-block', 'verticalAlign': 'top'}),
            html.Div([
                dcc.Graph(id='entailment-graph', figure=graph_fig, config={'displayModeBar': False}),
            ], style={'width': '43%', 'display': 'inline-block', 'verticalAlign': 'top',
                      'marginLeft': '2%'}),
        ]),
    ], style={'padding': '8px', 'maxWidth': '1100px'})

    @app.callback(
        [Output('table-graph', 'figure'), Output('entailment-graph', 'figure'),
         Output('status-msg', 'children'), Output('error-msg', 'children')],
        [Input('expression-input', 'value'), Input('options', 'value')]
    )
    def update(text, options):
        options = options or []
        return compute_app_outputs(text, 'numeric' in options, 'ordered' in options,
                                   calculator=calculator)

    return app

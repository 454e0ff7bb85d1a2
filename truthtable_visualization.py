"""
truthtable_visualization.py

Rendering of truth tables and of their entailment posets.

- table_to_string(): bordered fixed-width text grid
- create_table_figure(): Plotly table
- create_entailment_graph(): Plotly drawing of a NetworkX entailment poset
- export_to_csv() / export_to_dot(): file exports
"""

import csv

import networkx as nx
import plotly.graph_objects as go


def table_to_string(table, true_symbol='1', false_symbol='0'):
    """
    Render a table as text.

        ------------
        |p|q| p ∨ q|
        ------------
        |0|0|   0  |
        ...
        ------------

    Each value is placed under the middle of its header.

    Args:
        table: Table
        true_symbol: glyph for true cells
        false_symbol: glyph for false cells

    Returns:
        str
    """
    header = ''.join('|' + name for name in table.headers)
    rule = '-' * (len(header) + 1)

    lines = [rule, header + '|', rule]
    for row in table.iter_rows():
        cells = []
        for column, bit in zip(table.columns, row):
            width = len(column.display_name)
            left = width // 2
            symbol = true_symbol if bit else false_symbol
            cells.append('|' + ' ' * left + symbol + ' ' * (width - 1 - left))
        lines.append(''.join(cells) + '|')
    lines.append(rule)

    return '\n'.join(lines) + '\n'


def create_table_figure(table, true_symbol='1', false_symbol='0', title=None):
    """
    Create a Plotly table of the truth values.

    Args:
        table: Table
        true_symbol: glyph for true cells
        false_symbol: glyph for false cells
        title: Optional figure title

    Returns:
        plotly.graph_objects.Figure
    """
    cell_values = [[true_symbol if bit else false_symbol for bit in column.truth_values]
                   for column in table]
    fill_colors = [['#d4edda' if bit else '#f8d7da' for bit in column.truth_values]
                   for column in table]

    fig = go.Figure(data=[go.Table(
        header=dict(values=table.headers, fill_color='#e9ecef', align='center',
                    font=dict(size=13)),
        cells=dict(values=cell_values, fill_color=fill_colors, align='center',
                   font=dict(family='monospace', size=12))
    )])

    fig.update_layout(
        title=dict(text=title or f"Truth table ({table.rows} rows)", font=dict(size=16)),
        margin=dict(b=10, l=5, r=5, t=40),
    )

    return fig


def compute_layout(G, layout_type):
    """
    Compute node positions based on layout algorithm.

    Args:
        G: NetworkX DiGraph
        layout_type: 'hierarchical', 'force', or 'circular'

    Returns:
        dict mapping node_id -> (x, y) position
    """
    if layout_type == 'hierarchical':
        return hierarchical_layout(G)
    elif layout_type == 'force':
        return nx.spring_layout(G, k=0.5, iterations=50, seed=0)
    elif layout_type == 'circular':
        return nx.circular_layout(G)
    else:
        raise ValueError(f"Unknown layout type: {layout_type}")


def hierarchical_layout(G):
    """
    Layer a DAG by longest path from its sources.

    Stronger propositions (sources of entailment edges) end up at the
    bottom, weaker ones above them.

    Args:
        G: NetworkX DiGraph

    Returns:
        dict mapping node_id -> (x, y) position
    """
    if G.number_of_nodes() == 0:
        return {}

    try:
        topo_order = list(nx.topological_sort(G))
    except nx.NetworkXUnfeasible:
        return nx.spring_layout(G, k=0.5, iterations=50, seed=0)

    levels = {}
    for node in topo_order:
        pred_levels = [levels[pred] for pred in G.predecessors(node)]
        levels[node] = max(pred_levels) + 1 if pred_levels else 0

    level_groups = {}
    for node, level in levels.items():
        level_groups.setdefault(level, []).append(node)

    max_level = max(levels.values())
    pos = {}
    for level, nodes in level_groups.items():
        y = level / max(max_level, 1)
        n_nodes = len(nodes)
        for i, node in enumerate(sorted(nodes)):
            x = i / (n_nodes - 1) if n_nodes > 1 else 0.5
            pos[node] = (x, y)

    return pos


def create_edge_trace(G, pos):
    """Plotly line trace for all edges of G."""
    edge_x = []
    edge_y = []

    for edge in G.edges():
        x0, y0 = pos[edge[0]]
        x1, y1 = pos[edge[1]]
        edge_x.extend([x0, x1, None])
        edge_y.extend([y0, y1, None])

    return go.Scatter(
        x=edge_x,
        y=edge_y,
        line=dict(width=0.8, color='#888'),
        hoverinfo='none',
        mode='lines'
    )


def create_hover_text(poset, node_id, true_symbol='1', false_symbol='0'):
    """
    Hover text for one equivalence class of columns.

    Returns:
        str: HTML-formatted hover text
    """
    bits = poset.class_list[node_id]
    lines = [f"<b>{column.display_name}</b>" for column in poset.get_columns(node_id)]
    lines.append("")
    lines.append("Values: " + ''.join(true_symbol if bit else false_symbol for bit in bits))

    if all(bits):
        lines.append("✓ Tautology")
    elif not any(bits):
        lines.append("✓ Contradiction")

    lines.append("")
    lines.append(f"Entailed by: {len(poset.predecessors(node_id))}")
    lines.append(f"Entails: {len(poset.successors(node_id))}")

    return "<br>".join(lines)


def create_node_trace(poset, pos, base_size=12, true_symbol='1', false_symbol='0'):
    """Plotly marker trace for the nodes of an entailment poset."""
    G = poset.graph
    node_x, node_y, node_text, node_label, node_color, node_size = [], [], [], [], [], []

    for node in G.nodes():
        x, y = pos[node]
        node_x.append(x)
        node_y.append(y)
        node_text.append(create_hover_text(poset, node, true_symbol, false_symbol))
        node_label.append(poset.label(node))

        # Fraction of rows where the class holds
        bits = poset.class_list[node]
        node_color.append(sum(bits) / len(bits) if bits else 0)

        node_size.append(base_size + 2 * len(poset.get_columns(node)))

    return go.Scatter(
        x=node_x,
        y=node_y,
        mode='markers+text',
        hoverinfo='text',
        hovertext=node_text,
        text=node_label,
        textposition='top center',
        marker=dict(
            size=node_size,
            color=node_color,
            colorscale='RdYlGn',
            cmin=0,
            cmax=1,
            line=dict(width=1, color='white')
        )
    )


def create_entailment_graph(poset, layout='hierarchical', title=None,
                            true_symbol='1', false_symbol='0'):
    """
    Create an interactive Plotly drawing of an entailment poset.

    Pass `poset.transitive_reduction()` to draw a Hasse diagram.

    Args:
        poset: EntailmentPoset
        layout: 'hierarchical', 'force', or 'circular'
        title: Optional figure title

    Returns:
        plotly.graph_objects.Figure
    """
    pos = compute_layout(poset.graph, layout)

    fig = go.Figure(data=[
        create_edge_trace(poset.graph, pos),
        create_node_trace(poset, pos, true_symbol=true_symbol, false_symbol=false_symbol),
    ])

    fig.update_layout(
        title=dict(text=title or f"Entailment ({len(poset.class_list)} classes)",
                   font=dict(size=16)),
        showlegend=False,
        hovermode='closest',
        margin=dict(b=20, l=5, r=5, t=40),
        xaxis=dict(showgrid=False, zeroline=False, showticklabels=False),
        yaxis=dict(showgrid=False, zeroline=False, showticklabels=False),
        plot_bgcolor='white',
    )

    return fig


def export_to_dot(poset, filename=None):
    """
    Export an entailment poset to GraphViz DOT format.

    Args:
        poset: EntailmentPoset
        filename: Optional filename to write to (if None, returns string)

    Returns:
        str: DOT format string (if filename is None)
    """
    lines = ['digraph G {', '  rankdir = BT;']

    for node in poset.graph.nodes():
        lines.append(f'  n{node} [label="{poset.label(node)}"];')
    for src, dst in poset.graph.edges():
        lines.append(f'  n{src} -> n{dst};')

    lines.append('}')
    dot_string = '\n'.join(lines)

    if filename:
        with open(filename, 'w', encoding='utf-8') as f:
            f.write(dot_string)
        return None
    return dot_string


def export_to_csv(table, filename, true_symbol='1', false_symbol='0'):
    """
    Export a table to CSV: one header row, then one row per assignment.

    Args:
        table: Table
        filename: CSV filename to write to
    """
    with open(filename, 'w', newline='', encoding='utf-8') as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(table.headers)
        for row in table.iter_rows():
            writer.writerow([true_symbol if bit else false_symbol for bit in row])

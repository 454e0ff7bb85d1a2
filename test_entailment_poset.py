"""
test_entailment_poset.py

Tests for grouping table columns by truth values and ordering them by entailment.
"""

from truthtable_core import (
    generate_table, entails, group_by_truth_values, EntailmentPoset,
)


def test_entails():
    assert entails([0, 1], [1, 1])
    assert entails([0, 0], [1, 0])
    assert not entails([1, 0], [0, 1])


def test_equivalent_columns_share_a_node():
    table = generate_table("p, ¬¬p, A = p ∧ p")
    groups = group_by_truth_values(table)
    assert list(groups) == [(0, 1)]

    poset = EntailmentPoset(table)
    assert len(poset.class_list) == 1
    assert poset.label(0) == 'p ≡ ¬¬p ≡ A = p ∧ p'
    assert poset.graph.number_of_edges() == 0


def test_hasse_diagram():
    table = generate_table("p ∧ q, p, p ∨ q, ¬p, p ∨ ¬p")
    assert table.headers == ['p', 'q', 'p ∧ q', 'p ∨ q', '¬p', 'p ∨ ¬p']

    poset = EntailmentPoset(table)
    assert poset.graph.number_of_nodes() == 6
    assert poset.graph.number_of_edges() == 10

    hasse = poset.transitive_reduction()
    assert hasse.graph.number_of_edges() == 6

    def node(name):
        return hasse.class_list.index(tuple(table.column(name).truth_values))

    assert sorted(hasse.successors(node('p ∧ q'))) == sorted([node('p'), node('q')])
    assert sorted(hasse.predecessors(node('p ∨ ¬p'))) == sorted([node('p ∨ q'), node('¬p')])
    assert hasse.get_columns(node('p'))[0].name == 'p'


def test_tautologies_and_contradictions():
    poset = EntailmentPoset(generate_table("p ∧ ¬p, p -> p, q"))
    assert [c.display_name for c in poset.tautologies()] == ['p -> p']
    assert [c.display_name for c in poset.contradictions()] == ['p ∧ ¬p']


def test_verbose_progress(capsys):
    EntailmentPoset(generate_table("p ∨ q"), verbose=True)
    assert "Poset built" in capsys.readouterr().err

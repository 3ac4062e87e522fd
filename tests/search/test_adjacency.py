# tests/search/test_adjacency.py
import pytest

from graphpath.domain.entities.graph import Edge, GraphSnapshot, Node
from graphpath.domain.search.search_adjacency import (
    build_adjacency,
    edge_weight,
    path_weight,
    traversal_weight,
)


def test_edge_listed_under_both_endpoints():
    e = Edge(7, 1, 2)
    adj = build_adjacency([e])
    assert adj == {1: [e], 2: [e]}


def test_self_loop_listed_once():
    loop = Edge(1, 5, 5)
    adj = build_adjacency([loop])
    assert adj == {5: [loop]}


def test_parallel_edges_are_not_collapsed():
    a, b = Edge(1, 1, 2), Edge(2, 2, 1)
    adj = build_adjacency([a, b])
    assert adj[1] == [a, b]
    assert adj[2] == [a, b]


def test_none_edges_rejected():
    with pytest.raises(ValueError):
        build_adjacency(None)


@pytest.mark.parametrize(
    "props, expected",
    [
        ({}, 1),
        ({"weight": "7"}, 7),
        ({"Weight": "4"}, 4),
        ({"WEIGHT": "4"}, 1),  # keys are case-sensitive
        ({"weight": ""}, 1),
        ({"weight": "abc"}, 1),
        ({"weight": "2.5"}, 1),
        ({"weight": " 12 "}, 12),
        ({"weight": "0"}, 0),
        ({"weight": "-3"}, -3),
        ({"weight": "2147483647"}, 2147483647),
        ({"weight": "-2147483648"}, -2147483648),
        ({"weight": "2147483648"}, 1),
        ({"weight": "99999999999"}, 1),
        ({"label": "x", "weight": "9"}, 9),
    ],
)
def test_edge_weight_policy(props, expected):
    assert edge_weight(Edge(1, 1, 2, props)) == expected


def test_edge_weight_uses_first_non_empty_entry_in_order():
    e = Edge(1, 1, 2, [("weight", ""), ("Weight", "5"), ("weight", "8")])
    assert edge_weight(e) == 5


def test_first_non_empty_entry_wins_even_if_unparseable():
    e = Edge(1, 1, 2, [("weight", "heavy"), ("Weight", "5")])
    assert edge_weight(e) == 1


def test_traversal_weight_rejects_negative():
    with pytest.raises(ValueError, match="negative weight"):
        traversal_weight(Edge(3, 1, 2, {"weight": "-1"}))


def test_path_weight_sums_by_edge_id():
    g = GraphSnapshot.of(None, [Edge(1, 1, 2, {"weight": "3"}), Edge(2, 2, 3)])
    assert path_weight([1, 2], g.edge_map) == 4


def test_snapshot_infers_domain_from_edges():
    g = GraphSnapshot.of(None, [Edge(1, 10, 20), Edge(2, 20, 30)])
    assert g.node_ids == {10, 20, 30}
    assert g.node_map[10] == Node(10)


def test_snapshot_explicit_nodes_define_domain():
    g = GraphSnapshot.of([Node(1), Node(2), Node(9)], [Edge(1, 1, 2)])
    assert g.node_ids == {1, 2, 9}

import math

import pytest

from graphpath.graph.transient import NO_VERTEX, OutEdge, TransientGraph


def test_add_vertex_grows_with_floor():
    g = TransientGraph()
    g.add_vertex(3)
    # empty sequence grows to id + 4
    assert g.capacity == 7
    assert g.vertex_count == 1
    assert 3 in g
    assert 2 not in g


def test_add_vertex_doubles_when_that_is_enough():
    g = TransientGraph()
    g.add_vertex(3)
    g.add_vertex(10)
    assert g.capacity == 14


def test_add_vertex_is_idempotent():
    g = TransientGraph()
    g.add_vertex(1)
    g.add_edge(1, 2, 5)
    g.add_vertex(1)
    assert g.vertex_count == 2
    assert list(g.out_edges(1)) == [OutEdge(2, 5)]


def test_add_vertex_rejects_negative_id():
    g = TransientGraph()
    with pytest.raises(ValueError):
        g.add_vertex(-1)


def test_add_edge_creates_both_endpoints():
    g = TransientGraph()
    g.add_edge(4, 9, 2)
    assert 4 in g and 9 in g
    assert list(g.out_edges(9)) == []


def test_out_edges_keep_insertion_order_and_multi_edges():
    g = TransientGraph()
    g.add_edge(1, 2, 7)
    g.add_edge(1, 3, 1)
    g.add_edge(1, 2, 4)
    g.add_edge(1, 1, 0)

    assert [(e.vertex, e.weight) for e in g.out_edges(1)] == [
        (2, 7),
        (3, 1),
        (2, 4),
        (1, 0),
    ]
    assert g.edge_count == 4


def test_new_slot_state_is_unreached():
    g = TransientGraph()
    g.add_vertex(1)
    slot = g[1]
    assert math.isinf(slot.dist)
    assert slot.prev == NO_VERTEX
    assert slot.visited is False


def test_missing_slot_lookup_raises():
    g = TransientGraph()
    g.add_vertex(5)
    with pytest.raises(KeyError):
        g[2]
    with pytest.raises(KeyError):
        g.out_edges(100)


def test_vertex_ids_skip_empty_positions():
    g = TransientGraph()
    g.add_edge(5, 2, 1)
    g.add_vertex(8)
    assert list(g.vertex_ids()) == [2, 5, 8]
    assert len(g) == 3

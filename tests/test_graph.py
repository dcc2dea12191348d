"""Tests for the multigraph structure."""

import pytest

from eulerian.graph import Multigraph


def test_vertex_count_must_be_positive():
    with pytest.raises(ValueError):
        Multigraph(0)


def test_add_edge_updates_both_endpoints():
    graph = Multigraph(3)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)

    assert graph.neighbors == [[1], [0, 2], [1]]
    assert graph.edges == [(0, 1), (1, 2)]
    assert graph.num_edges == 2
    assert graph.has_edge(1, 0)
    assert not graph.has_edge(0, 2)


def test_out_of_range_vertex_rejected():
    graph = Multigraph(2)
    with pytest.raises(ValueError):
        graph.add_edge(0, 2)


def test_self_loop_counts_twice():
    graph = Multigraph(1)
    graph.add_edge(0, 0)

    assert graph.neighbors[0] == [0, 0]
    assert graph.degree(0) == 2
    assert graph.has_even_degree()


def test_parallel_edges_and_single_removal():
    graph = Multigraph.from_edges(2, [(0, 1), (1, 0), (0, 1)])
    assert graph.multiplicity(0, 1) == 3

    graph.remove_edge(1, 0)

    assert graph.multiplicity(0, 1) == 2
    assert graph.neighbors == [[1, 1], [0, 0]]
    assert graph.num_edges == 2


def test_remove_missing_edge_raises():
    graph = Multigraph.from_edges(3, [(0, 1)])
    with pytest.raises(ValueError):
        graph.remove_edge(1, 2)


def test_degree_statistics():
    graph = Multigraph.from_edges(4, [(0, 1), (1, 2), (2, 0), (0, 3)])

    assert [graph.degree(v) for v in range(4)] == [3, 2, 2, 1]
    assert graph.avg_degree() == 2.0
    assert graph.odd_degree_vertices() == [0, 3]
    assert not graph.has_even_degree()


def test_connectivity_ignores_isolated_vertices():
    graph = Multigraph.from_edges(5, [(0, 1), (1, 2), (2, 0)])
    assert graph.is_connected()


def test_two_components_with_edges_are_disconnected():
    graph = Multigraph.from_edges(6, [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)])
    assert not graph.is_connected()


def test_edgeless_graph_is_connected():
    graph = Multigraph(4)
    assert graph.is_connected()
    assert graph.has_even_degree()
    assert graph.first_nonzero_degree_vertex() == -1


def test_connectivity_on_long_path_does_not_recurse():
    n = 50_000
    graph = Multigraph.from_edges(n, [(i, i + 1) for i in range(n - 1)])
    assert graph.is_connected()


def test_checks_are_idempotent():
    graph = Multigraph.from_edges(4, [(0, 1), (1, 2), (2, 3)])
    snapshot = [list(ns) for ns in graph.neighbors]

    assert graph.is_connected() == graph.is_connected()
    assert graph.has_even_degree() == graph.has_even_degree()
    assert graph.neighbors == snapshot


def test_copy_is_independent():
    graph = Multigraph.from_edges(3, [(0, 1), (1, 2)])
    clone = graph.copy()
    clone.remove_edge(0, 1)

    assert graph.has_edge(0, 1)
    assert graph.neighbors == [[1], [0, 2], [1]]
    assert not clone.has_edge(0, 1)


def test_neighbors_alone_derive_edges():
    graph = Multigraph(3, neighbors=[[1, 2], [0, 2], [0, 1]])

    assert graph.num_edges == 3
    assert sorted(graph.edges) == [(0, 1), (0, 2), (1, 2)]
    assert graph.has_edge(2, 1)


def test_neighbors_alone_count_loops_and_parallel_edges():
    graph = Multigraph(2, neighbors=[[0, 0, 1, 1], [0, 0]])

    assert graph.multiplicity(0, 0) == 1
    assert graph.multiplicity(0, 1) == 2
    assert graph.num_edges == 3


def test_edges_alone_build_adjacency():
    graph = Multigraph(3, edges=[(0, 1), (1, 2), (2, 0)])

    assert graph.neighbors == [[1, 2], [0, 2], [1, 0]]
    assert graph.has_even_degree()


@pytest.mark.parametrize("neighbors,edges", [
    ([[1], [0], []], [(0, 1), (1, 2)]),
    ([[1, 1], [0, 0], []], [(0, 1)]),
    ([[], [], []], [(0, 1)]),
])
def test_disagreeing_neighbors_and_edges_rejected(neighbors, edges):
    with pytest.raises(ValueError):
        Multigraph(3, neighbors=neighbors, edges=edges)


@pytest.mark.parametrize("neighbors", [
    [[1], [], []],
    [[1, 1], [0], []],
    [[0], [], []],
    [[5], [0], []],
    [[1], [0]],
])
def test_malformed_neighbors_rejected(neighbors):
    with pytest.raises(ValueError):
        Multigraph(3, neighbors=neighbors)


def test_edges_out_of_range_rejected():
    with pytest.raises(ValueError):
        Multigraph(2, edges=[(0, 2)])

"""Tests for the seeded graph generators."""

import pytest

from eulerian.graph import create_graph
from eulerian.graph.generators import random_edge_capacity


def test_ring_matches_cycle():
    graph = create_graph("ring", 4)

    assert graph.edges == [(0, 1), (1, 2), (2, 3), (3, 0)]
    assert all(graph.degree(v) == 2 for v in range(4))


@pytest.mark.parametrize("n", [1, 2])
def test_tiny_rings_stay_even(n):
    graph = create_graph("ring", n)

    assert graph.num_edges == n
    assert graph.has_even_degree()


def test_random_is_deterministic_per_seed():
    first = create_graph("random", 8, 15, seed=7)
    second = create_graph("random", 8, 15, seed=7)

    assert first.edges == second.edges
    assert first.neighbors == second.neighbors


def test_random_starts_from_ring_and_adds_simple_edges():
    graph = create_graph("random", 8, 15, seed=3)

    assert graph.num_edges == 15
    assert graph.edges[:8] == [(i, (i + 1) % 8) for i in range(8)]
    for u, v in graph.edges[8:]:
        assert u != v
        assert graph.multiplicity(u, v) == 1


def test_random_never_drops_ring_edges():
    graph = create_graph("random", 5, 2, seed=1)
    assert graph.num_edges == 5


def test_random_edge_capacity():
    assert random_edge_capacity(1) == 1
    assert random_edge_capacity(2) == 2
    assert random_edge_capacity(3) == 3
    assert random_edge_capacity(5) == 10


def test_random_can_fill_to_capacity():
    graph = create_graph("random", 5, 10, seed=11)
    assert graph.num_edges == 10
    assert all(graph.degree(v) == 4 for v in range(5))


def test_random_rejects_unreachable_edge_count():
    with pytest.raises(ValueError, match="Cannot place"):
        create_graph("random", 5, 11, seed=1)


def test_complete_graph():
    graph = create_graph("complete", 5)
    assert graph.num_edges == 10
    assert all(graph.degree(v) == 4 for v in range(5))


def test_k_regular():
    graph = create_graph("k-regular", 10, k=4)

    assert graph.num_edges == 20
    assert all(graph.degree(v) == 4 for v in range(10))


def test_k_regular_odd_k_is_bumped(capsys):
    graph = create_graph("k-regular", 10, k=3)

    assert all(graph.degree(v) == 4 for v in range(10))
    assert "Warning" in capsys.readouterr().out


def test_invalid_parameters():
    with pytest.raises(ValueError):
        create_graph("random", 0, 0)
    with pytest.raises(ValueError):
        create_graph("random", 3, -1)
    with pytest.raises(ValueError, match="Unknown graph type"):
        create_graph("star", 3)

"""Seeded multigraph generators."""

import random
from typing import Literal

from eulerian.graph.base import Multigraph


GraphType = Literal["random", "ring", "complete", "k-regular"]


def create_graph(
    graph_type: GraphType,
    num_vertices: int,
    num_edges: int = 0,
    **kwargs
) -> Multigraph:
    """Create a multigraph.

    Args:
        graph_type: Type of graph ('random', 'ring', 'complete', 'k-regular')
        num_vertices: Number of vertices
        num_edges: Target edge count for 'random' (ignored by the other types)
        **kwargs: Additional parameters specific to graph type:
            - seed (int): Random seed for 'random' (default: 12345)
            - k (int): Degree for 'k-regular' (default: 4, must be even)

    Returns:
        Multigraph object

    Raises:
        ValueError: If graph_type is unknown or parameters are invalid
    """
    graph_type = graph_type.lower()

    if num_vertices <= 0:
        raise ValueError(f"num_vertices must be > 0, got {num_vertices}")
    if num_edges < 0:
        raise ValueError(f"num_edges must be >= 0, got {num_edges}")

    if graph_type == "random":
        seed = kwargs.get("seed", 12345)
        return _create_random(num_vertices, num_edges, seed)
    elif graph_type in ("ring", "cycle"):
        return _create_ring(num_vertices)
    elif graph_type in ("complete", "fully", "full"):
        return _create_complete(num_vertices)
    elif graph_type in ("k-regular", "kregular"):
        k = kwargs.get("k")
        if k is None:
            k = 4
        return _create_k_regular(num_vertices, k)
    else:
        raise ValueError(f"Unknown graph type: {graph_type}")


def _create_ring(n: int) -> Multigraph:
    """Create a cycle i -> (i+1) % n.

    n == 1 yields a self loop and n == 2 a pair of parallel edges, so every
    vertex has degree 2.
    """
    graph = Multigraph(n)
    for i in range(n):
        graph.add_edge(i, (i + 1) % n)
    return graph


def random_edge_capacity(n: int) -> int:
    """Largest edge count reachable by the 'random' generator on n vertices."""
    ring = _create_ring(n)
    joined = {(min(u, v), max(u, v)) for u, v in ring.edges if u != v}
    return ring.num_edges + n * (n - 1) // 2 - len(joined)


def _create_random(n: int, num_edges: int, seed: int = 12345) -> Multigraph:
    """Create a ring plus uniformly drawn extra edges.

    Extra edges avoid self loops and vertex pairs that are already joined,
    and are added until the graph holds ``num_edges`` edges. They do not
    preserve parity, so the result can contain odd-degree vertices.
    """
    capacity = random_edge_capacity(n)
    if num_edges > capacity:
        raise ValueError(
            f"Cannot place {num_edges} edges on {n} vertices "
            f"(at most {capacity} without self loops or duplicates)"
        )

    rng = random.Random(seed)
    graph = _create_ring(n)

    while graph.num_edges < num_edges:
        u = rng.randrange(n)
        v = rng.randrange(n)
        if u != v and not graph.has_edge(u, v):
            graph.add_edge(u, v)

    return graph


def _create_complete(n: int) -> Multigraph:
    """Create a complete graph where all vertices connect to all others."""
    graph = Multigraph(n)
    for i in range(n):
        for j in range(i + 1, n):
            graph.add_edge(i, j)
    return graph


def _create_k_regular(n: int, k: int) -> Multigraph:
    """Create a k-regular ring lattice (circulant graph).

    Each vertex connects to k/2 predecessors and k/2 successors.
    """
    if k % 2 != 0:
        print(f"Warning: k={k} is odd, using k={k+1} for regular ring lattice")
        k = k + 1

    if k >= n:
        print(f"Warning: k={k} >= n={n}, creating complete graph")
        return _create_complete(n)

    graph = Multigraph(n)
    half_k = k // 2

    for i in range(n):
        for offset in range(1, half_k + 1):
            j = (i + offset) % n
            if not graph.has_edge(i, j):
                graph.add_edge(i, j)

    return graph

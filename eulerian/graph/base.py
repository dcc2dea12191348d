"""Base multigraph structure and utilities."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Counter as CounterType, List

from eulerian.core.types import Edge


def _key(u: int, v: int) -> Edge:
    return (u, v) if u <= v else (v, u)


@dataclass
class Multigraph:
    """Undirected multigraph over a fixed set of integer-labeled vertices.

    Attributes:
        num_vertices: Number of vertices, labeled 0..num_vertices-1
        neighbors: Adjacency list where neighbors[i] holds i's neighbors in
            insertion order, one entry per incident edge (a self loop on i
            contributes two entries)
        edges: Undirected edges as (u, v) tuples in insertion order
    """

    num_vertices: int
    neighbors: List[List[int]] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
    _multiplicity: CounterType[Edge] = field(default_factory=Counter, init=False, repr=False)

    def __post_init__(self):
        """Validate the graph and fill in whichever of neighbors/edges is missing.

        Raises:
            ValueError: If a vertex is out of range or neighbors and edges
                disagree on how many edges join a pair of vertices
        """
        if self.num_vertices <= 0:
            raise ValueError(f"num_vertices must be > 0, got {self.num_vertices}")

        for u, v in self.edges:
            self._check_vertex(u)
            self._check_vertex(v)
            self._multiplicity[_key(u, v)] += 1

        if not self.neighbors:
            self.neighbors = [[] for _ in range(self.num_vertices)]
            for u, v in self.edges:
                self.neighbors[u].append(v)
                self.neighbors[v].append(u)
            return

        if len(self.neighbors) != self.num_vertices:
            raise ValueError(
                f"neighbors list length ({len(self.neighbors)}) != num_vertices ({self.num_vertices})"
            )

        adjacency = self._adjacency_multiplicity()
        if not self.edges:
            for (u, v), count in sorted(adjacency.items()):
                self.edges.extend([(u, v)] * count)
            self._multiplicity.update(adjacency)
        elif adjacency != self._multiplicity:
            raise ValueError("neighbors and edges describe different graphs")

    def _adjacency_multiplicity(self) -> CounterType[Edge]:
        """Count edges per vertex pair as recorded in the adjacency lists."""
        entries: CounterType[Edge] = Counter()
        for u, neighbors in enumerate(self.neighbors):
            for v in neighbors:
                self._check_vertex(v)
                entries[(u, v)] += 1

        counts: CounterType[Edge] = Counter()
        for (u, v), count in entries.items():
            if u == v:
                if count % 2:
                    raise ValueError(f"Self loop on {u} must appear twice per edge in its neighbors")
                counts[(u, u)] = count // 2
            elif u < v:
                if entries[(v, u)] != count:
                    raise ValueError(f"Edge ({u}, {v}) is not listed symmetrically in neighbors")
                counts[(u, v)] = count
            elif (v, u) not in entries:
                raise ValueError(f"Edge ({v}, {u}) is not listed symmetrically in neighbors")

        return counts

    @classmethod
    def from_edges(cls, num_vertices: int, edges: List[Edge]) -> "Multigraph":
        """Build a multigraph by adding ``edges`` in order.

        Args:
            num_vertices: Number of vertices
            edges: Undirected edges to add

        Returns:
            Multigraph whose adjacency order follows ``edges``
        """
        graph = cls(num_vertices)
        for u, v in edges:
            graph.add_edge(u, v)
        return graph

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self.num_vertices:
            raise ValueError(f"Vertex {v} out of range [0, {self.num_vertices})")

    def add_edge(self, u: int, v: int) -> None:
        """Add an undirected edge between u and v.

        Args:
            u: First endpoint
            v: Second endpoint (may equal u for a self loop)
        """
        self._check_vertex(u)
        self._check_vertex(v)

        self.neighbors[u].append(v)
        self.neighbors[v].append(u)
        self.edges.append((u, v))
        self._multiplicity[_key(u, v)] += 1

    def remove_edge(self, u: int, v: int) -> None:
        """Remove one occurrence of the edge between u and v.

        Costs O(deg(u) + deg(v) + E) since each list is scanned for the
        occurrence to drop.

        Args:
            u: First endpoint
            v: Second endpoint

        Raises:
            ValueError: If no such edge exists
        """
        key = _key(u, v)
        if not self._multiplicity[key]:
            raise ValueError(f"Edge ({u}, {v}) not in graph")

        self.neighbors[u].remove(v)
        self.neighbors[v].remove(u)
        if (u, v) in self.edges:
            self.edges.remove((u, v))
        else:
            self.edges.remove((v, u))

        self._multiplicity[key] -= 1
        if not self._multiplicity[key]:
            del self._multiplicity[key]

    def has_edge(self, u: int, v: int) -> bool:
        """Check whether at least one edge joins u and v."""
        return self._multiplicity[_key(u, v)] > 0

    def multiplicity(self, u: int, v: int) -> int:
        """Number of parallel edges joining u and v."""
        return self._multiplicity[_key(u, v)]

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    def degree(self, vertex: int) -> int:
        """Get the degree of a vertex.

        Args:
            vertex: Vertex label

        Returns:
            Length of the vertex's adjacency list (self loops count twice)
        """
        return len(self.neighbors[vertex])

    def avg_degree(self) -> float:
        """Calculate average vertex degree."""
        return sum(len(neighbors) for neighbors in self.neighbors) / self.num_vertices

    def odd_degree_vertices(self) -> List[int]:
        """Vertices whose degree is odd, in label order."""
        return [v for v in range(self.num_vertices) if len(self.neighbors[v]) % 2]

    def first_nonzero_degree_vertex(self) -> int:
        """Lowest-labeled vertex with at least one incident edge, or -1."""
        for v in range(self.num_vertices):
            if self.neighbors[v]:
                return v
        return -1

    def is_connected(self) -> bool:
        """Check that all vertices with non-zero degree are mutually reachable.

        Depth-first traversal with an explicit stack, starting from the first
        vertex of non-zero degree. Isolated vertices are ignored and a graph
        without edges counts as connected.

        Returns:
            True if every non-zero-degree vertex was reached
        """
        start = self.first_nonzero_degree_vertex()
        if start == -1:
            return True

        visited = [False] * self.num_vertices
        visited[start] = True
        stack = [start]

        while stack:
            current = stack.pop()
            for neighbor in self.neighbors[current]:
                if not visited[neighbor]:
                    visited[neighbor] = True
                    stack.append(neighbor)

        return all(visited[v] or not self.neighbors[v] for v in range(self.num_vertices))

    def has_even_degree(self) -> bool:
        """Check that every vertex has even degree."""
        return all(len(neighbors) % 2 == 0 for neighbors in self.neighbors)

    def copy(self) -> "Multigraph":
        """Return an independent copy of this graph."""
        return Multigraph(
            num_vertices=self.num_vertices,
            neighbors=[list(ns) for ns in self.neighbors],
            edges=list(self.edges),
        )

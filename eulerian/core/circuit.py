"""Eulerian circuit construction with Hierholzer's algorithm."""

from collections import Counter, deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Tuple

from eulerian.core.types import Circuit, CircuitFailure
from eulerian.graph.base import Multigraph


_FAILURE_MESSAGES = {
    CircuitFailure.DISCONNECTED: "Graph is not connected. No Eulerian Circuit exists.",
    CircuitFailure.ODD_DEGREE: "Graph has vertices with odd degree. No Eulerian Circuit exists.",
}


@dataclass
class CircuitResult:
    """Outcome of an Eulerian circuit search.

    Attributes:
        exists: Whether the graph has an Eulerian circuit
        circuit: Closed vertex sequence when ``exists``, otherwise None
        reason: Failed precondition when not ``exists``
    """

    exists: bool
    circuit: Optional[Circuit] = None
    reason: Optional[CircuitFailure] = None

    @property
    def message(self) -> str:
        """Human-readable report of the result."""
        if not self.exists:
            return _FAILURE_MESSAGES[self.reason]
        return "Eulerian Circuit: " + " -> ".join(str(v) for v in self.circuit)


class EulerianCircuitFinder:
    """Finds Eulerian circuits in undirected multigraphs.

    The finder checks connectivity of the non-zero-degree vertices and then
    even degree. When both hold it walks the graph with Hierholzer's
    algorithm, always leaving a vertex through its first remaining incident
    edge in adjacency order. The input graph is never modified.
    """

    def check(self, graph: Multigraph) -> Optional[CircuitFailure]:
        """Run the existence checks.

        Args:
            graph: Graph to inspect

        Returns:
            The first failed precondition, or None if a circuit exists
        """
        if not graph.is_connected():
            return CircuitFailure.DISCONNECTED
        if not graph.has_even_degree():
            return CircuitFailure.ODD_DEGREE
        return None

    def find(self, graph: Multigraph) -> CircuitResult:
        """Find an Eulerian circuit.

        Args:
            graph: Graph to traverse

        Returns:
            CircuitResult holding either the circuit or the failure reason
        """
        failure = self.check(graph)
        if failure is not None:
            return CircuitResult(exists=False, reason=failure)

        return CircuitResult(exists=True, circuit=self._hierholzer(graph))

    def _hierholzer(self, graph: Multigraph) -> Circuit:
        remaining = _incidence_queues(graph)
        consumed = bytearray(graph.num_edges)

        start = graph.first_nonzero_degree_vertex()
        if start == -1:
            start = 0

        path = [start]
        circuit: Circuit = []
        current = start

        while path:
            queue = remaining[current]
            # Entries whose edge was consumed from the other endpoint
            while queue and consumed[queue[0][1]]:
                queue.popleft()

            if queue:
                path.append(current)
                neighbor, edge_id = queue.popleft()
                consumed[edge_id] = 1
                current = neighbor
            else:
                circuit.append(current)
                current = path.pop()

        circuit.reverse()
        return circuit


def _incidence_queues(graph: Multigraph) -> List[Deque[Tuple[int, int]]]:
    """Pair every adjacency entry with the id of the edge it belongs to.

    Entries keep the graph's adjacency order. Parallel edges between the same
    pair are matched to ids in insertion order.
    """
    pending = {}
    for edge_id, (u, v) in enumerate(graph.edges):
        pending.setdefault((u, v), deque()).append(edge_id)
        if u != v:
            pending.setdefault((v, u), deque()).append(edge_id)

    # Each undirected edge appears once in each endpoint's list; a self loop
    # appears twice in its vertex's list and both entries share its id.
    seen: Counter = Counter()
    queues: List[Deque[Tuple[int, int]]] = []
    for u, neighbors in enumerate(graph.neighbors):
        queue: Deque[Tuple[int, int]] = deque()
        for v in neighbors:
            ids = pending[(u, v)]
            if u == v:
                edge_id = ids[seen[(u, u)] // 2]
                seen[(u, u)] += 1
            else:
                edge_id = ids[seen[(u, v)]]
                seen[(u, v)] += 1
            queue.append((v, edge_id))
        queues.append(queue)

    return queues


def find_eulerian_circuit(graph: Multigraph) -> CircuitResult:
    """Convenience wrapper around ``EulerianCircuitFinder().find``."""
    return EulerianCircuitFinder().find(graph)


def verify_circuit(graph: Multigraph, circuit: Circuit) -> bool:
    """Check that ``circuit`` is closed and uses every edge exactly once.

    Args:
        graph: Graph the circuit was built from
        circuit: Vertex sequence to check

    Returns:
        True if the sequence is an Eulerian circuit of ``graph``
    """
    if not circuit or circuit[0] != circuit[-1]:
        return False
    if len(circuit) != graph.num_edges + 1:
        return False

    unused = Counter((min(u, v), max(u, v)) for u, v in graph.edges)
    for u, v in zip(circuit, circuit[1:]):
        key = (min(u, v), max(u, v))
        if not unused[key]:
            return False
        unused[key] -= 1

    return True

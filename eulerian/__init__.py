"""
eulerian: Seeded multigraph generation and Eulerian circuit construction.

eulerian builds undirected multigraphs, checks whether an Eulerian circuit
exists, and constructs one with Hierholzer's algorithm.
"""

__version__ = "0.1.0"

from eulerian.config import Config
from eulerian.core import CircuitResult, EulerianCircuitFinder, find_eulerian_circuit
from eulerian.graph import Multigraph, create_graph

__all__ = [
    "__version__",
    "Config",
    "CircuitResult",
    "EulerianCircuitFinder",
    "find_eulerian_circuit",
    "Multigraph",
    "create_graph",
]

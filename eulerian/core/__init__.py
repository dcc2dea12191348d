"""Core components for Eulerian circuit construction."""

from eulerian.core.circuit import (
    CircuitResult,
    EulerianCircuitFinder,
    find_eulerian_circuit,
    verify_circuit,
)
from eulerian.core.types import Circuit, CircuitFailure, Edge

__all__ = [
    "CircuitResult",
    "EulerianCircuitFinder",
    "find_eulerian_circuit",
    "verify_circuit",
    "Circuit",
    "CircuitFailure",
    "Edge",
]

"""Core type definitions for eulerian."""

from enum import Enum
from typing import List, Tuple


# Type aliases
Edge = Tuple[int, int]
"""Undirected edge as a (u, v) vertex pair"""

Circuit = List[int]
"""Closed walk as an ordered list of vertex labels"""


class CircuitFailure(str, Enum):
    """Reason an Eulerian circuit does not exist."""

    DISCONNECTED = "disconnected"
    ODD_DEGREE = "odd_degree"

"""Multigraph structure and generators."""

from eulerian.graph.base import Multigraph
from eulerian.graph.generators import create_graph

__all__ = ["Multigraph", "create_graph"]

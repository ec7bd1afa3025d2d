"""Currency graph construction and rate resolution."""

from __future__ import annotations

from curconv.graph.builder import AdjacencyList, Edge, build_adjacency
from curconv.graph.resolver import PathStrategy, ResolvedRate, find_exchange_rate

__all__ = [
    "AdjacencyList",
    "Edge",
    "build_adjacency",
    "PathStrategy",
    "ResolvedRate",
    "find_exchange_rate",
]

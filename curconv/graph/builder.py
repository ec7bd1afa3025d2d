"""Build a bidirectional adjacency list from currency pairs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from curconv.errors import InvalidInputError
from curconv.ingestion.models import CurrencyPair
from curconv.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = ["Edge", "AdjacencyList", "build_adjacency"]


@dataclass(frozen=True, slots=True)
class Edge:
    """Outgoing edge: one unit of the owning currency buys ``value`` of ``endpoint``."""

    endpoint: str
    value: float


AdjacencyList = dict[str, list[Edge]]


def build_adjacency(pairs: Iterable[CurrencyPair]) -> AdjacencyList:
    """Return currency -> edges, adding the reciprocal edge for every pair.

    Repeated pairs are kept as parallel edges.
    """

    adjacency: AdjacencyList = {}
    edge_count = 0
    for pair in pairs:
        if not math.isfinite(pair.value) or pair.value <= 0:
            raise InvalidInputError(
                f"Rate for {pair.left}/{pair.right} must be a positive number; got {pair.value!r}"
            )
        adjacency.setdefault(pair.left, []).append(Edge(pair.right, pair.value))
        adjacency.setdefault(pair.right, []).append(Edge(pair.left, 1 / pair.value))
        edge_count += 2
    LOGGER.debug(
        "Created adjacency list with %s currencies and %s edges: %s",
        len(adjacency),
        edge_count,
        adjacency,
    )
    return adjacency

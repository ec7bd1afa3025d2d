"""Public interface for the curconv package."""

from __future__ import annotations

from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import Iterable

from curconv.errors import (
    CurConvError,
    InvalidInputError,
    MissingArgumentError,
    NoPathError,
    UnknownCurrencyError,
)
from curconv.graph.builder import AdjacencyList, Edge, build_adjacency
from curconv.graph.resolver import PathStrategy, ResolvedRate, find_exchange_rate
from curconv.ingestion.models import CurrencyPair
from curconv.ingestion.pairs_csv import PairsCSVParser

__all__ = [
    "__version__",
    "AdjacencyList",
    "CurConvError",
    "CurrencyConverter",
    "CurrencyPair",
    "Edge",
    "InvalidInputError",
    "MissingArgumentError",
    "NoPathError",
    "PairsCSVParser",
    "PathStrategy",
    "ResolvedRate",
    "UnknownCurrencyError",
    "build_adjacency",
    "find_exchange_rate",
]

try:
    __version__ = importlib_metadata.version("curconv")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


class CurrencyConverter:
    """Package facade that builds the currency graph once and answers queries."""

    __slots__ = ("pairs", "graph")

    # Provide direct access to the package version as a class attribute.
    __version__ = __version__

    def __init__(self, pairs: Iterable[CurrencyPair]) -> None:
        """Build the adjacency list from ``pairs``.

        The pairs are kept so callers can inspect what the graph was built
        from; the graph itself is not modified after construction.
        """

        self.pairs: list[CurrencyPair] = list(pairs)
        self.graph: AdjacencyList = build_adjacency(self.pairs)

    @classmethod
    def from_csv(cls, csv_path: str | Path) -> "CurrencyConverter":
        """Read a comma-delimited pairs file and build a converter from it."""

        return cls(PairsCSVParser().parse(csv_path))

    def currencies(self) -> list[str]:
        """Return every currency code known to the graph, sorted."""

        return sorted(self.graph)

    def rate(
        self,
        source: str,
        target: str,
        *,
        trace_steps: bool = False,
        strategy: PathStrategy | str = PathStrategy.DFS,
    ) -> ResolvedRate:
        """Return ``1 source = ? target`` composed along a path in the graph."""

        if not source:
            raise MissingArgumentError("Must provide the currency to convert from")
        if not target:
            raise MissingArgumentError("Must provide the currency to convert to")
        return find_exchange_rate(source, target, self.graph, trace_steps, strategy=strategy)

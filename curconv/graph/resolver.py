"""Resolve a derived exchange rate by walking the currency graph."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum

from curconv.errors import NoPathError, UnknownCurrencyError
from curconv.graph.builder import AdjacencyList, Edge
from curconv.ingestion.models import CurrencyPair
from curconv.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = ["PathStrategy", "ResolvedRate", "find_exchange_rate"]


class PathStrategy(str, Enum):
    """How the resolver searches for a connecting path."""

    DFS = "dfs"
    BFS = "bfs"

    @classmethod
    def from_value(cls, value: "PathStrategy | str") -> "PathStrategy":
        """Normalise user input such as ``"BFS"`` into a PathStrategy."""

        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(
                f"Unsupported path strategy {value!r}. Supported values are "
                + ", ".join(member.value for member in cls)
            ) from None


@dataclass(slots=True)
class ResolvedRate:
    """Outcome of a single resolution."""

    source: str
    target: str
    rate: float
    steps: list[CurrencyPair] | None = None

    def as_tuple(self) -> tuple[float, list[CurrencyPair] | None]:
        """Return the result as ``(rate, steps)``."""
        return (self.rate, self.steps)


def find_exchange_rate(
    source: str,
    target: str,
    graph: AdjacencyList,
    trace_steps: bool = False,
    *,
    strategy: PathStrategy | str = PathStrategy.DFS,
) -> ResolvedRate:
    """Compose the rate ``1 source = ? target`` along a path through ``graph``.

    The default depth-first search accepts whichever path the traversal
    constructs; it is not the shortest or cheapest one. ``PathStrategy.BFS``
    returns a path with the fewest hops instead.

    Raises :class:`UnknownCurrencyError` when either currency has no pairs and
    :class:`NoPathError` when the two currencies are not connected.
    """

    if source not in graph:
        raise UnknownCurrencyError(source)
    if target not in graph:
        raise UnknownCurrencyError(target)
    resolved_strategy = PathStrategy.from_value(strategy)

    if source == target:
        return ResolvedRate(source, target, 1.0, [] if trace_steps else None)

    if resolved_strategy is PathStrategy.BFS:
        discovered_by = _breadth_first(source, target, graph)
    else:
        discovered_by = _depth_first(source, target, graph)
    if target not in discovered_by:
        raise NoPathError(source, target)

    hops = _reconstruct_path(source, target, discovered_by)
    rate = 1.0
    for hop in hops:
        rate = rate * hop.value
    LOGGER.debug(
        "Resolved 1 %s = %f %s over %s hops (%s)",
        source,
        rate,
        target,
        len(hops),
        resolved_strategy.value,
    )
    return ResolvedRate(source, target, rate, hops if trace_steps else None)


def _depth_first(source: str, target: str, graph: AdjacencyList) -> dict[str, CurrencyPair]:
    """Stack based DFS returning the edge that led to each visited currency.

    ``successors`` keeps the last unvisited edge examined from each node. Its
    chain from ``source`` follows the visit order, so wherever it reaches
    ``target`` every hop is also the discovering edge of the next node; the
    discovering edges additionally cover targets reached after a backtrack.
    The path is rebuilt from the discovering edges only; ``successors`` is
    kept for the DEBUG diagnostic and never read back.
    """

    successors: dict[str, Edge] = {}
    discovered_by: dict[str, CurrencyPair] = {}
    visited: set[str] = set()
    stack = [source]
    while stack:
        top = stack.pop()
        if top in visited:
            continue
        visited.add(top)
        if top == target:
            break
        for edge in graph[top]:
            if edge.endpoint in visited:
                continue
            stack.append(edge.endpoint)
            successors[top] = edge
            # Overwritten on every push; the last push is the copy popped first.
            discovered_by[edge.endpoint] = CurrencyPair(top, edge.endpoint, edge.value)

    LOGGER.debug("Done traversing currency pairs; successor table: %s", successors)
    return discovered_by


def _breadth_first(source: str, target: str, graph: AdjacencyList) -> dict[str, CurrencyPair]:
    discovered_by: dict[str, CurrencyPair] = {}
    visited = {source}
    queue = deque([source])
    while queue:
        current = queue.popleft()
        if current == target:
            break
        for edge in graph[current]:
            if edge.endpoint in visited:
                continue
            visited.add(edge.endpoint)
            discovered_by[edge.endpoint] = CurrencyPair(current, edge.endpoint, edge.value)
            queue.append(edge.endpoint)
    return discovered_by


def _reconstruct_path(
    source: str, target: str, discovered_by: dict[str, CurrencyPair]
) -> list[CurrencyPair]:
    hops: list[CurrencyPair] = []
    current = target
    while current != source:
        hop = discovered_by[current]
        hops.append(hop)
        current = hop.left
    hops.reverse()
    return hops

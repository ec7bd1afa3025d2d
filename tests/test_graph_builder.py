from __future__ import annotations

import pytest

from curconv.errors import InvalidInputError
from curconv.graph.builder import Edge, build_adjacency
from curconv.ingestion.models import CurrencyPair


def test_build_adds_forward_and_reciprocal_edges() -> None:
    graph = build_adjacency([CurrencyPair("USD", "CAD", 1.35)])

    assert graph == {
        "USD": [Edge("CAD", 1.35)],
        "CAD": [Edge("USD", 1 / 1.35)],
    }


def test_build_keys_every_currency_in_any_pair() -> None:
    graph = build_adjacency(
        [
            CurrencyPair("USD", "CAD", 1.35),
            CurrencyPair("CHF", "CAD", 1.53),
            CurrencyPair("EUR", "GBP", 0.85),
        ]
    )

    assert set(graph) == {"USD", "CAD", "CHF", "EUR", "GBP"}
    assert graph["CAD"] == [Edge("USD", 1 / 1.35), Edge("CHF", 1 / 1.53)]


def test_build_keeps_parallel_edges() -> None:
    graph = build_adjacency(
        [CurrencyPair("USD", "CAD", 1.35), CurrencyPair("USD", "CAD", 1.40)]
    )

    assert graph["USD"] == [Edge("CAD", 1.35), Edge("CAD", 1.40)]
    assert len(graph["CAD"]) == 2


def test_build_accepts_generators() -> None:
    pairs = (CurrencyPair(left, "USD", rate) for left, rate in [("EUR", 1.08), ("GBP", 1.27)])

    graph = build_adjacency(pairs)

    assert [edge.endpoint for edge in graph["USD"]] == ["EUR", "GBP"]


def test_build_empty_input() -> None:
    assert build_adjacency([]) == {}


@pytest.mark.parametrize("value", [0.0, -2.0, float("nan"), float("inf")])
def test_build_rejects_invalid_rates(value: float) -> None:
    with pytest.raises(InvalidInputError):
        build_adjacency([CurrencyPair("USD", "CAD", value)])

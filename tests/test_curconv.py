"""Tests for the public package facade."""

from pathlib import Path

import pytest

import curconv
from curconv import (
    CurrencyConverter,
    CurrencyPair,
    MissingArgumentError,
    NoPathError,
    PathStrategy,
    UnknownCurrencyError,
    __version__,
)


@pytest.fixture
def converter() -> CurrencyConverter:
    return CurrencyConverter(
        [
            CurrencyPair("USD", "CAD", 1.35),
            CurrencyPair("CHF", "CAD", 1.53),
            CurrencyPair("EUR", "USD", 1.08),
            CurrencyPair("JPY", "KRW", 9.1),
        ]
    )


def test_version_is_exposed() -> None:
    assert CurrencyConverter.__version__ == __version__


def test_public_names_are_exported() -> None:
    for name in curconv.__all__:
        assert hasattr(curconv, name)


def test_currencies_are_sorted(converter: CurrencyConverter) -> None:
    assert converter.currencies() == ["CAD", "CHF", "EUR", "JPY", "KRW", "USD"]


def test_rate_with_steps(converter: CurrencyConverter) -> None:
    result = converter.rate("EUR", "CHF", trace_steps=True)

    assert result.rate == pytest.approx(1.08 * 1.35 / 1.53)
    assert [(step.left, step.right) for step in result.steps] == [
        ("EUR", "USD"),
        ("USD", "CAD"),
        ("CAD", "CHF"),
    ]


def test_rate_accepts_strategy_names(converter: CurrencyConverter) -> None:
    dfs = converter.rate("EUR", "CHF")
    bfs = converter.rate("EUR", "CHF", strategy="bfs")

    assert bfs.rate == pytest.approx(dfs.rate)
    assert converter.rate("EUR", "CHF", strategy=PathStrategy.BFS).steps is None


def test_rate_errors(converter: CurrencyConverter) -> None:
    with pytest.raises(UnknownCurrencyError):
        converter.rate("EUR", "GBP")
    with pytest.raises(NoPathError):
        converter.rate("EUR", "KRW")
    with pytest.raises(MissingArgumentError):
        converter.rate("", "USD")


def test_unknown_currency_is_a_key_error(converter: CurrencyConverter) -> None:
    with pytest.raises(KeyError):
        converter.rate("GBP", "USD")


def test_from_csv(tmp_path: Path) -> None:
    path = tmp_path / "pairs.csv"
    path.write_text("USD,CAD,1.35\nCHF,CAD,1.53\n", encoding="utf-8")

    converter = CurrencyConverter.from_csv(path)

    assert converter.pairs == [
        CurrencyPair("USD", "CAD", 1.35),
        CurrencyPair("CHF", "CAD", 1.53),
    ]
    assert converter.rate("USD", "CHF").rate == pytest.approx(0.882353, abs=1e-6)

"""Exceptions raised by curconv."""

from __future__ import annotations

__all__ = [
    "CurConvError",
    "InvalidInputError",
    "UnknownCurrencyError",
    "NoPathError",
    "MissingArgumentError",
]


class CurConvError(Exception):
    """Base class for every error curconv raises on purpose."""


class InvalidInputError(CurConvError, ValueError):
    """A currency pair line (or programmatic pair) could not be accepted."""

    def __init__(self, message: str, *, line_number: int | None = None, line: str | None = None):
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class UnknownCurrencyError(CurConvError, KeyError):
    """The requested currency never appeared in any pair."""

    def __init__(self, currency: str) -> None:
        super().__init__(f"No connecting currency pair provided for {currency}")
        self.currency = currency

    def __str__(self) -> str:
        # KeyError would otherwise wrap the message in quotes.
        return str(self.args[0])


class NoPathError(CurConvError):
    """Both currencies are known but no chain of pairs links them."""

    def __init__(self, source: str, target: str) -> None:
        super().__init__(f"No chain of currency pairs connects {source} to {target}")
        self.source = source
        self.target = target


class MissingArgumentError(CurConvError, ValueError):
    """A required source or target currency was not supplied."""

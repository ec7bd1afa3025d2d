"""Data models shared across ingestion and graph modules."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CurrencyPair:
    """A directly observed conversion: ``1 left = value right``.

    The resolver reuses this record for each hop of a conversion trace.
    """

    left: str
    right: str
    value: float

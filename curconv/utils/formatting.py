"""Render resolved rates the way the command line prints them."""

from __future__ import annotations

from curconv.graph.resolver import ResolvedRate
from curconv.ingestion.models import CurrencyPair

STEPS_HEADER = "Steps:"
SEPARATOR = "--------------"

__all__ = ["STEPS_HEADER", "SEPARATOR", "format_conversion", "render_result"]


def format_conversion(left: str, value: float, right: str) -> str:
    """Return ``1 <left> = <value> <right>`` with six decimal places."""
    return f"1 {left} = {value:f} {right}"


def render_result(result: ResolvedRate) -> list[str]:
    """Return output lines; the step block is included only when steps were traced."""

    lines: list[str] = []
    if result.steps is not None:
        lines.append(STEPS_HEADER)
        lines.extend(_format_step(step) for step in result.steps)
        lines.append(SEPARATOR)
    lines.append(format_conversion(result.source, result.rate, result.target))
    return lines


def _format_step(step: CurrencyPair) -> str:
    return format_conversion(step.left, step.value, step.right)

"""Logging utilities for the curconv package."""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER: Optional[logging.Logger] = None


def get_logger(name: str = "curconv") -> logging.Logger:
    """Return a module-level logger configured with a simple formatter."""
    global _LOGGER
    if _LOGGER is None:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
        _LOGGER = logging.getLogger(name)
    return logging.getLogger(name)


def set_verbose(enabled: bool, name: str = "curconv") -> None:
    """Switch the package logger between DEBUG and INFO."""

    get_logger(name).setLevel(logging.DEBUG if enabled else logging.INFO)

"""CLI entry point for resolving a currency conversion."""

from __future__ import annotations

import sys

from curconv.cli import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    sys.exit(main())

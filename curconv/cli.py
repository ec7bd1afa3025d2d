"""Find the rate between any two currencies in a comma-delimited pairs file."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Sequence

from curconv.errors import CurConvError, MissingArgumentError
from curconv.graph.builder import build_adjacency
from curconv.graph.resolver import PathStrategy, ResolvedRate, find_exchange_rate
from curconv.ingestion.pairs_csv import PairsCSVParser
from curconv.utils.formatting import render_result
from curconv.utils.logger import get_logger, set_verbose

LOGGER = get_logger(__name__)

PAIRS_FILE_ENV_VAR = "CURCONV_PAIRS_FILE"
DEFAULT_STRATEGY = PathStrategy.DFS

__all__ = ["PAIRS_FILE_ENV_VAR", "DEFAULT_STRATEGY", "parse_args", "convert", "run", "main"]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    default_file = os.environ.get(PAIRS_FILE_ENV_VAR)
    parser = argparse.ArgumentParser(
        prog="curconv",
        description=__doc__,
        usage="%(prog)s [options] <currency from> <currency to>",
    )
    parser.add_argument("source", nargs="?", help="Currency to convert from")
    parser.add_argument("target", nargs="?", help="Currency to convert to")
    parser.add_argument(
        "-f",
        "--file",
        dest="file",
        default=default_file,
        required=default_file is None,
        help=f"Path to CSV file containing comma-delimited currency pairs (env: {PAIRS_FILE_ENV_VAR})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Print each conversion step and debug logging",
    )
    parser.add_argument(
        "--strategy",
        choices=[member.value for member in PathStrategy],
        default=DEFAULT_STRATEGY.value,
        help="Path search: dfs (any path, default) or bfs (fewest hops)",
    )
    return parser.parse_args(argv)


def convert(
    source: str | None,
    target: str | None,
    *,
    file: str,
    verbose: bool = False,
    strategy: PathStrategy | str = DEFAULT_STRATEGY,
) -> ResolvedRate:
    """Read ``file`` and resolve ``source`` -> ``target``."""

    if not source:
        raise MissingArgumentError("Must provide the currency to convert from")
    if not target:
        raise MissingArgumentError("Must provide the currency to convert to")

    pairs = PairsCSVParser().parse(file)
    graph = build_adjacency(pairs)
    return find_exchange_rate(source, target, graph, verbose, strategy=strategy)


def run(args: argparse.Namespace) -> int:
    set_verbose(args.verbose)
    try:
        result = convert(
            args.source,
            args.target,
            file=args.file,
            verbose=args.verbose,
            strategy=args.strategy,
        )
    except FileNotFoundError as exc:
        print(f"Pairs file not found: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Could not read pairs file: {exc}", file=sys.stderr)
        return 1
    except CurConvError as exc:
        LOGGER.debug("Conversion failed: %r", exc)
        print(exc, file=sys.stderr)
        return 1
    for line in render_result(result):
        print(line)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    return run(parse_args(argv))


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())

"""Parser for comma-delimited currency pair files.

Each non-blank line holds exactly three fields::

    USD, CAD, 1.35

meaning ``1 USD = 1.35 CAD``. The first malformed line aborts the whole read.
"""

from __future__ import annotations

import csv
import math
import re
from pathlib import Path
from typing import Iterable, Iterator

from curconv.errors import InvalidInputError
from curconv.ingestion.models import CurrencyPair
from curconv.utils.logger import get_logger

LOGGER = get_logger(__name__)

FIELD_COUNT = 3
RATE_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

__all__ = ["FIELD_COUNT", "RATE_PATTERN", "PairsCSVParser"]


class PairsCSVParser:
    """Parse ``left,right,rate`` lines into :class:`CurrencyPair` records."""

    def __init__(self, *, delimiter: str = ",") -> None:
        self.delimiter = delimiter

    def parse(self, csv_path: str | Path) -> list[CurrencyPair]:
        path = Path(csv_path)
        if not path.exists():
            raise FileNotFoundError(path)

        with path.open("rb") as handle:
            pairs = self.parse_lines(_decode_lines(handle))
        LOGGER.debug("Read %s currency pairs from %s", len(pairs), path)
        return pairs

    def parse_lines(self, lines: Iterable[str]) -> list[CurrencyPair]:
        pairs: list[CurrencyPair] = []
        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.rstrip("\r\n")
            if not line.strip():
                continue
            pairs.append(self.parse_line(line, line_number))
        return pairs

    def parse_line(self, line: str, line_number: int) -> CurrencyPair:
        """Validate a single line and return the pair it describes."""

        # Quotes are literal characters; every delimiter splits a field.
        fields = next(csv.reader([line], delimiter=self.delimiter, quoting=csv.QUOTE_NONE), [])
        if len(fields) != FIELD_COUNT:
            raise InvalidInputError(
                f"Line {line_number} is invalid; must have exactly {FIELD_COUNT} values "
                f"between commas; got '{line}'",
                line_number=line_number,
                line=line,
            )
        left, right, value_raw = (field.strip() for field in fields)
        if not left or not right:
            raise InvalidInputError(
                f"Line {line_number} is invalid; currency code is empty; got '{line}'",
                line_number=line_number,
                line=line,
            )
        if RATE_PATTERN.fullmatch(value_raw) is None:
            raise InvalidInputError(
                f"Line {line_number} is invalid; rate is not a number; got '{value_raw}'",
                line_number=line_number,
                line=line,
            )
        value = float(value_raw)
        if not math.isfinite(value) or value <= 0:
            raise InvalidInputError(
                f"Line {line_number} is invalid; rate must be a positive number; got '{value_raw}'",
                line_number=line_number,
                line=line,
            )
        return CurrencyPair(left=left, right=right, value=value)


def _decode_lines(handle: Iterable[bytes]) -> Iterator[str]:
    for line_number, raw_line in enumerate(handle, start=1):
        try:
            yield raw_line.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidInputError(
                f"Line {line_number} is invalid; not UTF-8 text ({exc.reason})",
                line_number=line_number,
            ) from None

"""
Delimiter detection.

Exports from European spreadsheet tools use ";" because "," is the decimal
separator there. The choice is made once per file by counting both characters
over the first lines; it is never re-evaluated per line.
"""

from __future__ import annotations

from typing import Sequence

from config import DELIMITER_SAMPLE_LINES
from config.logging_setup import get_logger

logger = get_logger(__name__)

COMMA = ","
SEMICOLON = ";"


def count_delimiters(lines: Sequence[str]) -> tuple[int, int]:
    """Return (comma_count, semicolon_count) over `lines`."""
    comma_count = 0
    semicolon_count = 0
    for line in lines:
        comma_count += line.count(COMMA)
        semicolon_count += line.count(SEMICOLON)
    return comma_count, semicolon_count


def detect_delimiter(lines: Sequence[str], sample_size: int = DELIMITER_SAMPLE_LINES) -> str:
    """Return ";" if it strictly outnumbers "," in the first `sample_size` lines, else ","."""
    comma_count, semicolon_count = count_delimiters(lines[:sample_size])
    delimiter = SEMICOLON if semicolon_count > comma_count else COMMA

    logger.info('Smart Parser: Detected delimiter -> "%s"', delimiter)
    logger.debug("Delimiter tally: comma=%d semicolon=%d", comma_count, semicolon_count)
    return delimiter

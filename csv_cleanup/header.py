"""
Header row location and junk-line classification.

Real-world exports often start with title/metadata lines ("Export 2024-05-01",
"Version : 8") and contain separator-only filler rows like ";;;;;;". The header
is taken to be the widest delimited line within the early scan window.
"""

from __future__ import annotations

from typing import Sequence

from config import HEADER_SCAN_LINES, MIN_HEADER_CELLS


def is_delimiter_only(line: str, delimiter: str) -> bool:
    """Return True when `line` carries nothing but delimiters and whitespace."""
    return not line.replace(delimiter, "").strip()


def is_header_candidate(line: str, delimiter: str) -> bool:
    """A header candidate holds the delimiter and at least MIN_HEADER_CELLS non-blank cells."""
    if not line or delimiter not in line:
        return False
    if is_delimiter_only(line, delimiter):
        return False

    non_empty = sum(1 for cell in line.split(delimiter) if cell.strip())
    return non_empty >= MIN_HEADER_CELLS


def find_header_index(
    lines: Sequence[str],
    delimiter: str,
    scan_limit: int = HEADER_SCAN_LINES,
) -> int:
    """
    Return the index of the most plausible header line.

    Among candidates in the first `scan_limit` lines, the one with the most
    cells wins; on equal counts the earliest line is kept. Returns 0 when no
    line qualifies.
    """
    best_idx = 0
    best_cell_count = 0

    for i, line in enumerate(lines[:scan_limit]):
        if not is_header_candidate(line, delimiter):
            continue

        cell_count = len(line.split(delimiter))
        if cell_count > best_cell_count:
            best_cell_count = cell_count
            best_idx = i

    return best_idx

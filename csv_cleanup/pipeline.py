"""
Smart CSV parsing pipeline.

Turns the raw text of an arbitrary CSV export into a clean Table:

1. split into lines (any line-ending style)
2. detect the delimiter ("," or ";")
3. locate the header row, skipping title/metadata preambles
4. drop delimiter-only junk lines
5. parse header + records
6. detect and undo pivoted (attributes-as-rows) layouts
7. normalize empty cells to None and drop fully empty records

The result is consumed by the mapping/enrichment steps as an opaque
(headers, records) pair plus a small preview.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from config import PREVIEW_ROWS
from config.logging_setup import get_logger
from domain.table import Record, Table

from .delimiter import detect_delimiter
from .header import find_header_index
from .lines import split_lines
from .normalize import build_preview, normalize_table
from .parser import clean_lines, parse_table
from .transpose import is_probably_transposed, transpose_attribute_rows

logger = get_logger(__name__)


@dataclass(frozen=True)
class ParsedCsv:
    table: Table
    preview: List[Record] = field(default_factory=list)
    delimiter: str = ","
    header_index: int = 0
    transposed: bool = False

    @property
    def headers(self) -> List[str]:
        return list(self.table.headers)

    @property
    def records(self) -> List[Record]:
        return list(self.table.records)


def parse_csv_text(text: str, preview_rows: int = PREVIEW_ROWS) -> ParsedCsv:
    """
    Run the full cleanup pipeline on raw CSV text.

    Raises:
        EmptyTableError: If no header or no data rows survive cleanup
    """
    lines = split_lines(text)

    delimiter = detect_delimiter(lines)

    header_index = find_header_index(lines, delimiter)
    logger.info("Smart Parser: Data starts at row index %d", header_index)

    cleaned = clean_lines(lines, header_index, delimiter)
    table = parse_table("\n".join(cleaned), delimiter)

    transposed = is_probably_transposed(table)
    if transposed:
        table = transpose_attribute_rows(table)
        logger.info(
            "Smart Parser: Detected transposed CSV -> converted to %d rows and %d columns",
            table.row_count,
            table.column_count,
        )

    table = normalize_table(table)
    if table.row_count == 0:
        logger.warning("Smart Parser: All rows are empty after normalization")

    logger.info("Smart Parser: Parsed %d rows, %d columns", table.row_count, table.column_count)

    return ParsedCsv(
        table=table,
        preview=build_preview(table, preview_rows),
        delimiter=delimiter,
        header_index=header_index,
        transposed=transposed,
    )

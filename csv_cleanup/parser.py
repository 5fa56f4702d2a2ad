"""
Tabular parsing of the cleaned CSV text.

The first non-blank row is the header, every following row is one record
aligned to the header by column position. Parsing is permissive: rows with
fewer cells get None for the missing trailing columns, cells beyond the header
width are ignored, and no row is dropped for having the "wrong" length.
"""

from __future__ import annotations

import csv
import io
from typing import Dict, List, Optional, Sequence, Tuple

from config import MAX_FILE_SIZE_MB
from domain.errors import EmptyTableError, FileReadError
from domain.table import Record, Table

from .header import is_delimiter_only


def clean_lines(lines: Sequence[str], header_index: int, delimiter: str) -> List[str]:
    """Return the lines from `header_index` onward with delimiter-only junk removed."""
    return [line for line in lines[header_index:] if not is_delimiter_only(line, delimiter)]


def _dedupe_header_names(names: Sequence[str]) -> List[str]:
    """Make header names distinct: repeated names get a "_1", "_2", ... suffix."""
    seen: set[str] = set()
    out: List[str] = []
    for name in names:
        candidate = name
        suffix = 0
        while candidate in seen:
            suffix += 1
            candidate = f"{name}_{suffix}"
        seen.add(candidate)
        out.append(candidate)
    return out


def _header_columns(raw_header: Sequence[str]) -> List[Tuple[int, str]]:
    """Return (column position, header name) pairs for the non-blank header cells."""
    kept = [(pos, cell.strip()) for pos, cell in enumerate(raw_header) if cell.strip()]
    names = _dedupe_header_names([name for _, name in kept])
    return [(pos, name) for (pos, _), name in zip(kept, names)]


def _row_to_record(row: Sequence[str], columns: Sequence[Tuple[int, str]]) -> Record:
    record: Dict[str, Optional[str]] = {}
    for pos, name in columns:
        record[name] = row[pos] if pos < len(row) else None
    return record


def parse_table(text: str, delimiter: str) -> Table:
    """
    Parse delimiter-separated `text` into a Table.

    Args:
        text: Cleaned CSV text, header row first
        delimiter: Field separator ("," or ";")

    Returns:
        Table with trimmed, distinct header names and string cell values

    Raises:
        EmptyTableError: If no usable header column or no data row is found
        FileReadError: If the text is not parseable as CSV (e.g. NUL bytes)
    """
    # A single cell may be as large as the whole upload (inline images etc.)
    limit = max(MAX_FILE_SIZE_MB * 1024 * 1024, len(text))
    if csv.field_size_limit() < limit:
        csv.field_size_limit(limit)

    reader = csv.reader(io.StringIO(text), delimiter=delimiter)
    try:
        rows = [row for row in reader if row]
    except csv.Error as e:
        raise FileReadError(f"Cannot parse the CSV (line {reader.line_num}): {e}") from e

    if not rows:
        raise EmptyTableError("No data found. Check the CSV format.")

    columns = _header_columns(rows[0])
    if not columns:
        raise EmptyTableError("No usable column names found in the header row. Check the CSV format.")

    records = [_row_to_record(row, columns) for row in rows[1:]]
    if not records:
        raise EmptyTableError("The file contains a header but no data rows.")

    return Table(headers=tuple(name for _, name in columns), records=tuple(records))

"""
Detection and reversal of pivoted ("transposed") CSV exports.

Some catalogue tools export one row per attribute and one column per product:

    ProductKey;1;2;3;...
    Product Name;Widget;Gadget;Gizmo;...
    Brand;Acme;Acme;Globex;...

The detector recognises that shape from a few cheap signals (far more columns
than rows, numeric column names, label-like first column). The transposer
turns it back into one record per product.
"""

from __future__ import annotations

import re
from typing import Dict, List

from config import (
    TRANSPOSE_FIELD_SAMPLE,
    TRANSPOSE_HEADER_SAMPLE,
    TRANSPOSE_MAX_ROWS,
    TRANSPOSE_MIN_COLUMNS,
    TRANSPOSE_MIN_FIELD_NAMES,
    TRANSPOSE_MIN_HEADERS,
    TRANSPOSE_MIN_NUMERIC_HEADERS,
    TRANSPOSE_MIN_ROWS,
)
from domain.table import Record, Table

_DIGITS = re.compile(r"^\d+$")


def _is_numeric_label(value: str) -> bool:
    return bool(_DIGITS.match(value.strip()))


def _field_names(table: Table) -> List[str]:
    """Trimmed, non-empty first-column values of the first TRANSPOSE_FIELD_SAMPLE records."""
    first_header = table.headers[0]
    names = []
    for record in table.records[:TRANSPOSE_FIELD_SAMPLE]:
        value = record.get(first_header)
        if value is None:
            continue
        text = str(value).strip()
        if text:
            names.append(text)
    return names


def is_probably_transposed(table: Table) -> bool:
    """Return True when `table` looks like an attributes-as-rows export."""
    headers = table.headers
    row_count = table.row_count
    col_count = table.column_count

    if col_count < TRANSPOSE_MIN_HEADERS or row_count < TRANSPOSE_MIN_ROWS:
        return False

    # Way more columns than rows
    if col_count < TRANSPOSE_MIN_COLUMNS:
        return False
    if row_count > TRANSPOSE_MAX_ROWS:
        return False
    if row_count >= col_count:
        return False

    if not headers[0]:
        return False

    sample_size = min(TRANSPOSE_HEADER_SAMPLE, col_count - 1)
    numeric_headers = sum(1 for h in headers[1 : 1 + sample_size] if _is_numeric_label(h))
    if numeric_headers < min(TRANSPOSE_MIN_NUMERIC_HEADERS, sample_size):
        return False

    # First column should look like attribute labels, not IDs
    names = _field_names(table)
    required = min(TRANSPOSE_MIN_FIELD_NAMES, len(names))
    non_numeric = sum(1 for n in names if not _is_numeric_label(n))
    unique = len(set(names))

    return non_numeric >= required and unique >= required


def transpose_attribute_rows(table: Table) -> Table:
    """
    Turn an attributes-as-rows table into one record per entity column.

    The first header stays the first output header and holds each entity's
    column name (its ID). Every input row contributes one output header named
    by its first-column value; rows without a name are skipped.
    """
    first_header = table.headers[0]
    id_headers = [h for h in table.headers[1:] if h and h.strip()]

    records_by_id: Dict[str, Record] = {}
    for id_header in id_headers:
        key = id_header.strip()
        records_by_id[key] = {first_header: key}

    out_headers: List[str] = [first_header]
    seen = {first_header}

    for row in table.records:
        raw_name = row.get(first_header)
        field_name = str(raw_name).strip() if raw_name is not None else ""
        if not field_name:
            continue

        if field_name not in seen:
            seen.add(field_name)
            out_headers.append(field_name)

        for id_header in id_headers:
            records_by_id[id_header.strip()][field_name] = row.get(id_header)

    return Table.from_rows(out_headers, records_by_id.values())

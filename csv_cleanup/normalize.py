from __future__ import annotations

from typing import List

from config import PREVIEW_ROWS
from domain.table import CellValue, Record, Table


def _normalize_value(value: CellValue) -> CellValue:
    """Empty strings become None; everything else is kept verbatim."""
    if value is None or value == "":
        return None
    return value


def normalize_table(table: Table) -> Table:
    """Rewrite empty cells to None and drop records that end up entirely empty."""
    records: List[Record] = []
    for row in table.records:
        out = {h: _normalize_value(row.get(h)) for h in table.headers}
        if any(v is not None for v in out.values()):
            records.append(out)

    return Table(headers=table.headers, records=tuple(records))


def build_preview(table: Table, n: int = PREVIEW_ROWS) -> List[Record]:
    """Return the first `n` records for the mapping collaborator."""
    return table.preview(n)

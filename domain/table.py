"""
Table: an ordered header list plus records keyed by those headers.

Every record holds exactly the table's headers, in header order. Tables are
immutable; pipeline stages build a new Table instead of editing one in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

import pandas as pd

CellValue = Optional[Union[str, int, float]]
Record = Dict[str, CellValue]


@dataclass(frozen=True)
class Table:
    headers: Tuple[str, ...]
    records: Tuple[Record, ...] = field(default_factory=tuple)

    @classmethod
    def from_rows(cls, headers: Sequence[str], rows: Iterable[Dict[str, Any]]) -> "Table":
        """Build a Table, aligning every row to `headers` (absent keys become None, extra keys dropped)."""
        headers = tuple(headers)
        if len(set(headers)) != len(headers):
            raise ValueError(f"Duplicate header names: {list(headers)}")

        records = tuple({h: row.get(h) for h in headers} for row in rows)
        return cls(headers=headers, records=records)

    @property
    def row_count(self) -> int:
        return len(self.records)

    @property
    def column_count(self) -> int:
        return len(self.headers)

    def preview(self, n: int) -> List[Record]:
        """Return copies of the first `n` records."""
        return [dict(r) for r in self.records[:n]]

    def to_frame(self) -> pd.DataFrame:
        """Return the table as a DataFrame (columns in header order) for display/export."""
        return pd.DataFrame(list(self.records), columns=list(self.headers))

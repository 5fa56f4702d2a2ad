"""
Apply a field mapping to a parsed Table, producing CanonicalProduct rows.

Values are coerced per field type: cost/price to float, year to int,
everything else to stripped text. Unmapped fields and `enriched_description`
stay None. One product is produced per record so row positions line up with
the source table.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from domain.canonical import (
    FLOAT_FIELDS,
    INT_FIELDS,
    MAPPABLE_FIELDS,
    CanonicalProduct,
    FieldMapping,
    empty_product,
)
from domain.table import Record, Table
from fields.normalization import to_float, to_int, to_text


def _coercer(field: str) -> Callable[[Any], Any]:
    if field in FLOAT_FIELDS:
        return to_float
    if field in INT_FIELDS:
        return to_int
    return to_text


def _record_to_canonical(record: Record, mapping: Dict[str, str]) -> CanonicalProduct:
    product = empty_product()
    for field, column in mapping.items():
        product[field] = _coercer(field)(record.get(column))
    return product


def table_to_canonical(table: Table, mapping: FieldMapping) -> List[CanonicalProduct]:
    """
    Convert every record of `table` into a CanonicalProduct.

    Raises:
        ValueError: If the mapping names a column the table does not have
    """
    active: Dict[str, str] = {}
    for field in MAPPABLE_FIELDS:
        column: Optional[str] = mapping.get(field)
        if not column:
            continue
        if column not in table.headers:
            raise ValueError(f"Mapping for '{field}' refers to unknown column '{column}'")
        active[field] = column

    return [_record_to_canonical(record, active) for record in table.records]

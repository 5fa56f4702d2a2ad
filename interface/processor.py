"""
Upload processing for the Streamlit page.

Wraps reading + parsing so the page never sees an exception: every failure is
returned as a human-readable message.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

import pandas as pd

from config.logging_setup import get_logger
from csv_cleanup import ParsedCsv, parse_csv_text
from domain.canonical import CANONICAL_FIELDS, CanonicalProduct
from domain.errors import CsvMapperError
from input_readers import decode_csv_bytes

logger = get_logger(__name__)


def process_uploaded_file(uploaded_file: Any) -> Tuple[bool, Optional[ParsedCsv], Optional[str]]:
    """
    Read and parse one uploaded CSV file.

    Args:
        uploaded_file: Streamlit UploadedFile (anything with getvalue() -> bytes)

    Returns:
        (success, parsed CSV or None, error message or None)
    """
    name = getattr(uploaded_file, "name", "upload")
    try:
        text = decode_csv_bytes(uploaded_file.getvalue())
        parsed = parse_csv_text(text)
    except CsvMapperError as e:
        logger.warning("Upload %s rejected: %s", name, e)
        return False, None, str(e)
    except Exception as e:
        logger.exception("Unexpected error while processing %s", name)
        return False, None, f"Error while processing the CSV: {e}"

    logger.info("Upload %s parsed: %d rows", name, parsed.table.row_count)
    return True, parsed, None


def products_to_frame(products: Sequence[CanonicalProduct]) -> pd.DataFrame:
    """Return products as a DataFrame with columns in canonical order."""
    return pd.DataFrame(list(products), columns=CANONICAL_FIELDS)


def products_to_csv_bytes(products: Sequence[CanonicalProduct]) -> bytes:
    """Serialize products as UTF-8 CSV (with BOM so spreadsheet tools detect the encoding)."""
    return products_to_frame(products).to_csv(index=False).encode("utf-8-sig")


def mapped_columns(mapping: dict) -> List[str]:
    """Return the source columns used by `mapping`, in canonical field order."""
    return [mapping[f] for f in CANONICAL_FIELDS if mapping.get(f)]

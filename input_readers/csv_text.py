"""
CSV TEXT READER
---------------
Reads an uploaded CSV/TXT file into one text string with NO structural changes.
Line endings, preambles and junk rows are left for the cleanup pipeline.
"""

from __future__ import annotations

from typing import Sequence

from config import CSV_ENCODINGS, MAX_FILE_SIZE_MB
from config.logging_setup import get_logger
from domain.errors import FileReadError

logger = get_logger(__name__)


def decode_csv_bytes(data: bytes, encodings: Sequence[str] = CSV_ENCODINGS) -> str:
    """
    Decode raw file bytes into text, trying each encoding in order.

    Args:
        data: File contents
        encodings: Candidate encodings (first success wins)

    Returns:
        Decoded text (UTF-8 BOM stripped)

    Raises:
        FileReadError: If the content is empty, too large or cannot be decoded
    """
    if not data:
        raise FileReadError("The file is empty.")

    size_mb = len(data) / (1024 * 1024)
    if size_mb > MAX_FILE_SIZE_MB:
        raise FileReadError(f"File is too large ({size_mb:.1f} MB, limit {MAX_FILE_SIZE_MB} MB).")

    for encoding in encodings:
        try:
            text = data.decode(encoding)
        except UnicodeDecodeError:
            continue
        if encoding != encodings[0]:
            logger.info("Decoded file using fallback encoding %s", encoding)
        return text

    raise FileReadError(
        f"Cannot read the file as text (tried encodings: {', '.join(encodings)})."
    )


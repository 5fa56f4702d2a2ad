"""
Central configuration for the CSV mapper.

This module defines:
- Scan windows and thresholds used by the CSV cleanup heuristics
  (delimiter detection, header location, transpose detection).
- Preview and batch sizes for the LLM mapping / enrichment calls.
- File limits and accepted text encodings for uploads.
- Default LLM model settings and the log level.

All values are constants and should be imported where needed (no runtime logic here).
"""

from __future__ import annotations

import os


# Delimiter detection
DELIMITER_SAMPLE_LINES = 20

# Header location
HEADER_SCAN_LINES = 200
MIN_HEADER_CELLS = 2

# Transpose detection
TRANSPOSE_MIN_HEADERS = 5
TRANSPOSE_MIN_ROWS = 2
TRANSPOSE_MIN_COLUMNS = 50
TRANSPOSE_MAX_ROWS = 50
TRANSPOSE_HEADER_SAMPLE = 30
TRANSPOSE_MIN_NUMERIC_HEADERS = 5
TRANSPOSE_FIELD_SAMPLE = 10
TRANSPOSE_MIN_FIELD_NAMES = 3

# Previews / batches
PREVIEW_ROWS = 5
MAPPING_PREVIEW_ROWS = 3
ENRICH_BATCH_SIZE = 20

# Uploads
MAX_FILE_SIZE_MB = 50
CSV_ENCODINGS = ("utf-8-sig", "cp1250")
MAX_TEXT_CHARS_BEFORE_LLM = 120_000

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0

LOG_LEVEL = os.getenv("CSV_MAPPER_LOG_LEVEL", "INFO")

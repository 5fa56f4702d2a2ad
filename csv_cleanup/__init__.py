"""
CSV structure recovery for messy exports.

Public API:
- lines.split_lines
- delimiter.detect_delimiter
- header.is_delimiter_only, header.find_header_index
- parser.clean_lines, parser.parse_table
- transpose.is_probably_transposed, transpose.transpose_attribute_rows
- normalize.normalize_table, normalize.build_preview
- pipeline.parse_csv_text, pipeline.ParsedCsv
"""

from .pipeline import ParsedCsv, parse_csv_text

__all__ = [
    "ParsedCsv",
    "parse_csv_text",
]

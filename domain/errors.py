"""Error kinds surfaced by the upload pipeline and the LLM collaborators."""

from __future__ import annotations


class CsvMapperError(RuntimeError):
    """Base class for all errors reported to the user."""
    pass


class FileReadError(CsvMapperError):
    """Raised when an uploaded file cannot be read as text."""
    pass


class EmptyTableError(CsvMapperError):
    """Raised when the cleaned CSV yields no usable header or no data rows."""
    pass


class MappingServiceError(CsvMapperError):
    """Raised when the column-mapping LLM call fails or returns invalid content."""
    pass


class EnrichmentServiceError(CsvMapperError):
    """Raised when the description-enrichment LLM call fails or returns invalid content."""
    pass

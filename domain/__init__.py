from .canonical import CANONICAL_FIELDS, MAPPABLE_FIELDS, CanonicalProduct, FieldMapping
from .errors import (
    CsvMapperError,
    EmptyTableError,
    EnrichmentServiceError,
    FileReadError,
    MappingServiceError,
)
from .table import Record, Table

__all__ = [
    "CANONICAL_FIELDS",
    "MAPPABLE_FIELDS",
    "CanonicalProduct",
    "FieldMapping",
    "CsvMapperError",
    "EmptyTableError",
    "EnrichmentServiceError",
    "FileReadError",
    "MappingServiceError",
    "Record",
    "Table",
]

from .enrichment import enrich_products
from .field_mapping import map_columns
from .to_canonical import table_to_canonical

__all__ = ["enrich_products", "map_columns", "table_to_canonical"]

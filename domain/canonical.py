"""
CanonicalProduct schema definition.

This TypedDict represents the fixed product structure every uploaded CSV is
mapped into. Column mapping (LLM) decides which source column feeds which
field; `enriched_description` is filled later by the enrichment step and is
never part of the mapping.

Fields are optional because supplier exports rarely carry every attribute.
"""

from __future__ import annotations

from typing import Dict, List, Optional, TypedDict


class CanonicalProduct(TypedDict, total=False):
    id: Optional[str]
    name: Optional[str]
    category: Optional[str]
    subcategory: Optional[str]

    cost: Optional[float]
    price: Optional[float]

    color: Optional[str]
    brand: Optional[str]
    year: Optional[int]
    image: Optional[str]

    enriched_description: Optional[str]


CANONICAL_FIELDS: List[str] = [
    "id",
    "name",
    "category",
    "subcategory",
    "cost",
    "price",
    "color",
    "brand",
    "year",
    "image",
    "enriched_description",
]

# Fields a source column can be mapped onto
MAPPABLE_FIELDS: List[str] = [f for f in CANONICAL_FIELDS if f != "enriched_description"]

FLOAT_FIELDS = frozenset({"cost", "price"})
INT_FIELDS = frozenset({"year"})

# Canonical field -> source header name (or None when unmapped)
FieldMapping = Dict[str, Optional[str]]


def empty_product() -> CanonicalProduct:
    """Return a product with every canonical field set to None."""
    return CanonicalProduct(**{f: None for f in CANONICAL_FIELDS})

"""
Batched LLM enrichment of canonical products.

This module sends canonical products to the LLM in small batches and collects
a short factual description per product into `enriched_description`.

Key features:
- Strips null values and non-descriptive fields (image, existing description)
  before anything is sent.
- Identifies products by their `id`, falling back to their position.
- Never mutates the input: a failed batch leaves the caller's products as they were.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Sequence, Tuple

import pandas as pd

from config import DEFAULT_MODEL, DEFAULT_TEMPERATURE, ENRICH_BATCH_SIZE
from config.logging_setup import get_logger
from domain.canonical import CanonicalProduct
from domain.errors import EnrichmentServiceError

from .llm_client import complete_json
from .llm_json import parse_llm_json
from .prompts import ENRICHMENT_SYSTEM_PROMPT, build_enrichment_prompt

logger = get_logger(__name__)

_EXCLUDED_FIELDS = ("enriched_description", "image")


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def clean_product(product: CanonicalProduct) -> Dict[str, Any]:
    """Drop null values and fields that must not feed the description."""
    return {
        k: v
        for k, v in product.items()
        if k not in _EXCLUDED_FIELDS and not _is_missing(v)
    }


def product_keys(products: Sequence[CanonicalProduct]) -> List[str]:
    """Return one unique identifier per product: its id, or "row-<n>" when missing/duplicated."""
    keys: List[str] = []
    used: set[str] = set()
    for idx, product in enumerate(products, start=1):
        pid = product.get("id")
        key = "" if _is_missing(pid) else str(pid).strip()
        if not key or key in used:
            key = f"row-{idx}"
        used.add(key)
        keys.append(key)
    return keys


def _describe_batch(batch: Dict[str, Dict[str, Any]], model: str) -> Dict[str, str]:
    """Call the LLM for one batch and return identifier -> description."""
    user_prompt = build_enrichment_prompt(batch)
    raw_output = complete_json(ENRICHMENT_SYSTEM_PROMPT, user_prompt, model, DEFAULT_TEMPERATURE)
    parsed = parse_llm_json(raw_output)

    descriptions: Dict[str, str] = {}
    for key, text in parsed.items():
        if key not in batch:
            logger.warning("Enrichment returned unknown product id %r", key)
            continue
        if isinstance(text, str) and text.strip():
            descriptions[key] = text.strip()
    return descriptions


def _batches(items: List[Tuple[str, Dict[str, Any]]], size: int):
    for start in range(0, len(items), size):
        yield dict(items[start : start + size])


def enrich_products(
    products: Sequence[CanonicalProduct],
    model: str = DEFAULT_MODEL,
    batch_size: int = ENRICH_BATCH_SIZE,
) -> List[CanonicalProduct]:
    """
    Return copies of `products` with `enriched_description` filled in.

    Products the model did not describe keep their previous description.

    Raises:
        EnrichmentServiceError: If any LLM call fails or returns invalid content
    """
    if not products:
        return []
    if batch_size <= 0:
        raise ValueError(f"batch_size must be positive, got: {batch_size}")

    keys = product_keys(products)
    items = [(key, clean_product(p)) for key, p in zip(keys, products)]
    num_batches = math.ceil(len(items) / batch_size)

    descriptions: Dict[str, str] = {}
    for i, batch in enumerate(_batches(items, batch_size), start=1):
        logger.info("Enriching batch %d/%d (%d products)", i, num_batches, len(batch))
        try:
            descriptions.update(_describe_batch(batch, model))
        except Exception as e:
            logger.error("Enrichment failed on batch %d: %s", i, e)
            raise EnrichmentServiceError(f"Failed to enrich data: {e}") from e

    enriched: List[CanonicalProduct] = []
    for key, product in zip(keys, products):
        out = CanonicalProduct(**product)
        if key in descriptions:
            out["enriched_description"] = descriptions[key]
        enriched.append(out)

    logger.info("Enriched %d of %d products", len(descriptions), len(products))
    return enriched

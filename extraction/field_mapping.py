"""
LLM-based column mapping onto the canonical product fields.

Sends the parsed headers and a few preview rows to the model and validates
the reply: every mappable canonical field ends up in the result, and a value
that is not one of the given headers is discarded (set to None).
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from config import (
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    MAPPING_PREVIEW_ROWS,
    MAX_TEXT_CHARS_BEFORE_LLM,
)
from config.logging_setup import get_logger
from domain.canonical import MAPPABLE_FIELDS, FieldMapping
from domain.errors import MappingServiceError

from .llm_client import complete_json
from .llm_json import parse_llm_json
from .prompts import MAPPING_SYSTEM_PROMPT, build_mapping_prompt

logger = get_logger(__name__)


def validate_mapping(raw: Dict[str, Any], headers: Sequence[str]) -> FieldMapping:
    """Keep only canonical keys and only values naming an existing header."""
    known = set(headers)
    mapping: FieldMapping = {}

    for field in MAPPABLE_FIELDS:
        column = raw.get(field)
        if column is None:
            mapping[field] = None
        elif isinstance(column, str) and column in known:
            mapping[field] = column
        else:
            logger.warning("Mapping for '%s' ignored: unknown column %r", field, column)
            mapping[field] = None

    extra = sorted(set(raw) - set(MAPPABLE_FIELDS))
    if extra:
        logger.debug("Ignoring non-canonical keys in mapping: %s", extra)

    return mapping


def map_columns(
    headers: Sequence[str],
    preview: List[Dict[str, Any]],
    model: str = DEFAULT_MODEL,
) -> FieldMapping:
    """
    Ask the LLM which CSV column feeds each canonical field.

    Args:
        headers: Header list of the parsed table
        preview: A few parsed records (only the first MAPPING_PREVIEW_ROWS are sent)
        model: Chat model name

    Returns:
        Canonical field -> header name or None, for every mappable field

    Raises:
        MappingServiceError: If no headers are given, or the call/reply fails
    """
    if not headers:
        raise MappingServiceError("No headers provided")

    user_prompt = build_mapping_prompt(headers, preview[:MAPPING_PREVIEW_ROWS], MAPPABLE_FIELDS)
    if len(user_prompt) > MAX_TEXT_CHARS_BEFORE_LLM:
        raise MappingServiceError(
            f"Mapping request ({len(user_prompt):,} characters) exceeds limit "
            f"({MAX_TEXT_CHARS_BEFORE_LLM:,}). The file has too many columns."
        )

    try:
        raw_output = complete_json(MAPPING_SYSTEM_PROMPT, user_prompt, model, DEFAULT_TEMPERATURE)
        parsed = parse_llm_json(raw_output)
    except Exception as e:
        logger.error("Column mapping failed: %s", e)
        raise MappingServiceError(f"Failed to analyze CSV: {e}") from e

    mapping = validate_mapping(parsed, headers)
    logger.info(
        "Mapped %d of %d canonical fields",
        sum(1 for v in mapping.values() if v),
        len(mapping),
    )
    return mapping

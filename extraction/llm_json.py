"""
Parsing of JSON objects out of LLM replies.

Even in JSON mode, models occasionally add a sentence or markdown fences around
the object, or leave a trailing comma. Only the outermost braces are kept and
trailing commas are repaired once before giving up.
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict


def _extract_json_from_text(text: str) -> str:
    """Cut the outermost {...} span out of a reply; prose or fences around it are dropped."""
    text = (text or "").strip()
    start, end = text.find("{"), text.rfind("}")
    if start == -1 or end < start:
        return text
    return text[start : end + 1]


def parse_llm_json(raw_response: str) -> Dict[str, Any]:
    """
    Parse model output into a JSON object.

    Raises:
        ValueError: If the output is empty, not valid JSON, or not an object
    """
    if not raw_response or not raw_response.strip():
        raise ValueError("LLM returned empty response")

    json_text = _extract_json_from_text(raw_response)

    try:
        parsed = json.loads(json_text)
    except json.JSONDecodeError as e:
        fixed = re.sub(r",\s*([}\]])", r"\1", json_text)
        try:
            parsed = json.loads(fixed)
        except json.JSONDecodeError:
            raise ValueError(
                f"LLM did not return valid JSON. Error: position {e.pos}: {e.msg}\n"
                f"First 500 chars: {raw_response[:500]}"
            ) from e

    if not isinstance(parsed, dict):
        raise ValueError(f"Expected a JSON object, got {type(parsed).__name__}")
    return parsed

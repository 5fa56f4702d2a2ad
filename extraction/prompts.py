from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

MAPPING_SYSTEM_PROMPT = """
You are a Data Mapping Expert.
You are a helpful assistant that outputs only valid JSON.

Your goal:
- Match CSV columns to the fields of a fixed Canonical Product Model
- Use ONLY column names that exist in the CSV, spelled EXACTLY as given
- NEVER invent, rename, translate, or merge columns
- If no column fits a field, map the field to null
"""

ENRICHMENT_SYSTEM_PROMPT = """
You are an E-commerce Copywriter.
You represent data as a JSON object strictly.

Your goal:
- Write a SHORT, factual description (1-3 sentences) for each product
- Use ONLY the provided data
- NEVER hallucinate features, materials, or specifications not listed
"""


def _to_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, default=str)


def build_mapping_prompt(
    headers: Sequence[str],
    preview: List[Dict[str, Any]],
    canonical_fields: Sequence[str],
) -> str:
    """Build the user prompt for the column-mapping call."""
    return f"""
I have a CSV file with the following columns: {_to_json(list(headers))}.
Here is a data preview (first {len(preview)} rows): {_to_json(preview)}.

Your task is to map these CSV columns to my Canonical Product Model.

The Canonical Model has these exact fields:
{_to_json(list(canonical_fields))}

━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
RULES
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
1. Analyze the column names AND the preview data to understand the content.
   Column names may be in any language (e.g. Czech "Cena" = price, "Značka" = brand).
2. Return a JSON object where keys are Canonical Fields and values are the matching CSV column names.
3. If a canonical field cannot be found in the CSV, map it to null.
4. Do not invent columns. Only use exact column names from the CSV.
5. Each CSV column may be used for at most one canonical field.
6. "cost" is the purchase / wholesale price; "price" is the selling / retail price.

━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
OUTPUT FORMAT (EXACT — NO EXTRA KEYS)
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
{{
  "id": "product_id",
  "name": "Title",
  "price": null
}}
"""


def build_enrichment_prompt(products: Dict[str, Dict[str, Any]]) -> str:
    """Build the user prompt for a batch of products keyed by identifier."""
    return f"""
I will provide a JSON object of products, keyed by product identifier.
Your task is to write a SHORT, factual description (1-3 sentences) for each product.

━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
RULES
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
1. Use ONLY the provided data. Do not hallucinate features not listed.
2. If data is scarce (e.g. only ID), just write "Standard product info not available."
3. Tone: Professional, engaging.
4. Return a JSON object where the Key is the product identifier (exactly as given) and the Value is the description.

Products:
{_to_json(products)}
"""

"""
OpenAI client factory.

This module loads environment variables (via dotenv) and exposes a single
shared OpenAI client used by the column-mapping and enrichment calls. The
client reads credentials (OPENAI_API_KEY) from the environment.
"""

from __future__ import annotations

from functools import lru_cache

from dotenv import load_dotenv
from openai import OpenAI

load_dotenv()


@lru_cache(maxsize=1)
def get_client() -> OpenAI:
    """Shared client, built on first use so importing never needs an API key."""
    return OpenAI()


def complete_json(system_prompt: str, user_prompt: str, model: str, temperature: float) -> str:
    """Run one JSON-mode chat completion and return the raw message content."""
    client = get_client()
    response = client.chat.completions.create(
        model=model,
        messages=[
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ],
        temperature=temperature,
        response_format={"type": "json_object"},
    )
    return response.choices[0].message.content or ""

# Shared pytest fixtures
from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from domain.table import Table


@pytest.fixture()
def simple_table() -> Table:
    return Table.from_rows(
        ["SKU", "Title", "Retail", "Maker", "Released"],
        [
            {"SKU": "A-1", "Title": " Widget ", "Retail": "9,99", "Maker": "Acme", "Released": "2021"},
            {"SKU": "A-2", "Title": "Gadget", "Retail": None, "Maker": None, "Released": "n/a"},
        ],
    )


@pytest.fixture()
def pivoted_csv_text() -> str:
    """Attributes-as-rows export: 60 columns (59 numeric product ids), 4 attribute rows."""
    ids = [str(i) for i in range(1, 60)]
    lines = [
        "Catalogue export;;",
        "ProductKey;" + ";".join(ids),
        "Product Name;" + ";".join(f"Item {i}" for i in ids),
        "Brand;" + ";".join("Acme" if int(i) % 2 else "Globex" for i in ids),
        "Price;" + ";".join(f"{i},50" for i in ids),
        ";" * 59,
        "Color;" + ";".join("red" for _ in ids),
    ]
    return "\r\n".join(lines) + "\r\n"


def make_completion(content: str | None) -> SimpleNamespace:
    """Build an object shaped like an OpenAI chat completion response."""
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture()
def fake_client():
    """MagicMock OpenAI client; set `.reply(...)` payloads before use."""
    client = MagicMock()

    def reply(*payloads):
        client.chat.completions.create.side_effect = [
            make_completion(p if isinstance(p, str) or p is None else json.dumps(p))
            for p in payloads
        ]

    client.reply = reply
    return client


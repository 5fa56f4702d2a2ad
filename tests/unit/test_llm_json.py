from __future__ import annotations

import pytest

from extraction.llm_json import parse_llm_json


def test_plain_json_object():
    assert parse_llm_json('{"id": "SKU", "name": null}') == {"id": "SKU", "name": None}


def test_markdown_fenced_json():
    raw = 'Here you go:\n```json\n{"price": "Cena"}\n```'
    assert parse_llm_json(raw) == {"price": "Cena"}


def test_object_surrounded_by_prose():
    raw = 'Mapping: {"name": "Název", "brand": null} (brand not present)'
    assert parse_llm_json(raw) == {"name": "Název", "brand": None}


def test_trailing_comma_is_repaired():
    assert parse_llm_json('{"a": 1, "b": [1, 2,],}') == {"a": 1, "b": [1, 2]}


@pytest.mark.parametrize("raw", ["", "   ", None])
def test_empty_response_raises(raw):
    with pytest.raises(ValueError, match="empty"):
        parse_llm_json(raw)


def test_invalid_json_raises():
    with pytest.raises(ValueError, match="valid JSON"):
        parse_llm_json('{"a": ')


def test_non_object_raises():
    with pytest.raises(ValueError, match="JSON object"):
        parse_llm_json("[1, 2, 3]")

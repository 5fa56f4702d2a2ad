from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from domain.canonical import MAPPABLE_FIELDS
from domain.errors import MappingServiceError
from extraction.field_mapping import map_columns, validate_mapping

HEADERS = ["Kód", "Název", "Značka", "Cena"]
PREVIEW = [
    {"Kód": "A1", "Název": "Hrnek", "Značka": "ACME", "Cena": "129,90"},
    {"Kód": "A2", "Název": "Talíř", "Značka": None, "Cena": "89,00"},
    {"Kód": "A3", "Název": "Miska", "Značka": "ACME", "Cena": "59,00"},
    {"Kód": "A4", "Název": "Sklenice", "Značka": "ACME", "Cena": "39,00"},
]


def test_map_columns_returns_every_field(fake_client):
    fake_client.reply({"id": "Kód", "name": "Název", "brand": "Značka", "price": "Cena"})

    with patch("extraction.llm_client.get_client", return_value=fake_client):
        mapping = map_columns(HEADERS, PREVIEW)

    assert list(mapping) == MAPPABLE_FIELDS
    assert mapping["id"] == "Kód"
    assert mapping["price"] == "Cena"
    assert mapping["cost"] is None
    assert "enriched_description" not in mapping


def test_map_columns_sends_three_preview_rows_in_json_mode(fake_client):
    fake_client.reply({})

    with patch("extraction.llm_client.get_client", return_value=fake_client):
        map_columns(HEADERS, PREVIEW, model="test-model")

    kwargs = fake_client.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "test-model"
    assert kwargs["response_format"] == {"type": "json_object"}
    user_prompt = kwargs["messages"][1]["content"]
    assert json.dumps(HEADERS, ensure_ascii=False) in user_prompt
    assert "Miska" in user_prompt
    assert "Sklenice" not in user_prompt


def test_invented_columns_are_discarded(fake_client, caplog):
    fake_client.reply({"id": "Kód", "brand": "Manufacturer", "color": 5, "bogus": "Cena"})

    with patch("extraction.llm_client.get_client", return_value=fake_client):
        mapping = map_columns(HEADERS, PREVIEW)

    assert mapping["brand"] is None
    assert mapping["color"] is None
    assert "bogus" not in mapping
    assert "Manufacturer" in caplog.text


def test_empty_headers_raise_without_calling_llm(fake_client):
    with patch("extraction.llm_client.get_client", return_value=fake_client):
        with pytest.raises(MappingServiceError, match="No headers"):
            map_columns([], [])
    fake_client.chat.completions.create.assert_not_called()


def test_api_failure_becomes_mapping_error(fake_client):
    fake_client.chat.completions.create.side_effect = RuntimeError("401 Unauthorized")

    with patch("extraction.llm_client.get_client", return_value=fake_client):
        with pytest.raises(MappingServiceError, match="401"):
            map_columns(HEADERS, PREVIEW)


def test_invalid_reply_becomes_mapping_error(fake_client):
    fake_client.reply("not json at all")

    with patch("extraction.llm_client.get_client", return_value=fake_client):
        with pytest.raises(MappingServiceError):
            map_columns(HEADERS, PREVIEW)


def test_oversized_request_is_rejected(fake_client, monkeypatch):
    monkeypatch.setattr("extraction.field_mapping.MAX_TEXT_CHARS_BEFORE_LLM", 10)

    with patch("extraction.llm_client.get_client", return_value=fake_client):
        with pytest.raises(MappingServiceError, match="exceeds limit"):
            map_columns(HEADERS, PREVIEW)
    fake_client.chat.completions.create.assert_not_called()


def test_validate_mapping_keeps_nulls():
    mapping = validate_mapping({"id": None, "name": "Název"}, HEADERS)
    assert mapping["id"] is None
    assert mapping["name"] == "Název"

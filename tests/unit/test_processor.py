from __future__ import annotations

import io

import pandas as pd

from domain.canonical import CANONICAL_FIELDS, empty_product
from interface.processor import (
    mapped_columns,
    process_uploaded_file,
    products_to_csv_bytes,
    products_to_frame,
)


class FakeUpload:
    """Minimal stand-in for Streamlit's UploadedFile."""

    def __init__(self, name: str, data: bytes):
        self.name = name
        self.size = len(data)
        self._data = data

    def getvalue(self) -> bytes:
        return self._data


def test_successful_upload():
    success, parsed, error = process_uploaded_file(
        FakeUpload("offer.csv", b"id;name\n1;Widget\n2;Gadget\n")
    )
    assert success is True
    assert error is None
    assert parsed.headers == ["id", "name"]
    assert parsed.table.row_count == 2


def test_empty_upload_is_rejected():
    success, parsed, error = process_uploaded_file(FakeUpload("empty.csv", b""))
    assert success is False
    assert parsed is None
    assert "empty" in error


def test_parse_failure_is_reported_not_raised():
    success, parsed, error = process_uploaded_file(FakeUpload("header.csv", b"id;name\n;;\n"))
    assert success is False
    assert parsed is None
    assert "no data rows" in error


def test_unexpected_errors_are_reported(monkeypatch):
    def boom(_text):
        raise KeyError("bug")

    monkeypatch.setattr("interface.processor.parse_csv_text", boom)
    success, parsed, error = process_uploaded_file(FakeUpload("x.csv", b"a,b\n1,2\n"))
    assert success is False
    assert "bug" in error


def test_products_export():
    p = empty_product()
    p.update(id="1", name="Widget", price=9.99)

    df = products_to_frame([p])
    assert list(df.columns) == CANONICAL_FIELDS

    data = products_to_csv_bytes([p])
    assert data.startswith(b"\xef\xbb\xbf")
    back = pd.read_csv(io.BytesIO(data), encoding="utf-8-sig")
    assert list(back.columns) == CANONICAL_FIELDS
    assert back.loc[0, "name"] == "Widget"


def test_mapped_columns_in_canonical_order():
    assert mapped_columns({"price": "Cena", "id": "Kód", "brand": None}) == ["Kód", "Cena"]

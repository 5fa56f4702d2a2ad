from __future__ import annotations

import math

import pytest

from fields.normalization import to_float, to_int, to_text


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("9.99", 9.99),
        ("9,99", 9.99),
        ("1 299,00 Kč", 1299.0),
        ("$1,299.50", 1299.5),
        ("1.299,50", 1299.5),
        (" -3 ", -3.0),
        (12, 12.0),
        (1.5, 1.5),
    ],
)
def test_to_float(raw, expected):
    assert to_float(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", [None, "", "  ", "n/a", "-", True, math.nan])
def test_to_float_returns_none(raw):
    assert to_float(raw) is None


def test_to_int():
    assert to_int("2021") == 2021
    assert to_int("2021.0") == 2021
    assert to_int("unknown") is None
    assert to_int(None) is None


def test_to_text():
    assert to_text("  Widget ") == "Widget"
    assert to_text("   ") is None
    assert to_text(None) is None
    assert to_text(42) == "42"

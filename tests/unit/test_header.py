from __future__ import annotations

import pytest

from csv_cleanup.header import find_header_index, is_delimiter_only, is_header_candidate


@pytest.mark.parametrize(
    "line, delimiter, expected",
    [
        (";;;;;;", ";", True),
        (" ; ;\t;", ";", True),
        ("", ";", True),
        (",,,", ",", True),
        (";;x;;", ";", False),
        # a comma line is not junk when the delimiter is ";"
        (",,,", ";", False),
    ],
)
def test_is_delimiter_only(line, delimiter, expected):
    assert is_delimiter_only(line, delimiter) is expected


def test_header_candidate_needs_two_non_blank_cells():
    assert is_header_candidate("id;name", ";")
    assert not is_header_candidate("Report title;;;", ";")
    assert not is_header_candidate("no delimiter here", ";")
    assert not is_header_candidate(";;;", ";")


def test_skips_metadata_preamble():
    lines = [
        "Export generated 2024-05-01",
        "Shop: Example;",
        "id;name;brand;price",
        "1;Widget;Acme;9,99",
        "2;Gadget;Acme;19,99",
    ]
    assert find_header_index(lines, ";") == 2


def test_widest_line_wins():
    lines = [
        "Title;Value",
        "Generated;today",
        "id;name;brand;price;color",
        "1;Widget;Acme;9,99;red",
    ]
    assert find_header_index(lines, ";") == 2


def test_ties_keep_first_occurrence():
    lines = ["a;b;c", "1;2;3", "4;5;6"]
    assert find_header_index(lines, ";") == 0


def test_no_candidate_returns_zero():
    assert find_header_index(["hello", "world", ";;;"], ";") == 0
    assert find_header_index([], ",") == 0


def test_scan_window_is_limited():
    lines = ["x;y"] + ["filler"] * 250 + ["a;b;c;d;e;f"]
    assert find_header_index(lines, ";") == 0
    assert find_header_index(lines, ";", scan_limit=300) == 251


def test_cell_count_includes_empty_cells():
    # the second line has more raw cells even though only 2 are filled
    lines = ["id;name;price", "Sku;Title;;;;"]
    assert find_header_index(lines, ";") == 1

"""Streamlit building blocks for the CSV mapper page."""

from __future__ import annotations

from typing import Optional, Sequence

import pandas as pd
import streamlit as st

from csv_cleanup import ParsedCsv
from domain.canonical import CanonicalProduct, FieldMapping

from .processor import mapped_columns, products_to_csv_bytes, products_to_frame


def render_header() -> None:
    st.title("📊 AI CSV Mapper")
    st.caption("Smart CSV normalization. Upload a file and let the AI map it onto the product model.")


def render_file_uploader():
    return st.file_uploader(
        "Upload a CSV file",
        type=["csv", "txt"],
        help="Supports semicolons, metadata lines at the top, and pivoted exports.",
    )


def render_parse_summary(parsed: ParsedCsv) -> None:
    table = parsed.table

    col1, col2, col3 = st.columns(3)
    col1.metric("Rows", table.row_count)
    col2.metric("Columns", table.column_count)
    col3.metric("Delimiter", parsed.delimiter)

    notes = [f"Header found on line {parsed.header_index + 1}."]
    if parsed.transposed:
        notes.append("Pivoted layout detected: attributes were rows, now converted to one row per product.")
    st.info(" ".join(notes))

    with st.expander("Columns found in the CSV", expanded=False):
        st.write(", ".join(f"`{h}`" for h in table.headers))

    st.dataframe(table.to_frame(), width="stretch")


def render_mapping(mapping: FieldMapping) -> None:
    st.subheader("AI mapping result")

    rows = [
        {"Model field": field, "CSV column": column if column else "— not found —"}
        for field, column in mapping.items()
    ]
    st.table(pd.DataFrame(rows))

    used = mapped_columns(mapping)
    st.caption(f"{len(used)} of {len(mapping)} fields mapped.")


def render_products_table(products: Sequence[CanonicalProduct]) -> None:
    st.subheader(f"Canonical products ({len(products)})")
    st.dataframe(products_to_frame(products), width="stretch")


def render_download_button(products: Sequence[CanonicalProduct], base_filename: Optional[str]) -> None:
    stem = (base_filename or "products").rsplit(".", 1)[0]
    st.download_button(
        label="📥 Download canonical CSV",
        data=products_to_csv_bytes(products),
        file_name=f"{stem}_canonical.csv",
        mime="text/csv",
        type="primary",
        key="download_products",
    )


def render_reset_button() -> bool:
    return st.button("🔄 Start over", type="secondary", key="reset")

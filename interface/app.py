# interface/app.py
"""
CSV Mapper - Main Application

Streamlit interface: upload a messy CSV, review the recovered table, let the
LLM map its columns onto the canonical product model, then transform, enrich
and download the products.
"""

import streamlit as st

from config.logging_setup import setup_logging
from domain.errors import EnrichmentServiceError, MappingServiceError
from extraction import enrich_products, map_columns, table_to_canonical
from interface.components import (
    render_download_button,
    render_file_uploader,
    render_header,
    render_mapping,
    render_parse_summary,
    render_products_table,
    render_reset_button,
)
from interface.processor import process_uploaded_file

setup_logging()

# ============================================================================
# PAGE CONFIG
# ============================================================================
st.set_page_config(
    page_title="CSV Mapper",
    page_icon="📊",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# ============================================================================
# SESSION STATE INITIALIZATION
# ============================================================================
if "upload_key" not in st.session_state:
    st.session_state.upload_key = None
if "upload_name" not in st.session_state:
    st.session_state.upload_name = None
if "parsed" not in st.session_state:
    st.session_state.parsed = None
if "mapping" not in st.session_state:
    st.session_state.mapping = None
if "products" not in st.session_state:
    st.session_state.products = None

# ============================================================================
# UPLOAD
# ============================================================================
render_header()

uploaded_file = render_file_uploader()

if uploaded_file:
    upload_key = (uploaded_file.name, uploaded_file.size)

    # A new file replaces all previous results
    if upload_key != st.session_state.upload_key:
        with st.spinner("🔄 Smart scanning of the file..."):
            success, parsed, error = process_uploaded_file(uploaded_file)

        st.session_state.upload_key = upload_key
        st.session_state.upload_name = uploaded_file.name
        st.session_state.parsed = parsed if success else None
        st.session_state.mapping = None
        st.session_state.products = None

        if not success:
            st.error(f"❌ Error: {error}")

parsed = st.session_state.parsed

# ============================================================================
# PARSE RESULT + MAPPING
# ============================================================================
if parsed is not None:
    render_parse_summary(parsed)

    if parsed.table.row_count == 0:
        st.warning("All rows in the file are empty. Nothing to map.")
    elif st.session_state.mapping is None:
        st.warning("**Ready to map.** The column structure will be sent to the AI, which proposes links to the product model.")
        if st.button("🪄 Run AI mapping", type="primary", key="run_mapping"):
            with st.spinner("Analyzing..."):
                try:
                    st.session_state.mapping = map_columns(parsed.headers, parsed.preview)
                except MappingServiceError as e:
                    st.error(f"❌ Mapping failed: {e}")
            if st.session_state.mapping is not None:
                st.rerun()

# ============================================================================
# TRANSFORM + ENRICH
# ============================================================================
if parsed is not None and st.session_state.mapping is not None:
    render_mapping(st.session_state.mapping)

    if st.session_state.products is None:
        if st.button("➡️ Transform to products", type="primary", key="transform"):
            st.session_state.products = table_to_canonical(parsed.table, st.session_state.mapping)
            st.rerun()

if st.session_state.products is not None:
    products = st.session_state.products
    render_products_table(products)

    if st.button("✨ Generate descriptions", key="enrich"):
        with st.spinner("Writing product descriptions..."):
            try:
                st.session_state.products = enrich_products(products)
            except EnrichmentServiceError as e:
                st.error(f"❌ Enrichment failed: {e}")
            else:
                st.rerun()

    render_download_button(products, st.session_state.upload_name)

if render_reset_button():
    for key in list(st.session_state.keys()):
        del st.session_state[key]
    st.rerun()

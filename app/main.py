from __future__ import annotations

import streamlit as st

st.set_page_config(page_title="Thunder Lineup", page_icon="🛡️", layout="wide")

from components import (  # noqa: E402
    render_export_bar,
    render_search_form,
    render_vehicle_grid,
)
from data_access import get_client, get_grid_capture, get_view_store  # noqa: E402
from lineup.workflow import SearchWorkflow  # noqa: E402
from theme import inject_theme  # noqa: E402

inject_theme()

client = get_client()
store = get_view_store()
capture = get_grid_capture()
workflow = SearchWorkflow(client, store)


# ---------------------------------------------------------------------------
# Form row: name search + export controls
# ---------------------------------------------------------------------------
_form_col, _export_col = st.columns([3, 2], gap="large")

with _form_col:
    render_search_form(store.state, workflow)

with _export_col:
    render_export_bar(store, capture)

st.markdown('<hr class="results-divider" />', unsafe_allow_html=True)


# ---------------------------------------------------------------------------
# Results grid
# ---------------------------------------------------------------------------
render_vehicle_grid(store.state.vehicles, client, capture)

st.markdown(
    '<div class="app-footer">Data sourced via ThunderInsights &middot; '
    "Built with Streamlit</div>",
    unsafe_allow_html=True,
)

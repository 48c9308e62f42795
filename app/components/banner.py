"""Error banner shared by the search form."""

from __future__ import annotations

import html

import streamlit as st


def error_html(message: str) -> str:
    return f'<p class="error-text">{html.escape(message)}</p>'


def render_banner(message: str | None) -> None:
    """Render the shared error banner; nothing when there is no message."""
    if message:
        st.markdown(error_html(message), unsafe_allow_html=True)

"""Inline CSS for the dark lineup theme: page, form, error text and vehicle cards."""

from __future__ import annotations

import streamlit as st
from lineup.styles import CLAN, PAGE_BACKGROUND, PREMIUM, SPECIAL, STANDARD, CardStyle


def _card_rule(style: CardStyle) -> str:
    return (
        f".vehicle-card.card-{style.key} {{ "
        f"background: {style.background}; border-color: {style.border}; }}"
    )


def card_rules() -> str:
    return "\n    ".join(_card_rule(s) for s in (PREMIUM, SPECIAL, CLAN, STANDARD))


def inject_theme() -> None:
    """Inject all custom CSS into the Streamlit page; runs on every rerun."""
    rules = card_rules()

    st.markdown(
        f"""
    <style>
    /* ---- Page background ---- */
    .stApp {{
        background: {PAGE_BACKGROUND};
        color: #E5E7EB;
    }}
    .block-container {{
        padding-top: 3rem;
        padding-bottom: 2rem;
        max-width: 1500px;
    }}

    /* ---- Hide default Streamlit header/footer ---- */
    header[data-testid="stHeader"] {{ background: transparent; }}
    footer {{ display: none; }}

    /* ---- Name field ---- */
    div[data-testid="stTextInput"] input {{
        background: #111827;
        color: #FFFFFF;
        border: 2px solid #374151;
        border-radius: 6px;
    }}

    /* ---- Buttons ---- */
    div[data-testid="stButton"] button,
    div[data-testid="stDownloadButton"] button {{
        background: #3B82F6;
        color: #FFFFFF;
        border: none;
        border-radius: 6px;
        padding: 0.5rem 3rem;
    }}
    div[data-testid="stButton"] button:hover,
    div[data-testid="stDownloadButton"] button:hover {{
        background: #2563EB;
        color: #FFFFFF;
    }}

    /* ---- Error text (banner + inline field message) ---- */
    .error-text {{
        color: #DC2626;
        margin: 0 0 0.75rem 0;
    }}
    @media (max-width: 768px) {{
        .error-text {{ text-align: center; }}
    }}

    .results-divider {{
        border: none;
        border-top: 1px solid #374151;
        margin: 3rem 0;
    }}

    /* ---- Vehicle grid ---- */
    .vehicle-section {{
        padding: 1rem;
        background: {PAGE_BACKGROUND};
    }}
    .vehicle-grid {{
        list-style: none;
        margin: 0;
        padding: 0;
        display: grid;
        grid-template-columns: repeat(4, minmax(0, 1fr));
        gap: 1rem;
    }}
    @media (max-width: 1024px) {{
        .vehicle-grid {{ grid-template-columns: repeat(3, minmax(0, 1fr)); }}
    }}
    @media (max-width: 768px) {{
        .vehicle-grid {{ grid-template-columns: repeat(2, minmax(0, 1fr)); }}
    }}
    @media (max-width: 640px) {{
        .vehicle-grid {{ grid-template-columns: minmax(0, 1fr); }}
    }}
    .vehicle-card {{
        display: flex;
        flex-direction: row;
        justify-content: space-between;
        align-items: center;
        color: #FFFFFF;
        padding: 0.5rem;
        border: 2px solid;
        margin: 0;
    }}
    {rules}
    .vehicle-thumb {{
        display: flex;
        justify-content: center;
        align-items: center;
        width: 50%;
        overflow: hidden;
        background-size: cover;
        background-repeat: no-repeat;
        background-position: center;
    }}
    .vehicle-thumb img {{ max-width: 100%; }}
    .vehicle-meta {{
        display: flex;
        flex-direction: column;
        justify-content: center;
        text-align: right;
        margin: 0;
    }}
    @media (max-width: 768px) {{
        .vehicle-card {{ flex-direction: column; }}
        .vehicle-thumb {{ width: 100%; }}
        .vehicle-meta {{ text-align: center; width: 100%; }}
    }}

    /* ---- Footer ---- */
    .app-footer {{
        text-align: center;
        color: #4B5563;
        font-size: 0.75rem;
        margin-top: 2rem;
        padding-top: 1rem;
        border-top: 1px solid #1F2937;
    }}
    </style>
    """,
        unsafe_allow_html=True,
    )

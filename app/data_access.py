from __future__ import annotations

import logging

import streamlit as st
from lineup.client import ThunderInsightsClient
from lineup.config import get_settings
from lineup.export import AssetCache, GridCapture
from lineup.workflow import ViewStore

_STORE_KEY = "view_store"
_CAPTURE_KEY = "grid_capture"


@st.cache_resource
def get_client() -> ThunderInsightsClient:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    return ThunderInsightsClient(settings)


@st.cache_resource
def get_asset_cache() -> AssetCache:
    return AssetCache(get_client())


def get_view_store() -> ViewStore:
    if _STORE_KEY not in st.session_state:
        st.session_state[_STORE_KEY] = ViewStore()
    return st.session_state[_STORE_KEY]


def get_grid_capture() -> GridCapture:
    if _CAPTURE_KEY not in st.session_state:
        st.session_state[_CAPTURE_KEY] = GridCapture(get_asset_cache())
    return st.session_state[_CAPTURE_KEY]

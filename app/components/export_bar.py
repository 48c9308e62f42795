"""Copy / Screenshot / CSV controls shown above a non-empty result grid."""

from __future__ import annotations

import json

import streamlit as st
import streamlit.components.v1 as components
from lineup.export import (
    RESULTS_REGION,
    SCREENSHOT_FILENAME,
    ClipboardWriter,
    RegionCapture,
    clipboard_text,
    vehicles_frame,
)
from lineup.workflow import SnapshotCaptured, ViewStore


class BrowserClipboard:
    """Writes text through the browser Clipboard API from a zero-height component."""

    def write_text(self, text: str) -> None:
        payload = json.dumps(text).replace("</", "<\\/")
        components.html(
            f"<script>navigator.clipboard.writeText({payload});</script>",
            height=0,
        )


def render_export_bar(
    store: ViewStore,
    capture: RegionCapture,
    clipboard: ClipboardWriter | None = None,
) -> None:
    vehicles = store.state.vehicles
    if not vehicles:
        return

    clipboard = clipboard or BrowserClipboard()
    copy_col, shot_col, csv_col = st.columns(3)

    with copy_col:
        copied = st.button("Copy", key="copy_button", use_container_width=True)
    with shot_col:
        shot = st.button("Screenshot", key="screenshot_button", use_container_width=True)
    with csv_col:
        st.download_button(
            "CSV",
            vehicles_frame(vehicles).to_csv(index=False).encode("utf-8"),
            file_name="vehicles.csv",
            mime="text/csv",
            use_container_width=True,
        )

    if copied:
        text = clipboard_text(vehicles)
        clipboard.write_text(text)
        st.code(text, language=None)
        st.toast("Top vehicles copied to clipboard")

    if shot:
        with st.spinner("Loading images…"):
            store.dispatch(SnapshotCaptured(capture.capture_region(RESULTS_REGION)))

    snapshot = store.state.snapshot
    if snapshot:
        st.download_button(
            f"Download {SCREENSHOT_FILENAME}",
            snapshot,
            file_name=SCREENSHOT_FILENAME,
            mime="image/png",
            key="screenshot_download",
        )

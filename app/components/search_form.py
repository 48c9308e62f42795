"""Player name entry with inline required-field validation."""

from __future__ import annotations

import streamlit as st
from lineup.workflow import SearchWorkflow, ViewState

from .banner import error_html, render_banner

NAME_KEY = "player_name"
SEARCH_KEY = "search_button"


def _submit(workflow: SearchWorkflow) -> None:
    workflow.submit(st.session_state.get(NAME_KEY, ""))


def _name_changed(workflow: SearchWorkflow) -> None:
    """Clear errors on edit; a committed non-empty name (Enter) also searches.

    When the Search button was pressed in the same interaction its own
    callback submits, so the edit only clears errors.
    """
    workflow.input_changed()
    if st.session_state.get(SEARCH_KEY):
        return
    name = st.session_state.get(NAME_KEY, "")
    if name:
        workflow.submit(name)


def render_search_form(state: ViewState, workflow: SearchWorkflow) -> None:
    """Render the field error, banner, name input and Search button.

    Both widgets act through callbacks so the store is updated before the
    page is drawn on the following rerun.
    """
    if state.field_error:
        st.markdown(error_html(state.field_error), unsafe_allow_html=True)
    render_banner(state.error)

    name_col, button_col = st.columns([3, 1])
    with name_col:
        st.text_input(
            "Name",
            key=NAME_KEY,
            placeholder="Name",
            label_visibility="collapsed",
            on_change=_name_changed,
            args=(workflow,),
        )
    with button_col:
        st.button(
            "Search",
            key=SEARCH_KEY,
            on_click=_submit,
            args=(workflow,),
            use_container_width=True,
        )

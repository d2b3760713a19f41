"""
Streamlit main app for the OMDb movie explorer.

Run: streamlit run omdb_explorer/ui/app.py --server.port 8501
"""

import streamlit as st

from omdb_explorer.config import get_log_file, get_log_level
from omdb_explorer.core.omdb_client import OmdbConfigError
from omdb_explorer.models.movie import SearchResultItem
from omdb_explorer.models.view_state import DetailDisplay, ListDisplay
from omdb_explorer.ui.components.movie_card import render_movie_detail, render_result_list
from omdb_explorer.ui.components.search_form import render_language_form, render_search_form
from omdb_explorer.ui.utils.session_state import init_session_state
from omdb_explorer.utils.logging_config import configure_ui_logging

configure_ui_logging(log_file=get_log_file(), level=get_log_level())

st.set_page_config(
    page_title="Movie Database Explorer",
    page_icon="🎬",
    layout="wide",
)

st.title("🎬 Movie Database Explorer")

try:
    view = init_session_state()
except OmdbConfigError as e:
    st.error(str(e))
    st.stop()

state = view.state

form_data = render_search_form(initial_query=state.search_query_text, disabled=state.is_loading)
if form_data:
    with st.spinner("Searching..."):
        view.submit_search(form_data["query"], mode=form_data["mode"], rating=form_data["rating"])

language = render_language_form(initial_language=state.language_query_text, disabled=state.is_loading)
if language is not None:
    with st.spinner("Loading..."):
        view.submit_language(language)


def handle_select(item: SearchResultItem) -> None:
    """Callback when user picks a search result."""
    with st.spinner("Loading..."):
        view.select_result(item)
    st.rerun()


if state.last_error:
    st.error(f"Error: {state.last_error}")

# Requests complete within the rerun that dispatched them; st.spinner covers loading
st.divider()
if isinstance(state.display, ListDisplay):
    render_result_list(state.display.items, on_select=handle_select)
elif isinstance(state.display, DetailDisplay):
    render_movie_detail(state.display.record)

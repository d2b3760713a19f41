"""
Session state helpers for Streamlit.
"""

import streamlit as st

from omdb_explorer.core.omdb_client import OmdbClient
from omdb_explorer.core.search_view import SearchView

SEARCH_VIEW_KEY = "search_view"


def init_session_state(client: OmdbClient | None = None) -> SearchView:
    """Create the per-session SearchView on first run and return it."""
    if SEARCH_VIEW_KEY not in st.session_state:
        st.session_state[SEARCH_VIEW_KEY] = SearchView(client or OmdbClient.from_env())
    return st.session_state[SEARCH_VIEW_KEY]

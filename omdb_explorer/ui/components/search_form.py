"""
Search and language form components.
"""

import streamlit as st

from omdb_explorer.core.search_view import SearchMode

SEARCH_MODES: dict[SearchMode, str] = {
    "title": "Search titles",
    "exact": "Exact title details",
    "rating": "Search and filter by rating",
}


def render_search_form(initial_query: str = "", disabled: bool = False) -> dict | None:
    """
    Render the title search form.

    Args:
        initial_query: Pre-fill the query input
        disabled: Disable the submit button (request in flight)

    Returns:
        Dict with query, mode and rating if submitted, else None.
    """
    with st.form("search_form"):
        query = st.text_input("Title", value=initial_query, placeholder="Search movies...")
        col1, col2 = st.columns([2, 1])
        with col1:
            mode = st.radio(
                "Mode",
                options=list(SEARCH_MODES),
                format_func=SEARCH_MODES.get,
                horizontal=True,
            )
        with col2:
            rating = st.text_input("Rating", placeholder="e.g. PG-13", help="Exact match, used by the rating filter")
        submitted = st.form_submit_button("Searching..." if disabled else "Search", disabled=disabled)
        if submitted:
            return {"query": query, "mode": mode, "rating": rating}
    return None


def render_language_form(initial_language: str = "", disabled: bool = False) -> str | None:
    """
    Render the "top 10 by language" form.

    Returns:
        Language text if submitted, else None.
    """
    with st.form("language_form"):
        language = st.text_input(
            "Language",
            value=initial_language,
            placeholder="Enter language (e.g., English)",
        )
        if st.form_submit_button("Get Top 10", disabled=disabled):
            return language
    return None

"""
Result list and movie detail components.
"""

import streamlit as st

from omdb_explorer.models.movie import MovieDetail, SearchResultItem


def render_result_list(items: list[SearchResultItem], on_select: callable) -> None:
    """
    Render search results as clickable entries.

    Args:
        items: Results in upstream order
        on_select: Callback(item) when the user picks an entry
    """
    st.subheader("Search Results:")
    if not items:
        st.info("No results")
        return
    for item in items:
        if st.button(item.label, key=f"result_{item.imdb_id}"):
            on_select(item)


def render_movie_detail(movie: MovieDetail) -> None:
    """Render the detail panel for a single movie."""
    st.header(movie.title)
    col1, col2 = st.columns([1, 3])
    with col1:
        if movie.poster_url:
            st.image(movie.poster_url, caption=f"{movie.title} Poster")
        else:
            st.write("No poster available")
    with col2:
        st.markdown(f"**Year:** {movie.year}")
        st.markdown(f"**Rating:** {movie.rated}")
        st.markdown(f"**Actors:** {movie.actors}")
        st.markdown(f"**Director:** {movie.director}")
        st.markdown(f"**Plot:** {movie.plot}")
        meta = [v for v in (movie.genre, movie.language, movie.runtime) if v and v != "N/A"]
        if movie.imdb_rating and movie.imdb_rating != "N/A":
            meta.append(f"IMDb {movie.imdb_rating}")
        if meta:
            st.caption(" | ".join(meta))

    st.subheader("Key Personnel")
    st.markdown(f"**Top Director:** {movie.top_director}")
    st.markdown(f"**Top Actor:** {movie.top_actor}")

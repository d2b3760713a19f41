"""
Pydantic schemas for upstream records and view state.
"""

from omdb_explorer.models.movie import MovieDetail, SearchResultItem, first_credit
from omdb_explorer.models.view_state import (
    DetailDisplay,
    EmptyDisplay,
    ListDisplay,
    ViewState,
)

__all__ = [
    "MovieDetail",
    "SearchResultItem",
    "first_credit",
    "DetailDisplay",
    "EmptyDisplay",
    "ListDisplay",
    "ViewState",
]

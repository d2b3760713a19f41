"""
Pydantic schemas for the search view's interaction state.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from omdb_explorer.models.movie import MovieDetail, SearchResultItem


class EmptyDisplay(BaseModel):
    """Nothing fetched yet."""

    kind: Literal["empty"] = "empty"


class ListDisplay(BaseModel):
    """A (possibly empty) list of search results."""

    kind: Literal["list"] = "list"
    items: list[SearchResultItem] = Field(default_factory=list)


class DetailDisplay(BaseModel):
    """A single detail record."""

    kind: Literal["detail"] = "detail"
    record: MovieDetail


Display = Annotated[
    Union[EmptyDisplay, ListDisplay, DetailDisplay],
    Field(discriminator="kind"),
]


class ViewState(BaseModel):
    """
    Per-session state of the search view.

    ``display`` holds either the result list or the detail record, never
    both. ``is_loading`` and ``last_error`` are independent of it.
    """

    display: Display = Field(default_factory=EmptyDisplay)
    is_loading: bool = False
    last_error: str | None = None
    search_query_text: str = ""
    language_query_text: str = ""

    @property
    def result_list(self) -> list[SearchResultItem]:
        if isinstance(self.display, ListDisplay):
            return self.display.items
        return []

    @property
    def detail(self) -> MovieDetail | None:
        if isinstance(self.display, DetailDisplay):
            return self.display.record
        return None

"""
Pydantic schemas for OMDb records.

Field aliases follow the upstream JSON keys (``Title``, ``imdbID``, ...);
attributes use snake_case names.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

NOT_AVAILABLE = "N/A"


def first_credit(names: str) -> str:
    """Return the first comma-delimited entry of a credits string."""
    return names.split(",")[0].strip()


class SearchResultItem(BaseModel):
    """One entry of a search response's ``Search`` array."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str = Field(alias="Title")
    year: str = Field(alias="Year")
    imdb_id: str = Field(alias="imdbID")
    type: str | None = Field(default=None, alias="Type")
    poster: str | None = Field(default=None, alias="Poster")
    rated: str | None = Field(default=None, alias="Rated")

    @property
    def label(self) -> str:
        return f"{self.title} ({self.year})"


class MovieDetail(BaseModel):
    """Full record returned by a by-title or by-id lookup."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(alias="Title")
    year: str = Field(default="", alias="Year")
    rated: str = Field(default="", alias="Rated")
    actors: str = Field(default="", alias="Actors")
    director: str = Field(default="", alias="Director")
    plot: str = Field(default="", alias="Plot")
    poster_url: str | None = Field(default=None, alias="Poster")
    imdb_id: str | None = Field(default=None, alias="imdbID")
    genre: str | None = Field(default=None, alias="Genre")
    language: str | None = Field(default=None, alias="Language")
    runtime: str | None = Field(default=None, alias="Runtime")
    imdb_rating: str | None = Field(default=None, alias="imdbRating")

    @field_validator("poster_url")
    @classmethod
    def drop_missing_poster(cls, v: str | None) -> str | None:
        """OMDb reports a missing poster as "N/A"."""
        if not v or v == NOT_AVAILABLE:
            return None
        return v

    @property
    def top_director(self) -> str:
        return first_credit(self.director)

    @property
    def top_actor(self) -> str:
        return first_credit(self.actors)

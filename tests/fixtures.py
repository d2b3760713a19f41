"""
Canned OMDb payloads and a recording fake client.
"""

from omdb_explorer.config import OmdbConfig
from omdb_explorer.models.movie import MovieDetail, SearchResultItem

TEST_API_KEY = "test-key"


def make_search_payload(count: int, prefix: str = "Batman", rated: list[str] | None = None) -> dict:
    """Build an OMDb search response with ``count`` distinct results."""
    items = []
    for i in range(count):
        item = {
            "Title": f"{prefix} {i + 1}",
            "Year": str(1990 + i),
            "imdbID": f"tt{1000000 + i}",
            "Type": "movie",
            "Poster": "N/A",
        }
        if rated is not None:
            item["Rated"] = rated[i]
        items.append(item)
    return {"Search": items, "totalResults": str(count), "Response": "True"}


DETAIL_PAYLOAD = {
    "Title": "Batman Begins",
    "Year": "2005",
    "Rated": "PG-13",
    "Runtime": "140 min",
    "Genre": "Action, Crime, Drama",
    "Director": "Christopher Nolan",
    "Actors": "Christian Bale, Michael Caine, Ken Watanabe",
    "Plot": "After witnessing his parents' death, Bruce learns the art of fighting.",
    "Language": "English, Mandarin",
    "Poster": "https://m.media-amazon.com/images/M/batman_begins.jpg",
    "imdbRating": "8.2",
    "imdbID": "tt0372784",
    "Response": "True",
}

NOT_FOUND_PAYLOAD = {"Response": "False", "Error": "Movie not found!"}


class FakeOmdbClient:
    """
    Stand-in for OmdbClient that records calls and replays canned outcomes.

    ``outcome`` is either a value to return or an exception to raise.
    ``on_call`` runs during the call (used to observe loading state).
    """

    def __init__(self, outcome=None, on_call=None):
        self.outcome = outcome
        self.on_call = on_call
        self.calls: list[tuple[str, str]] = []
        self.config = OmdbConfig(api_key=TEST_API_KEY)

    def _respond(self, method: str, arg: str):
        self.calls.append((method, arg))
        if self.on_call:
            self.on_call()
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome

    def search(self, query: str) -> list[SearchResultItem]:
        return self._respond("search", query)

    def get_by_title(self, title: str) -> MovieDetail:
        return self._respond("get_by_title", title)

    def get_by_id(self, imdb_id: str) -> MovieDetail:
        return self._respond("get_by_id", imdb_id)

    def redact(self, text: str) -> str:
        return text.replace(TEST_API_KEY, "***")

    def close(self) -> None:
        pass

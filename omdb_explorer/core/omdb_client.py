"""
OMDb REST client.

OMDb answers HTTP 200 even for failed lookups and signals them with an
``Error`` field; those responses are raised as ``OmdbError``.
"""

import logging

import requests

from omdb_explorer.config import OmdbConfig, load_config
from omdb_explorer.models.movie import MovieDetail, SearchResultItem

logger = logging.getLogger(__name__)


class OmdbError(Exception):
    """Upstream reported a logical failure (e.g. "Movie not found!")."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class OmdbConfigError(ValueError):
    """Client cannot be built from the given configuration."""


class OmdbClient:
    """
    Thin wrapper over the single OMDb endpoint.

    Each public method issues exactly one GET. Transport problems surface
    as ``requests.RequestException``; malformed payloads as ``ValueError``.
    """

    def __init__(self, config: OmdbConfig, session: requests.Session | None = None):
        if not config.api_key:
            raise OmdbConfigError("OMDb API key is required (set OMDB_API_KEY).")
        self.config = config
        self.session = session or requests.Session()

    @classmethod
    def from_env(cls) -> "OmdbClient":
        """Create a client configured from the environment."""
        return cls(load_config())

    def _get(self, params: dict) -> dict:
        """Issue one GET with the API key attached and classify the reply."""
        query = {**params, "apikey": self.config.api_key}
        r = self.session.get(self.config.base_url, params=query, timeout=self.config.timeout)
        r.raise_for_status()
        try:
            data = r.json()
        except requests.exceptions.JSONDecodeError as e:
            # Also a RequestException; surface it as a payload problem
            raise ValueError(f"body is not JSON ({e})") from e
        if not isinstance(data, dict):
            raise ValueError("Unexpected OMDb payload")
        if data.get("Error"):
            raise OmdbError(data["Error"])
        return data

    def search(self, query: str) -> list[SearchResultItem]:
        """Title-substring search. A reply without ``Search`` is an empty list."""
        logger.debug("OMDb search: %r", query)
        data = self._get({"s": query})
        return [SearchResultItem.model_validate(item) for item in data.get("Search") or []]

    def get_by_title(self, title: str) -> MovieDetail:
        """Exact-title lookup with the full-length plot."""
        logger.debug("OMDb detail by title: %r", title)
        return MovieDetail.model_validate(self._get({"t": title, "plot": "full"}))

    def get_by_id(self, imdb_id: str) -> MovieDetail:
        """Lookup by IMDb identifier."""
        logger.debug("OMDb detail by id: %s", imdb_id)
        return MovieDetail.model_validate(self._get({"i": imdb_id}))

    def redact(self, text: str) -> str:
        """Mask the API key in text that may embed a request URL."""
        return text.replace(self.config.api_key, "***")

    def close(self) -> None:
        self.session.close()

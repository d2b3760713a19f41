"""
Search orchestration and the OMDb client.
"""

from omdb_explorer.core.omdb_client import OmdbClient, OmdbConfigError, OmdbError
from omdb_explorer.core.search_view import SearchView

__all__ = ["OmdbClient", "OmdbConfigError", "OmdbError", "SearchView"]

"""
Shared pytest fixtures.
"""

import pytest

from omdb_explorer.config import OmdbConfig
from omdb_explorer.core.omdb_client import OmdbError
from omdb_explorer.models.movie import MovieDetail, SearchResultItem
from tests.fixtures import DETAIL_PAYLOAD, TEST_API_KEY, make_search_payload


@pytest.fixture
def config():
    """Config pointing at a fake endpoint."""
    return OmdbConfig(api_key=TEST_API_KEY, base_url="http://omdb.test/", timeout=5)


@pytest.fixture
def batman_results():
    """Ten distinct search results."""
    return [SearchResultItem.model_validate(i) for i in make_search_payload(10)["Search"]]


@pytest.fixture
def detail():
    """A full detail record."""
    return MovieDetail.model_validate(DETAIL_PAYLOAD)


@pytest.fixture
def not_found():
    """Logical upstream error."""
    return OmdbError("Movie not found!")

"""Quick check that OMDB_API_KEY is accepted by OMDb."""
import sys

import requests

from omdb_explorer.config import load_config
from omdb_explorer.core.omdb_client import OmdbClient, OmdbConfigError, OmdbError
from omdb_explorer.utils.logging_config import setup_logging, get_logger

setup_logging(level="INFO")
logger = get_logger(__name__)

title = sys.argv[1] if len(sys.argv) > 1 else "Inception"

try:
    client = OmdbClient(load_config())
except OmdbConfigError as e:
    logger.error(str(e))
    sys.exit(2)

try:
    movie = client.get_by_title(title)
except OmdbError as e:
    logger.error("OMDb returned error: %s", e.message)
    sys.exit(1)
except requests.RequestException as e:
    logger.error("Request failed: %s", client.redact(str(e)))
    sys.exit(1)
finally:
    client.close()

print("Key OK:", movie.title, f"({movie.year})", "-", movie.director)

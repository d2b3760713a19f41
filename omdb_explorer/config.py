"""
Application configuration loaded from environment or defaults.
"""

import os
from dataclasses import dataclass

DEFAULT_OMDB_BASE_URL = "http://www.omdbapi.com/"


@dataclass(frozen=True)
class OmdbConfig:
    """Settings handed to the OMDb client at construction time."""

    api_key: str
    base_url: str = DEFAULT_OMDB_BASE_URL
    timeout: float = 10.0

    def __repr__(self) -> str:
        # Keep the key out of logs and tracebacks
        return f"OmdbConfig(api_key='***', base_url={self.base_url!r}, timeout={self.timeout})"


def get_omdb_api_key() -> str:
    """Get OMDb API key from env (empty string if unset)."""
    return os.getenv("OMDB_API_KEY", "").strip()


def get_omdb_base_url() -> str:
    """Get OMDb endpoint URL from env or default."""
    return os.getenv("OMDB_BASE_URL", "") or DEFAULT_OMDB_BASE_URL


def get_request_timeout() -> float:
    """Get upstream request timeout in seconds."""
    return float(os.getenv("OMDB_TIMEOUT", "10"))


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get optional log file name."""
    return os.getenv("LOG_FILE") or None


def load_config() -> OmdbConfig:
    """Build an OmdbConfig from the environment."""
    return OmdbConfig(
        api_key=get_omdb_api_key(),
        base_url=get_omdb_base_url(),
        timeout=get_request_timeout(),
    )

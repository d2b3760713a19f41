"""
Shared utilities package.

Currently holds the logging configuration used by the UI and scripts.
"""

from omdb_explorer.utils.logging_config import setup_logging, get_logger

__all__ = ['setup_logging', 'get_logger']

"""
OMDb Explorer Application Package.

This package contains the movie search view, the OMDb client, the
pydantic schemas for upstream records and the Streamlit UI.
"""

__version__ = "1.0.0"

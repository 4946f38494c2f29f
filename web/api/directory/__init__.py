"""MP directory API."""

from web.api.directory.views import get_directory, get_directory_summary

__all__ = [
    "get_directory",
    "get_directory_summary",
]

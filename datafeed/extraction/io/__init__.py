"""I/O layer (search backend clients)."""

from .search import HTTPSearchClient, search_path

__all__ = ["HTTPSearchClient", "search_path"]

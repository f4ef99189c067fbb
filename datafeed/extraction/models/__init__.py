"""Data models."""

from .search import SearchResponse
from .summary import DataSummary

__all__ = ["DataSummary", "SearchResponse"]

"""Core components."""

from .base import SearchClient, SubExtractor, SubExtractorFactory
from .context import ExtractionContext
from .exceptions import DataError, DataExtractionError, ValidationError

__all__ = [
    "ExtractionContext",
    "SearchClient",
    "SubExtractor",
    "SubExtractorFactory",
    "DataError",
    "DataExtractionError",
    "ValidationError",
]

"""Core package initialization."""

from blame_lens.core.cache import AttributionCache
from blame_lens.core.condenser import DiffCondenser
from blame_lens.core.diff_fetcher import DiffFetcher
from blame_lens.core.metadata import ChangeMetadataTable
from blame_lens.core.parser import LineAttributionParser
from blame_lens.core.query import AttributionQuery

__all__ = [
    "AttributionCache",
    "AttributionQuery",
    "ChangeMetadataTable",
    "DiffCondenser",
    "DiffFetcher",
    "LineAttributionParser",
]

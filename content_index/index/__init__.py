"""Content index construction and queries."""

from .content_index import ContentIndex, parse_date, sort_by_date
from .builder import BuildResult, ContentIndexBuilder, build_index, build_index_sync
from .holder import ContentIndexHolder

__all__ = [
    "ContentIndex",
    "parse_date",
    "sort_by_date",
    "BuildResult",
    "ContentIndexBuilder",
    "build_index",
    "build_index_sync",
    "ContentIndexHolder",
]

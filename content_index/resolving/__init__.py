"""Slug and URL resolution."""

from .urls import (
    DEFAULT_INDEX_NAMES,
    humanize,
    is_index_file,
    normalize_url,
    resolve_url,
    slug_for,
    strip_extension,
)

__all__ = [
    "DEFAULT_INDEX_NAMES",
    "humanize",
    "is_index_file",
    "normalize_url",
    "resolve_url",
    "slug_for",
    "strip_extension",
]

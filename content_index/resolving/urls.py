# content_index/resolving/urls.py
"""
Slug and URL resolution.

Pure functions: the same relative path always maps to the same URL.
"""

import re
from typing import Iterable, Sequence

DEFAULT_INDEX_NAMES = ("index",)

_SEPARATORS = re.compile(r"/{2,}")


def strip_extension(filename: str) -> str:
    """Drop the final extension (``setup.md`` -> ``setup``)."""
    base = filename.rsplit("/", 1)[-1]
    if "." in base.lstrip("."):
        return base.rsplit(".", 1)[0]
    return base


def is_index_file(filename: str, index_names: Iterable[str] = DEFAULT_INDEX_NAMES) -> bool:
    return strip_extension(filename) in tuple(index_names)


def slug_for(
    directory: Sequence[str],
    filename: str,
    index_names: Iterable[str] = DEFAULT_INDEX_NAMES,
) -> str:
    """Filename without extension; index files collapse to their parent directory."""
    base = strip_extension(filename)
    if base in tuple(index_names):
        return directory[-1] if directory else base
    return base


def normalize_url(url: str) -> str:
    """Leading ``/``, no duplicate separators, no trailing ``/`` except root."""
    url = "/" + url.replace("\\", "/").strip()
    url = _SEPARATORS.sub("/", url)
    if len(url) > 1:
        url = url.rstrip("/") or "/"
    return url


def resolve_url(
    directory: Sequence[str],
    filename: str,
    index_names: Iterable[str] = DEFAULT_INDEX_NAMES,
) -> str:
    """
    Map a directory path and filename to a canonical URL.

    Args:
        directory: Directory segments relative to the content root
        filename: File name including extension
        index_names: Basenames that stand for their directory

    Returns:
        URL such as ``/docs/guide/setup``, ``/docs`` or ``/``
    """
    segments = [s for s in directory if s]
    base = strip_extension(filename)

    if base in tuple(index_names):
        return normalize_url("/".join(segments))

    return normalize_url("/".join(segments + [base]))


def humanize(value: str) -> str:
    """Turn a slug or directory name into a display label (``getting-started`` -> ``Getting started``)."""
    text = re.sub(r"[-_]+", " ", value).strip()
    if not text:
        return value
    return text[0].upper() + text[1:]

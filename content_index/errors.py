# content_index/errors.py
"""Error taxonomy for content indexing."""

from typing import Optional


class ContentIndexError(Exception):
    """Base class for all content index errors."""


class ScanError(ContentIndexError):
    """Raised when the content root cannot be traversed safely.

    Aborts the whole build; the previous snapshot (if any) stays servable.
    """

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        detail = f"{message}: {path}" if path else message
        super().__init__(detail)


class MetadataParseError(ContentIndexError):
    """Raised for a malformed frontmatter block in a single file.

    The builder collects it as a warning and excludes only that file.
    """

    def __init__(self, path: str, message: str, line: Optional[int] = None):
        self.path = path
        self.line = line
        self.message = message
        location = f"{path}:{line}" if line is not None else path
        super().__init__(f"{location}: {message}")


class DuplicateUrlError(ContentIndexError):
    """Raised when two files resolve to the same URL under the ``error`` policy."""

    def __init__(self, url: str, first: str, second: str):
        self.url = url
        self.first = first
        self.second = second
        super().__init__(f"URL {url} produced by both {first} and {second}")

# content_index/models/content.py

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


ROOT_DIRECTORY = "root"


class WarningKind(str, Enum):
    METADATA = "metadata"
    COLLISION = "collision"
    READ = "read"


class ContentItem(BaseModel):
    """
    A single indexed content file.

    Items are frozen once built; callers that need adjusted metadata go
    through ``get_page_metadata`` which returns a copy.
    """

    model_config = ConfigDict(frozen=True)

    path: str                         # Relative to content root, "/"-separated
    directory: str                    # "docs/guides", or "root" for top-level files
    main_directory: str               # First segment of directory
    slug: str
    url: str
    metadata: dict[str, Any] = Field(default_factory=dict)
    body: Any = ""                    # Opaque payload handed back by the parser
    layout: str = "default"           # Resolved once at build time
    position: int = 0                 # Scan position


class Directory(BaseModel):
    """A directory observed during the scan."""

    model_config = ConfigDict(frozen=True)

    name: str                         # "/"-joined path relative to content root
    title: str
    order: Optional[float] = None     # From the directory meta file, if any


class BuildWarning(BaseModel):
    """A non-fatal problem recorded while building the index."""

    model_config = ConfigDict(frozen=True)

    path: str
    message: str
    kind: WarningKind = WarningKind.METADATA
    line: Optional[int] = None

# content_index/layouts.py
"""
Layout variants for content items.

Each item's layout is resolved once at index-build time from its metadata
and directory, then stored on the item.
"""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from .config import LayoutsConfig
from .paths import SegmentPath

logger = logging.getLogger(__name__)

DEFAULT_LAYOUT = "default"


class LayoutSpec(BaseModel):
    """A registered layout: the component that renders it and its props."""

    model_config = ConfigDict(frozen=True)

    name: str
    component: str
    props: Dict[str, Any] = Field(default_factory=dict)
    directories: tuple[str, ...] = ()    # Top-level directories that imply this layout


def _builtin_layouts() -> Dict[str, LayoutSpec]:
    return {
        "docs": LayoutSpec(
            name="docs",
            component="DocsLayout",
            props={"sidebarTitle": "Docs"},
            directories=("docs",),
        ),
        "blog": LayoutSpec(
            name="blog",
            component="BlogPostLayout",
            directories=("blog",),
        ),
        DEFAULT_LAYOUT: LayoutSpec(name=DEFAULT_LAYOUT, component="DefaultLayout"),
    }


class LayoutRegistry:
    """Closed set of layouts (docs, blog, default), extensible by registration."""

    def __init__(self, config: Optional[LayoutsConfig] = None):
        self.config = config or LayoutsConfig()
        self._layouts = _builtin_layouts()

    def register(
        self,
        name: str,
        component: str,
        props: Optional[Dict[str, Any]] = None,
        directories: Iterable[str] = (),
    ) -> LayoutSpec:
        """Register (or replace) a layout variant."""
        spec = LayoutSpec(
            name=name,
            component=component,
            props=props or {},
            directories=tuple(directories),
        )
        self._layouts[name] = spec
        return spec

    def get(self, name: Optional[str]) -> LayoutSpec:
        """Return the named layout, falling back to ``default``."""
        if name and name in self._layouts:
            return self._layouts[name]
        return self._layouts[DEFAULT_LAYOUT]

    def names(self) -> list[str]:
        return list(self._layouts)

    def _from_directory(self, directory: SegmentPath) -> Optional[str]:
        if directory.is_root():
            return None
        top = directory.segments[0]
        for spec in self._layouts.values():
            if top in spec.directories:
                return spec.name
        return None

    def _from_metadata(self, metadata: Mapping[str, Any], directory: SegmentPath) -> Optional[str]:
        declared = metadata.get("layout")
        if not isinstance(declared, str) or not declared:
            return None

        allowed = self.config.metadata_directories
        if allowed is not None:
            top = directory.segments[0] if directory.segments else ""
            if top not in allowed:
                return None

        if declared not in self._layouts:
            logger.debug("Unknown layout %r; using %s", declared, DEFAULT_LAYOUT)
            return DEFAULT_LAYOUT
        return declared

    def resolve(self, metadata: Mapping[str, Any], directory: SegmentPath) -> str:
        """
        Choose the layout name for an item.

        Args:
            metadata: The item's frontmatter
            directory: The item's directory

        Returns:
            A registered layout name
        """
        from_metadata = self._from_metadata(metadata, directory)
        from_directory = self._from_directory(directory)

        if self.config.precedence == "directory":
            return from_directory or from_metadata or DEFAULT_LAYOUT
        return from_metadata or from_directory or DEFAULT_LAYOUT

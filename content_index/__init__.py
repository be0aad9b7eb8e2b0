"""Content indexing for a markdown-driven static site."""

from .config import Config, SiteConfig, load_config, load_site_config
from .errors import ContentIndexError, DuplicateUrlError, MetadataParseError, ScanError
from .index import (
    BuildResult,
    ContentIndex,
    ContentIndexBuilder,
    ContentIndexHolder,
    build_index,
    build_index_sync,
)
from .layouts import LayoutRegistry, LayoutSpec
from .listing import get_directory_listings, get_directory_page, get_entries, get_slug_page
from .metadata import get_page_metadata
from .models import BuildWarning, ContentItem, Directory, SidebarNode
from .sidebar import build_sidebar_tree

__all__ = [
    "Config",
    "SiteConfig",
    "load_config",
    "load_site_config",
    "ContentIndexError",
    "DuplicateUrlError",
    "MetadataParseError",
    "ScanError",
    "BuildResult",
    "ContentIndex",
    "ContentIndexBuilder",
    "ContentIndexHolder",
    "build_index",
    "build_index_sync",
    "LayoutRegistry",
    "LayoutSpec",
    "get_directory_listings",
    "get_directory_page",
    "get_entries",
    "get_slug_page",
    "get_page_metadata",
    "BuildWarning",
    "ContentItem",
    "Directory",
    "SidebarNode",
    "build_sidebar_tree",
]

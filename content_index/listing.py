# content_index/listing.py
"""
Listing views derived from a content index.

Shapes index data the way directory pages, single pages, footers and
prerender entry lists consume it. Everything returned is plain JSON-ready data.
"""

from typing import Any, Dict, List, Optional

from .index.content_index import ContentIndex
from .layouts import DEFAULT_LAYOUT, LayoutRegistry, LayoutSpec
from .metadata import get_page_metadata
from .paths import SegmentPath
from .resolving import humanize


def _layout_config(spec: LayoutSpec) -> Dict[str, Any]:
    return {"component": spec.component, "props": dict(spec.props)}


def get_directory_listings(index: ContentIndex) -> List[Dict[str, Any]]:
    """
    Top-level directories, each with the pages beneath it.

    Returns:
        ``[{"name", "title", "order", "subpages": [{"title", "url"}]}]``
    """
    listings = []
    for directory in index.get_content_directories():
        subpages = [
            {
                "title": get_page_metadata(item, index.site_config)["title"],
                "url": item.url,
            }
            for item in index.get_content_by_directory(directory.name)
        ]
        listing = directory.model_dump(mode="json")
        listing["subpages"] = subpages
        listings.append(listing)
    return listings


def get_directory_page(index: ContentIndex, name: str) -> Dict[str, Any]:
    """Everything a directory page needs: its content, children and sidebar."""
    directory = index.get_directory(name)
    content = [
        item.model_copy(update={"metadata": get_page_metadata(item, index.site_config)})
        for item in index.get_content_by_directory(name)
    ]
    sidebar = []
    if index.site_config.features.docs_sidebar and name == "docs":
        sidebar = index.get_sidebar_tree(name)

    return {
        "directory": (
            directory.model_dump(mode="json")
            if directory is not None
            else {"name": name, "title": humanize(SegmentPath.parse(name).last), "order": None}
        ),
        "content": [item.model_dump(mode="json") for item in content],
        "sub_directories": [d.model_dump(mode="json") for d in index.get_sub_directories(name)],
        "sidebar": [node.model_dump(mode="json") for node in sidebar],
    }


def get_entries(index: ContentIndex, main_directory: str) -> List[Dict[str, str]]:
    """Prerender entries (``{"slug": ...}``) for one section, e.g. ``blog``."""
    return [
        {"slug": item.slug}
        for item in index.get_content_by_main_directory(main_directory)
    ]


def get_slug_page(
    index: ContentIndex,
    url: str,
    registry: Optional[LayoutRegistry] = None,
) -> Dict[str, Any]:
    """
    Payload for rendering a single page by URL.

    The docs sidebar is attached only when the page resolved to the ``docs``
    layout. An unknown URL yields ``not_found`` with the default layout.

    Args:
        index: Built content index
        url: Requested URL, e.g. ``"/docs/guide/setup"``
        registry: Layouts to describe; built-in layouts when omitted

    Returns:
        ``{"content", "directories", "sidebar_items", "layout_config",
        "layout_type"}``, or ``{"not_found": True, ...}`` for a missing page
    """
    registry = registry or LayoutRegistry()
    directories = [d.model_dump(mode="json") for d in index.get_content_directories()]

    item = index.get_content_by_url(url)
    if item is None:
        return {
            "not_found": True,
            "directories": directories,
            "sidebar_items": [],
            "layout_config": _layout_config(registry.get(DEFAULT_LAYOUT)),
        }

    spec = registry.get(item.layout)
    sidebar = index.get_sidebar_tree("docs") if spec.name == "docs" else []
    content = item.model_copy(update={"metadata": get_page_metadata(item, index.site_config)})

    return {
        "content": content.model_dump(mode="json"),
        "directories": directories,
        "sidebar_items": [node.model_dump(mode="json") for node in sidebar],
        "layout_config": _layout_config(spec),
        "layout_type": spec.name,
    }

# content_index/sidebar.py
"""
Sidebar tree construction.

Groups a directory's content by sub-directory into nested SidebarNodes.
The tree follows the strict parent -> child directory relation, so it is
acyclic and as deep as the deepest content directory.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from .models import ROOT_DIRECTORY, ContentItem, SidebarNode
from .paths import SegmentPath
from .resolving import humanize, normalize_url

if TYPE_CHECKING:
    from .index.content_index import ContentIndex


def explicit_order(value: Any) -> Optional[float]:
    """Numeric ``order`` metadata, or None when absent or not a number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _item_title(item: ContentItem) -> str:
    title = item.metadata.get("title")
    if isinstance(title, str) and title.strip():
        return title
    return humanize(item.slug) if item.slug else "Home"


def _directory_of(item: ContentItem) -> SegmentPath:
    if item.directory == ROOT_DIRECTORY:
        return SegmentPath()
    return SegmentPath.parse(item.directory)


def _sort_key(entry: Tuple[bool, SidebarNode]) -> Tuple[int, float, str]:
    explicit, node = entry
    if explicit:
        return (0, node.order, node.path)
    return (1, 0.0, node.path)


def _build_level(
    index: "ContentIndex",
    directory: SegmentPath,
    items: List[ContentItem],
    absorb_index: bool,
) -> List[SidebarNode]:
    entries: List[Tuple[bool, SidebarNode]] = []
    groups: Dict[str, List[ContentItem]] = {}
    directory_url = normalize_url(directory.name)

    for item in items:
        item_dir = _directory_of(item)
        if item_dir == directory:
            if absorb_index and item.url == directory_url:
                continue
            order = explicit_order(item.metadata.get("order"))
            entries.append((
                order is not None,
                SidebarNode(
                    title=_item_title(item),
                    url=item.url,
                    order=order if order is not None else item.position,
                    path=item.path,
                ),
            ))
        else:
            segment = item_dir.relative_to(directory).segments[0]
            groups.setdefault(segment, []).append(item)

    for segment, group_items in groups.items():
        child = directory.child(segment)
        child_url = normalize_url(child.name)
        index_item = next(
            (i for i in group_items if i.directory == child.name and i.url == child_url),
            None,
        )

        meta_dir = index.get_directory(child.name)
        title = meta_dir.title if meta_dir is not None else humanize(segment)

        order = explicit_order(index_item.metadata.get("order")) if index_item else None
        if order is None and meta_dir is not None and meta_dir.order is not None:
            order = meta_dir.order
        explicit = order is not None
        if order is None:
            order = min(i.position for i in group_items)

        entries.append((
            explicit,
            SidebarNode(
                title=title,
                url=index_item.url if index_item else None,
                order=order,
                path=child.name,
                children=_build_level(index, child, group_items, absorb_index=True),
            ),
        ))

    entries.sort(key=_sort_key)
    return [node for _, node in entries]


def build_sidebar_tree(index: "ContentIndex", directory_name: str) -> List[SidebarNode]:
    """
    Build ordered sidebar navigation for a directory.

    Items directly in the directory become leaf nodes. Each sub-directory
    becomes a grouping node whose ``url`` is set only when the sub-directory
    has an index page (which is then folded into the group).

    Args:
        index: Built content index
        directory_name: Directory to build navigation for, e.g. ``"docs"``

    Returns:
        Sorted top-level nodes; empty when the directory has no content
    """
    items = index.get_content_by_directory(directory_name)
    if not items:
        return []

    items = sorted(items, key=lambda i: i.position)
    if directory_name == ROOT_DIRECTORY:
        directory = SegmentPath()
    else:
        directory = SegmentPath.parse(directory_name)
    return _build_level(index, directory, items, absorb_index=False)

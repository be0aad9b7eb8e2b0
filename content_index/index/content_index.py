# content_index/index/content_index.py
"""
Immutable content index snapshot.

Built once by ContentIndexBuilder and queried many times. All queries are
read-only and return fresh lists, so a snapshot can be shared between
concurrent callers without locking.
"""

from datetime import date, datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..config import SiteConfig
from ..metadata import get_page_metadata
from ..models import ROOT_DIRECTORY, BuildWarning, ContentItem, Directory, SidebarNode
from ..paths import SegmentPath
from ..resolving import normalize_url
from ..sidebar import build_sidebar_tree


def parse_date(value: Any) -> Optional[datetime]:
    """Parse a metadata date into a naive UTC datetime, or None if unusable."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def sort_by_date(items: Iterable[ContentItem]) -> List[ContentItem]:
    """Newest first; undated items follow in scan order."""
    dated: List[Tuple[datetime, ContentItem]] = []
    undated: List[ContentItem] = []
    for item in sorted(items, key=lambda i: i.position):
        when = parse_date(item.metadata.get("date"))
        if when is None:
            undated.append(item)
        else:
            dated.append((when, item))

    dated.sort(key=lambda pair: pair[0], reverse=True)
    return [item for _, item in dated] + undated


class ContentIndex:
    """An owned, immutable snapshot of indexed content."""

    def __init__(
        self,
        items: Iterable[ContentItem],
        directories: Iterable[Directory] = (),
        warnings: Iterable[BuildWarning] = (),
        site_config: Optional[SiteConfig] = None,
    ):
        self._items: Tuple[ContentItem, ...] = tuple(items)
        self._warnings: Tuple[BuildWarning, ...] = tuple(warnings)
        self.site_config = site_config or SiteConfig()

        self._by_url: Dict[str, ContentItem] = {}
        self._by_directory: Dict[str, List[ContentItem]] = {}
        self._by_main_directory: Dict[str, List[ContentItem]] = {}

        # Single pass over items in scan order
        for item in self._items:
            self._by_url[item.url] = item
            self._by_directory.setdefault(item.directory, []).append(item)
            self._by_main_directory.setdefault(item.main_directory, []).append(item)

        self._directories: Dict[str, Directory] = {d.name: d for d in directories}
        self._top_level: List[str] = []
        self._children: Dict[str, List[str]] = {}
        for name in self._directories:
            path = SegmentPath.parse(name)
            if path.depth == 1:
                self._top_level.append(name)
            else:
                self._children.setdefault(path.parent.name, []).append(name)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return (
            f"ContentIndex(items={len(self._items)}, "
            f"directories={len(self._directories)}, warnings={len(self._warnings)})"
        )

    @property
    def warnings(self) -> List[BuildWarning]:
        return list(self._warnings)

    def get_all_content(self) -> List[ContentItem]:
        """Every indexed item, in scan order."""
        return list(self._items)

    def get_content_by_url(self, url: str) -> Optional[ContentItem]:
        """Exact URL lookup; None when no content lives at ``url``."""
        if not url:
            return None
        return self._by_url.get(normalize_url(url))

    def get_content_by_main_directory(self, name: str) -> List[ContentItem]:
        """Items whose first path segment is ``name``, in scan order."""
        return list(self._by_main_directory.get(name, []))

    def get_content_directories(self) -> List[Directory]:
        """Top-level directories in first-seen order."""
        return [self._directories[name] for name in self._top_level]

    def get_directory(self, name: str) -> Optional[Directory]:
        return self._directories.get(SegmentPath.parse(name).name)

    def get_content_by_directory(self, name: str) -> List[ContentItem]:
        """
        Items in ``name`` and every directory beneath it.

        ``"root"`` selects only files at the top of the content root.

        Returns:
            Items sorted newest first by ``metadata.date``; undated items
            follow in scan order
        """
        if name == ROOT_DIRECTORY:
            return sort_by_date(self._by_directory.get(ROOT_DIRECTORY, []))

        target = SegmentPath.parse(name)
        if target.is_root():
            return []

        collected: List[ContentItem] = []
        for directory, items in self._by_directory.items():
            if directory == ROOT_DIRECTORY:
                continue
            if target.is_prefix_of(SegmentPath.parse(directory)):
                collected.extend(items)

        return sort_by_date(collected)

    def get_sub_directories(self, name: str) -> List[Directory]:
        """Direct children of ``name`` (one level down only)."""
        target = SegmentPath.parse(name)
        if target.is_root() or name == ROOT_DIRECTORY:
            return self.get_content_directories()
        return [self._directories[child] for child in self._children.get(target.name, [])]

    def get_page_metadata(self, item: ContentItem) -> Dict[str, Any]:
        """Normalised metadata copy for ``item``; see ``metadata.get_page_metadata``."""
        return get_page_metadata(item, self.site_config)

    def get_sidebar_tree(self, name: str) -> List[SidebarNode]:
        """Nested navigation for ``name``; see ``sidebar.build_sidebar_tree``."""
        return build_sidebar_tree(self, name)

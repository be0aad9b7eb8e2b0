# content_index/metadata.py
"""Page metadata defaults."""

import copy
from typing import Any, Dict, Optional

from .config import SiteConfig
from .models import ContentItem
from .resolving import humanize


def _first(*values: Optional[str]) -> Optional[str]:
    for value in values:
        if isinstance(value, str) and value.strip():
            return value
    return None


def get_page_metadata(item: ContentItem, site_config: Optional[SiteConfig] = None) -> Dict[str, Any]:
    """
    Return a normalised copy of an item's metadata.

    - ``title`` falls back to the humanized slug
    - ``date`` is kept only when declared; it is never fabricated
    - ``author`` falls back to the site profile, then the site author
    - ``author_avatar`` is the declared avatar, else the profile avatar;
      it is left unset when neither exists
    - ``layout`` reflects the layout resolved at build time

    The stored item is never mutated.

    Args:
        item: Indexed content item
        site_config: Site settings supplying author fallbacks

    Returns:
        New metadata dictionary
    """
    site = site_config or SiteConfig()
    metadata = copy.deepcopy(item.metadata)

    title = metadata.get("title")
    if title is None or (isinstance(title, str) and not title.strip()):
        metadata["title"] = humanize(item.slug) if item.slug else "Home"

    if metadata.get("date") in (None, ""):
        metadata.pop("date", None)

    author = _first(metadata.get("author"), site.profile.name, site.site.author)
    if author is not None:
        metadata["author"] = author

    avatar = _first(
        metadata.pop("author_avatar", None),
        metadata.pop("authorAvatar", None),
        site.profile.avatar_url,
    )
    if avatar is not None:
        metadata["author_avatar"] = avatar

    metadata["layout"] = item.layout
    return metadata

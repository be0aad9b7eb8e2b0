# tests/test_metadata.py
"""Tests for page metadata defaults."""

from content_index.config import SiteConfig
from content_index.metadata import get_page_metadata
from content_index.models import ContentItem


def _item(**overrides):
    data = {
        "path": "blog/my-first-post.md",
        "directory": "blog",
        "main_directory": "blog",
        "slug": "my-first-post",
        "url": "/blog/my-first-post",
        "metadata": {},
        "layout": "blog",
    }
    data.update(overrides)
    return ContentItem(**data)


def test_title_falls_back_to_humanized_slug():
    metadata = get_page_metadata(_item())

    assert metadata["title"] == "My first post"
    assert "date" not in metadata
    assert metadata["layout"] == "blog"
    assert "author_avatar" not in metadata


def test_declared_values_are_kept():
    item = _item(metadata={"title": "Hello", "date": "2024-01-01", "author": "Ada"})

    metadata = get_page_metadata(item, SiteConfig(profile={"name": "Site Owner"}))

    assert metadata["title"] == "Hello"
    assert metadata["date"] == "2024-01-01"
    assert metadata["author"] == "Ada"


def test_author_fallbacks_from_site_config():
    site = SiteConfig.model_validate({
        "site": {"author": "Site Author"},
        "blog": {"defaultAuthorAvatar": "/blog-avatar.png"},
    })

    metadata = get_page_metadata(_item(), site)

    assert metadata["author"] == "Site Author"
    # Without a profile avatar no avatar is filled in
    assert "author_avatar" not in metadata


def test_profile_beats_site_author():
    site = SiteConfig.model_validate({
        "site": {"author": "Site Author"},
        "profile": {"name": "Profile Name", "avatarUrl": "/me.png"},
    })

    metadata = get_page_metadata(_item(), site)

    assert metadata["author"] == "Profile Name"
    assert metadata["author_avatar"] == "/me.png"


def test_stored_item_is_not_mutated():
    item = _item(metadata={"tags": ["a"]})

    metadata = get_page_metadata(item)
    metadata["tags"].append("b")

    assert item.metadata == {"tags": ["a"]}
    assert "title" not in item.metadata


def test_root_index_title():
    item = _item(path="index.md", directory="root", main_directory="root", slug="", url="/")

    assert get_page_metadata(item)["title"] == "Home"


def test_declared_avatar_is_kept_and_normalised():
    item = _item(metadata={"authorAvatar": "/guest.png"})
    site = SiteConfig.model_validate({"profile": {"avatarUrl": "/me.png"}})

    metadata = get_page_metadata(item, site)

    assert metadata["author_avatar"] == "/guest.png"
    assert "authorAvatar" not in metadata

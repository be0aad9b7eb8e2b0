# tests/test_urls.py
"""Tests for slug and URL resolution."""

from content_index.resolving import humanize, normalize_url, resolve_url, slug_for


class TestResolveUrl:
    def test_nested_file(self):
        assert resolve_url(["docs", "guide"], "setup.md") == "/docs/guide/setup"

    def test_index_file_maps_to_directory(self):
        assert resolve_url(["docs"], "index.md") == "/docs"
        assert resolve_url(["docs", "guide"], "index.mdx") == "/docs/guide"

    def test_root_files(self):
        assert resolve_url([], "about.md") == "/about"
        assert resolve_url([], "index.md") == "/"

    def test_empty_segments_are_collapsed(self):
        assert resolve_url(["docs", "", "guide"], "setup.md") == "/docs/guide/setup"

    def test_custom_index_names(self):
        assert resolve_url(["docs"], "README.md", index_names=["README"]) == "/docs"
        assert resolve_url(["docs"], "index.md", index_names=["README"]) == "/docs/index"

    def test_is_deterministic(self):
        assert resolve_url(["a", "b"], "c.md") == resolve_url(["a", "b"], "c.md")


def test_slug_for():
    assert slug_for(["blog"], "post-a.md") == "post-a"
    assert slug_for(["docs", "guide"], "index.md") == "guide"
    assert slug_for([], "index.md") == "index"


def test_normalize_url():
    assert normalize_url("docs//guide/") == "/docs/guide"
    assert normalize_url("/") == "/"
    assert normalize_url("") == "/"


def test_humanize():
    assert humanize("getting-started") == "Getting started"
    assert humanize("api_reference") == "Api reference"
    assert humanize("blog") == "Blog"

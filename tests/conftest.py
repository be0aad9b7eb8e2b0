# tests/conftest.py
"""Shared pytest fixtures and test helpers."""

from pathlib import Path

import pytest

from content_index.config import Config, SiteConfig
from content_index.index import ContentIndexBuilder


@pytest.fixture
def content_root(tmp_path) -> Path:
    """Empty content root under the test's temp directory."""
    root = tmp_path / "content"
    root.mkdir()
    return root


@pytest.fixture
def write_content(content_root):
    """Fixture providing a factory that writes files below the content root.

    Usage:
        def test_example(write_content):
            write_content("blog/post.md", title="Post", body="Hello")
    """
    def _write(relative: str, body: str = "Body text.", raw: str = None, **metadata) -> Path:
        path = content_root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if raw is not None:
            text = raw
        elif metadata:
            lines = ["---"]
            for key, value in metadata.items():
                lines.append(f"{key}: {value}")
            lines.append("---")
            text = "\n".join(lines) + "\n" + body
        else:
            text = body
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def make_builder(content_root):
    """Fixture providing a factory for builders pointed at the content root."""
    def _make(site_config: SiteConfig = None, **content_overrides) -> ContentIndexBuilder:
        config = Config()
        config.content.root = str(content_root)
        for key, value in content_overrides.items():
            setattr(config.content, key, value)
        return ContentIndexBuilder(config, site_config=site_config)
    return _make

# tests/test_build_index_cli.py
"""Regression tests for the build_index entrypoint."""

import importlib
import json

import pytest


def test_build_index_is_importable():
    """Importing build_index should not fail (e.g., missing symbols)."""
    importlib.import_module("build_index")


def test_cli_prints_summary(tmp_path, write_content, content_root, capsys, monkeypatch):
    build_index = importlib.import_module("build_index")
    monkeypatch.chdir(tmp_path)
    write_content("docs/index.md", title="Docs")
    write_content("docs/guide/setup.md", title="Setup")
    write_content("blog/broken.md", raw="---\ntitle: oops\n")

    build_index.main(["--root", str(content_root), "--sidebar", "docs"])

    summary = json.loads(capsys.readouterr().out)
    assert [item["url"] for item in summary["items"]] == ["/docs/guide/setup", "/docs"]
    assert [d["name"] for d in summary["directories"]] == ["docs"]
    assert [w["path"] for w in summary["warnings"]] == ["blog/broken.md"]
    assert len(summary["sidebar"]) == 2


def test_cli_exits_on_scan_error(tmp_path, capsys, monkeypatch):
    build_index = importlib.import_module("build_index")
    monkeypatch.chdir(tmp_path)
    not_a_dir = tmp_path / "file.md"
    not_a_dir.write_text("x")

    with pytest.raises(SystemExit) as exc_info:
        build_index.main(["--root", str(not_a_dir)])

    assert exc_info.value.code == 1
    assert "Failed to build content index" in capsys.readouterr().err

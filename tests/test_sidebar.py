# tests/test_sidebar.py
"""Tests for sidebar tree construction."""

import pytest

from content_index.sidebar import explicit_order


def _shape(nodes):
    return [(n.title, n.url, _shape(n.children)) for n in nodes]


@pytest.mark.asyncio
async def test_docs_index_and_guide_group(write_content, make_builder):
    write_content("docs/index.md", title="Introduction")
    write_content("docs/guide/setup.md", title="Setup")

    index = (await make_builder().build()).index
    tree = index.get_sidebar_tree("docs")

    assert len(tree) == 2
    by_title = {node.title: node for node in tree}
    assert by_title["Introduction"].url == "/docs"
    assert by_title["Introduction"].children == []

    guide = by_title["Guide"]
    assert guide.url is None
    assert [(c.title, c.url) for c in guide.children] == [("Setup", "/docs/guide/setup")]


@pytest.mark.asyncio
async def test_sub_directory_index_is_folded_into_group(write_content, make_builder):
    write_content("docs/guide/index.md", title="Guide overview")
    write_content("docs/guide/setup.md", title="Setup")

    index = (await make_builder().build()).index
    tree = index.get_sidebar_tree("docs")

    assert _shape(tree) == [
        ("Guide", "/docs/guide", [("Setup", "/docs/guide/setup", [])]),
    ]


@pytest.mark.asyncio
async def test_explicit_order_first_then_path(write_content, make_builder):
    write_content("docs/zeta.md", title="Zeta", order=1)
    write_content("docs/alpha.md", title="Alpha")
    write_content("docs/beta.md", title="Beta", order=2)
    write_content("docs/gamma.md", title="Gamma")

    index = (await make_builder().build()).index

    assert [n.title for n in index.get_sidebar_tree("docs")] == ["Zeta", "Beta", "Alpha", "Gamma"]


@pytest.mark.asyncio
async def test_group_order_from_index_or_directory_meta(write_content, make_builder):
    write_content("docs/a-first.md", title="First")
    write_content("docs/reference/index.md", title="Reference", order=1)
    write_content("docs/reference/api.md")
    write_content("docs/tutorials/_directory.yaml", raw="title: Tutorials\norder: 0\n")
    write_content("docs/tutorials/one.md")

    index = (await make_builder().build()).index
    tree = index.get_sidebar_tree("docs")

    assert [n.title for n in tree] == ["Tutorials", "Reference", "First"]
    assert tree[0].order == 0
    assert tree[1].url == "/docs/reference"


@pytest.mark.asyncio
async def test_untitled_leaf_uses_humanized_slug(write_content, make_builder):
    write_content("docs/getting-started.md")

    index = (await make_builder().build()).index

    assert [n.title for n in index.get_sidebar_tree("docs")] == ["Getting started"]


@pytest.mark.asyncio
async def test_deep_nesting_terminates(write_content, make_builder):
    parts = [f"level{n}" for n in range(12)]
    write_content("/".join(["docs"] + parts + ["leaf.md"]), title="Leaf")

    index = (await make_builder().build()).index
    tree = index.get_sidebar_tree("docs")

    depth = 0
    seen = set()
    node = tree[0]
    while node.children:
        assert id(node) not in seen
        seen.add(id(node))
        node = node.children[0]
        depth += 1
    assert depth == 12
    assert node.title == "Leaf"
    assert node.url == "/docs/" + "/".join(parts) + "/leaf"


@pytest.mark.asyncio
async def test_unknown_directory_is_empty(write_content, make_builder):
    write_content("blog/post.md")

    index = (await make_builder().build()).index

    assert index.get_sidebar_tree("docs") == []


@pytest.mark.asyncio
async def test_nested_directory_sidebar(write_content, make_builder):
    write_content("docs/guide/setup.md", title="Setup")
    write_content("docs/guide/advanced/tuning.md", title="Tuning")

    index = (await make_builder().build()).index

    assert _shape(index.get_sidebar_tree("docs/guide")) == [
        ("Advanced", None, [("Tuning", "/docs/guide/advanced/tuning", [])]),
        ("Setup", "/docs/guide/setup", []),
    ]


def test_explicit_order_parsing():
    assert explicit_order(3) == 3.0
    assert explicit_order("2.5") == 2.5
    assert explicit_order(True) is None
    assert explicit_order("first") is None
    assert explicit_order(None) is None

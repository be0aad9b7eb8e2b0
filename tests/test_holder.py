# tests/test_holder.py
"""Tests for snapshot ownership and rebuilds."""

import os

import anyio
import pytest

from content_index.errors import ScanError
from content_index.index import ContentIndexHolder


@pytest.mark.asyncio
async def test_current_builds_once(write_content, make_builder):
    write_content("blog/post.md")
    holder = ContentIndexHolder(make_builder())

    assert holder.snapshot is None
    first = await holder.current()
    second = await holder.current()

    assert first is second
    assert holder.snapshot is first


@pytest.mark.asyncio
async def test_rebuild_swaps_snapshot(write_content, make_builder):
    write_content("blog/one.md")
    holder = ContentIndexHolder(make_builder())
    old = await holder.current()

    write_content("blog/two.md")
    result = await holder.rebuild()

    assert result.index is not old
    assert len(old.get_all_content()) == 1
    assert len(result.index.get_all_content()) == 2
    assert holder.snapshot is result.index


@pytest.mark.asyncio
async def test_invalidate_triggers_rebuild(write_content, make_builder):
    write_content("blog/one.md")
    holder = ContentIndexHolder(make_builder())
    old = await holder.current()

    write_content("blog/two.md")
    holder.invalidate()

    assert holder.is_stale
    assert holder.snapshot is old
    fresh = await holder.current()
    assert fresh is not old
    assert len(fresh.get_all_content()) == 2
    assert not holder.is_stale


@pytest.mark.asyncio
async def test_failed_rebuild_keeps_previous_snapshot(tmp_path, content_root, write_content, make_builder):
    write_content("blog/one.md")
    builder = make_builder()
    holder = ContentIndexHolder(builder)
    old = await holder.current()

    # Replace the root with a plain file so the next scan fails
    moved = tmp_path / "moved"
    os.rename(content_root, moved)
    content_root.write_text("not a directory")

    with pytest.raises(ScanError):
        await holder.rebuild()

    assert holder.snapshot is old
    assert old.get_content_by_url("/blog/one") is not None


@pytest.mark.asyncio
async def test_concurrent_current_calls_share_one_build(write_content, make_builder):
    write_content("blog/post.md")
    builder = make_builder()
    calls = 0
    original_build = builder.build

    async def counting_build():
        nonlocal calls
        calls += 1
        return await original_build()

    builder.build = counting_build
    holder = ContentIndexHolder(builder)
    seen = []

    async def reader():
        seen.append(await holder.current())

    async with anyio.create_task_group() as tg:
        for _ in range(5):
            tg.start_soon(reader)

    assert calls == 1
    assert all(index is seen[0] for index in seen)

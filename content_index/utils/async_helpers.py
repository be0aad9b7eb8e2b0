# content_index/utils/async_helpers.py
# Blocking bridge behind content_index.index.build_index_sync.
import asyncio
from typing import TypeVar, Coroutine, Any

T = TypeVar("T")


def _run_sync(coro: Coroutine[Any, Any, T]) -> T:
    """
    Run an async coroutine synchronously.

    Used by ``build_index_sync`` so one-shot build scripts can index content
    without managing an event loop. Refuses to nest inside a running loop and
    closes the unawaited coroutine before raising.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    coro.close()
    raise RuntimeError(
        "Cannot build the content index synchronously inside an active event loop. "
        "Use `await build_index(...)` instead."
    )

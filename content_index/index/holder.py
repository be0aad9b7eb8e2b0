# content_index/index/holder.py
"""
Current-snapshot holder.

Callers see either no index or a fully built one. Rebuilds are serialised
and swap the snapshot reference in a single assignment; a failed rebuild
leaves the previous snapshot in place.
"""

import logging
from typing import Optional

import anyio

from .builder import BuildResult, ContentIndexBuilder
from .content_index import ContentIndex

logger = logging.getLogger(__name__)


class ContentIndexHolder:
    """Own the current ContentIndex snapshot for a process or build."""

    def __init__(self, builder: ContentIndexBuilder):
        self.builder = builder
        self._result: Optional[BuildResult] = None
        self._stale = False
        self._lock = anyio.Lock()

    @property
    def snapshot(self) -> Optional[ContentIndex]:
        """Last successfully built index, or None if never built."""
        result = self._result
        return result.index if result is not None else None

    @property
    def last_result(self) -> Optional[BuildResult]:
        return self._result

    @property
    def is_stale(self) -> bool:
        return self._stale

    def invalidate(self) -> None:
        """Mark the snapshot stale; the next ``current()`` rebuilds it."""
        self._stale = True

    async def current(self) -> ContentIndex:
        """
        Return the current snapshot, building it if missing or stale.

        Raises:
            ScanError: If a needed build fails; ``snapshot`` still returns the
                previous index in that case
        """
        result = self._result
        if result is not None and not self._stale:
            return result.index

        async with self._lock:
            # Another caller may have finished the build while we waited
            if self._result is None or self._stale:
                await self._build_locked()
            return self._result.index

    async def rebuild(self) -> BuildResult:
        """Force a full rebuild and swap it in."""
        async with self._lock:
            return await self._build_locked()

    async def _build_locked(self) -> BuildResult:
        previous = self._result
        try:
            result = await self.builder.build()
        except Exception:
            if previous is not None:
                logger.error("Rebuild failed; keeping previous snapshot %r", previous.index)
            raise

        self._result = result
        self._stale = False
        return result

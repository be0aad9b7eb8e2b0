# content_index/paths.py
"""
Path-segment model for content directories.

Directory names are compared segment by segment so that ``docs`` is a
prefix of ``docs/guides`` but not of ``docs-internal``.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple, Union


@dataclass(frozen=True, order=True)
class SegmentPath:
    """An ordered sequence of path components relative to the content root."""

    segments: Tuple[str, ...] = ()

    @classmethod
    def parse(cls, value: Union[str, "SegmentPath", Iterable[str]]) -> "SegmentPath":
        """Build from ``"a/b"``, ``"/a/b/"``, ``"a\\b"`` or an iterable of parts."""
        if isinstance(value, SegmentPath):
            return value
        if isinstance(value, str):
            parts = value.replace("\\", "/").split("/")
        else:
            parts = list(value)
        return cls(tuple(p for p in parts if p and p != "."))

    @property
    def name(self) -> str:
        return "/".join(self.segments)

    @property
    def depth(self) -> int:
        return len(self.segments)

    @property
    def last(self) -> str:
        return self.segments[-1] if self.segments else ""

    @property
    def parent(self) -> "SegmentPath":
        return SegmentPath(self.segments[:-1])

    def is_root(self) -> bool:
        return not self.segments

    def child(self, segment: str) -> "SegmentPath":
        return SegmentPath(self.segments + (segment,))

    def is_prefix_of(self, other: "SegmentPath") -> bool:
        """True when ``other`` equals this path or lies beneath it."""
        n = len(self.segments)
        return other.segments[:n] == self.segments

    def is_parent_of(self, other: "SegmentPath") -> bool:
        """True when ``other`` is exactly one level beneath this path."""
        return len(other.segments) == len(self.segments) + 1 and self.is_prefix_of(other)

    def relative_to(self, ancestor: "SegmentPath") -> "SegmentPath":
        if not ancestor.is_prefix_of(self):
            raise ValueError(f"{self.name!r} is not under {ancestor.name!r}")
        return SegmentPath(self.segments[len(ancestor.segments):])

    def __str__(self) -> str:
        return self.name

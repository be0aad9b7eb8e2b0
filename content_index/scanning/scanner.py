# content_index/scanning/scanner.py
"""
Content root scanning.

Walks the content root for markdown/MDX files and reports each one with its
directory chain. Traversal is lazy and deterministic (entries sorted by name).
"""

import fnmatch
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, AsyncIterator, Dict, Iterable, Optional, Set

import anyio
import yaml

from ..errors import MetadataParseError, ScanError
from ..paths import SegmentPath

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".md", ".mdx")


@dataclass(frozen=True)
class FileDescriptor:
    """A content file discovered during the scan."""

    path: Path                        # Absolute path on disk
    relative: str                     # "/"-separated, relative to the content root
    directory: SegmentPath
    filename: str

    @property
    def depth(self) -> int:
        return self.directory.depth

    @property
    def top_level(self) -> Optional[str]:
        return self.directory.segments[0] if self.directory.segments else None


class DirectoryScanner:
    """Discover content files beneath a content root."""

    def __init__(
        self,
        root: str = "./content",
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        ignore: Iterable[str] = (),
        directory_meta_file: str = "_directory.yaml",
    ):
        self.root = Path(root)
        self.extensions = tuple(e.lower() for e in extensions)
        self.ignore = tuple(ignore)
        self.directory_meta_file = directory_meta_file

    def _is_ignored(self, name: str) -> bool:
        if name.startswith("."):
            return True
        return any(fnmatch.fnmatch(name, pattern) for pattern in self.ignore)

    async def scan(self) -> AsyncIterator[FileDescriptor]:
        """
        Yield every content file under the root.

        An absent root yields nothing.

        Raises:
            ScanError: If the root is not a directory, a directory cannot be
                read, or an entry resolves outside the root
        """
        root = anyio.Path(self.root)

        if not await root.exists():
            logger.info("Content root %s does not exist; nothing to scan", self.root)
            return

        if not await root.is_dir():
            raise ScanError("Content root is not a directory", str(self.root))

        resolved_root = Path(await root.resolve())
        visited: Set[Path] = {resolved_root}

        async for descriptor in self._walk(root, resolved_root, SegmentPath(), visited):
            yield descriptor

    async def _walk(
        self,
        directory: anyio.Path,
        resolved_root: Path,
        segments: SegmentPath,
        visited: Set[Path],
    ) -> AsyncIterator[FileDescriptor]:
        try:
            entries = [entry async for entry in directory.iterdir()]
        except OSError as e:
            raise ScanError(f"Cannot read directory ({e.strerror or e})", str(directory)) from e

        for entry in sorted(entries, key=lambda p: p.name):
            if self._is_ignored(entry.name):
                continue

            try:
                resolved = Path(await entry.resolve())
            except OSError as e:
                raise ScanError(f"Cannot resolve entry ({e.strerror or e})", str(entry)) from e

            if not resolved.is_relative_to(resolved_root):
                raise ScanError("Path escapes content root", str(entry))

            if await entry.is_dir():
                # Symlinked directories may point back at an ancestor
                if resolved in visited:
                    logger.debug("Skipping already visited directory %s", entry)
                    continue
                visited.add(resolved)
                async for descriptor in self._walk(
                    entry, resolved_root, segments.child(entry.name), visited
                ):
                    yield descriptor

            elif await entry.is_file() and entry.suffix.lower() in self.extensions:
                relative = "/".join(segments.segments + (entry.name,))
                yield FileDescriptor(
                    path=Path(entry),
                    relative=relative,
                    directory=segments,
                    filename=entry.name,
                )

    async def read_directory_meta(self, directory: SegmentPath) -> Dict[str, Any]:
        """
        Read the optional per-directory meta file (title, order).

        Returns:
            Mapping from the meta file, or an empty dict when absent

        Raises:
            MetadataParseError: If the meta file cannot be read or is not a
                valid YAML mapping
        """
        meta_path = anyio.Path(self.root.joinpath(*directory.segments, self.directory_meta_file))
        if not await meta_path.exists():
            return {}

        relative = "/".join(directory.segments + (self.directory_meta_file,))
        try:
            text = await meta_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise MetadataParseError(relative, f"Cannot read directory meta file: {e}") from e

        try:
            data = yaml.safe_load(text)
        except (yaml.YAMLError, ValueError, TypeError) as e:
            raise MetadataParseError(relative, f"Invalid directory meta file: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise MetadataParseError(relative, "Directory meta file must be a mapping")
        return data

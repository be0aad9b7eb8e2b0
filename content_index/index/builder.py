# content_index/index/builder.py
"""
Content index construction.

Pipeline:
1. Scan the content root (ScanError aborts the build)
2. Read and parse every file concurrently; each task owns one result slot
3. Merge results in scan order into the url/directory lookup maps
4. Derive the directory tree and freeze everything into a ContentIndex
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

import anyio

from ..config import Config, SiteConfig
from ..errors import DuplicateUrlError, MetadataParseError
from ..extraction import ParsedContent, parse_frontmatter
from ..layouts import LayoutRegistry
from ..models import ROOT_DIRECTORY, BuildWarning, ContentItem, Directory, WarningKind
from ..paths import SegmentPath
from ..resolving import humanize, resolve_url, slug_for
from ..scanning import DirectoryScanner, FileDescriptor
from ..sidebar import explicit_order
from ..utils.async_helpers import _run_sync
from .content_index import ContentIndex

logger = logging.getLogger(__name__)

BodyRenderer = Callable[[str], Any]


@dataclass(frozen=True)
class BuildResult:
    """A finished build: the snapshot plus non-fatal warnings."""

    index: ContentIndex
    warnings: List[BuildWarning] = field(default_factory=list)


@dataclass(frozen=True)
class _ParsedFile:
    descriptor: FileDescriptor
    parsed: ParsedContent
    body: Any


class ContentIndexBuilder:
    """Build immutable ContentIndex snapshots from a content root."""

    def __init__(
        self,
        config: Optional[Config] = None,
        site_config: Optional[SiteConfig] = None,
        layouts: Optional[LayoutRegistry] = None,
        body_renderer: Optional[BodyRenderer] = None,
    ):
        self.config = config or Config()
        self.site_config = site_config or SiteConfig()
        self.layouts = layouts or LayoutRegistry(self.config.layouts)
        self.body_renderer = body_renderer

        content = self.config.content
        self.scanner = DirectoryScanner(
            root=content.root,
            extensions=content.extensions,
            ignore=content.ignore,
            directory_meta_file=content.directory_meta_file,
        )

    async def build(self) -> BuildResult:
        """
        Scan, parse and index the content root.

        Returns:
            BuildResult with the new snapshot and collected warnings

        Raises:
            ScanError: If the content root cannot be traversed
            DuplicateUrlError: If two files share a URL and the collision
                policy is ``error``
        """
        started = time.perf_counter()

        descriptors = [d async for d in self.scanner.scan()]
        results: List[Union[_ParsedFile, BuildWarning, None]] = [None] * len(descriptors)

        limiter = anyio.CapacityLimiter(max(1, self.config.content.max_workers))
        async with anyio.create_task_group() as tg:
            for position, descriptor in enumerate(descriptors):
                tg.start_soon(self._parse_one, position, descriptor, results, limiter)

        warnings: List[BuildWarning] = []
        items = self._merge(results, warnings)
        directories = await self._collect_directories(items, warnings)

        index = ContentIndex(
            items=items,
            directories=directories,
            warnings=warnings,
            site_config=self.site_config,
        )

        logger.info(
            "Indexed %d items in %d directories from %s (%d warnings, %.1f ms)",
            len(items),
            len(directories),
            self.config.content.root,
            len(warnings),
            (time.perf_counter() - started) * 1000,
        )
        return BuildResult(index=index, warnings=warnings)

    async def _parse_one(
        self,
        position: int,
        descriptor: FileDescriptor,
        results: List[Union[_ParsedFile, BuildWarning, None]],
        limiter: anyio.CapacityLimiter,
    ) -> None:
        """Read and parse one file into ``results[position]``."""
        async with limiter:
            try:
                text = await anyio.Path(descriptor.path).read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Skipping unreadable file %s: %s", descriptor.relative, e)
                results[position] = BuildWarning(
                    path=descriptor.relative,
                    message=f"Cannot read file: {e}",
                    kind=WarningKind.READ,
                )
                return

        try:
            parsed = parse_frontmatter(text, descriptor.relative)
        except MetadataParseError as e:
            logger.warning("Skipping %s", e)
            results[position] = BuildWarning(
                path=descriptor.relative,
                message=e.message,
                kind=WarningKind.METADATA,
                line=e.line,
            )
            return

        body: Any = parsed.body
        if self.body_renderer is not None:
            try:
                body = self.body_renderer(parsed.body)
            except Exception as e:
                logger.warning("Body renderer failed for %s", descriptor.relative, exc_info=True)
                results[position] = BuildWarning(
                    path=descriptor.relative,
                    message=f"Body rendering failed: {e}",
                    kind=WarningKind.READ,
                )
                return

        logger.debug("Parsed %s (%d metadata keys)", descriptor.relative, len(parsed.metadata))
        results[position] = _ParsedFile(descriptor=descriptor, parsed=parsed, body=body)

    def _to_item(self, position: int, parsed_file: _ParsedFile) -> ContentItem:
        descriptor = parsed_file.descriptor
        segments = descriptor.directory.segments
        index_names = self.config.content.index_names
        metadata = parsed_file.parsed.metadata

        return ContentItem(
            path=descriptor.relative,
            directory=descriptor.directory.name or ROOT_DIRECTORY,
            main_directory=segments[0] if segments else ROOT_DIRECTORY,
            slug=slug_for(segments, descriptor.filename, index_names),
            url=resolve_url(segments, descriptor.filename, index_names),
            metadata=metadata,
            body=parsed_file.body,
            layout=self.layouts.resolve(metadata, descriptor.directory),
            position=position,
        )

    def _merge(
        self,
        results: List[Union[_ParsedFile, BuildWarning, None]],
        warnings: List[BuildWarning],
    ) -> List[ContentItem]:
        """Ordered merge of per-file results; the only place shared state is written."""
        by_url: Dict[str, ContentItem] = {}

        for position, result in enumerate(results):
            if result is None:
                continue
            if isinstance(result, BuildWarning):
                warnings.append(result)
                continue

            item = self._to_item(position, result)
            existing = by_url.get(item.url)
            if existing is not None:
                if self.config.content.collision_policy == "error":
                    raise DuplicateUrlError(item.url, existing.path, item.path)

                logger.warning(
                    "URL %s from %s shadows %s", item.url, item.path, existing.path
                )
                warnings.append(BuildWarning(
                    path=item.path,
                    message=f"URL {item.url} shadows {existing.path}",
                    kind=WarningKind.COLLISION,
                ))
                # Later item wins and takes its own scan position
                del by_url[item.url]

            by_url[item.url] = item

        return list(by_url.values())

    async def _collect_directories(
        self,
        items: List[ContentItem],
        warnings: List[BuildWarning],
    ) -> List[Directory]:
        """Every directory holding content, ancestors first, in first-seen order."""
        directories: Dict[str, Directory] = {}

        for item in items:
            if item.directory == ROOT_DIRECTORY:
                continue
            path = SegmentPath.parse(item.directory)
            for depth in range(1, path.depth + 1):
                ancestor = SegmentPath(path.segments[:depth])
                if ancestor.name not in directories:
                    directories[ancestor.name] = await self._directory(ancestor, warnings)

        return list(directories.values())

    async def _directory(self, path: SegmentPath, warnings: List[BuildWarning]) -> Directory:
        try:
            meta = await self.scanner.read_directory_meta(path)
        except MetadataParseError as e:
            logger.warning("Ignoring directory meta file: %s", e)
            warnings.append(BuildWarning(path=e.path, message=e.message, line=e.line))
            meta = {}

        title = self.site_config.directories.get(path.name)
        if not title:
            declared = meta.get("title")
            title = declared if isinstance(declared, str) and declared.strip() else humanize(path.last)

        return Directory(name=path.name, title=title, order=explicit_order(meta.get("order")))


async def build_index(
    config: Optional[Config] = None,
    site_config: Optional[SiteConfig] = None,
    layouts: Optional[LayoutRegistry] = None,
    body_renderer: Optional[BodyRenderer] = None,
) -> BuildResult:
    """Build a fresh index snapshot."""
    builder = ContentIndexBuilder(config, site_config, layouts, body_renderer)
    return await builder.build()


def build_index_sync(
    config: Optional[Config] = None,
    site_config: Optional[SiteConfig] = None,
    layouts: Optional[LayoutRegistry] = None,
    body_renderer: Optional[BodyRenderer] = None,
) -> BuildResult:
    """Blocking variant of ``build_index`` for scripts without an event loop."""
    return _run_sync(build_index(config, site_config, layouts, body_renderer))

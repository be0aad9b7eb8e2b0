#!/usr/bin/env python3
"""Build the content index and print a JSON summary."""

import argparse
import json
import logging
import sys
import anyio

from content_index.config import load_config, load_site_config
from content_index.errors import ContentIndexError
from content_index.index import build_index


async def _run(args: argparse.Namespace) -> dict:
    config = await load_config(args.config)
    if args.root:
        config.content.root = args.root
    site_config = await load_site_config(config.site_config_path)

    result = await build_index(config, site_config)
    index = result.index

    summary = {
        "root": config.content.root,
        "items": [
            {"url": item.url, "path": item.path, "layout": item.layout}
            for item in index.get_all_content()
        ],
        "directories": [d.model_dump(mode="json") for d in index.get_content_directories()],
        "warnings": [w.model_dump(mode="json") for w in result.warnings],
    }
    if args.sidebar:
        summary["sidebar"] = [
            node.model_dump(mode="json") for node in index.get_sidebar_tree(args.sidebar)
        ]
    return summary


def main(argv=None):
    """Build the index once and report what was found."""
    parser = argparse.ArgumentParser(description="Build the site content index")
    parser.add_argument(
        "--root",
        type=str,
        default=None,
        help="Content root (default: from config)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Settings file (default: configs/settings.yaml)",
    )
    parser.add_argument(
        "--sidebar",
        type=str,
        default=None,
        help="Also print the sidebar tree for this directory",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        summary = anyio.run(_run, args)
    except (ContentIndexError, ValueError) as e:
        print(f"Failed to build content index: {e}", file=sys.stderr)
        raise SystemExit(1) from e

    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()

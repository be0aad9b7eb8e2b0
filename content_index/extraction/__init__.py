"""Frontmatter extraction."""

from .frontmatter import ParsedContent, parse_frontmatter

__all__ = ["ParsedContent", "parse_frontmatter"]

# content_index/extraction/frontmatter.py
"""
Frontmatter parsing.

Splits a content file into its leading YAML metadata block and body:
- The block must open with a ``---`` line at the very start of the file
- It closes at the next ``---`` (or ``...``) line
- Files without a fence have empty metadata and the whole text as body
- Malformed blocks raise MetadataParseError with the offending line
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional

import yaml

from ..errors import MetadataParseError

FENCE = "---"
CLOSING_FENCES = ("---", "...")


@dataclass(frozen=True)
class ParsedContent:
    """Parsed frontmatter metadata and body text."""

    metadata: Dict[str, Any] = field(default_factory=dict)
    body: str = ""


def _normalize_value(value: Any) -> Any:
    """Convert YAML timestamps to ISO strings so metadata stays plain data."""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, list):
        return [_normalize_value(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _normalize_value(v) for k, v in value.items()}
    return value


def _find_closing_fence(lines: List[str]) -> Optional[int]:
    for i in range(1, len(lines)):
        if lines[i].rstrip() in CLOSING_FENCES:
            return i
    return None


def parse_frontmatter(text: str, path: str = "<string>") -> ParsedContent:
    """
    Split raw file content into metadata and body.

    Args:
        text: Raw file content
        path: Path used in error messages

    Returns:
        ParsedContent with metadata dict and body string

    Raises:
        MetadataParseError: If the fenced block is unterminated, is not valid
            YAML, or does not describe a mapping
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    text = text.replace("\r\n", "\n")

    lines = text.split("\n")
    if not lines or lines[0].rstrip() != FENCE:
        return ParsedContent(metadata={}, body=text)

    end = _find_closing_fence(lines)
    if end is None:
        raise MetadataParseError(path, "Unterminated frontmatter block", line=1)

    block = "\n".join(lines[1:end])
    body = "\n".join(lines[end + 1:]).lstrip("\n")

    try:
        data = yaml.safe_load(block)
    except yaml.MarkedYAMLError as e:
        mark = e.problem_mark or e.context_mark
        # Block content starts on line 2 of the file
        line = mark.line + 2 if mark is not None else None
        raise MetadataParseError(path, f"Invalid frontmatter: {e.problem or e}", line=line) from e
    except yaml.YAMLError as e:
        raise MetadataParseError(path, f"Invalid frontmatter: {e}") from e
    except (ValueError, TypeError) as e:
        # PyYAML constructors raise these for values like "date: 2024-13-45"
        raise MetadataParseError(path, f"Invalid frontmatter value: {e}") from e

    if data is None:
        return ParsedContent(metadata={}, body=body)

    if not isinstance(data, dict):
        raise MetadataParseError(
            path,
            f"Frontmatter must be a mapping, got {type(data).__name__}",
            line=2,
        )

    return ParsedContent(metadata=_normalize_value(data), body=body)

"""Delimiter-based frontmatter splitting."""

from __future__ import annotations

import re
from typing import NamedTuple

DELIMITER = "---"

_FRONTMATTER_PATTERN = re.compile(
    r"""
    \A---[ \t]*\r?\n            # content must start with the opening delimiter
    (?P<metadata>.*?)           # metadata, possibly spanning lines
    ^---[ \t]*(?:\r?\n|\Z)      # closing delimiter on its own line
    """,
    re.MULTILINE | re.DOTALL | re.VERBOSE,
)


class Split(NamedTuple):
    """Metadata and body regions of a document."""

    metadata: str
    body: str


def split(content: str) -> Split:
    """Split *content* into a metadata and body pair.

    The content must begin with the opening delimiter ``---`` on its own
    line. The metadata block is terminated by the same delimiter on its own
    line, and everything after that line is the body.

    If there is no frontmatter block, the metadata is empty and the body is
    the entire content. This function never raises.
    """
    match = _FRONTMATTER_PATTERN.match(content)
    if match is None or not match.group("metadata"):
        return Split("", content)

    return Split(match.group("metadata"), content[match.end() :])

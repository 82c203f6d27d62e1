"""JSON frontmatter."""

from __future__ import annotations

import json
from typing import Any

from frontmatter_kit.attach import attach
from frontmatter_kit.errors import JsonError
from frontmatter_kit.item import Item, Key


class Metadata(Key[Any]):
    """Extension key for parsed JSON metadata."""


def load(text: str) -> Any:
    """Parse JSON metadata text.

    ``NaN``, ``Infinity`` and ``-Infinity`` are rejected like any other
    invalid token.

    Raises:
        JsonError: If *text* is not a single valid JSON value.
    """

    def reject_constant(name: str) -> Any:
        raise json.JSONDecodeError(f"Invalid constant {name!r}", text, text.find(name))

    try:
        return json.loads(text, parse_constant=reject_constant)
    except json.JSONDecodeError as exc:
        raise JsonError(exc) from exc


def parse(item: Item) -> None:
    """Parse JSON frontmatter into the ``Metadata`` extension.

    Raises:
        JsonError: If the frontmatter is not valid JSON. *item* is unchanged.
    """
    attach(item, Metadata, load)

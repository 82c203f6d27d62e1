"""TOML frontmatter.

``parse`` puts the parsed TOML table in the ``Metadata`` extension and
removes the frontmatter from the item body::

    from frontmatter_kit import Item, toml_metadata

    item = Item(body="---\\nname = 'testing'\\n---\\nbody")
    toml_metadata.parse(item)
    item.extensions[toml_metadata.Metadata]["name"]  # → "testing"
"""

from __future__ import annotations

import tomllib
from typing import Any

from frontmatter_kit.attach import attach
from frontmatter_kit.errors import TomlError
from frontmatter_kit.item import Item, Key


class Metadata(Key[dict[str, Any]]):
    """Extension key for parsed TOML metadata."""


def load(text: str) -> dict[str, Any]:
    """Parse TOML metadata text.

    Raises:
        TomlError: If *text* is not valid TOML.
    """
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise TomlError([exc]) from exc


def parse(item: Item) -> None:
    """Parse TOML frontmatter into the ``Metadata`` extension.

    Raises:
        TomlError: If the frontmatter is not valid TOML. *item* is unchanged.
    """
    attach(item, Metadata, load)

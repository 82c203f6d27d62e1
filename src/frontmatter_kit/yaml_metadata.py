"""YAML frontmatter.

Only the first document of the metadata block is kept. Any further
documents in the block are discarded.
"""

from __future__ import annotations

from typing import Any

import yaml

from frontmatter_kit.attach import attach
from frontmatter_kit.errors import YamlError
from frontmatter_kit.item import Item, Key


class Metadata(Key[Any]):
    """Extension key for parsed YAML metadata."""


def load(text: str) -> Any:
    """Parse the first YAML document in *text*.

    The whole stream is loaded, so an error in any document fails. Returns
    ``None`` when *text* holds no document at all.

    Raises:
        YamlError: If *text* is not valid YAML.
    """
    try:
        documents = list(yaml.safe_load_all(text))
    except yaml.YAMLError as exc:
        raise YamlError(exc) from exc

    return documents[0] if documents else None


def parse(item: Item) -> None:
    """Parse YAML frontmatter into the ``Metadata`` extension.

    Raises:
        YamlError: If the frontmatter is not valid YAML. *item* is unchanged.
    """
    attach(item, Metadata, load)

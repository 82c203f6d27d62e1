"""Split-parse-attach sequence shared by every metadata format."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from frontmatter_kit.item import Item, Key
from frontmatter_kit.split import split

logger = logging.getLogger(__name__)

V = TypeVar("V")


def attach(item: Item, key: type[Key[V]], load: Callable[[str], V]) -> None:
    """Parse *item*'s frontmatter with *load* and store it under *key*.

    Items without frontmatter are left untouched. On success the parsed
    value is stored under *key* and ``item.body`` becomes the content that
    followed the frontmatter block.

    *load* is called before anything is mutated, so an item is left exactly
    as it was when *load* raises.
    """
    metadata, body = split(item.body)

    if not metadata:
        logger.debug("No frontmatter in %s", item.path or "item")
        return

    value = load(metadata)

    item.extensions.insert(key, value)
    item.body = body
    logger.debug(
        "Attached %s.%s to %s", key.__module__, key.__qualname__, item.path or "item"
    )

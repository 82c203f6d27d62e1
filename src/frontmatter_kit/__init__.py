"""Frontmatter metadata extraction for TOML, YAML and JSON.

Two paths to use:

**Items** — parse frontmatter into a typed extension on an ``Item``::

    from frontmatter_kit import Item, parse_toml, toml_metadata

    item = Item.from_file("posts/hello.md")
    parse_toml(item)

    item.extensions[toml_metadata.Metadata]["title"]
    item.body  # → content after the frontmatter block

**LangChain** — use ``FrontmatterTransformer`` as a document transformer::

    from frontmatter_kit import FrontmatterTransformer

    docs = FrontmatterTransformer(format="yaml").transform_documents(docs)
    docs[0].metadata["frontmatter"]
"""

from frontmatter_kit import json_metadata, toml_metadata, yaml_metadata
from frontmatter_kit.errors import FrontmatterError, JsonError, TomlError, YamlError
from frontmatter_kit.item import Extensions, Item, Key
from frontmatter_kit.settings import FrontmatterSettings, get_settings
from frontmatter_kit.split import Split, split
from frontmatter_kit.transformer import FrontmatterTransformer

parse_toml = toml_metadata.parse
parse_yaml = yaml_metadata.parse
parse_json = json_metadata.parse

__all__ = [
    "Extensions",
    "FrontmatterError",
    "FrontmatterSettings",
    "FrontmatterTransformer",
    "Item",
    "JsonError",
    "Key",
    "Split",
    "TomlError",
    "YamlError",
    "get_settings",
    "json_metadata",
    "parse_json",
    "parse_toml",
    "parse_yaml",
    "split",
    "toml_metadata",
    "yaml_metadata",
]

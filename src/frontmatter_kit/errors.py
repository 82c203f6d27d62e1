"""Frontmatter parsing errors."""

from __future__ import annotations

import json
import tomllib
from collections.abc import Sequence

import yaml


class FrontmatterError(ValueError):
    """Frontmatter metadata is not valid in its serialization format."""

    format_name = "frontmatter"


class TomlError(FrontmatterError):
    """TOML parsing error.

    Holds every syntax error reported for the metadata block and renders
    them one per line.
    """

    format_name = "toml"

    def __init__(self, errors: Sequence[tomllib.TOMLDecodeError]) -> None:
        if not errors:
            raise ValueError("TomlError requires at least one underlying error")
        self.errors = list(errors)
        super().__init__(str(self))

    def __str__(self) -> str:
        return "\n".join(str(error) for error in self.errors)


class YamlError(FrontmatterError):
    """YAML scanning or parsing error."""

    format_name = "yaml"

    def __init__(self, error: yaml.YAMLError) -> None:
        self.error = error
        super().__init__(str(error))


class JsonError(FrontmatterError):
    """JSON syntax error."""

    format_name = "json"

    def __init__(self, error: json.JSONDecodeError) -> None:
        self.error = error
        super().__init__(str(error))

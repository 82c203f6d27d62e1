"""Tests for JSON frontmatter parsing."""

import json
from pathlib import Path

import pytest

from frontmatter_kit.errors import FrontmatterError, JsonError
from frontmatter_kit.item import Item
from frontmatter_kit.json_metadata import Metadata, load, parse

FIXTURES = Path(__file__).parent / "fixtures"


class TestParse:
    def test_parses_fixture(self):
        item = Item.from_file(FIXTURES / "json/input.md")

        parse(item)

        assert item.body == (FIXTURES / "split-output.md").read_text()
        meta = item.extensions.get(Metadata)
        assert meta is not None
        assert meta["name"] == "testing"
        assert meta["tags"] == ["rust", "static-site"]
        assert meta["draft"] is False

    def test_parses_inline_content(self):
        item = Item(body='---\n{"name": "testing"}\n---\nmultiline\nbody')

        parse(item)

        assert item.body == "multiline\nbody"
        assert item.extensions[Metadata] == {"name": "testing"}

    def test_null_metadata_is_stored(self):
        item = Item(body="---\nnull\n---\nbody")

        parse(item)

        assert Metadata in item.extensions
        assert item.extensions[Metadata] is None

    def test_whitespace_only_metadata_is_a_syntax_error(self):
        content = "---\n   \n---\nbody"
        item = Item(body=content)

        with pytest.raises(JsonError):
            parse(item)

        assert item.body == content

    def test_raises_on_invalid_json(self):
        content = "---\n{\"name\": }\n---\nbody"
        item = Item(body=content)

        with pytest.raises(JsonError):
            parse(item)

        assert item.body == content
        assert Metadata not in item.extensions

    def test_raises_on_non_finite_constants(self):
        content = '---\n{"a": NaN, "b": Infinity}\n---\nbody'
        item = Item(body=content)

        with pytest.raises(JsonError, match="NaN"):
            parse(item)

        assert item.body == content
        assert Metadata not in item.extensions


class TestLoad:
    def test_returns_value(self):
        assert load('{"a": [1, 2], "b": {"c": true}}') == {"a": [1, 2], "b": {"c": True}}

    def test_rejects_trailing_data(self):
        with pytest.raises(JsonError, match="Extra data"):
            load('{"a": 1}\n{"b": 2}\n')

    @pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
    def test_rejects_non_finite_constants(self, token):
        with pytest.raises(JsonError, match="Invalid constant"):
            load(f'{{"value": {token}}}')

    def test_error_wraps_decode_error(self):
        with pytest.raises(JsonError) as excinfo:
            load("{'single': 'quotes'}")

        error = excinfo.value
        assert isinstance(error, FrontmatterError)
        assert error.format_name == "json"
        assert isinstance(error.error, json.JSONDecodeError)
        assert error.__cause__ is error.error

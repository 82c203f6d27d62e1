"""Tests for items and the extension store."""

from pathlib import Path

import pytest

from frontmatter_kit.item import Extensions, Item, Key

FIXTURES = Path(__file__).parent / "fixtures"


class WordCount(Key[int]):
    pass


class Tags(Key[list[str]]):
    pass


class TestExtensions:
    def test_starts_empty(self):
        extensions = Extensions()

        assert len(extensions) == 0
        assert WordCount not in extensions

    def test_insert_and_get(self):
        extensions = Extensions()

        extensions.insert(WordCount, 42)

        assert extensions.get(WordCount) == 42
        assert extensions[WordCount] == 42
        assert WordCount in extensions

    def test_get_missing_returns_none(self):
        assert Extensions().get(WordCount) is None

    def test_getitem_missing_raises_key_error(self):
        with pytest.raises(KeyError, match="WordCount"):
            Extensions()[WordCount]

    def test_insert_overwrites(self):
        extensions = Extensions()

        extensions.insert(WordCount, 1)
        extensions.insert(WordCount, 2)

        assert extensions[WordCount] == 2
        assert len(extensions) == 1

    def test_keys_are_independent(self):
        extensions = Extensions()

        extensions.insert(WordCount, 3)
        extensions.insert(Tags, ["a"])

        assert extensions[WordCount] == 3
        assert extensions[Tags] == ["a"]
        assert set(extensions) == {WordCount, Tags}

    def test_remove(self):
        extensions = Extensions()
        extensions.insert(WordCount, 7)

        assert extensions.remove(WordCount) == 7
        assert WordCount not in extensions
        assert extensions.remove(WordCount) is None

    def test_rejects_non_key_types(self):
        extensions = Extensions()

        with pytest.raises(TypeError, match="Key subclasses"):
            extensions.insert("word_count", 1)  # type: ignore[arg-type]

    def test_contains_rejects_non_key_types(self):
        with pytest.raises(TypeError, match="Key subclasses"):
            "word_count" in Extensions()  # noqa: B015

    def test_rejects_key_instances(self):
        with pytest.raises(TypeError):
            Extensions().get(WordCount())  # type: ignore[arg-type]


class TestItem:
    def test_defaults(self):
        item = Item()

        assert item.body == ""
        assert len(item.extensions) == 0
        assert item.path is None

    def test_items_do_not_share_extensions(self):
        first, second = Item(), Item()

        first.extensions.insert(WordCount, 1)

        assert WordCount not in second.extensions

    def test_from_file_reads_body(self):
        item = Item.from_file(FIXTURES / "no-frontmatter.md")

        assert "Just plain markdown content." in item.body
        assert item.path == FIXTURES / "no-frontmatter.md"

    def test_from_file_accepts_string_path(self):
        item = Item.from_file(str(FIXTURES / "no-frontmatter.md"))

        assert isinstance(item.path, Path)

    def test_from_file_raises_on_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Item.from_file(tmp_path / "nonexistent.md")

"""Host document with a type-keyed extension store.

Pipeline stages attach auxiliary data to an ``Item`` without a shared
schema by keying it on a ``Key`` subclass::

    class WordCount(Key[int]):
        pass

    item.extensions.insert(WordCount, 42)
    item.extensions.get(WordCount)  # → 42

The key class itself is the tag; it is never instantiated.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Generic, TypeVar

V = TypeVar("V")


class Key(Generic[V]):
    """Marker base class for extension keys.

    The type parameter names the value type stored under the key.
    """


def _check_key(key: Any) -> None:
    if not (isinstance(key, type) and issubclass(key, Key)):
        raise TypeError(f"Extension keys must be Key subclasses, got {key!r}")


class Extensions:
    """Heterogeneous map from ``Key`` subclasses to values.

    At most one value is stored per key. ``insert`` overwrites silently,
    and retrieval requires the caller to know the key it stored under.
    """

    def __init__(self) -> None:
        self._values: dict[type[Key[Any]], Any] = {}

    def insert(self, key: type[Key[V]], value: V) -> None:
        """Store *value* under *key*, replacing any previous value."""
        _check_key(key)
        self._values[key] = value

    def get(self, key: type[Key[V]]) -> V | None:
        """Return the value stored under *key*, or ``None`` if absent."""
        _check_key(key)
        return self._values.get(key)

    def remove(self, key: type[Key[V]]) -> V | None:
        """Remove and return the value stored under *key*, if any."""
        _check_key(key)
        return self._values.pop(key, None)

    def __getitem__(self, key: type[Key[V]]) -> V:
        _check_key(key)
        try:
            return self._values[key]
        except KeyError:
            raise KeyError(f"No extension stored under {key.__qualname__}") from None

    def __contains__(self, key: object) -> bool:
        _check_key(key)
        return key in self._values

    def __iter__(self) -> Iterator[type[Key[Any]]]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        names = ", ".join(key.__qualname__ for key in self._values)
        return f"Extensions({names})"


@dataclass
class Item:
    """A document flowing through a pipeline.

    Fields:
        body: Mutable text content. Metadata parsers replace it with the
            body that follows the frontmatter block.
        extensions: Typed auxiliary data attached by pipeline stages.
        path: Where the item was read from, if anywhere.
    """

    body: str = ""
    extensions: Extensions = field(default_factory=Extensions)
    path: Path | None = None

    @classmethod
    def from_file(cls, path: Path | str) -> Item:
        """Read an item from a UTF-8 text file.

        Raises:
            FileNotFoundError: If *path* does not exist.
        """
        path = Path(path)
        return cls(body=path.read_text(encoding="utf-8"), path=path)

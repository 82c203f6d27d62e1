"""FrontmatterTransformer — LangChain document transformer for frontmatter.

Usage::

    from frontmatter_kit import FrontmatterTransformer

    transformer = FrontmatterTransformer(format="toml")
    docs = transformer.transform_documents(loader.load())

    docs[0].metadata["frontmatter"]  # → parsed TOML table
    docs[0].page_content             # → body without the frontmatter

The format is always chosen by the caller; document content is never
inspected to guess it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from types import ModuleType
from typing import Any

from langchain_core.documents import BaseDocumentTransformer, Document

from frontmatter_kit import json_metadata, toml_metadata, yaml_metadata
from frontmatter_kit.errors import FrontmatterError
from frontmatter_kit.item import Item
from frontmatter_kit.settings import FrontmatterSettings, get_settings

logger = logging.getLogger(__name__)

FORMATS: dict[str, ModuleType] = {
    "toml": toml_metadata,
    "yaml": yaml_metadata,
    "json": json_metadata,
}


class FrontmatterTransformer(BaseDocumentTransformer):
    """Split frontmatter off LangChain documents and keep it as metadata.

    Each document's ``page_content`` is run through the selected format's
    parser. Parsed documents come back with the body as ``page_content``
    and the parsed value under ``settings.metadata_key``. Documents without
    frontmatter come back unchanged.

    Args:
        format: ``"toml"``, ``"yaml"`` or ``"json"``. Defaults to
            ``settings.default_format``.
        settings: Overrides the environment-driven settings.
    """

    def __init__(
        self,
        format: str | None = None,
        *,
        settings: FrontmatterSettings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        fmt = format or self.settings.default_format
        if fmt not in FORMATS:
            raise ValueError(
                f"Unknown frontmatter format '{fmt}'. "
                f"Supported formats: {', '.join(FORMATS)}"
            )
        self.fmt = fmt

    def transform_documents(
        self, documents: Sequence[Document], **kwargs: Any
    ) -> Sequence[Document]:
        """Return new documents with frontmatter moved into metadata.

        Raises:
            FrontmatterError: If a document's frontmatter is malformed and
                ``settings.on_error`` is ``"raise"``.
        """
        return [self._transform(document) for document in documents]

    def _transform(self, document: Document) -> Document:
        module = FORMATS[self.fmt]
        item = Item(body=document.page_content)
        try:
            module.parse(item)
        except FrontmatterError as exc:
            if self.settings.on_error == "raise":
                raise
            logger.warning(
                "Skipping malformed %s frontmatter in document %s: %s",
                exc.format_name,
                document.id or document.metadata.get("source", "<unknown>"),
                exc,
            )
            return self._copy(document, document.page_content, {})

        key = module.Metadata
        if key not in item.extensions:
            return self._copy(document, document.page_content, {})

        return self._copy(
            document, item.body, {self.settings.metadata_key: item.extensions[key]}
        )

    @staticmethod
    def _copy(document: Document, content: str, extra: dict[str, Any]) -> Document:
        return Document(
            page_content=content,
            metadata={**document.metadata, **extra},
            id=document.id,
        )

"""LangChain — strip frontmatter from documents before splitting or indexing.

Set ``FRONTMATTER_ON_ERROR=skip`` to log and pass through documents whose
frontmatter is malformed instead of failing the whole batch.
"""

from pathlib import Path

from langchain_core.documents import Document

from frontmatter_kit import FrontmatterTransformer

POSTS = Path(__file__).parent / "posts"

notes = POSTS / "notes.md"

docs = [
    Document(page_content=notes.read_text(), metadata={"source": str(notes)}),
    Document(page_content="No frontmatter here.", metadata={"source": "inline"}),
]

transformer = FrontmatterTransformer(format="yaml")

if __name__ == "__main__":
    import logging

    logging.basicConfig(level=logging.DEBUG)

    for doc in transformer.transform_documents(docs):
        print(doc.metadata.get("frontmatter"), repr(doc.page_content))

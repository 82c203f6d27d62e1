"""Parse items directly — pick the parser that matches each file's frontmatter.

Use this approach when you own the pipeline and want typed access to the
parsed metadata through the item's extension store.
"""

from pathlib import Path

from frontmatter_kit import FrontmatterError, Item, parse_toml, parse_yaml
from frontmatter_kit import toml_metadata, yaml_metadata

POSTS = Path(__file__).parent / "posts"

hello = Item.from_file(POSTS / "hello.md")
parse_toml(hello)

notes = Item.from_file(POSTS / "notes.md")
parse_yaml(notes)

if __name__ == "__main__":
    print(hello.extensions[toml_metadata.Metadata]["title"])
    print(hello.body)

    print(notes.extensions[yaml_metadata.Metadata]["title"])
    print(notes.body)

    broken = Item(body="---\ntitle = \n---\nbody")
    try:
        parse_toml(broken)
    except FrontmatterError as exc:
        print(f"{exc.format_name} error:\n{exc}")

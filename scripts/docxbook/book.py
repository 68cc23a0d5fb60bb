"""
Render context and book tree, as mdBook hands them to a backend.

mdBook writes one JSON document to the backend's stdin:

    {
        "version": "0.4.37",
        "root": "/path/to/book",
        "book": {"sections": [{"Chapter": {...}}, "Separator", ...]},
        "config": {"book": {...}, "output": {"docx": {...}}},
        "destination": "/path/to/book/book/docx"
    }

The renderer only ever reads this; nothing here writes back.
"""

import json
import os
from dataclasses import dataclass, field

from docxbook.errors import ConfigDeserializationError


@dataclass(frozen=True)
class Chapter:
    """One chapter leaf. `path` is None for draft chapters."""

    name: str
    content: str
    path: str = None
    source_path: str = None
    number: tuple = ()
    is_draft: bool = False
    sub_items: tuple = field(default=(), repr=False)

    @property
    def selectable(self):
        """Only file-backed, non-draft chapters can be selected."""
        return bool(self.path) and not self.is_draft


def _parse_chapter(data):
    if not isinstance(data, dict):
        raise ConfigDeserializationError(f"Chapter must be an object, got {type(data).__name__}")

    content = data.get("content") or ""
    if not isinstance(content, str):
        raise ConfigDeserializationError(f"Chapter {data.get('name')!r} has non-text content")

    path = data.get("path")
    if path is not None and not isinstance(path, str):
        raise ConfigDeserializationError(f"Chapter {data.get('name')!r} has an invalid path")

    return Chapter(
        name=data.get("name", ""),
        content=content,
        path=path,
        source_path=data.get("source_path"),
        number=tuple(data.get("number") or ()),
        # mdBook marks drafts with a null path; accept an explicit flag too
        is_draft=bool(data.get("is_draft", data.get("draft", path is None))),
        sub_items=_parse_items(data.get("sub_items") or []),
    )


def _parse_items(items):
    """Keep chapters, drop separators and part titles."""
    if not isinstance(items, list):
        raise ConfigDeserializationError("Book items must be a list")
    chapters = []
    for item in items:
        if isinstance(item, dict) and "Chapter" in item:
            chapters.append(_parse_chapter(item["Chapter"]))
        elif item == "Separator" or (isinstance(item, dict) and "PartTitle" in item):
            continue
        else:
            raise ConfigDeserializationError(f"Unrecognised book item: {item!r}")
    return tuple(chapters)


class BookTree:
    """
    Read-only view over the book's chapters.

    iter_chapters() walks depth-first, parent before its sub-items, in the
    order mdBook presents them. It can be called any number of times.
    """

    def __init__(self, chapters=()):
        self._chapters = tuple(chapters)

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise ConfigDeserializationError("'book' must be an object")
        return cls(_parse_items(data.get("sections", data.get("items", []))))

    def iter_chapters(self):
        stack = list(reversed(self._chapters))
        while stack:
            chapter = stack.pop()
            yield chapter
            stack.extend(reversed(chapter.sub_items))

    def __iter__(self):
        return self.iter_chapters()

    def __len__(self):
        return sum(1 for _ in self.iter_chapters())


class RenderContext:
    """The book root, its configuration, its chapters and where output goes."""

    def __init__(self, root, book, config=None, destination=None, version=""):
        self.root = root
        self.book = book
        self.config = config or {}
        self.destination = destination or os.path.join(root, "book", "docx")
        self.version = version

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise ConfigDeserializationError("Render context must be a JSON object")
        root = data.get("root")
        if not root or not isinstance(root, str):
            raise ConfigDeserializationError("Render context is missing 'root'")
        if "book" not in data:
            raise ConfigDeserializationError("Render context is missing 'book'")

        config = data.get("config") or {}
        if not isinstance(config, dict):
            raise ConfigDeserializationError("'config' must be an object")

        return cls(
            root=root,
            book=BookTree.from_dict(data["book"]),
            config=config,
            destination=data.get("destination"),
            version=data.get("version", ""),
        )

    @classmethod
    def from_json(cls, text):
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigDeserializationError(f"Render context is not valid JSON: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def load(cls, stream):
        """Read the whole context from a file object (normally stdin)."""
        return cls.from_json(stream.read())

    def output_section(self):
        """The [output.docx] table from book.toml, or an empty dict."""
        output = self.config.get("output") or {}
        if not isinstance(output, dict):
            raise ConfigDeserializationError("'output' must be a table")
        section = output.get("docx") or {}
        if not isinstance(section, dict):
            raise ConfigDeserializationError("'output.docx' must be a table")
        return section

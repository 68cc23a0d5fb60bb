"""
Document list configuration: load, validate, and provide defaults.

The list normally comes from book.toml:

    [[output.docx.documents]]
    filename = "guide.docx"
    include = ["intro.md", "guide/*.md"]

and can also be read from a standalone YAML file with the same
`documents:` schema (see load_document_file).
"""

import logging
import os
from dataclasses import dataclass

import yaml

from docxbook.errors import ConfigDeserializationError

logger = logging.getLogger(__name__)


# Defaults applied to every document entry
DOCUMENT_DEFAULTS = {
    "filename": "output.docx",
    "template": "reference.docx",
    "include": ["*"],
    "offset_headings_by": None,
    "prepend": [],
    "append": [],
}


@dataclass(frozen=True)
class DocumentSpec:
    """One output document, with every field populated."""

    filename: str = DOCUMENT_DEFAULTS["filename"]
    template: str = DOCUMENT_DEFAULTS["template"]
    include: tuple = ("*",)
    offset_headings_by: int = None
    prepend: tuple = ()
    append: tuple = ()

    @classmethod
    def from_dict(cls, data, index=0):
        """
        Resolve defaults for a partially-populated document entry.

        An absent or empty `include` becomes ["*"]. An empty `template`
        string turns the reference document off.
        """
        where = f"documents[{index}]"
        if not isinstance(data, dict):
            raise ConfigDeserializationError(
                f"{where} must be a table, got {type(data).__name__}"
            )

        unknown = sorted(set(data) - set(DOCUMENT_DEFAULTS))
        if unknown:
            raise ConfigDeserializationError(
                f"{where} has unknown fields: {', '.join(unknown)}"
            )

        fields = dict(DOCUMENT_DEFAULTS)
        fields.update({key: value for key, value in data.items() if value is not None})

        filename = _string(fields["filename"], f"{where}.filename")
        if not filename:
            raise ConfigDeserializationError(f"{where}.filename must not be empty")

        template = _string(fields["template"], f"{where}.template") or None

        offset = fields["offset_headings_by"]
        if offset is not None and (isinstance(offset, bool) or not isinstance(offset, int)):
            raise ConfigDeserializationError(
                f"{where}.offset_headings_by must be an integer, got {offset!r}"
            )

        include = _string_list(fields["include"], f"{where}.include")
        if not include:
            include = ("*",)

        return cls(
            filename=filename,
            template=template,
            include=include,
            offset_headings_by=offset,
            prepend=_string_list(fields["prepend"], f"{where}.prepend"),
            append=_string_list(fields["append"], f"{where}.append"),
        )

    @property
    def combines(self):
        """True when prepend/append files must be merged around the body."""
        return bool(self.prepend or self.append)


def _string(value, where):
    if not isinstance(value, str):
        raise ConfigDeserializationError(f"{where} must be a string, got {value!r}")
    return value


def _string_list(value, where):
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise ConfigDeserializationError(f"{where} must be a list of strings, got {value!r}")
    return tuple(_string(item, f"{where}[{i}]") for i, item in enumerate(value))


class DocumentList:
    """
    Ordered, validated list of documents to render.

    Usage:
        documents = DocumentList.from_section(context.output_section())
        for doc in documents:
            doc.filename
    """

    def __init__(self, documents=()):
        self.documents = tuple(documents)

    @classmethod
    def from_section(cls, section):
        """Build from the [output.docx] table. Missing keys mean no documents."""
        if section is None:
            return cls()
        if not isinstance(section, dict):
            raise ConfigDeserializationError(
                f"output.docx must be a table, got {type(section).__name__}"
            )

        entries = section.get("documents")
        if entries is None:
            return cls()
        if not isinstance(entries, list):
            raise ConfigDeserializationError(
                f"output.docx.documents must be an array of tables, got {type(entries).__name__}"
            )

        documents = [DocumentSpec.from_dict(entry, i) for i, entry in enumerate(entries)]
        cls._check_unique_filenames(documents)
        return cls(documents)

    @staticmethod
    def _check_unique_filenames(documents):
        seen = {}
        for i, doc in enumerate(documents):
            key = os.path.normpath(doc.filename)
            if key in seen:
                raise ConfigDeserializationError(
                    f"documents[{seen[key]}] and documents[{i}] both write {doc.filename}"
                )
            seen[key] = i

    def __iter__(self):
        return iter(self.documents)

    def __len__(self):
        return len(self.documents)

    def __bool__(self):
        return bool(self.documents)


def load_document_file(path):
    """Load a document list from a standalone YAML file."""
    if not os.path.exists(path):
        raise ConfigDeserializationError(f"No document list found at {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigDeserializationError(f"{path} is not valid YAML: {e}") from e

    if data is None:
        logger.info("%s is empty, no documents configured", path)
        return DocumentList()
    if not isinstance(data, dict):
        raise ConfigDeserializationError(
            f"{path} must be a YAML mapping, got {type(data).__name__}"
        )
    return DocumentList.from_section(data)

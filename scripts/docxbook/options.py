"""
Pandoc options for one document.

build_options() is pure: the same (root, document) always renders to
the same argument list, so the primary conversion and the combine step
can each build their own copy.
"""

import os
from dataclasses import dataclass

INPUT_FORMAT = "markdown_github"

INPUT_EXTENSIONS = (
    "pipe_tables",
    "raw_html",
    "autolink_bare_uris",
    "auto_identifiers",
    "hard_line_breaks",
    "blank_before_header",
    "table_captions",
    "pandoc_title_block",
    "yaml_metadata_block",
    "implicit_header_references",
)

OUTPUT_FORMAT = "docx"


def input_format():
    """The pandoc --from string including extensions."""
    return "+".join((INPUT_FORMAT,) + INPUT_EXTENSIONS)


@dataclass(frozen=True)
class ConversionOptions:
    data_dir: str
    resource_path: tuple
    atx_headers: bool = True
    reference_links: bool = True
    shift_heading_level_by: int = None
    reference_doc: str = None
    include_before_body: tuple = ()
    include_after_body: tuple = ()

    def to_args(self):
        """Render as pandoc command-line arguments."""
        args = [
            f"--data-dir={self.data_dir}",
            f"--resource-path={os.pathsep.join(self.resource_path)}",
        ]
        if self.atx_headers:
            args.append("--markdown-headings=atx")
        if self.reference_links:
            args.append("--reference-links")
        if self.shift_heading_level_by is not None:
            args.append(f"--shift-heading-level-by={self.shift_heading_level_by}")
        if self.reference_doc:
            args.append(f"--reference-doc={self.reference_doc}")
        for path in self.include_before_body:
            args.append(f"--include-before-body={path}")
        for path in self.include_after_body:
            args.append(f"--include-after-body={path}")
        return args


def build_options(root, doc):
    """Map a DocumentSpec onto pandoc options, resolving paths against root."""
    return ConversionOptions(
        data_dir=root,
        resource_path=(os.path.join(root, "src"),),
        shift_heading_level_by=doc.offset_headings_by,
        reference_doc=os.path.join(root, doc.template) if doc.template else None,
        include_before_body=tuple(os.path.join(root, p) for p in doc.prepend),
        include_after_body=tuple(os.path.join(root, p) for p in doc.append),
    )

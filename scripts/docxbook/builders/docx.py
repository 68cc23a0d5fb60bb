"""
DOCX builder.

Pipeline:
    1. Compile include patterns and select matching chapters
    2. Concatenate chapter content in book order
    3. pandoc: markdown (stdin) → docx, styled by the reference document
    4. pandoc again, if prepend/append are set: merge those files around
       the output of step 3, overwriting it
"""

from docxbook.builders.base import BaseBuilder
from docxbook.patterns import compile_patterns
from docxbook.resolve import assemble_content, select_chapters


class DocxBuilder(BaseBuilder):
    format_name = "DOCX"

    def build(self):
        self.header()
        book = self.context.book

        # ── Select and assemble ────────────────────────────
        patterns = compile_patterns(self.document.include)
        chapters = select_chapters(patterns, book)
        content = assemble_content(book, chapters, self.document.filename)
        self.log("  Input: %d chapter(s), %d characters", len(chapters), len(content))

        if self.document.template:
            self.log("  Reference: %s", self.resolve(self.document.template))

        # ── Convert ────────────────────────────────────────
        self.converter.convert(content, self.options(), self.output_file)

        # ── Combine ────────────────────────────────────────
        self.combine()

        self.log("  ✓ %s", self.output_file)
        return self.output_file

    def combine_inputs(self):
        """prepend..., primary output, append..., all as absolute paths."""
        return (
            [self.resolve(p) for p in self.document.prepend]
            + [self.output_file]
            + [self.resolve(p) for p in self.document.append]
        )

    def combine(self):
        """Merge prepend/append files around the primary output, if any."""
        if not self.document.combines:
            return None

        inputs = self.combine_inputs()
        self.log(
            "  Combining %d prepend and %d append file(s)",
            len(self.document.prepend),
            len(self.document.append),
        )
        return self.converter.combine(inputs, self.options(), self.output_file)

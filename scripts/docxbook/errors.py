"""
Error taxonomy for the docx renderer.

Every failure in the pipeline is a DocxRenderError subclass. Nothing is
recovered locally: errors bubble up to the document list orchestrator,
which stops at the first one, and the entry script logs it and exits.
"""


class DocxRenderError(Exception):
    """Base for all renderer failures. `stage` names the pipeline step."""

    stage = "render"


class ConfigDeserializationError(DocxRenderError):
    """Raised when the render context or output.docx section is invalid."""

    stage = "config"


class PatternCompileError(DocxRenderError):
    """Raised when an include pattern is not a valid glob."""

    stage = "patterns"

    def __init__(self, pattern, position, reason):
        self.pattern = pattern
        self.position = position
        self.reason = reason
        super().__init__(
            f"Invalid include pattern {pattern!r} at position {position}: {reason}"
        )


class NoMatchingChapters(DocxRenderError):
    """Raised when no chapter path matches any include pattern."""

    stage = "select"

    def __init__(self, patterns):
        self.patterns = list(patterns)
        super().__init__(
            "No markdown files match the include patterns "
            f"{', '.join(self.patterns)}. Verify your filenames and patterns are correct."
        )


class EmptyFilteredContent(DocxRenderError):
    """Raised when the selected chapters assemble to an empty document."""

    stage = "assemble"

    def __init__(self, filename):
        self.filename = filename
        super().__init__(
            f"The include patterns for {filename} do not match any content."
        )


# ── Converter failures ─────────────────────────────────────────────────

BAD_ENCODING = "bad-encoding"
IO = "io"
MISSING_INPUT = "missing-input"
NO_OUTPUT = "no-output"
NO_INPUT = "no-input"
NOT_FOUND = "not-found"
FAILED = "failed"

CAUSE_MESSAGES = {
    BAD_ENCODING: "Could not encode the document content or template path for pandoc",
    IO: "I/O error while running pandoc",
    MISSING_INPUT: "Pandoc input file does not exist",
    NO_OUTPUT: "No output file specified for pandoc",
    NO_INPUT: "No input specified for pandoc",
    NOT_FOUND: "Pandoc executable not found (install pandoc or set PANDOC)",
    FAILED: "Pandoc exited with an error",
}


class ConverterExecutionError(DocxRenderError):
    """
    Raised when pandoc cannot be run or exits non-zero.

    `cause` is one of the module-level cause constants; `detail` carries
    the converter's own diagnostic (stderr, OS error text, offending path).
    """

    stage = "convert"

    def __init__(self, cause, detail="", stage=None):
        if cause not in CAUSE_MESSAGES:
            raise ValueError(f"Unknown converter error cause: {cause}")
        self.cause = cause
        self.detail = detail.strip() if detail else ""
        if stage:
            self.stage = stage
        message = CAUSE_MESSAGES[cause]
        if self.detail:
            message = f"{message}: {self.detail}"
        super().__init__(message)

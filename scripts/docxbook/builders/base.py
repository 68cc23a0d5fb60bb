"""
Base builder class for document outputs.

Subclasses implement `build()` and set `format_name`.
Shared logic (converter handle, logging, output paths) lives here.
"""

import logging
import os
from abc import ABC, abstractmethod

from docxbook.options import build_options

logger = logging.getLogger(__name__)


class BaseBuilder(ABC):
    """
    Abstract base for document builders.

    Subclasses must define:
        format_name:  str    human-readable name ("DOCX")
        build():      method the actual build logic
    """

    format_name = None  # Override in subclass

    def __init__(self, context, document, converter):
        self.context = context
        self.document = document
        self.converter = converter

    # ── Paths ──────────────────────────────────────────────

    @property
    def root(self):
        return self.context.root

    @property
    def output_file(self):
        return os.path.join(self.context.destination, self.document.filename)

    def resolve(self, filename):
        """Resolve a configured path against the book root."""
        return os.path.join(self.root, filename)

    # ── Logging ────────────────────────────────────────────

    def log(self, msg, *args):
        logger.debug(msg, *args)

    def header(self):
        logger.info("Building %s: %s", self.format_name, self.document.filename)

    # ── Options ────────────────────────────────────────────

    def options(self):
        """Fresh converter options for this document."""
        return build_options(self.root, self.document)

    # ── Abstract interface ─────────────────────────────────

    @abstractmethod
    def build(self):
        """Execute the build. Returns the output path; raises on failure."""
        ...

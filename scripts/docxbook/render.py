"""
Render every configured document, one after another.

The first failure stops the run: later documents are never started and
the error is re-raised unchanged.
"""

import copy
import logging

from docxbook.builders import BUILDERS, DEFAULT_FORMAT
from docxbook.config import DocumentList
from docxbook.pandoc import PandocConverter

logger = logging.getLogger(__name__)


def render_documents(context, documents, converter, builder_cls=None):
    """Build each document against its own copy of the render context."""
    builder_cls = builder_cls or BUILDERS[DEFAULT_FORMAT]
    outputs = []
    for doc in documents:
        builder = builder_cls(
            context=copy.deepcopy(context),
            document=doc,
            converter=converter,
        )
        outputs.append(builder.build())

    logger.info("Done. %d document(s) built.", len(outputs))


def render(context, documents=None, converter=None):
    """
    Render the documents configured for this book.

    `documents` defaults to the [output.docx] section of the context's
    config; `converter` defaults to pandoc found on this machine.
    """
    if documents is None:
        documents = DocumentList.from_section(context.output_section())

    if not documents:
        logger.info("No documents configured under [output.docx]; nothing to do.")
        return

    render_documents(context, documents, converter or PandocConverter())

#!/usr/bin/env python3
"""
mdBook backend entry point: render configured documents to .docx.

mdBook runs this as the `docx` renderer and writes the render context
as JSON on stdin:

    [output.docx]
    [[output.docx.documents]]
    filename = "guide.docx"
    include = ["intro.md", "guide/*.md"]

Usage:
    mdbook-docx                                 Read the context from stdin
    mdbook-docx --context ctx.json              Read a saved context
    mdbook-docx --context ctx.json --config docs.yaml
                                                Use a YAML document list
    mdbook-docx -v                              Debug logging

Requires: pandoc, PyYAML
"""

import argparse
import logging
import os
import sys
import traceback

# Ensure docxbook is importable from the scripts/ directory
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from docxbook.book import RenderContext
from docxbook.config import load_document_file
from docxbook.errors import ConfigDeserializationError, DocxRenderError
from docxbook.logs import init_logger
from docxbook.render import render

logger = logging.getLogger("mdbook_docx")

ERROR_LOG = "mdbook_docx_error.log"


def build_parser():
    parser = argparse.ArgumentParser(
        description="Render an mdBook to .docx documents with pandoc",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--context",
        help="Read the render context from this JSON file instead of stdin",
    )
    parser.add_argument(
        "--config",
        help="Read the document list from this YAML file instead of [output.docx]",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def load_context(path=None):
    if path:
        try:
            with open(path, encoding="utf-8") as f:
                return RenderContext.load(f)
        except OSError as e:
            raise ConfigDeserializationError(f"Cannot read render context: {e}") from e
    return RenderContext.load(sys.stdin)


def main(argv=None):
    args = build_parser().parse_args(argv)
    init_logger(verbose=args.verbose)

    try:
        context = load_context(args.context)
        documents = load_document_file(args.config) if args.config else None
        render(context, documents=documents)
    except DocxRenderError as e:
        logger.error("%s failed: %s", e.stage, e)
        return 1
    return 0


def run():
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.error("Cancelled.")
        sys.exit(1)
    except Exception as e:
        with open(ERROR_LOG, "w") as f:
            traceback.print_exc(file=f)
        logger.error("Unexpected error: %s (full traceback written to %s)", e, ERROR_LOG)
        sys.exit(1)


if __name__ == "__main__":
    run()

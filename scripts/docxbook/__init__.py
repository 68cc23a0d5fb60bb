"""
docxbook: mdBook backend that renders chapters to .docx with pandoc.

Public API:
    from docxbook.book import RenderContext, BookTree, Chapter
    from docxbook.config import DocumentList, DocumentSpec, load_document_file
    from docxbook.patterns import compile_patterns
    from docxbook.resolve import select_chapters, assemble_content
    from docxbook.options import build_options
    from docxbook.pandoc import PandocConverter
    from docxbook.render import render
"""

__version__ = "0.1.0"

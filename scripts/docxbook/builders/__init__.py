from docxbook.builders.docx import DocxBuilder

BUILDERS = {
    "docx": DocxBuilder,
}

DEFAULT_FORMAT = "docx"

"""Shared fixtures: render contexts and a recording converter."""

import pytest

from docxbook.book import RenderContext
from docxbook.errors import ConverterExecutionError
from docxbook.pandoc import Converter


def chapter(name, content, path=None, sub_items=None, **extra):
    data = {
        "name": name,
        "content": content,
        "path": path,
        "number": None,
        "sub_items": sub_items or [],
    }
    data.update(extra)
    return {"Chapter": data}


def context_dict(root, sections, documents=None, destination=None):
    config = {"book": {"title": "Test Book"}}
    if documents is not None:
        config["output"] = {"docx": {"documents": documents}}
    return {
        "version": "0.4.37",
        "root": str(root),
        "book": {"sections": sections, "__non_exhaustive": None},
        "config": config,
        "destination": str(destination or root / "book" / "docx"),
    }


class FakeConverter(Converter):
    """Records every call; optionally fails on the Nth convert."""

    def __init__(self, fail_on=None, error=None):
        self.calls = []
        self.fail_on = fail_on
        self.error = error or ConverterExecutionError("failed", "boom")

    def convert(self, content, options, output):
        self.calls.append(("convert", content, options, output))
        converts = sum(1 for c in self.calls if c[0] == "convert")
        if self.fail_on is not None and converts == self.fail_on:
            raise self.error
        return output

    def combine(self, inputs, options, output):
        self.calls.append(("combine", list(inputs), options, output))
        return output

    def of_kind(self, kind):
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture
def sample_sections():
    return [
        chapter("One", "Hello", "ch1.md"),
        chapter("Two", "World", "ch2.md"),
    ]


@pytest.fixture
def nested_sections():
    return [
        chapter("Intro", "# Intro", "intro.md"),
        "Separator",
        {"PartTitle": "Part I"},
        chapter(
            "Guide",
            "# Guide",
            "guide/index.md",
            sub_items=[
                chapter("Install", "## Install", "guide/install.md"),
                chapter("Draft", "", None),
                chapter("Usage", "## Usage", "guide/usage.md"),
            ],
        ),
        chapter("Appendix", "# Appendix", "appendix.md"),
    ]


@pytest.fixture
def make_context(tmp_path):
    def _make(sections, documents=None):
        return RenderContext.from_dict(context_dict(tmp_path, sections, documents))
    return _make


@pytest.fixture
def converter():
    return FakeConverter()

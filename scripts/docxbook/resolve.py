"""
Chapter selection and content assembly.

Both walk the book tree in mdBook's own order; nothing is sorted.
"""

import logging

from docxbook.errors import EmptyFilteredContent, NoMatchingChapters

logger = logging.getLogger(__name__)

# mdBook strips trailing newlines from chapter content. Without a blank
# line before it, a chapter's leading "# Title" is not a heading under
# blank_before_header, so every chapter is padded back out.
CHAPTER_PADDING = "\n\n"


def select_chapters(patterns, book):
    """
    Return the paths of selectable chapters matching any pattern.

    Chapters without a path and draft chapters are skipped.
    Raises NoMatchingChapters when nothing matches.
    """
    selected = []
    for chapter in book.iter_chapters():
        if not chapter.selectable:
            continue
        if any(p.matches(chapter.path) for p in patterns):
            selected.append(chapter.path)
        else:
            logger.debug("  Skipping %s", chapter.path)

    if not selected:
        raise NoMatchingChapters(p.pattern for p in patterns)

    logger.debug("  Selected %d chapter(s): %s", len(selected), ", ".join(selected))
    return selected


def assemble_content(book, selected, filename="document"):
    """
    Concatenate selected chapters in book order, each followed by a blank line.

    Raises EmptyFilteredContent if the result is empty.
    """
    wanted = set(selected)
    parts = []
    for chapter in book.iter_chapters():
        if chapter.selectable and chapter.path in wanted:
            parts.append(chapter.content)
            parts.append(CHAPTER_PADDING)

    content = "".join(parts)
    if not content:
        raise EmptyFilteredContent(filename)
    return content

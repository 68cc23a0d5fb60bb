"""
Include patterns: compile glob strings into path matchers.

Syntax:
    ?        any single character
    *        any run of characters (including "/")
    **       any run of path components; must be a whole component
    [abc]    one of a, b, c      [a-z]  a range      [!abc]  negation

A "]" right after "[" or "[!" is a literal member of the class.
"""

import logging
import re

from docxbook.errors import PatternCompileError

logger = logging.getLogger(__name__)

WILDCARD = "*"


class GlobPattern:
    """A compiled include pattern."""

    def __init__(self, pattern):
        self.pattern = pattern
        self._regex = re.compile(_translate(pattern), re.DOTALL)

    def matches(self, path):
        """Match a chapter path, using "/" separators on every platform."""
        return self._regex.fullmatch(path.replace("\\", "/")) is not None

    def __repr__(self):
        return f"GlobPattern({self.pattern!r})"


def _translate(pattern):
    """Turn a glob into a regular expression body. Raises PatternCompileError."""
    out = []
    i = 0
    n = len(pattern)

    while i < n:
        ch = pattern[i]

        if ch == "*":
            if pattern.startswith("**", i):
                start_ok = i == 0 or pattern[i - 1] == "/"
                end = i + 2
                end_ok = end == n or pattern[end] == "/"
                if not (start_ok and end_ok):
                    raise PatternCompileError(
                        pattern, i, "'**' must be a whole path component"
                    )
                if end < n:
                    # "**/" matches zero or more leading directories
                    out.append("(?:.*/)?")
                    i = end + 1
                else:
                    out.append(".*")
                    i = end
                continue
            out.append(".*")

        elif ch == "?":
            out.append(".")

        elif ch == "[":
            body, i = _translate_class(pattern, i)
            out.append(body)
            continue

        else:
            out.append(re.escape(ch))

        i += 1

    return "".join(out)


def _translate_class(pattern, start):
    """Translate "[...]" at `start`; returns (regex, index after "]")."""
    i = start + 1
    negate = False
    if i < len(pattern) and pattern[i] == "!":
        negate = True
        i += 1

    members = []
    first = True
    while i < len(pattern):
        ch = pattern[i]
        if ch == "]" and not first:
            break
        first = False

        if i + 2 < len(pattern) and pattern[i + 1] == "-" and pattern[i + 2] != "]":
            low, high = ch, pattern[i + 2]
            if low > high:
                raise PatternCompileError(
                    pattern, i, f"invalid range {low}-{high}"
                )
            members.append(f"{re.escape(low)}-{re.escape(high)}")
            i += 3
        else:
            members.append(re.escape(ch))
            i += 1
    else:
        raise PatternCompileError(pattern, start, "unterminated character class")

    prefix = "^" if negate else ""
    return f"[{prefix}{''.join(members)}]", i + 1


def compile_patterns(includes):
    """
    Compile include strings into GlobPattern objects.

    An empty list means "everything" and is replaced by the wildcard.
    """
    includes = list(includes or [])
    if not includes:
        logger.info("No include value provided. Using wildcard glob.")
        includes = [WILDCARD]
    return [GlobPattern(p) for p in includes]

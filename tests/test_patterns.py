"""
Tests for include pattern compilation.

Tests:
- Wildcard substitution for empty include lists
- Glob syntax: *, ?, **, character classes
- Rejection of malformed globs
"""

import pytest

from docxbook.errors import PatternCompileError
from docxbook.patterns import WILDCARD, GlobPattern, compile_patterns


class TestCompilePatterns:
    """Test compile_patterns() defaults."""

    def test_empty_list_becomes_wildcard(self):
        """An empty include list should match everything."""
        patterns = compile_patterns([])
        assert [p.pattern for p in patterns] == [WILDCARD]

    def test_none_becomes_wildcard(self):
        """A missing include list should match everything."""
        patterns = compile_patterns(None)
        assert len(patterns) == 1
        assert patterns[0].matches("any/nested/chapter.md")

    def test_preserves_order(self):
        """Patterns compile one-to-one, in order."""
        patterns = compile_patterns(["b.md", "a.md"])
        assert [p.pattern for p in patterns] == ["b.md", "a.md"]

    def test_invalid_pattern_raises(self):
        """A malformed glob anywhere in the list should fail."""
        with pytest.raises(PatternCompileError) as exc:
            compile_patterns(["ok.md", "bad[.md"])
        assert exc.value.pattern == "bad[.md"
        assert exc.value.position == 3


class TestGlobMatching:
    """Test GlobPattern.matches()."""

    def test_literal(self):
        assert GlobPattern("ch1.md").matches("ch1.md")
        assert not GlobPattern("ch1.md").matches("ch10.md")

    def test_star_matches_run(self):
        assert GlobPattern("ch*.md").matches("ch12.md")
        assert not GlobPattern("ch*.md").matches("intro.md")

    def test_star_crosses_separators(self):
        """A bare * selects nested chapters too."""
        assert GlobPattern("*").matches("guide/install.md")
        assert GlobPattern("guide*").matches("guide/install.md")

    def test_question_mark(self):
        assert GlobPattern("ch?.md").matches("ch1.md")
        assert not GlobPattern("ch?.md").matches("ch10.md")

    def test_double_star_prefix(self):
        """**/ matches zero or more directories."""
        pattern = GlobPattern("**/usage.md")
        assert pattern.matches("usage.md")
        assert pattern.matches("guide/usage.md")
        assert pattern.matches("a/b/usage.md")
        assert not pattern.matches("guide/install.md")

    def test_double_star_suffix(self):
        pattern = GlobPattern("guide/**")
        assert pattern.matches("guide/install.md")
        assert pattern.matches("guide/deep/page.md")
        assert not pattern.matches("intro.md")

    def test_character_class(self):
        pattern = GlobPattern("ch[12].md")
        assert pattern.matches("ch1.md")
        assert pattern.matches("ch2.md")
        assert not pattern.matches("ch3.md")

    def test_character_range(self):
        pattern = GlobPattern("ch[0-4].md")
        assert pattern.matches("ch3.md")
        assert not pattern.matches("ch7.md")

    def test_negated_class(self):
        pattern = GlobPattern("ch[!1].md")
        assert pattern.matches("ch2.md")
        assert not pattern.matches("ch1.md")

    def test_literal_bracket_in_class(self):
        """] right after [ is a member, not the end of the class."""
        pattern = GlobPattern("a[]]b")
        assert pattern.matches("a]b")

    def test_regex_characters_are_literal(self):
        pattern = GlobPattern("notes (v1).md")
        assert pattern.matches("notes (v1).md")
        assert not pattern.matches("notes v1.md")

    def test_backslash_paths_are_normalised(self):
        assert GlobPattern("guide/*.md").matches("guide\\install.md")


class TestInvalidPatterns:
    """Test PatternCompileError cases."""

    @pytest.mark.parametrize("pattern", ["a**", "**a", "***", "guide/**.md"])
    def test_partial_recursive_wildcard(self, pattern):
        with pytest.raises(PatternCompileError):
            GlobPattern(pattern)

    def test_unterminated_class(self):
        with pytest.raises(PatternCompileError, match="unterminated"):
            GlobPattern("ch[1.md")

    def test_reversed_range(self):
        with pytest.raises(PatternCompileError, match="invalid range"):
            GlobPattern("ch[9-0].md")

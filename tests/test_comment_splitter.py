"""
Tests for splitting code from trailing // comments.
"""

import pytest

from semi_lint.comment_splitter import split_trailing_comment


class TestSplitTrailingComment:
    """Character-level // detection."""

    def test_inline_comment(self):
        """Code is right-trimmed, comment keeps its slashes."""
        assert split_trailing_comment("let a = 1   // note") == ("let a = 1", "// note")

    def test_no_comment_returns_line_untouched(self):
        """Without a comment nothing is trimmed."""
        assert split_trailing_comment("  a = b   ") == ("  a = b   ", "")

    def test_comment_at_column_zero(self):
        assert split_trailing_comment("// all comment") == ("", "// all comment")

    def test_url_after_colon_is_not_a_comment(self):
        """`://` is skipped so URLs survive."""
        line = 'const url = "http://example.com"'
        assert split_trailing_comment(line) == (line, "")

    def test_comment_after_url(self):
        code, comment = split_trailing_comment('fetch("https://x.io") // go')
        assert code == 'fetch("https://x.io")'
        assert comment == "// go"

    def test_slashes_inside_string_are_still_a_comment(self):
        """String literals are not recognised."""
        assert split_trailing_comment("x = 'a//b'") == ("x = 'a", "//b'")

    def test_third_slash_after_colon(self):
        """In `:///` the second pair of slashes is not preceded by a colon."""
        assert split_trailing_comment("a:///b") == ("a:/", "//b")

    @pytest.mark.parametrize("line", ["", "/", "a / b"])
    def test_no_double_slash(self, line):
        assert split_trailing_comment(line) == (line, "")

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_escape.py
"""Unit tests for Markdown escaping helpers."""

import pytest

from runmark.utils.escape import (
    code_block_fence,
    escape_inline_code,
    escape_link_destination,
    escape_markdown_text,
    longest_run,
)


@pytest.mark.unit
class TestEscapeMarkdownText:
    """Tests for plain-text escaping."""

    @pytest.mark.parametrize("char", list("*_[]()`~"))
    def test_escapes_syntax_characters(self, char):
        """Test each syntax character gets one backslash."""
        assert escape_markdown_text(f"a{char}b") == f"a\\{char}b"

    def test_backslash_doubles(self):
        """Test a literal backslash escapes to a double backslash."""
        assert escape_markdown_text("C:\\temp") == "C:\\\\temp"

    def test_single_pass(self):
        """Test an escaped-looking sequence is escaped once per character."""
        assert escape_markdown_text("\\*") == "\\\\\\*"

    def test_plain_text_unchanged(self):
        """Test text without syntax characters is returned unchanged."""
        assert escape_markdown_text("Hello, world. # - + !") == "Hello, world. # - + !"

    def test_empty(self):
        """Test empty input."""
        assert escape_markdown_text("") == ""


@pytest.mark.unit
class TestEscapeLinkDestination:
    """Tests for link destination escaping."""

    def test_escapes_space_parens_brackets(self):
        """Test spaces, parentheses and brackets are escaped."""
        assert escape_link_destination("a b(c)[d]") == "a\\ b\\(c\\)\\[d\\]"

    def test_url_unchanged(self):
        """Test an ordinary URL is unchanged."""
        assert escape_link_destination("https://example.com/path?q=1") == "https://example.com/path?q=1"


@pytest.mark.unit
class TestBacktickFences:
    """Tests for inline code and code block fences."""

    def test_longest_run(self):
        """Test longest backtick run detection."""
        assert longest_run("a``b```c`") == 3
        assert longest_run("none") == 0

    def test_inline_code_without_backticks(self):
        """Test plain code uses a single backtick fence."""
        assert escape_inline_code("x = 1") == ("x = 1", "`")

    def test_inline_code_with_backtick(self):
        """Test an inner backtick forces a double fence."""
        assert escape_inline_code("code`tick") == ("code`tick", "``")

    def test_inline_code_with_double_backtick(self):
        """Test a double backtick run forces a triple fence."""
        assert escape_inline_code("a``b") == ("a``b", "```")

    def test_inline_code_edge_backtick_padded(self):
        """Test content starting or ending with a backtick is padded with spaces."""
        assert escape_inline_code("`x") == (" `x ", "``")
        assert escape_inline_code("x`") == (" x` ", "``")

    def test_code_block_fence_minimum(self):
        """Test the minimum fence length for plain content."""
        assert code_block_fence("print(1)\n") == "```"

    def test_code_block_fence_grows(self):
        """Test the fence exceeds the longest inner backtick run."""
        assert code_block_fence("````\n") == "`````"

    def test_code_block_fence_custom_minimum(self):
        """Test a larger configured minimum."""
        assert code_block_fence("x", minimum=5) == "`````"

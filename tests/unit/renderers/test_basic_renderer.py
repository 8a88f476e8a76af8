#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_basic_renderer.py
"""Unit tests for the bold/italic-only Markdown encoder."""

from io import StringIO

import pytest

from runmark.renderers.basic import BasicMarkdownRenderer, runs_to_basic_markdown
from runmark.runs.attributes import AttributeSet, PresentationIntent
from runmark.runs.run import Run

BOLD = AttributeSet(bold=True)
ITALIC = AttributeSet(italic=True)
BOTH = AttributeSet(bold=True, italic=True)


@pytest.mark.unit
class TestBasicMarkdownRenderer:
    """Tests for wrapper stack handling."""

    def test_plain_text_escaped(self):
        """Test plain text is escaped and newlines are kept."""
        assert runs_to_basic_markdown([Run("a*b\nc")]) == "a\\*b\nc"

    def test_single_wrapper(self):
        """Test a bold run is wrapped once."""
        assert runs_to_basic_markdown([Run("x", BOLD)]) == "**x**"

    def test_wrappers_stay_open(self):
        """Test a shared outer wrapper is not closed between runs."""
        assert runs_to_basic_markdown([Run("a", BOLD), Run("b", BOTH)]) == "**a*b***"

    def test_closes_differing_suffix(self):
        """Test only the differing wrappers are closed and reopened."""
        assert runs_to_basic_markdown([Run("a", BOTH), Run("b", BOLD), Run("c")]) == "***a*b**c"

    def test_italic_then_bold(self):
        """Test switching from italic to bold closes italic first."""
        assert runs_to_basic_markdown([Run("a", ITALIC), Run("b", BOLD)]) == "*a***b**"

    def test_presentation_flags(self):
        """Test presentation flags count as bold and italic."""
        run = Run("x", AttributeSet(presentation=PresentationIntent.EMPHASIZED))
        assert runs_to_basic_markdown([run]) == "*x*"

    def test_empty_runs_skipped(self):
        """Test empty runs do not open or close wrappers."""
        assert runs_to_basic_markdown([Run("a", BOLD), Run(""), Run("b", BOLD)]) == "**ab**"

    def test_block_structure_ignored(self):
        """Test headings and code are written as plain text."""
        runs = [Run("T", AttributeSet(heading_level=1)), Run("`c`", AttributeSet(code=True))]
        assert runs_to_basic_markdown(runs) == "T\\`c\\`"

    def test_render_to_stream(self):
        """Test writing to a text stream."""
        buffer = StringIO()
        BasicMarkdownRenderer().render([Run("x", ITALIC)], buffer)
        assert buffer.getvalue() == "*x*"

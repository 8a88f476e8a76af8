#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/runs/test_attributes.py
"""Unit tests for the run attribute schema."""

import dataclasses

import pytest

from runmark.runs.attributes import (
    PLAIN,
    AttributeSet,
    CodeBlockMetadata,
    ListMetadata,
    PresentationIntent,
)


@pytest.mark.unit
class TestAttributeSet:
    """Tests for AttributeSet construction and helpers."""

    def test_plain_has_nothing(self):
        """Test the plain attribute set carries no decoration or block tag."""
        assert not PLAIN.has_decoration
        assert not PLAIN.has_block_tag
        assert PLAIN.presentation == PresentationIntent.NONE

    def test_frozen(self):
        """Test attribute sets cannot be mutated."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            PLAIN.bold = True  # type: ignore[misc]

    def test_code_clears_other_inline_decoration(self):
        """Test code suppresses bold, italic, strike and link."""
        attributes = AttributeSet(bold=True, italic=True, strike=True, link="https://x.org", code=True)
        assert attributes.code
        assert not attributes.bold
        assert not attributes.italic
        assert not attributes.strike
        assert attributes.link is None

    def test_replace_to_code_clears_bold(self):
        """Test deriving a code copy of a bold set clears bold."""
        assert not AttributeSet(bold=True).replace(code=True).bold

    def test_replace_returns_new_instance(self):
        """Test replace leaves the original untouched."""
        original = AttributeSet(italic=True)
        derived = original.replace(bold=True)
        assert derived.bold and derived.italic
        assert not original.bold

    @pytest.mark.parametrize("level", [0, 7])
    def test_heading_level_range(self, level):
        """Test heading levels outside 1-6 are rejected."""
        with pytest.raises(ValueError):
            AttributeSet(heading_level=level)

    def test_quote_depth_range(self):
        """Test a quote depth below 1 is rejected."""
        with pytest.raises(ValueError):
            AttributeSet(quote_depth=0)

    def test_equality_is_by_value(self):
        """Test equal field values compare equal."""
        assert AttributeSet(bold=True, paragraph_id=3) == AttributeSet(bold=True, paragraph_id=3)
        assert AttributeSet(bold=True, paragraph_id=3) != AttributeSet(bold=True, paragraph_id=4)

    def test_has_decoration_ignores_structure(self):
        """Test paragraph identity and quote depth are not decoration."""
        assert not AttributeSet(paragraph_id=1, quote_depth=2).has_decoration
        assert AttributeSet(heading_level=1).has_decoration
        assert AttributeSet(list_item=ListMetadata("ordered", 1)).has_decoration
        assert AttributeSet(code_block=CodeBlockMetadata("x")).has_decoration
        assert AttributeSet(link="https://x.org").has_decoration

    def test_style_key(self):
        """Test the style key holds inline styling only."""
        attributes = AttributeSet(bold=True, link="u", heading_level=2, paragraph_id=9)
        assert attributes.style_key == (True, False, False, False, "u")


@pytest.mark.unit
class TestPresentationFallback:
    """Tests for folding presentation flags into semantic attributes."""

    def test_no_flags_returns_same(self):
        """Test a set without flags is returned as is."""
        attributes = AttributeSet(italic=True)
        assert attributes.with_presentation_fallback() is attributes

    def test_flags_add_attributes(self):
        """Test each flag sets its semantic attribute."""
        intent = (
            PresentationIntent.STRONGLY_EMPHASIZED | PresentationIntent.EMPHASIZED | PresentationIntent.STRIKETHROUGH
        )
        resolved = AttributeSet(presentation=intent).with_presentation_fallback()
        assert resolved.bold and resolved.italic and resolved.strike
        assert not resolved.code

    def test_flags_never_clear(self):
        """Test a missing flag does not clear a semantic attribute."""
        resolved = AttributeSet(bold=True, presentation=PresentationIntent.EMPHASIZED).with_presentation_fallback()
        assert resolved.bold and resolved.italic

    def test_code_flag(self):
        """Test the code flag produces a code run without emphasis."""
        intent = PresentationIntent.CODE | PresentationIntent.STRONGLY_EMPHASIZED
        resolved = AttributeSet(presentation=intent).with_presentation_fallback()
        assert resolved.code
        assert not resolved.bold


@pytest.mark.unit
class TestMetadata:
    """Tests for list and code block metadata."""

    def test_list_kind_validated(self):
        """Test an unknown list kind is rejected."""
        with pytest.raises(ValueError):
            ListMetadata("bulleted", 1)  # type: ignore[arg-type]

    def test_list_ordinal_validated(self):
        """Test ordinals start at 1."""
        with pytest.raises(ValueError):
            ListMetadata("unordered", 0)

    def test_code_block_language_optional(self):
        """Test the language tag defaults to None."""
        assert CodeBlockMetadata("print(1)\n").language is None

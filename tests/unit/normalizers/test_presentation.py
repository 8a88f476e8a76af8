#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/normalizers/test_presentation.py
"""Unit tests for presentation flag helpers."""

import pytest

from runmark.normalizers.presentation import lift_presentation, resolve_font_traits
from runmark.renderers.markdown import runs_to_markdown
from runmark.runs.attributes import AttributeSet, PresentationIntent
from runmark.runs.run import Run

PI = PresentationIntent


@pytest.mark.unit
class TestLiftPresentation:
    """Tests for deriving flags from semantic attributes."""

    def test_emphasis_flags(self):
        """Test bold, italic and strike each set their flag."""
        (run,) = lift_presentation([Run("x", AttributeSet(bold=True, italic=True, strike=True))])
        assert run.attributes.presentation == PI.STRONGLY_EMPHASIZED | PI.EMPHASIZED | PI.STRIKETHROUGH

    def test_code_wins(self):
        """Test code runs get the code flag and lose emphasis flags."""
        attributes = AttributeSet(code=True, presentation=PI.STRONGLY_EMPHASIZED | PI.EMPHASIZED)
        (run,) = lift_presentation([Run("x", attributes)])
        assert run.attributes.presentation == PI.CODE

    def test_existing_flags_kept(self):
        """Test flags without a semantic counterpart stay set."""
        (run,) = lift_presentation([Run("x", AttributeSet(italic=True, presentation=PI.STRIKETHROUGH))])
        assert run.attributes.presentation == PI.EMPHASIZED | PI.STRIKETHROUGH

    def test_plain_unchanged(self):
        """Test plain runs are returned as is."""
        run = Run("x")
        assert lift_presentation([run])[0] is run


@pytest.mark.unit
class TestResolveFontTraits:
    """Tests for reading styling back from an editing surface."""

    def test_traits_added(self):
        """Test reported traits become presentation flags."""
        (run,) = resolve_font_traits([Run("x")], lambda run: (True, False))
        assert run.attributes.presentation == PI.STRONGLY_EMPHASIZED

    def test_false_never_clears(self):
        """Test a False answer keeps an existing flag."""
        (run,) = resolve_font_traits([Run("x", AttributeSet(presentation=PI.EMPHASIZED))], lambda run: (False, False))
        assert run.attributes.presentation == PI.EMPHASIZED

    def test_code_runs_skipped(self):
        """Test the resolver is not consulted for code runs."""
        calls = []

        def resolver(run):
            calls.append(run.text)
            return True, True

        runs = [
            Run("a", AttributeSet(code=True)),
            Run("b", AttributeSet(presentation=PI.CODE)),
            Run("c"),
        ]
        resolved = resolve_font_traits(runs, resolver)
        assert calls == ["c"]
        assert resolved[:2] == runs[:2]

    def test_resolved_runs_serialize(self):
        """Test resolved traits reach the Markdown output."""
        runs = resolve_font_traits(
            [Run("a", AttributeSet(paragraph_id=1)), Run("b", AttributeSet(paragraph_id=1))],
            lambda run: (run.text == "b", False),
        )
        assert runs_to_markdown(runs) == "a**b**"

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/normalizers/test_blank_lines.py
"""Unit tests for the display-path blank-line pass."""

import pytest

from runmark.normalizers.blank_lines import (
    BlankLineNormalizer,
    BlankLineRun,
    detect_blank_line_runs,
    normalize_blank_lines,
)
from runmark.options import BlankLineOptions
from runmark.runs.attributes import AttributeSet, PresentationIntent
from runmark.runs.run import Run, flatten_text


@pytest.mark.unit
class TestDetectBlankLineRuns:
    """Tests for finding blank-line stretches."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("A\nB\n", []),
            ("A\n\nB\n", [BlankLineRun(0, 1)]),
            ("A\n\n\nB\n", [BlankLineRun(0, 2)]),
            ("\n\nA\n", [BlankLineRun(None, 2)]),
            ("A\n\n", [BlankLineRun(0, 1)]),
            ("A\n  \t\nB", [BlankLineRun(0, 1)]),
            ("A\n\nB\nC\n\n\nD", [BlankLineRun(0, 1), BlankLineRun(2, 2)]),
            ("\n\n", [BlankLineRun(None, 2)]),
            ("", []),
        ],
    )
    def test_detect(self, source, expected):
        """Test stretch detection."""
        assert detect_blank_line_runs(source) == expected


@pytest.mark.unit
class TestBlankLineNormalizer:
    """Tests for re-inserting blank lines."""

    def test_inserts_after_preceding_line(self):
        """Test a stretch is inserted after the newline ending its preceding line."""
        runs = [Run("A\nB")]
        display = normalize_blank_lines(runs, "A\n\n\nB", BlankLineOptions(lift_presentation=False))
        assert flatten_text(display) == "A\n\n\nB"

    def test_leading_stretch(self):
        """Test blank lines before any content go first."""
        display = normalize_blank_lines([Run("A\n")], "\n\nA\n")
        assert flatten_text(display) == "\n\nA\n"

    def test_multiple_stretches(self):
        """Test positions of later stretches account for earlier ones."""
        runs = [Run("A\nB\nC\n")]
        display = normalize_blank_lines(runs, "\nA\n\nB\n\n\nC\n")
        assert flatten_text(display) == "\nA\n\nB\n\n\nC\n"

    def test_out_of_range_appends(self):
        """Test a stretch with no matching newline is appended at the end."""
        display = normalize_blank_lines([Run("A")], "A\n\n")
        assert flatten_text(display) == "A\n"
        assert display[-1] == Run("\n")

    def test_inserted_runs_are_plain(self):
        """Test inserted blank lines do not inherit styling."""
        runs = [Run("A\nB", AttributeSet(bold=True))]
        display = normalize_blank_lines(runs, "A\n\nB", BlankLineOptions(lift_presentation=False))
        assert display == [Run("A\n", AttributeSet(bold=True)), Run("\n"), Run("B", AttributeSet(bold=True))]

    def test_lifts_presentation(self):
        """Test presentation flags are set by default."""
        (run,) = BlankLineNormalizer().normalize([Run("x", AttributeSet(italic=True))], "x")
        assert run.attributes.presentation == PresentationIntent.EMPHASIZED

    def test_restore_disabled(self):
        """Test blank lines are left out when restoring is off."""
        runs = [Run("A\nB")]
        display = normalize_blank_lines(runs, "A\n\nB", BlankLineOptions(restore_blank_lines=False))
        assert flatten_text(display) == "A\nB"

    def test_no_stretches(self):
        """Test runs are unchanged when the source has no blank lines."""
        runs = [Run("A\nB")]
        assert normalize_blank_lines(runs, "A\nB") == runs

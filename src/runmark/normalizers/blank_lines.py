#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/runmark/normalizers/blank_lines.py
"""Blank-line reconstruction for display.

Parsing keeps only structural newlines, so stretches of blank lines between
paragraphs disappear from the run text. For display, this pass records the
blank-line stretches of the source and re-inserts them after the newline
that ends the preceding content line. The mapping from source lines to
newlines in the run text is a heuristic: source-only markers (``>``, ``#``,
list bullets, code fences) have no counterpart in the runs, so documents
mixing such blocks may see blank lines land one line off.

The output is for display surfaces only and is not a serialization path.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from runmark.normalizers.base import BaseNormalizer
from runmark.normalizers.presentation import lift_presentation
from runmark.options.normalizers import BlankLineOptions
from runmark.runs.run import Run, flatten_text, insert_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlankLineRun:
    """A stretch of consecutive blank source lines.

    Parameters
    ----------
    preceding_line : int or None
        0-based index of the content line before the stretch, None at the
        start of the document
    length : int
        Number of blank lines

    """

    preceding_line: Optional[int]
    length: int


def detect_blank_line_runs(source: str) -> list[BlankLineRun]:
    r"""Find the blank-line stretches of a Markdown source.

    A line is blank when it holds only whitespace. Blank lines at the end of
    the document are recorded against the last content line; a document
    holding only blank lines yields one leading stretch.

    Parameters
    ----------
    source : str
        Markdown source with LF line endings

    Returns
    -------
    list of BlankLineRun
        Stretches in document order

    Examples
    --------
        >>> detect_blank_line_runs("A\n\n\nB\n")
        [BlankLineRun(preceding_line=0, length=2)]

    """
    stretches: list[BlankLineRun] = []
    content_lines = 0
    pending = 0

    pieces = source.split("\n")
    # The text after the final newline is only a line when it is non-empty
    if not pieces[-1]:
        pieces.pop()

    for piece in pieces:
        if not piece.strip():
            pending += 1
            continue
        if pending:
            stretches.append(BlankLineRun(content_lines - 1 if content_lines else None, pending))
            pending = 0
        content_lines += 1

    if pending:
        stretches.append(BlankLineRun(content_lines - 1 if content_lines else None, pending))

    return stretches


class BlankLineNormalizer(BaseNormalizer):
    r"""Re-insert blank lines and set presentation flags for display.

    Parameters
    ----------
    options : BlankLineOptions or None, default = None
        Pass options

    Examples
    --------
        >>> from runmark.runs import AttributeSet, Run
        >>> runs = [Run("A", AttributeSet(paragraph_id=1)), Run("\n"), Run("B", AttributeSet(paragraph_id=2))]
        >>> display = BlankLineNormalizer().normalize(runs, "A\n\n\nB")
        >>> "".join(run.text for run in display)
        'A\n\n\nB'

    """

    def __init__(self, options: BlankLineOptions | None = None):
        """Initialize the pass with options."""
        BaseNormalizer._validate_options_type(options, BlankLineOptions, "blank_lines")
        options = options or BlankLineOptions()
        super().__init__(options)
        self.options: BlankLineOptions = options

    def normalize(self, runs: Sequence[Run], source: str) -> list[Run]:
        """Return display runs for ``runs`` parsed from ``source``.

        Parameters
        ----------
        runs : sequence of Run
            Runs rendered from the parsed ``source``
        source : str
            Original Markdown, with LF line endings

        Returns
        -------
        list of Run
            Runs with blank lines restored and presentation flags lifted

        """
        result = list(runs)
        if self.options.lift_presentation:
            result = lift_presentation(result)
        if self.options.restore_blank_lines:
            result = self._insert_blank_lines(result, detect_blank_line_runs(source))
        return result

    @staticmethod
    def _insert_blank_lines(runs: list[Run], stretches: Sequence[BlankLineRun]) -> list[Run]:
        if not stretches:
            return runs

        text = flatten_text(runs)
        newline_positions = [index for index, char in enumerate(text) if char == "\n"]

        for stretch in reversed(stretches):
            if stretch.length <= 0:
                continue
            insertion = "\n" * stretch.length

            if stretch.preceding_line is None:
                runs = insert_text(runs, 0, insertion)
                newline_positions = [position + stretch.length for position in newline_positions]
            elif stretch.preceding_line < len(newline_positions):
                runs = insert_text(runs, newline_positions[stretch.preceding_line] + 1, insertion)
                for later in range(stretch.preceding_line + 1, len(newline_positions)):
                    newline_positions[later] += stretch.length
            else:
                logger.debug("No newline for content line %d; appending blank lines", stretch.preceding_line + 1)
                runs = runs + [Run(insertion)]

        return runs


def normalize_blank_lines(runs: Sequence[Run], source: str, options: BlankLineOptions | None = None) -> list[Run]:
    """Run the blank-line pass with a one-off normalizer."""
    return BlankLineNormalizer(options).normalize(runs, source)

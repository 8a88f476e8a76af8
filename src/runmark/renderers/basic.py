#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/runmark/renderers/basic.py
"""Minimal bold/italic Markdown encoder.

``BasicMarkdownRenderer`` ignores every block structure and writes only
``**bold**`` and ``*italic*`` wrappers around escaped plain text, keeping
newlines verbatim. It is meant for editing surfaces that only support
bold and italic styling.

"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Sequence, Union

from runmark.constants import BOLD_MARKER, ITALIC_MARKER
from runmark.renderers.base import BaseRenderer
from runmark.runs.attributes import PresentationIntent
from runmark.runs.run import Run
from runmark.utils.escape import escape_markdown_text


def _desired_wrappers(run: Run) -> list[str]:
    attributes = run.attributes
    wrappers = []
    if attributes.bold or PresentationIntent.STRONGLY_EMPHASIZED in attributes.presentation:
        wrappers.append(BOLD_MARKER)
    if attributes.italic or PresentationIntent.EMPHASIZED in attributes.presentation:
        wrappers.append(ITALIC_MARKER)
    return wrappers


class BasicMarkdownRenderer(BaseRenderer):
    r"""Encode runs as Markdown with bold and italic markers only.

    Wrappers are kept open across consecutive runs: between two runs only
    the differing suffix of the open wrapper stack is closed and reopened.

    Examples
    --------
        >>> from runmark.runs import AttributeSet, Run
        >>> runs = [Run("a", AttributeSet(bold=True)), Run("b", AttributeSet(bold=True, italic=True))]
        >>> BasicMarkdownRenderer().render_to_string(runs)
        '**a*b***'

    """

    def render_to_string(self, runs: Sequence[Run]) -> str:
        """Encode runs to a Markdown string.

        Parameters
        ----------
        runs : sequence of Run
            Runs to encode

        Returns
        -------
        str
            Markdown text

        """
        output: list[str] = []
        open_wrappers: list[str] = []

        for run in runs:
            if not run.text:
                continue

            desired = _desired_wrappers(run)
            common = 0
            while common < min(len(open_wrappers), len(desired)) and open_wrappers[common] == desired[common]:
                common += 1

            output.extend(reversed(open_wrappers[common:]))
            output.extend(desired[common:])
            open_wrappers = desired
            output.append(escape_markdown_text(run.text))

        output.extend(reversed(open_wrappers))
        return "".join(output)

    def render(self, runs: Sequence[Run], output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Encode runs and write the Markdown to output."""
        self.write_text_output(self.render_to_string(runs), output)


def runs_to_basic_markdown(runs: Sequence[Run]) -> str:
    """Encode runs with a ``BasicMarkdownRenderer``."""
    return BasicMarkdownRenderer().render_to_string(runs)

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/runmark/normalizers/quote_depth.py
"""Block quote depth repair.

The Markdown parser treats a shallower quote line that follows a deeper one
as a lazy continuation of the deeper quote, so

    > Outer
    > > Inner
    > Back to outer

parses into only two depth groups. This pass re-scans the source line by
line, counts the quote markers of each line, and re-slices the run sequence
along the source line boundaries with the per-line depth.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from runmark.constants import QUOTE_MARKER
from runmark.exceptions import NormalizationError
from runmark.normalizers.base import BaseNormalizer
from runmark.options.normalizers import QuoteDepthOptions
from runmark.runs.attributes import PLAIN, AttributeSet
from runmark.runs.run import Run, coalesce_runs

logger = logging.getLogger(__name__)

PASS_NAME = "quote_depth"


@dataclass(frozen=True)
class QuoteLine:
    """One source line with its quote markers removed.

    Parameters
    ----------
    depth : int
        Number of leading quote markers, 0 for unquoted lines
    content : str
        Visible line content after the markers
    has_newline : bool
        Whether the line was terminated by a newline in the source

    """

    depth: int
    content: str
    has_newline: bool


def strip_quote_markers(line: str) -> tuple[int, str]:
    """Strip leading quote markers from one line.

    Each ``>`` may be followed by one space. Leading indentation before the
    first marker is not a marker, so an indented line has depth 0.

    Parameters
    ----------
    line : str
        Source line without its newline

    Returns
    -------
    tuple of (int, str)
        Quote depth and visible content

    Examples
    --------
        >>> strip_quote_markers("> > nested")
        (2, 'nested')
        >>> strip_quote_markers(">>tight")
        (2, 'tight')

    """
    depth = 0
    index = 0
    while index < len(line) and line[index] == QUOTE_MARKER:
        depth += 1
        index += 1
        if index < len(line) and line[index] == " ":
            index += 1
    return depth, line[index:]


def analyze_quote_lines(source: str) -> list[QuoteLine]:
    """Split the source into lines and measure the quote depth of each.

    A trailing newline does not produce an extra empty line.
    """
    pieces = source.split("\n")
    lines = []
    for position, piece in enumerate(pieces):
        has_newline = position < len(pieces) - 1
        if not has_newline and not piece:
            break
        depth, content = strip_quote_markers(piece)
        lines.append(QuoteLine(depth=depth, content=content, has_newline=has_newline))
    return lines


def requires_normalization(lines: Sequence[QuoteLine]) -> bool:
    """Return True when some line is shallower than a quote line before it."""
    deepest = 0
    for line in lines:
        if line.depth > deepest:
            deepest = line.depth
        elif line.depth < deepest:
            return True
    return False


def _with_depth(attributes: AttributeSet, depth: int) -> AttributeSet:
    return attributes.replace(quote_depth=depth if depth > 0 else None)


class QuoteDepthNormalizer(BaseNormalizer):
    r"""Restore per-line quote depths lost by the parser.

    Parameters
    ----------
    options : QuoteDepthOptions or None, default = None
        Pass options

    Examples
    --------
        >>> from runmark.runs import AttributeSet, Run
        >>> runs = [Run("A", AttributeSet(quote_depth=1)), Run("BC", AttributeSet(quote_depth=2))]
        >>> repaired = QuoteDepthNormalizer().normalize(runs, "> A\n> > B\n> C\n")
        >>> [(run.text, run.attributes.quote_depth) for run in repaired if run.text != "\n"]
        [('A', 1), ('B', 2), ('C', 1)]

    """

    def __init__(self, options: QuoteDepthOptions | None = None):
        """Initialize the pass with options."""
        BaseNormalizer._validate_options_type(options, QuoteDepthOptions, PASS_NAME)
        options = options or QuoteDepthOptions()
        super().__init__(options)
        self.options: QuoteDepthOptions = options

    def normalize(self, runs: Sequence[Run], source: str) -> list[Run]:
        """Re-slice ``runs`` along the quote lines of ``source``.

        Parameters
        ----------
        runs : sequence of Run
            Runs rendered from the parsed ``source``
        source : str
            Original Markdown, with LF line endings

        Returns
        -------
        list of Run
            Repaired runs, or ``runs`` unchanged when no repair is needed or
            it cannot be done safely

        Raises
        ------
        NormalizationError
            In strict mode, if repair is declined because styled runs do not
            line up with the source

        """
        if QUOTE_MARKER not in source:
            return list(runs)

        lines = analyze_quote_lines(source)
        if not requires_normalization(lines):
            logger.debug("Quote depths never decrease; skipping repair")
            return list(runs)

        visible_length = sum(len(line.content) for line in lines)
        run_length = sum(len(run.text) - run.text.count("\n") for run in runs)

        if visible_length != run_length:
            if not any(run.attributes.has_decoration for run in runs):
                logger.debug("Rebuilding plain quote runs from source (%d != %d)", visible_length, run_length)
                return self._rebuild_plain(lines)

            message = (
                f"Quote depth repair declined: source has {visible_length} visible characters, "
                f"styled runs have {run_length}"
            )
            if self.options.strict:
                raise NormalizationError(message, pass_name=PASS_NAME)
            logger.warning(message)
            return list(runs)

        rebuilt = self._reslice(runs, lines)
        if rebuilt is None:
            return list(runs)
        return coalesce_runs(rebuilt)

    @staticmethod
    def _rebuild_plain(lines: Sequence[QuoteLine]) -> list[Run]:
        rebuilt: list[Run] = []
        for position, line in enumerate(lines):
            if line.content:
                rebuilt.append(Run(line.content, _with_depth(PLAIN, line.depth)))
            if line.has_newline or position < len(lines) - 1:
                rebuilt.append(Run("\n"))
        return coalesce_runs(rebuilt)

    @staticmethod
    def _reslice(runs: Sequence[Run], lines: Sequence[QuoteLine]) -> Optional[list[Run]]:
        """Cut runs at source line boundaries; None when that is not safe."""
        if any(run.attributes.code_block is not None for run in runs):
            logger.debug("Code block runs cannot be re-sliced; skipping repair")
            return None

        # Runs with newlines removed, addressed by index and offset
        arena = [(run, run.text.replace("\n", "")) for run in runs]
        arena = [(run, text) for run, text in arena if text]
        index = 0
        offset = 0

        rebuilt: list[Run] = []
        for position, line in enumerate(lines):
            remaining = len(line.content)
            line_text = []
            while remaining > 0:
                if index >= len(arena):
                    logger.debug("Ran out of runs at source line %d; skipping repair", position + 1)
                    return None
                run, text = arena[index]
                take = min(len(text) - offset, remaining)
                piece = text[offset : offset + take]
                rebuilt.append(Run(piece, _with_depth(run.attributes, line.depth)))
                line_text.append(piece)
                remaining -= take
                offset += take
                if offset == len(text):
                    index += 1
                    offset = 0

            if "".join(line_text) != line.content:
                logger.debug("Run text differs from source line %d; skipping repair", position + 1)
                return None

            if line.has_newline or position < len(lines) - 1:
                rebuilt.append(Run("\n"))

        leftover = [run.with_text(text) for run, text in arena[index:]]
        if leftover and offset:
            leftover[0] = leftover[0].with_text(leftover[0].text[offset:])
        if any(run.text.strip() for run in leftover):
            logger.debug("Unconsumed run text after the last source line; skipping repair")
            return None
        rebuilt.extend(leftover)

        return rebuilt


def normalize_quote_depth(
    runs: Sequence[Run], source: str, options: QuoteDepthOptions | None = None
) -> list[Run]:
    """Run the quote depth repair pass with a one-off normalizer."""
    return QuoteDepthNormalizer(options).normalize(runs, source)

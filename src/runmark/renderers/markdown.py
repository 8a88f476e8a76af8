#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/runmark/renderers/markdown.py
"""Run sequence to Markdown rendering.

This module provides the MarkdownRenderer class which groups a run sequence
into blocks with ``RunCollector`` and writes each block as canonical
Markdown. Inline content is rendered by nesting run groups in a fixed
wrapper order (link, strikethrough, bold, italic), so combined emphasis
always serializes the same way regardless of how it was applied.

"""

from __future__ import annotations

import logging
import re
from itertools import groupby
from pathlib import Path
from typing import IO, Callable, Optional, Sequence, Union

from runmark.constants import (
    BOLD_MARKER,
    EDGE_BREAK_CHARS,
    EDGE_WHITESPACE_CHARS,
    HEADING_MARKER,
    ITALIC_MARKER,
    QUOTE_MARKER,
    STRIKE_MARKER,
)
from runmark.options.markdown import MarkdownRendererOptions
from runmark.renderers.base import BaseRenderer
from runmark.runs.blocks import (
    BlankBlock,
    Block,
    CodeFenceBlock,
    HeadingBlock,
    ListBlock,
    ParagraphBlock,
    QuoteBlock,
)
from runmark.runs.collector import RunCollector
from runmark.runs.run import Run, flatten_text
from runmark.utils.escape import code_block_fence, escape_inline_code, escape_link_destination, escape_markdown_text

logger = logging.getLogger(__name__)

# Grouping keys for inline rendering, outermost first
_INLINE_LEVELS: tuple[Callable[[Run], object], ...] = (
    lambda run: run.attributes.link,
    lambda run: run.attributes.strike,
    lambda run: run.attributes.bold,
    lambda run: run.attributes.italic,
)
_LEVEL_MARKERS: tuple[Optional[str], ...] = (None, STRIKE_MARKER, BOLD_MARKER, ITALIC_MARKER)


def trim_newlines(runs: Sequence[Run]) -> list[Run]:
    """Strip leading and trailing newline characters from a run sequence.

    Runs emptied by trimming are dropped.

    Parameters
    ----------
    runs : sequence of Run
        Inline content of one block

    Returns
    -------
    list of Run
        Trimmed content

    """
    trimmed = [run for run in runs if run.text]
    while trimmed and not trimmed[0].text.lstrip("\n"):
        trimmed.pop(0)
    while trimmed and not trimmed[-1].text.rstrip("\n"):
        trimmed.pop()
    if trimmed:
        trimmed[0] = trimmed[0].with_text(trimmed[0].text.lstrip("\n"))
        trimmed[-1] = trimmed[-1].with_text(trimmed[-1].text.rstrip("\n"))
    return trimmed


class MarkdownRenderer(BaseRenderer):
    r"""Render a run sequence to canonical Markdown text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options

    Examples
    --------
    Basic usage:

        >>> from runmark.runs import AttributeSet, Run
        >>> runs = [Run("Hello", AttributeSet(bold=True, paragraph_id=1)), Run("\n")]
        >>> MarkdownRenderer().render_to_string(runs)
        '**Hello**\n'

    Keep blank-line stretches exactly:

        >>> options = MarkdownRendererOptions(max_consecutive_newlines=None)
        >>> renderer = MarkdownRenderer(options)

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        super().__init__(options)
        self.options: MarkdownRendererOptions = options
        self._collector = RunCollector()

        self._block_handlers: dict[type, Callable[[Block, Optional[Block]], str]] = {
            HeadingBlock: self._render_heading,
            ParagraphBlock: self._render_paragraph,
            ListBlock: self._render_list,
            QuoteBlock: self._render_quote,
            CodeFenceBlock: self._render_code_block,
            BlankBlock: self._render_blank,
        }

    def render_to_string(self, runs: Sequence[Run]) -> str:
        """Render a run sequence to a Markdown string.

        Parameters
        ----------
        runs : sequence of Run
            Runs from the run renderer or from an editing surface

        Returns
        -------
        str
            Markdown text

        """
        blocks = self._collector.collect(runs)

        output: list[str] = []
        for index, block in enumerate(blocks):
            next_block = blocks[index + 1] if index + 1 < len(blocks) else None
            output.append(self._block_handlers[type(block)](block, next_block))

        return self._cleanup_output("".join(output), flatten_text(runs).endswith("\n"))

    def render(self, runs: Sequence[Run], output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render runs to Markdown and write to output.

        Parameters
        ----------
        runs : sequence of Run
            Runs to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination (file path or file-like object)

        """
        self.write_text_output(self.render_to_string(runs), output)

    def _cleanup_output(self, text: str, ends_with_newline: bool) -> str:
        """Apply the newline cap and the trailing newline rule.

        Parameters
        ----------
        text : str
            Concatenated block output
        ends_with_newline : bool
            Whether the rendered run text ends with a newline

        Returns
        -------
        str
            Final Markdown text

        """
        cap = self.options.max_consecutive_newlines
        if cap is not None:
            text = re.sub(r"\n{%d,}" % (cap + 1), "\n" * cap, text)

        if self.options.preserve_trailing_newline:
            text = text.rstrip("\n")
            if ends_with_newline:
                text += "\n"

        return text

    def _render_heading(self, block: HeadingBlock, next_block: Optional[Block]) -> str:
        content = self.render_inline(trim_newlines(block.runs))
        return f"{HEADING_MARKER * block.level} {content}\n\n"

    def _render_paragraph(self, block: ParagraphBlock, next_block: Optional[Block]) -> str:
        content = self.render_inline(block.runs)
        if next_block is not None and not isinstance(next_block, BlankBlock):
            content += "\n\n"
        return content

    def _render_list(self, block: ListBlock, next_block: Optional[Block]) -> str:
        lines = []
        for number, item in enumerate(block.items, start=1):
            marker = f"{number}." if block.ordered else self.options.unordered_marker
            lines.append(f"{marker} {self.render_inline(trim_newlines(item))}\n")
        if next_block is not None:
            lines.append("\n")
        return "".join(lines)

    def _render_quote(self, block: QuoteBlock, next_block: Optional[Block]) -> str:
        prefix = (QUOTE_MARKER + " ") * block.depth
        lines = []
        for line in block.lines:
            if line:
                lines.append(f"{prefix}{self.render_inline(line)}\n")
            else:
                lines.append(f"{prefix.rstrip()}\n")
        if not isinstance(next_block, QuoteBlock):
            lines.append("\n")
        return "".join(lines)

    def _render_code_block(self, block: CodeFenceBlock, next_block: Optional[Block]) -> str:
        fence = code_block_fence(block.content, self.options.code_fence_min)
        content = block.content
        if content and not content.endswith("\n"):
            content += "\n"
        return f"{fence}{block.language or ''}\n{content}{fence}\n\n"

    def _render_blank(self, block: BlankBlock, next_block: Optional[Block]) -> str:
        return "\n" * block.count

    def render_inline(self, runs: Sequence[Run]) -> str:
        """Render inline content.

        Contiguous runs are grouped by link, then strikethrough, then bold,
        then italic, and each group is wrapped once, so ``**a *b* c**``
        keeps a single bold wrapper around its inner italic span.

        Parameters
        ----------
        runs : sequence of Run
            Inline runs of one block or line

        Returns
        -------
        str
            Markdown inline text

        """
        return self._render_level(list(runs), 0)

    def _render_level(self, runs: list[Run], level: int) -> str:
        if level == len(_INLINE_LEVELS):
            return "".join(self._render_leaf(run) for run in runs)

        parts = []
        for key, group in groupby(runs, key=_INLINE_LEVELS[level]):
            inner = self._render_level(list(group), level + 1)
            if level == 0:
                parts.append(f"[{inner}]({escape_link_destination(key)})" if key is not None else inner)
            elif key:
                parts.append(self._wrap(inner, _LEVEL_MARKERS[level]))
            else:
                parts.append(inner)
        return "".join(parts)

    def _wrap(self, inner: str, marker: Optional[str]) -> str:
        """Wrap rendered text in an emphasis marker, keeping edge whitespace outside.

        Edge newlines are always kept outside the markers. Edge spaces and tabs
        are moved out only when ``move_edge_whitespace`` is set.
        """
        edge_chars = EDGE_BREAK_CHARS
        if self.options.move_edge_whitespace:
            edge_chars += EDGE_WHITESPACE_CHARS

        core = inner.strip(edge_chars)
        if not marker or not core.strip(EDGE_WHITESPACE_CHARS):
            return inner

        leading = inner[: len(inner) - len(inner.lstrip(edge_chars))]
        trailing = inner[len(inner.rstrip(edge_chars)) :]
        return f"{leading}{marker}{core}{marker}{trailing}"

    @staticmethod
    def _render_leaf(run: Run) -> str:
        if not run.text:
            return ""
        if run.attributes.code:
            code, fence = escape_inline_code(run.text)
            return f"{fence}{code}{fence}"
        return escape_markdown_text(run.text)


def runs_to_markdown(runs: Sequence[Run], options: MarkdownRendererOptions | None = None) -> str:
    r"""Render a run sequence to Markdown.

    Parameters
    ----------
    runs : sequence of Run
        Runs to render
    options : MarkdownRendererOptions or None, default = None
        Formatting options

    Returns
    -------
    str
        Markdown text

    Examples
    --------
    >>> from runmark.runs import AttributeSet, Run
    >>> runs_to_markdown([Run("Title", AttributeSet(heading_level=1, paragraph_id=1))])
    '# Title'

    """
    return MarkdownRenderer(options).render_to_string(runs)

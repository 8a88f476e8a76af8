#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/runmark/runs/collector.py
"""Group a flat run sequence into structural blocks.

The collector walks the run sequence once. At each position it tries a fixed
list of rules in priority order and the first rule that matches consumes one
or more runs and emits (at most) one block:

1. code block run
2. heading (contiguous runs with one heading level and paragraph identity)
3. list (contiguous runs of one list kind, a new item per ordinal change)
4. block quote (contiguous runs of one depth, split into lines)
5. paragraph (contiguous runs with one paragraph identity)
6. newline-only runs (swallowed, merged, or a blank block)
7. best-effort paragraph from undecorated runs
8. one-run paragraph for anything left

Runs that carry presentation flags but no semantic emphasis are resolved
first, so styling applied by a rich-text surface is honored either way.

"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional, Sequence

from runmark.runs.attributes import AttributeSet
from runmark.runs.blocks import (
    BlankBlock,
    Block,
    CodeFenceBlock,
    HeadingBlock,
    ListBlock,
    ParagraphBlock,
    QuoteBlock,
)
from runmark.runs.run import Run

logger = logging.getLogger(__name__)

_NEWLINES_RE = re.compile(r"(\n+)")

Rule = Callable[[Sequence[Run], int, list[Block]], Optional[int]]


def _outranks_quote(attributes: AttributeSet) -> bool:
    return attributes.code_block is not None or attributes.heading_level is not None or attributes.list_item is not None


def _block_identity(attributes: AttributeSet) -> tuple:
    return (
        attributes.code_block,
        attributes.heading_level,
        attributes.list_item,
        attributes.quote_depth,
        attributes.paragraph_id,
    )


def _is_undecorated(run: Run) -> bool:
    return not run.attributes.has_block_tag and run.attributes.paragraph_id is None


def _is_plain_content(run: Run) -> bool:
    return _is_undecorated(run) and bool(run.text) and not run.is_newline_only


def _is_free_newline(run: Run) -> bool:
    return _is_undecorated(run) and run.is_newline_only


def split_undecorated_runs(runs: Sequence[Run]) -> list[Run]:
    """Split undecorated runs on newline stretches.

    A single newline with content on both sides inside the same run is a
    soft break and stays inline. Every other newline stretch becomes its own
    newline-only run with the same attributes. Runs carrying a block tag or a
    paragraph identity are passed through untouched.

    Parameters
    ----------
    runs : sequence of Run
        Input sequence

    Returns
    -------
    list of Run
        Sequence in which undecorated newline stretches are separate runs

    """
    result: list[Run] = []
    for run in runs:
        if not _is_undecorated(run) or "\n" not in run.text or run.is_newline_only:
            result.append(run)
            continue

        pieces = _NEWLINES_RE.split(run.text)
        buffer = ""
        for index, piece in enumerate(pieces):
            if not piece:
                continue
            if not piece.startswith("\n"):
                buffer += piece
                continue
            has_before = bool(buffer)
            has_after = index + 1 < len(pieces) and bool(pieces[index + 1])
            if len(piece) == 1 and has_before and has_after:
                buffer += piece
                continue
            if buffer:
                result.append(run.with_text(buffer))
                buffer = ""
            result.append(run.with_text(piece))
        if buffer:
            result.append(run.with_text(buffer))
    return result


class RunCollector:
    """Group a run sequence into ``Block`` objects.

    Examples
    --------
        >>> from runmark.runs import AttributeSet, Run
        >>> blocks = RunCollector().collect([Run("Title", AttributeSet(heading_level=1))])
        >>> type(blocks[0]).__name__
        'HeadingBlock'

    """

    def __init__(self) -> None:
        """Initialize the collector with its rule table."""
        self._rules: tuple[Rule, ...] = (
            self._collect_code_block,
            self._collect_heading,
            self._collect_list,
            self._collect_quote,
            self._collect_paragraph,
            self._collect_newlines,
            self._collect_default_paragraph,
            self._collect_fallback,
        )

    def collect(self, runs: Sequence[Run]) -> list[Block]:
        """Group ``runs`` into blocks.

        Parameters
        ----------
        runs : sequence of Run
            Run sequence, from the run renderer or from an editing surface

        Returns
        -------
        list of Block
            Blocks in document order

        """
        prepared = [run.with_attributes(run.attributes.with_presentation_fallback()) for run in runs]
        prepared = split_undecorated_runs(prepared)

        blocks: list[Block] = []
        index = 0
        while index < len(prepared):
            for rule in self._rules:
                next_index = rule(prepared, index, blocks)
                if next_index is not None:
                    index = next_index
                    break

        logger.debug("Collected %d blocks from %d runs", len(blocks), len(prepared))
        return blocks

    @staticmethod
    def _collect_code_block(runs: Sequence[Run], index: int, blocks: list[Block]) -> Optional[int]:
        code_block = runs[index].attributes.code_block
        if code_block is None:
            return None
        blocks.append(CodeFenceBlock(content=code_block.content, language=code_block.language))
        return index + 1

    @staticmethod
    def _collect_heading(runs: Sequence[Run], index: int, blocks: list[Block]) -> Optional[int]:
        first = runs[index].attributes
        if first.heading_level is None:
            return None

        end = index
        while (
            end < len(runs)
            and runs[end].attributes.code_block is None
            and runs[end].attributes.heading_level == first.heading_level
            and runs[end].attributes.paragraph_id == first.paragraph_id
        ):
            end += 1

        blocks.append(HeadingBlock(level=first.heading_level, runs=list(runs[index:end])))
        return end

    @staticmethod
    def _collect_list(runs: Sequence[Run], index: int, blocks: list[Block]) -> Optional[int]:
        first_item = runs[index].attributes.list_item
        if first_item is None:
            return None

        items: list[list[Run]] = []
        current_ordinal: Optional[int] = None
        end = index
        while end < len(runs):
            attributes = runs[end].attributes
            list_item = attributes.list_item
            if (
                list_item is None
                or list_item.kind != first_item.kind
                or attributes.code_block is not None
                or attributes.heading_level is not None
            ):
                break
            if list_item.ordinal != current_ordinal:
                items.append([])
                current_ordinal = list_item.ordinal
            items[-1].append(runs[end])
            end += 1

        blocks.append(ListBlock(kind=first_item.kind, items=items))
        return end

    @staticmethod
    def _collect_quote(runs: Sequence[Run], index: int, blocks: list[Block]) -> Optional[int]:
        depth = runs[index].attributes.quote_depth
        if depth is None:
            return None

        lines: list[list[Run]] = []
        current: list[Run] = []
        previous_paragraph: Optional[int] = None
        end = index

        def flush() -> None:
            nonlocal current
            if current:
                lines.append(current)
                current = []

        while end < len(runs):
            run = runs[end]
            attributes = run.attributes
            if attributes.quote_depth != depth or _outranks_quote(attributes):
                break

            paragraph_id = attributes.paragraph_id
            if (
                end > index
                and paragraph_id is not None
                and previous_paragraph is not None
                and paragraph_id != previous_paragraph
            ):
                flush()
                if lines and lines[-1]:
                    lines.append([])
            previous_paragraph = paragraph_id

            for position, fragment in enumerate(run.text.split("\n")):
                if position > 0:
                    flush()
                if fragment:
                    current.append(run.with_text(fragment))
            end += 1
        flush()

        while lines and not lines[-1]:
            lines.pop()

        if not lines:
            return None

        blocks.append(QuoteBlock(depth=depth, lines=lines))
        return end

    @staticmethod
    def _collect_paragraph(runs: Sequence[Run], index: int, blocks: list[Block]) -> Optional[int]:
        paragraph_id = runs[index].attributes.paragraph_id
        if paragraph_id is None:
            return None

        end = index
        while (
            end < len(runs)
            and runs[end].attributes.paragraph_id == paragraph_id
            and not _outranks_quote(runs[end].attributes)
        ):
            end += 1

        blocks.append(ParagraphBlock(runs=list(runs[index:end])))
        return end

    @staticmethod
    def _collect_newlines(runs: Sequence[Run], index: int, blocks: list[Block]) -> Optional[int]:
        first = runs[index]
        if not first.is_newline_only:
            return None

        identity = _block_identity(first.attributes)
        end = index
        while end < len(runs) and runs[end].is_newline_only and _block_identity(runs[end].attributes) == identity:
            end += 1
        count = sum(len(run.text) for run in runs[index:end])

        if count >= 2:
            blocks.append(BlankBlock(count=count))
            return end

        neighbors = [runs[index - 1]] if index > 0 else []
        if end < len(runs):
            neighbors.append(runs[end])
        if any(n.attributes.paragraph_id is not None or n.attributes.quote_depth is not None for n in neighbors):
            return end

        previous = blocks[-1] if blocks else None
        if (
            isinstance(previous, ParagraphBlock)
            and previous.runs
            and previous.runs[-1].attributes.style_key == first.attributes.style_key
        ):
            previous.runs.append(first)
            return end

        blocks.append(BlankBlock(count=1))
        return end

    @staticmethod
    def _collect_default_paragraph(runs: Sequence[Run], index: int, blocks: list[Block]) -> Optional[int]:
        if not _is_plain_content(runs[index]):
            return None

        collected: list[Run] = []
        end = index
        while end < len(runs):
            run = runs[end]
            if _is_plain_content(run):
                collected.append(run)
                end += 1
                continue
            if not _is_free_newline(run):
                break

            # A single newline between undecorated content is a soft break.
            stretch_end = end
            while stretch_end < len(runs) and _is_free_newline(runs[stretch_end]):
                stretch_end += 1
            newline_count = sum(len(r.text) for r in runs[end:stretch_end])
            if newline_count != 1 or stretch_end >= len(runs) or not _is_plain_content(runs[stretch_end]):
                break
            collected.extend(runs[end:stretch_end])
            end = stretch_end

        blocks.append(ParagraphBlock(runs=collected))
        return end

    @staticmethod
    def _collect_fallback(runs: Sequence[Run], index: int, blocks: list[Block]) -> Optional[int]:
        blocks.append(ParagraphBlock(runs=[runs[index]]))
        return index + 1


def collect_blocks(runs: Sequence[Run]) -> list[Block]:
    """Group a run sequence into blocks with a default ``RunCollector``."""
    return RunCollector().collect(runs)

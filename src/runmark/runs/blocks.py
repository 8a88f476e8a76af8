#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/runmark/runs/blocks.py
"""Structural blocks produced by grouping a run sequence.

Blocks are the serializer's view of a run sequence: each carries only what
the Markdown emitter needs to write it out.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from runmark.constants import ListKind
from runmark.runs.run import Run


class Block:
    """Base class for all blocks."""


@dataclass
class HeadingBlock(Block):
    """ATX heading.

    Parameters
    ----------
    level : int
        Heading level, 1-6
    runs : list of Run
        Inline content

    """

    level: int
    runs: list[Run] = field(default_factory=list)


@dataclass
class ListBlock(Block):
    """Ordered or unordered list.

    Parameters
    ----------
    kind : {"ordered", "unordered"}
        List kind
    items : list of list of Run
        Inline content of each item, in order

    """

    kind: ListKind
    items: list[list[Run]] = field(default_factory=list)

    @property
    def ordered(self) -> bool:
        """Whether this is an ordered list."""
        return self.kind == "ordered"


@dataclass
class QuoteBlock(Block):
    """Block quote at one depth.

    Parameters
    ----------
    depth : int
        1-based nesting depth
    lines : list of list of Run
        Inline content of each quoted line; an empty list is a bare quote
        marker line separating two paragraphs

    """

    depth: int
    lines: list[list[Run]] = field(default_factory=list)


@dataclass
class CodeFenceBlock(Block):
    """Fenced code block.

    Parameters
    ----------
    content : str
        Verbatim code
    language : str or None, default None
        Info string language tag

    """

    content: str
    language: Optional[str] = None


@dataclass
class ParagraphBlock(Block):
    """Paragraph of inline content; may contain literal soft line breaks."""

    runs: list[Run] = field(default_factory=list)


@dataclass
class BlankBlock(Block):
    """Stretch of blank lines.

    Parameters
    ----------
    count : int
        Number of newlines to emit

    """

    count: int


__all__ = [
    "Block",
    "HeadingBlock",
    "ListBlock",
    "QuoteBlock",
    "CodeFenceBlock",
    "ParagraphBlock",
    "BlankBlock",
]

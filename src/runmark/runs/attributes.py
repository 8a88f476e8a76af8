#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/runmark/runs/attributes.py
"""Attribute schema carried by every run.

An ``AttributeSet`` combines inline decoration (bold, italic, strike, code,
link), block-level tags (heading level, list position, quote depth, code
block metadata), the paragraph identity used to regroup runs, and the
presentation flags a plain rich-text surface can display without knowing the
rest of the schema.

All classes here are frozen; derive modified copies with ``replace``.

"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Any, Optional

from runmark.constants import MAX_HEADING_LEVEL, MIN_HEADING_LEVEL, ListKind


class PresentationIntent(enum.Flag):
    """Display-level styling flags for a run.

    These mirror the semantic emphasis attributes for surfaces that only
    understand generic presentation styling, and are the channel through
    which such surfaces report styling the user applied directly.
    """

    NONE = 0
    EMPHASIZED = enum.auto()
    STRONGLY_EMPHASIZED = enum.auto()
    CODE = enum.auto()
    STRIKETHROUGH = enum.auto()


@dataclass(frozen=True)
class ListMetadata:
    """Position of a run inside a list.

    Parameters
    ----------
    kind : {"ordered", "unordered"}
        List kind
    ordinal : int
        1-based item index within its list

    """

    kind: ListKind
    ordinal: int

    def __post_init__(self) -> None:
        """Validate kind and ordinal."""
        if self.kind not in ("ordered", "unordered"):
            raise ValueError(f"List kind must be 'ordered' or 'unordered', got {self.kind!r}")
        if self.ordinal < 1:
            raise ValueError(f"List ordinal must be >= 1, got {self.ordinal}")


@dataclass(frozen=True)
class CodeBlockMetadata:
    """Code block carried by a run.

    Parameters
    ----------
    content : str
        Verbatim code content
    language : str or None, default None
        Language tag from the fence info string

    """

    content: str
    language: Optional[str] = None


@dataclass(frozen=True)
class AttributeSet:
    """Immutable attribute set shared by all characters of one run.

    Parameters
    ----------
    bold, italic, strike, code : bool, default False
        Inline decoration flags. ``code`` suppresses the other inline
        decoration: when it is set, ``bold``, ``italic``, ``strike`` and
        ``link`` are cleared on construction.
    link : str or None, default None
        Link destination
    heading_level : int or None, default None
        Heading level, 1-6
    list_item : ListMetadata or None, default None
        List kind and item ordinal
    quote_depth : int or None, default None
        1-based block quote nesting depth
    code_block : CodeBlockMetadata or None, default None
        Fenced code block the run belongs to
    paragraph_id : int or None, default None
        Identity of the source paragraph (or heading) the run came from
    presentation : PresentationIntent, default PresentationIntent.NONE
        Display-level styling flags

    Examples
    --------
        >>> AttributeSet(bold=True, code=True).bold
        False

    """

    bold: bool = False
    italic: bool = False
    strike: bool = False
    code: bool = False
    link: Optional[str] = None
    heading_level: Optional[int] = None
    list_item: Optional[ListMetadata] = None
    quote_depth: Optional[int] = None
    code_block: Optional[CodeBlockMetadata] = None
    paragraph_id: Optional[int] = None
    presentation: PresentationIntent = PresentationIntent.NONE

    def __post_init__(self) -> None:
        """Enforce code exclusivity and validate block-level tags.

        Raises
        ------
        ValueError
            If the heading level or quote depth is out of range.

        """
        if self.code:
            object.__setattr__(self, "bold", False)
            object.__setattr__(self, "italic", False)
            object.__setattr__(self, "strike", False)
            object.__setattr__(self, "link", None)

        if self.heading_level is not None and not MIN_HEADING_LEVEL <= self.heading_level <= MAX_HEADING_LEVEL:
            raise ValueError(f"Heading level must be 1-6, got {self.heading_level}")

        if self.quote_depth is not None and self.quote_depth < 1:
            raise ValueError(f"Quote depth must be >= 1, got {self.quote_depth}")

    def replace(self, **changes: Any) -> AttributeSet:
        """Return a copy with the given fields changed."""
        return replace(self, **changes)

    @property
    def has_block_tag(self) -> bool:
        """Whether any block-level tag (heading, list, quote, code block) is set."""
        return (
            self.heading_level is not None
            or self.list_item is not None
            or self.quote_depth is not None
            or self.code_block is not None
        )

    @property
    def has_decoration(self) -> bool:
        """Whether the run carries styling that a plain-text rebuild would lose.

        Paragraph identity and quote depth do not count; they are structural
        and can be re-derived from the source.
        """
        return (
            self.bold
            or self.italic
            or self.strike
            or self.code
            or self.link is not None
            or self.heading_level is not None
            or self.list_item is not None
            or self.code_block is not None
        )

    @property
    def style_key(self) -> tuple[bool, bool, bool, bool, Optional[str]]:
        """Inline styling only: (bold, italic, strike, code, link)."""
        return (self.bold, self.italic, self.strike, self.code, self.link)

    def with_presentation_fallback(self) -> AttributeSet:
        """Fold presentation flags into the semantic inline attributes.

        A flag only adds the matching attribute; semantic attributes that are
        already set are never cleared.
        """
        intent = self.presentation
        if intent == PresentationIntent.NONE:
            return self
        return self.replace(
            bold=self.bold or bool(intent & PresentationIntent.STRONGLY_EMPHASIZED),
            italic=self.italic or bool(intent & PresentationIntent.EMPHASIZED),
            strike=self.strike or bool(intent & PresentationIntent.STRIKETHROUGH),
            code=self.code or bool(intent & PresentationIntent.CODE),
        )


PLAIN = AttributeSet()

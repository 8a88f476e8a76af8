#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing and rendering."""
# src/runmark/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from runmark.constants import (
    DEFAULT_CODE_FENCE_MIN,
    DEFAULT_MAX_CONSECUTIVE_NEWLINES,
    DEFAULT_MOVE_EDGE_WHITESPACE,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_PRESERVE_TRAILING_NEWLINE,
    DEFAULT_UNORDERED_MARKER,
    UnorderedMarker,
)
from runmark.options.base import BaseParserOptions, BaseRendererOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~). When False, the
        tildes stay literal text.

    """

    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={
            "help": "Parse strikethrough syntax (~~text~~)",
            "importance": "core",
        },
    )


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    r"""Options for serializing a run sequence back to Markdown text.

    The defaults produce the canonical form: ``-`` bullets, ordered lists
    renumbered from 1, three-backtick minimum fences, and at most one blank
    line between blocks.

    Parameters
    ----------
    max_consecutive_newlines : int or None, default 2
        Upper bound on consecutive newlines in the final output. Longer
        stretches (for example a ``blank`` block of length 3) are collapsed
        to this many. ``None`` disables the cap so exact blank-line counts
        reach the output. Must be at least 2.
    code_fence_min : int, default 3
        Shortest backtick fence used for code blocks. Longer fences are used
        automatically when the content contains backtick runs.
    unordered_marker : {"-", "\*", "+"}, default "-"
        Bullet emitted for unordered list items.
    preserve_trailing_newline : bool, default True
        End the output with exactly one newline when the run text ends with
        a newline, and with none otherwise. When False, the output is
        returned as emitted apart from the newline cap.
    move_edge_whitespace : bool, default True
        Emit leading and trailing spaces of an emphasized group outside its
        markers (``**bold **`` becomes ``**bold** ``) so the output parses
        back as emphasis.

    """

    max_consecutive_newlines: int | None = field(
        default=DEFAULT_MAX_CONSECUTIVE_NEWLINES,
        metadata={
            "help": "Collapse longer newline stretches to this many (None disables the cap)",
            "type": int,
            "importance": "advanced",
        },
    )
    code_fence_min: int = field(
        default=DEFAULT_CODE_FENCE_MIN,
        metadata={
            "help": "Minimum backtick fence length for code blocks",
            "type": int,
            "importance": "advanced",
        },
    )
    unordered_marker: UnorderedMarker = field(
        default=DEFAULT_UNORDERED_MARKER,
        metadata={
            "help": "Bullet character for unordered list items",
            "choices": ["-", "*", "+"],
            "importance": "core",
        },
    )
    preserve_trailing_newline: bool = field(
        default=DEFAULT_PRESERVE_TRAILING_NEWLINE,
        metadata={
            "help": "End output with a single newline iff the run text ends with one",
            "importance": "core",
        },
    )
    move_edge_whitespace: bool = field(
        default=DEFAULT_MOVE_EDGE_WHITESPACE,
        metadata={
            "help": "Move spaces bordering emphasis outside the markers",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges and choices.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if self.max_consecutive_newlines is not None and self.max_consecutive_newlines < 2:
            raise ValueError(
                f"max_consecutive_newlines must be at least 2 or None, got {self.max_consecutive_newlines}"
            )

        if self.code_fence_min < 3:
            raise ValueError(f"code_fence_min must be at least 3, got {self.code_fence_min}")

        if self.unordered_marker not in ("-", "*", "+"):
            raise ValueError(f"unordered_marker must be one of '-', '*', '+', got {self.unordered_marker!r}")

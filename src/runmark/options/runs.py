#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for rendering an AST into a run sequence."""
# src/runmark/options/runs.py


from __future__ import annotations

from dataclasses import dataclass, field

from runmark.constants import (
    DEFAULT_APPEND_TRAILING_NEWLINE,
    DEFAULT_COALESCE_RUNS,
    DEFAULT_NORMALIZE_QUOTE_DEPTH,
)
from runmark.options.base import BaseRendererOptions


@dataclass(frozen=True)
class RunRendererOptions(BaseRendererOptions):
    """Options for the AST-to-run renderer.

    Parameters
    ----------
    normalize_quote_depth : bool, default True
        Run the quote-depth repair pass on the rendered runs when the source
        text is available.
    append_trailing_newline : bool, default True
        Match the source's final newline: append a literal newline run when
        the source ends with one and the run text does not, and drop the
        newline a final list item or code block ends with when the source
        has none.
    coalesce_runs : bool, default True
        Merge adjacent runs that carry identical attributes so every run is a
        maximal span. Code-block runs are never merged.

    """

    normalize_quote_depth: bool = field(
        default=DEFAULT_NORMALIZE_QUOTE_DEPTH,
        metadata={"help": "Repair block-quote depth transitions lost by the parser", "importance": "core"},
    )
    append_trailing_newline: bool = field(
        default=DEFAULT_APPEND_TRAILING_NEWLINE,
        metadata={"help": "Keep the source's trailing newline in the run text", "importance": "core"},
    )
    coalesce_runs: bool = field(
        default=DEFAULT_COALESCE_RUNS,
        metadata={"help": "Merge adjacent runs with identical attributes", "importance": "advanced"},
    )

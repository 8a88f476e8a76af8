#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the run-sequence normalization passes."""
# src/runmark/options/normalizers.py


from __future__ import annotations

from dataclasses import dataclass, field

from runmark.constants import (
    DEFAULT_LIFT_PRESENTATION,
    DEFAULT_QUOTE_DEPTH_STRICT,
    DEFAULT_RESTORE_BLANK_LINES,
)
from runmark.options.base import BaseNormalizerOptions


@dataclass(frozen=True)
class QuoteDepthOptions(BaseNormalizerOptions):
    """Options for the block-quote depth repair pass.

    Parameters
    ----------
    strict : bool, default False
        Raise ``NormalizationError`` instead of logging a warning when the
        pass declines to repair styled runs whose length does not match the
        source.

    """

    strict: bool = field(
        default=DEFAULT_QUOTE_DEPTH_STRICT,
        metadata={"help": "Raise instead of warning when repair is declined", "importance": "advanced"},
    )


@dataclass(frozen=True)
class BlankLineOptions(BaseNormalizerOptions):
    """Options for the display-path blank-line pass.

    Parameters
    ----------
    restore_blank_lines : bool, default True
        Re-insert the source's blank-line stretches into the run text.
    lift_presentation : bool, default True
        Set each run's presentation flags from its emphasis and code attributes.

    """

    restore_blank_lines: bool = field(
        default=DEFAULT_RESTORE_BLANK_LINES,
        metadata={"help": "Re-insert blank-line runs lost by parsing", "importance": "core"},
    )
    lift_presentation: bool = field(
        default=DEFAULT_LIFT_PRESENTATION,
        metadata={"help": "Derive presentation flags from semantic attributes", "importance": "core"},
    )

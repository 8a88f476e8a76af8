#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/runmark/normalizers/__init__.py
"""Run-sequence normalization passes.

- ``QuoteDepthNormalizer``: restores per-line block quote depths
- ``BlankLineNormalizer``: re-inserts blank lines and lifts presentation flags for display
- ``resolve_font_traits``: records font traits from an editing surface as presentation flags

"""

from runmark.normalizers.base import BaseNormalizer
from runmark.normalizers.blank_lines import (
    BlankLineNormalizer,
    BlankLineRun,
    detect_blank_line_runs,
    normalize_blank_lines,
)
from runmark.normalizers.presentation import FontTraitResolver, lift_presentation, resolve_font_traits
from runmark.normalizers.quote_depth import (
    QuoteDepthNormalizer,
    QuoteLine,
    analyze_quote_lines,
    normalize_quote_depth,
    requires_normalization,
    strip_quote_markers,
)

__all__ = [
    "BaseNormalizer",
    "QuoteDepthNormalizer",
    "QuoteLine",
    "analyze_quote_lines",
    "strip_quote_markers",
    "requires_normalization",
    "normalize_quote_depth",
    "BlankLineNormalizer",
    "BlankLineRun",
    "detect_blank_line_runs",
    "normalize_blank_lines",
    "FontTraitResolver",
    "lift_presentation",
    "resolve_font_traits",
]

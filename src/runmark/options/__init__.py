#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the runmark pipeline stages.

Each stage takes a frozen options dataclass; use ``create_updated`` to derive
a modified copy.
"""

from __future__ import annotations

from runmark.options.base import BaseNormalizerOptions, BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from runmark.options.markdown import MarkdownParserOptions, MarkdownRendererOptions
from runmark.options.normalizers import BlankLineOptions, QuoteDepthOptions
from runmark.options.runs import RunRendererOptions

__all__ = [
    "CloneFrozenMixin",
    "BaseParserOptions",
    "BaseRendererOptions",
    "BaseNormalizerOptions",
    "MarkdownParserOptions",
    "MarkdownRendererOptions",
    "RunRendererOptions",
    "QuoteDepthOptions",
    "BlankLineOptions",
]

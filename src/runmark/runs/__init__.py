#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/runmark/runs/__init__.py
"""Run-based rich-text model.

A document is an ordered list of ``Run`` objects, each a span of text with one
immutable ``AttributeSet``. ``RunCollector`` groups a run sequence into the
``Block`` objects the Markdown emitter writes out.
"""

from runmark.runs.attributes import (
    PLAIN,
    AttributeSet,
    CodeBlockMetadata,
    ListMetadata,
    PresentationIntent,
)
from runmark.runs.blocks import (
    BlankBlock,
    Block,
    CodeFenceBlock,
    HeadingBlock,
    ListBlock,
    ParagraphBlock,
    QuoteBlock,
)
from runmark.runs.collector import RunCollector, collect_blocks, split_undecorated_runs
from runmark.runs.run import Run, coalesce_runs, flatten_text, insert_text, split_run_at

__all__ = [
    "PLAIN",
    "AttributeSet",
    "CodeBlockMetadata",
    "ListMetadata",
    "PresentationIntent",
    "Run",
    "coalesce_runs",
    "flatten_text",
    "insert_text",
    "split_run_at",
    "Block",
    "HeadingBlock",
    "ListBlock",
    "QuoteBlock",
    "CodeFenceBlock",
    "ParagraphBlock",
    "BlankBlock",
    "RunCollector",
    "collect_blocks",
    "split_undecorated_runs",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/runmark/renderers/__init__.py
"""Renderers for the runmark pipeline.

- ``RunRenderer``: AST document to run sequence
- ``MarkdownRenderer``: run sequence to canonical Markdown
- ``BasicMarkdownRenderer``: run sequence to bold/italic-only Markdown

"""

from runmark.renderers.base import BaseRenderer
from runmark.renderers.basic import BasicMarkdownRenderer, runs_to_basic_markdown
from runmark.renderers.markdown import MarkdownRenderer, runs_to_markdown
from runmark.renderers.runs import RunRenderer, ast_to_runs

__all__ = [
    "BaseRenderer",
    "RunRenderer",
    "ast_to_runs",
    "MarkdownRenderer",
    "runs_to_markdown",
    "BasicMarkdownRenderer",
    "runs_to_basic_markdown",
]

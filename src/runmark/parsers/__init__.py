#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Markdown parsers producing the runmark AST."""

from runmark.parsers.base import BaseParser
from runmark.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = ["BaseParser", "MarkdownToAstConverter", "markdown_to_ast"]

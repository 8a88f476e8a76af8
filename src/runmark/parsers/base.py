#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/runmark/parsers/base.py
"""Base class for Markdown parsers.

A parser is the collaborator that turns Markdown text into the AST consumed
by the run renderer. Any implementation producing the node kinds of
``runmark.ast`` can be plugged into the pipeline.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from runmark.ast import Document
from runmark.exceptions import InvalidOptionsError
from runmark.options.base import BaseParserOptions
from runmark.utils.text import MarkdownInput, load_markdown_text

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for Markdown parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Parser options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: MarkdownInput) -> Document:
        """Parse Markdown input into an AST document.

        Parameters
        ----------
        input_data : str, bytes, Path, or file-like
            Markdown input

        Returns
        -------
        Document
            AST root

        """

    @staticmethod
    def _load_text_content(input_data: MarkdownInput) -> str:
        """Load the input as Markdown text with LF line endings."""
        return load_markdown_text(input_data)

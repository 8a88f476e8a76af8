#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/runmark/parsers/markdown.py
"""Markdown to AST parser.

This module provides the Markdown-AST collaborator of the pipeline, backed by
mistune in AST mode. mistune tokens outside the supported subset are kept as
``Generic`` nodes (or plain text where they only carry raw text) so the run
renderer can still walk them.

"""

from __future__ import annotations

import logging
from typing import Any, Callable

from runmark.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Generic,
    Heading,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Text,
)
from runmark.constants import DEPS_MARKDOWN, MAX_HEADING_LEVEL, MIN_HEADING_LEVEL
from runmark.exceptions import ParsingError
from runmark.options.markdown import MarkdownParserOptions
from runmark.parsers.base import BaseParser
from runmark.utils.decorators import requires_dependencies
from runmark.utils.text import MarkdownInput

logger = logging.getLogger(__name__)

# Block tokens that carry no content for the run model
_IGNORED_BLOCK_TOKENS = frozenset({"blank_line", "thematic_break"})


class MarkdownToAstConverter(BaseParser):
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Hello\n\nThis is **bold**.")
        >>> [type(child).__name__ for child in doc.children]
        ['Heading', 'Paragraph']

    Without strikethrough:

        >>> options = MarkdownParserOptions(parse_strikethrough=False)
        >>> doc = MarkdownToAstConverter(options).parse("~~kept~~")

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: MarkdownInput) -> Document:
        """Parse Markdown input into an AST Document.

        Parameters
        ----------
        input_data : str, bytes, Path, or file-like
            Markdown input to parse

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ParsingError
            If mistune returns something other than a token list

        """
        markdown_content = self._load_text_content(input_data)

        import mistune

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")

        markdown = mistune.create_markdown(plugins=plugins, renderer=None)
        tokens, _state = markdown.parse(markdown_content)

        if not isinstance(tokens, list):
            raise ParsingError(
                f"Expected a token list from mistune, got {type(tokens).__name__}", parsing_stage="tokenize"
            )

        children = self._process_tokens(tokens)
        logger.debug("Parsed %d top-level blocks from %d characters", len(children), len(markdown_content))
        return Document(children=children)

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune block tokens into AST nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single mistune block token into an AST node.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node or None
            Resulting AST node, or None for tokens without content

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return self._process_paragraph(token)
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(self._children(token)))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type in _IGNORED_BLOCK_TOKENS:
            return None

        return self._process_unknown_block(token)

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        """Process heading token, clamping the level to 1-6."""
        attrs = self._attrs(token)
        level = attrs.get("level", MIN_HEADING_LEVEL)
        if not isinstance(level, int):
            level = MIN_HEADING_LEVEL
        level = min(max(level, MIN_HEADING_LEVEL), MAX_HEADING_LEVEL)

        return Heading(level=level, content=self._process_inline_tokens(self._children(token)))

    def _process_paragraph(self, token: dict[str, Any]) -> Paragraph:
        """Process paragraph or block_text token."""
        return Paragraph(content=self._process_inline_tokens(self._children(token)))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process code block token.

        The language is the first word of the fence info string; the full
        info string is kept in the node metadata.
        """
        code_content = token.get("raw", "")
        info_string = self._attrs(token).get("info")

        metadata: dict[str, Any] = {}
        language = None
        if info_string:
            info_string = info_string.strip()
            metadata["info_string"] = info_string
            parts = info_string.split(maxsplit=1)
            if parts:
                language = parts[0]

        return CodeBlock(content=code_content, language=language, metadata=metadata)

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token and its list_item children."""
        attrs = self._attrs(token)
        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start", 1)

        items = [
            ListItem(children=self._process_tokens(self._children(child)))
            for child in self._children(token)
            if isinstance(child, dict)
        ]
        return List(ordered=ordered, items=items, start=start if isinstance(start, int) else 1)

    def _process_unknown_block(self, token: dict[str, Any]) -> Node | None:
        """Keep an unsupported block token walkable.

        Tokens with children become ``Generic`` nodes over their processed
        children; tokens with only raw text keep that text as a paragraph.
        """
        token_type = token.get("type", "")
        children = self._children(token)
        if children:
            return Generic(kind=token_type, children=self._process_tokens(children))

        raw = token.get("raw") or token.get("text")
        if isinstance(raw, str) and raw.strip():
            return Generic(kind=token_type, children=[Paragraph(content=[Text(content=raw.strip("\n"))])])

        logger.debug("Dropping empty block token of type %r", token_type)
        return None

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        """Handle text token."""
        return Text(content=token.get("raw", ""))

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        """Handle strong token."""
        return Strong(content=self._process_inline_tokens(self._children(token)))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        """Handle emphasis token."""
        return Emphasis(content=self._process_inline_tokens(self._children(token)))

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        """Handle strikethrough token."""
        return Strikethrough(content=self._process_inline_tokens(self._children(token)))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        """Handle codespan token."""
        return Code(content=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        """Handle link token."""
        attrs = self._attrs(token)
        return Link(
            url=attrs.get("url", ""),
            content=self._process_inline_tokens(self._children(token)),
            title=attrs.get("title"),
        )

    def _handle_softbreak_token(self, token: dict[str, Any]) -> LineBreak:
        """Handle softbreak token."""
        return LineBreak(soft=True)

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        """Handle linebreak token."""
        return LineBreak(soft=False)

    def _handle_inline_html_token(self, token: dict[str, Any]) -> Text:
        """Handle inline_html token as literal text."""
        return Text(content=token.get("raw", ""))

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node or None
            Inline AST node

        """
        token_type = token.get("type", "")

        handler_map: dict[str, Callable[[dict[str, Any]], Node]] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "strikethrough": self._handle_strikethrough_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "softbreak": self._handle_softbreak_token,
            "linebreak": self._handle_linebreak_token,
            "inline_html": self._handle_inline_html_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)

        # Images and other unsupported inline tokens keep their text content
        children = self._children(token)
        if children:
            return Generic(kind=token_type, children=self._process_inline_tokens(children))
        raw = token.get("raw")
        if isinstance(raw, str) and raw:
            return Text(content=raw)
        return None

    @staticmethod
    def _attrs(token: dict[str, Any]) -> dict[str, Any]:
        attrs = token.get("attrs", {})
        return attrs if isinstance(attrs, dict) else {}

    @staticmethod
    def _children(token: dict[str, Any]) -> list[dict[str, Any]]:
        children = token.get("children", [])
        return children if isinstance(children, list) else []


def markdown_to_ast(markdown_content: MarkdownInput, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert Markdown to AST.

    This is a convenience function that creates a converter and parses the
    Markdown in one step.

    Parameters
    ----------
    markdown_content : str, bytes, Path, or file-like
        Markdown to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> from runmark.parsers.markdown import markdown_to_ast
    >>> doc = markdown_to_ast("# Hello\n\nWorld")
    >>> len(doc.children)
    2

    """
    converter = MarkdownToAstConverter(options)
    return converter.parse(markdown_content)

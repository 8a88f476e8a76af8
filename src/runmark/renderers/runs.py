#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/runmark/renderers/runs.py
"""AST to run sequence rendering.

``RunRenderer`` walks the AST with an immutable context: every node handler
receives the ``AttributeSet`` in effect for it and passes a derived copy to
its children, so sibling subtrees never see each other's attributes. The
paragraph counter and the emitted runs live on a per-call render session.

"""

from __future__ import annotations

import logging
from typing import Callable, Optional
from urllib.parse import urlsplit

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
    get_node_children,
)
from runmark.constants import MAX_HEADING_LEVEL, MIN_HEADING_LEVEL
from runmark.options.runs import RunRendererOptions
from runmark.renderers.base import BaseRenderer
from runmark.runs.attributes import PLAIN, AttributeSet, CodeBlockMetadata, ListMetadata
from runmark.runs.run import Run, coalesce_runs, flatten_text

logger = logging.getLogger(__name__)


def normalize_link_destination(url: Optional[str]) -> Optional[str]:
    """Return the link destination, or None when it is absent or invalid.

    Parameters
    ----------
    url : str or None
        Raw destination from the parser

    Returns
    -------
    str or None
        The stripped destination, or None if it is empty or not parseable

    Examples
    --------
        >>> normalize_link_destination(" https://example.com ")
        'https://example.com'
        >>> normalize_link_destination("http://[::1") is None
        True

    """
    if url is None:
        return None
    url = url.strip()
    if not url:
        return None
    try:
        urlsplit(url)
    except ValueError:
        return None
    return url


def _trim_final_block_newline(runs: list[Run]) -> list[Run]:
    """Drop the newline a final list item or code block ends with."""
    if not runs:
        return runs
    last = runs[-1]
    if last.attributes.list_item is not None and last.is_newline_only:
        return runs[:-1]
    if last.attributes.code_block is not None and last.text.endswith("\n"):
        return runs[:-1] + [last.with_text(last.text[:-1])]
    return runs


class _RenderSession:
    """Mutable state of one ``RunRenderer.render`` call."""

    def __init__(self) -> None:
        self.runs: list[Run] = []
        self._last_paragraph_id = 0

    def next_paragraph_id(self) -> int:
        self._last_paragraph_id += 1
        return self._last_paragraph_id

    def emit(self, text: str, attributes: AttributeSet) -> None:
        self.runs.append(Run(text, attributes))


class RunRenderer(BaseRenderer):
    """Render an AST document into a run sequence.

    Parameters
    ----------
    options : RunRendererOptions or None, default = None
        Rendering options

    Examples
    --------
        >>> from runmark.ast import Document, Heading, Text
        >>> runs = RunRenderer().render(Document(children=[Heading(level=2, content=[Text("Title")])]))
        >>> runs[0].attributes.heading_level
        2

    """

    def __init__(self, options: RunRendererOptions | None = None):
        """Initialize the run renderer with options."""
        BaseRenderer._validate_options_type(options, RunRendererOptions, "runs")
        options = options or RunRendererOptions()
        super().__init__(options)
        self.options: RunRendererOptions = options

        self._handlers: dict[type, Callable[[Node, AttributeSet, _RenderSession], None]] = {
            Document: self._visit_children,
            Text: self._visit_text,
            LineBreak: self._visit_line_break,
            Strong: self._visit_strong,
            Emphasis: self._visit_emphasis,
            Strikethrough: self._visit_strikethrough,
            Code: self._visit_code,
            Link: self._visit_link,
            Heading: self._visit_heading,
            List: self._visit_list,
            ListItem: self._visit_children,
            BlockQuote: self._visit_block_quote,
            CodeBlock: self._visit_code_block,
            Paragraph: self._visit_paragraph,
            Generic: self._visit_children,
        }

    def render(self, document: Document, source_text: Optional[str] = None) -> list[Run]:
        """Render ``document`` into runs.

        Parameters
        ----------
        document : Document
            AST root
        source_text : str or None, default None
            The Markdown the AST was parsed from. When given and it ends with a
            newline that the run text lacks, a plain newline run is appended.
            When it does not end with a newline, the separator of a final list
            item and the last newline of a final code block are dropped.

        Returns
        -------
        list of Run
            Run sequence in document order

        """
        session = _RenderSession()
        self._visit(document, PLAIN, session)
        runs = session.runs

        if self.options.append_trailing_newline and source_text:
            if not source_text.endswith("\n"):
                runs = _trim_final_block_newline(runs)
            elif not flatten_text(runs).endswith("\n"):
                runs.append(Run("\n", PLAIN))

        if self.options.coalesce_runs:
            runs = coalesce_runs(runs)

        logger.debug("Rendered %d runs", len(runs))
        return runs

    def _visit(self, node: Node, context: AttributeSet, session: _RenderSession) -> None:
        handler = self._handlers.get(type(node), self._visit_children)
        handler(node, context, session)

    def _visit_children(self, node: Node, context: AttributeSet, session: _RenderSession) -> None:
        for child in get_node_children(node):
            self._visit(child, context, session)

    def _visit_text(self, node: Text, context: AttributeSet, session: _RenderSession) -> None:
        session.emit(node.content, context)

    def _visit_line_break(self, node: LineBreak, context: AttributeSet, session: _RenderSession) -> None:
        session.emit("\n", context)

    def _visit_strong(self, node: Strong, context: AttributeSet, session: _RenderSession) -> None:
        self._visit_children(node, context.replace(bold=True), session)

    def _visit_emphasis(self, node: Emphasis, context: AttributeSet, session: _RenderSession) -> None:
        self._visit_children(node, context.replace(italic=True), session)

    def _visit_strikethrough(self, node: Strikethrough, context: AttributeSet, session: _RenderSession) -> None:
        self._visit_children(node, context.replace(strike=True), session)

    def _visit_code(self, node: Code, context: AttributeSet, session: _RenderSession) -> None:
        session.emit(node.content, context.replace(code=True))

    def _visit_link(self, node: Link, context: AttributeSet, session: _RenderSession) -> None:
        destination = normalize_link_destination(node.url)
        if destination is None:
            logger.debug("Ignoring invalid link destination %r", node.url)
            self._visit_children(node, context, session)
            return
        self._visit_children(node, context.replace(link=destination), session)

    def _visit_heading(self, node: Heading, context: AttributeSet, session: _RenderSession) -> None:
        level = min(max(node.level, MIN_HEADING_LEVEL), MAX_HEADING_LEVEL)
        heading_context = context.replace(heading_level=level, paragraph_id=session.next_paragraph_id())
        self._visit_children(node, heading_context, session)

    def _visit_list(self, node: List, context: AttributeSet, session: _RenderSession) -> None:
        kind = "ordered" if node.ordered else "unordered"
        for ordinal, item in enumerate(node.items, start=1):
            item_context = context.replace(list_item=ListMetadata(kind=kind, ordinal=ordinal))
            self._visit(item, item_context, session)
            # Item separator stays attached to the list
            session.emit("\n", item_context)

    def _visit_block_quote(self, node: BlockQuote, context: AttributeSet, session: _RenderSession) -> None:
        quote_context = context.replace(quote_depth=(context.quote_depth or 0) + 1)
        for child in node.children:
            self._visit(child, quote_context, session)

    def _visit_code_block(self, node: CodeBlock, context: AttributeSet, session: _RenderSession) -> None:
        metadata = CodeBlockMetadata(content=node.content, language=node.language)
        session.emit(node.content, context.replace(code_block=metadata))

    def _visit_paragraph(self, node: Paragraph, context: AttributeSet, session: _RenderSession) -> None:
        self._visit_children(node, context.replace(paragraph_id=session.next_paragraph_id()), session)


def ast_to_runs(
    document: Document, source_text: Optional[str] = None, options: RunRendererOptions | None = None
) -> list[Run]:
    """Render an AST document into runs with a one-off ``RunRenderer``."""
    return RunRenderer(options).render(document, source_text)

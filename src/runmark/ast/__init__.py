#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/runmark/ast/__init__.py
"""Abstract Syntax Tree (AST) for the supported Markdown subset.

The Markdown parser produces this tree and the run renderer consumes it.
A tree can also be built by hand and handed straight to the run renderer.

Examples
--------
    >>> from runmark.ast import Document, Paragraph, Strong, Text
    >>> from runmark.renderers.runs import RunRenderer
    >>> doc = Document(children=[Paragraph(content=[Strong(content=[Text("Hi")])])])
    >>> [run.text for run in RunRenderer().render(doc)]
    ['Hi']

"""

from runmark.ast.nodes import (
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

__all__ = [
    "Node",
    "Document",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "BlockQuote",
    "List",
    "ListItem",
    "Text",
    "Emphasis",
    "Strong",
    "Strikethrough",
    "Code",
    "Link",
    "LineBreak",
    "Generic",
    "get_node_children",
]

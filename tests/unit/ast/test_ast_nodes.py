#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_ast_nodes.py
"""Unit tests for AST node classes."""

import pytest

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
    Paragraph,
    Strong,
    Text,
    get_node_children,
)


@pytest.mark.unit
class TestNodes:
    """Tests for node construction."""

    def test_heading_level_valid(self):
        """Test headings accept levels 1 through 6."""
        for level in range(1, 7):
            assert Heading(level=level).level == level

    @pytest.mark.parametrize("level", [0, 7])
    def test_heading_level_invalid(self, level):
        """Test levels outside 1-6 raise ValueError."""
        with pytest.raises(ValueError):
            Heading(level=level)

    def test_defaults(self):
        """Test default child lists and metadata are independent."""
        first, second = Paragraph(), Paragraph()
        first.content.append(Text("x"))
        assert second.content == []
        assert first.metadata == {}

    def test_code_block_language_optional(self):
        """Test code blocks default to no language."""
        assert CodeBlock(content="x\n").language is None

    def test_list_start_default(self):
        """Test lists start at 1 by default."""
        assert List(ordered=True).start == 1

    def test_line_break_hard_by_default(self):
        """Test line breaks are hard unless marked soft."""
        assert not LineBreak().soft


@pytest.mark.unit
class TestGetNodeChildren:
    """Tests for uniform child access."""

    def test_container_children(self):
        """Test block containers return their children."""
        para = Paragraph(content=[Text("a")])
        for node in (Document(children=[para]), BlockQuote(children=[para]), ListItem(children=[para])):
            assert get_node_children(node) == [para]

    def test_inline_content(self):
        """Test inline containers return their content."""
        text = Text("a")
        for node in (Emphasis(content=[text]), Strong(content=[text]), Link(url="u", content=[text])):
            assert get_node_children(node) == [text]

    def test_list_items(self):
        """Test lists return their items."""
        item = ListItem()
        assert get_node_children(List(ordered=False, items=[item])) == [item]

    def test_generic_children(self):
        """Test generic nodes expose their children."""
        text = Text("alt")
        assert get_node_children(Generic(kind="image", children=[text])) == [text]

    def test_leaves(self):
        """Test leaf nodes have no children."""
        for node in (Text("a"), Code("x"), LineBreak(), CodeBlock(content="")):
            assert get_node_children(node) == []

    def test_returns_copy(self):
        """Test the returned list is a copy."""
        doc = Document(children=[Paragraph()])
        get_node_children(doc).clear()
        assert len(doc.children) == 1

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_round_trip.py
"""Integration tests for Markdown -> runs -> Markdown round trips.

Test Coverage:
- Canonical documents survive unchanged
- Canonicalization (list numbering, bullets, blank lines, line endings)
- Nested quote depth transitions
- Escaped syntax characters
- Property: round trip is idempotent
"""

import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from runmark import from_runs, round_trip, to_runs

_WORD = st.text(alphabet=string.ascii_letters + string.digits, min_size=1, max_size=8)
_STYLED_WORD = st.tuples(_WORD, st.sampled_from(["", "*", "**"])).map(lambda pair: f"{pair[1]}{pair[0]}{pair[1]}")
_INLINE = st.lists(_STYLED_WORD, min_size=1, max_size=6).map(" ".join)
_HEADING = st.tuples(st.integers(min_value=1, max_value=3), _INLINE).map(lambda pair: f"{'#' * pair[0]} {pair[1]}")
_ITEMS = st.lists(_INLINE, min_size=1, max_size=3)
_LIST = st.one_of(
    _ITEMS.map(lambda items: "\n".join(f"- {item}" for item in items)),
    _ITEMS.map(lambda items: "\n".join(f"{number}. {item}" for number, item in enumerate(items, start=1))),
)
_QUOTE = _INLINE.map(lambda text: f"> {text}")
_BLOCKS = {"paragraph": _INLINE, "heading": _HEADING, "list": _LIST}


@st.composite
def markdown_documents(draw):
    """Canonical documents of paragraphs, headings and lists, optionally ending in a quote.

    Two lists are never adjacent.
    """
    blocks = []
    previous = None
    for _ in range(draw(st.integers(min_value=1, max_value=4))):
        kinds = ["paragraph", "heading"] if previous == "list" else ["paragraph", "heading", "list"]
        previous = draw(st.sampled_from(kinds))
        blocks.append(draw(_BLOCKS[previous]))
    if draw(st.booleans()):
        blocks.append(draw(_QUOTE))
    return "\n\n".join(blocks) + draw(st.sampled_from(["", "\n"]))


@pytest.mark.integration
class TestCanonicalDocuments:
    """Canonical Markdown comes back unchanged."""

    def test_sample_document(self, sample_markdown):
        """Test a document with every block kind."""
        assert round_trip(sample_markdown) == sample_markdown

    def test_sample_document_idempotent(self, sample_markdown):
        """Test a second round trip changes nothing."""
        once = round_trip(sample_markdown)
        assert round_trip(once) == once

    @pytest.mark.parametrize(
        "markdown",
        [
            "``code`tick``\n",
            "~~***text***~~\n",
            "**a *b* c**\n",
            "[site](https://example.com)\n",
            "```python\nx = 1\n```\n",
            "> a\n>\n> b\n",
            "1. one\n2. two\n",
            "### Third level\n\nBody text.\n",
        ],
    )
    def test_unchanged(self, markdown):
        """Test canonical snippets round trip exactly."""
        assert round_trip(markdown) == markdown

    @pytest.mark.parametrize(
        "markdown",
        ["*x*", "- a\n- b", "1. one\n2. two", "```python\nx = 1\n```", "# Title", "> quoted"],
    )
    def test_missing_trailing_newline_kept_missing(self, markdown):
        """Test output has no final newline when the input has none."""
        assert round_trip(markdown) == markdown


@pytest.mark.integration
class TestCanonicalization:
    """Non-canonical Markdown is rewritten in canonical form."""

    def test_ordered_list_renumbered(self):
        """Test ordered lists restart at 1."""
        assert round_trip("3. third\n4. fourth\n") == "1. third\n2. fourth\n"

    def test_bullet_normalized(self):
        """Test any bullet becomes the configured marker."""
        assert round_trip("* a\n* b\n") == "- a\n- b\n"
        assert round_trip("- a\n- b\n", unordered_marker="+") == "+ a\n+ b\n"

    def test_blank_lines_collapsed(self):
        """Test several blank lines become one."""
        assert round_trip("A\n\n\nB\n") == "A\n\nB\n"

    def test_crlf(self):
        """Test CRLF input produces LF output."""
        assert round_trip("# T\r\n\r\nbody\r\n") == "# T\n\nbody\n"

    def test_bytes_input(self):
        """Test UTF-8 bytes are accepted."""
        assert round_trip("**é**\n".encode("utf-8")) == "**é**\n"


@pytest.mark.integration
class TestNestedQuotes:
    """Quote depth transitions survive the round trip."""

    SOURCE = "> Outer\n> > Inner\n> Back to outer\n"

    def test_depths(self):
        """Test each line keeps its own depth."""
        runs = to_runs(self.SOURCE)
        depths = [run.attributes.quote_depth for run in runs if run.text.strip()]
        assert depths == [1, 2, 1]

    def test_round_trip(self):
        """Test the shallower last line is written at its own depth."""
        assert round_trip(self.SOURCE) == self.SOURCE

    def test_from_runs_matches_round_trip(self):
        """Test serializing to_runs output equals round_trip."""
        assert from_runs(to_runs(self.SOURCE)) == round_trip(self.SOURCE)


@pytest.mark.integration
class TestEscapes:
    """Escaped syntax characters stay literal."""

    @pytest.mark.parametrize("markdown", ["\\*x\\*\n", "\\_x\\_\n", "\\[x\\]\n", "\\`x\\`\n", "a \\~ b\n"])
    def test_escape_round_trip(self, markdown):
        """Test escaped characters are escaped again on output."""
        assert round_trip(markdown) == markdown

    def test_escaped_text_is_plain(self):
        """Test escaped markers do not produce emphasis."""
        (run, _newline) = to_runs("\\*x\\*\n")
        assert run.text == "*x*"
        assert not run.attributes.italic


@pytest.mark.integration
class TestProperties:
    """Property-based round trip checks."""

    @given(markdown_documents())
    def test_canonical_documents_round_trip(self, markdown):
        """Property: canonical documents of styled words round trip exactly."""
        assert round_trip(markdown) == markdown

    @given(markdown_documents())
    def test_idempotent(self, markdown):
        """Property: round tripping canonical output changes nothing."""
        once = round_trip(markdown)
        assert round_trip(once) == once

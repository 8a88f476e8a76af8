"""runmark - A bridge between Markdown text and run-based rich text.

runmark parses a Markdown subset into a sequence of text runs, each a span
of characters sharing one immutable attribute set (emphasis, link, heading
level, list position, block quote depth, code block, paragraph identity),
and serializes such run sequences back into canonical Markdown. For the
supported subset the round trip reproduces the source exactly.

Supported Markdown
------------------
- ATX headings, paragraphs with soft and hard line breaks
- Bold, italic, strikethrough, inline code and links
- Ordered and unordered lists (ordered lists are renumbered from 1)
- Nested block quotes and fenced code blocks

Requirements
------------
- Python 3.10+
- mistune 3 for parsing

Examples
--------
Round trip:

    >>> from runmark import round_trip
    >>> round_trip("> Outer\\n> > Inner\\n> Back to outer\\n")
    '> Outer\\n> > Inner\\n> Back to outer\\n'

Working with runs:

    >>> from runmark import from_runs, to_runs
    >>> runs = to_runs("~~***text***~~\\n")
    >>> from_runs(runs)
    '~~***text***~~\\n'

See Also
--------
runmark.runs : Run and attribute model
runmark.normalizers : Structural repair passes

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "runmark requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from runmark.api import (
    from_runs,
    round_trip,
    to_ast,
    to_basic_markdown,
    to_display_runs,
    to_runs,
)
from runmark.exceptions import (
    DependencyError,
    NormalizationError,
    ParsingError,
    RenderingError,
    RunmarkError,
    ValidationError,
)
from runmark.options import (
    BlankLineOptions,
    MarkdownParserOptions,
    MarkdownRendererOptions,
    QuoteDepthOptions,
    RunRendererOptions,
)
from runmark.runs import AttributeSet, CodeBlockMetadata, ListMetadata, PresentationIntent, Run

__all__ = [
    "__version__",
    # Pipeline
    "to_ast",
    "to_runs",
    "to_display_runs",
    "from_runs",
    "round_trip",
    "to_basic_markdown",
    # Run model
    "Run",
    "AttributeSet",
    "ListMetadata",
    "CodeBlockMetadata",
    "PresentationIntent",
    # Options
    "MarkdownParserOptions",
    "RunRendererOptions",
    "QuoteDepthOptions",
    "BlankLineOptions",
    "MarkdownRendererOptions",
    # Exceptions
    "RunmarkError",
    "ValidationError",
    "ParsingError",
    "RenderingError",
    "NormalizationError",
    "DependencyError",
]

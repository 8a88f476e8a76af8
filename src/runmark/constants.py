#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the runmark library.

This module centralizes the hardcoded values used across the Markdown/run
pipeline: literal types, the escape sets, Markdown syntax markers, and the
default option values.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Markdown Syntax - Markers and escape sets shared by the emitters
3. Defaults - Default option values
4. Dependencies - Collaborator package requirements
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ListKind = Literal["ordered", "unordered"]
UnorderedMarker = Literal["-", "*", "+"]

# =============================================================================
# Markdown Syntax
# =============================================================================

QUOTE_MARKER = ">"
HEADING_MARKER = "#"
BOLD_MARKER = "**"
ITALIC_MARKER = "*"
STRIKE_MARKER = "~~"
CODE_FENCE_CHAR = "`"

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6

# Characters backslash-escaped in plain inline text
MARKDOWN_ESCAPE_CHARS = frozenset("\\*_[]()`~")

# Characters backslash-escaped in link destinations
LINK_DESTINATION_ESCAPE_CHARS = frozenset(" ()[]")

# Characters moved outside emphasis wrappers when they border a styled group
EDGE_WHITESPACE_CHARS = " \t"

# Characters always kept outside emphasis wrappers
EDGE_BREAK_CHARS = "\n"

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_PARSE_STRIKETHROUGH = True

DEFAULT_NORMALIZE_QUOTE_DEPTH = True
DEFAULT_APPEND_TRAILING_NEWLINE = True
DEFAULT_COALESCE_RUNS = True

DEFAULT_QUOTE_DEPTH_STRICT = False

DEFAULT_RESTORE_BLANK_LINES = True
DEFAULT_LIFT_PRESENTATION = True

DEFAULT_MAX_CONSECUTIVE_NEWLINES: int | None = 2
DEFAULT_CODE_FENCE_MIN = 3
DEFAULT_UNORDERED_MARKER: UnorderedMarker = "-"
DEFAULT_PRESERVE_TRAILING_NEWLINE = True
DEFAULT_MOVE_EDGE_WHITESPACE = True

# =============================================================================
# Dependencies
# =============================================================================

# (install_name, import_name, version_spec)
DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/runmark/utils/escape.py
"""Markdown escaping utilities.

This module provides the escape functions shared by the Markdown emitters:
plain-text escaping, link destination escaping, and backtick fence sizing
for inline code and fenced code blocks.

"""

from __future__ import annotations

from runmark.constants import CODE_FENCE_CHAR, LINK_DESTINATION_ESCAPE_CHARS, MARKDOWN_ESCAPE_CHARS


def escape_markdown_text(text: str) -> str:
    r"""Backslash-escape Markdown syntax characters in plain text.

    Escaping is a single left-to-right pass, so a literal backslash becomes a
    double backslash and an already escaped sequence is never escaped twice
    by a later step.

    Parameters
    ----------
    text : str
        Plain text (never the content of a code span)

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_markdown_text("2 * 3 = [six]")
        '2 \\* 3 = \\[six\\]'
        >>> escape_markdown_text("C:\\temp")
        'C:\\\\temp'

    """
    if not text:
        return text
    return "".join("\\" + char if char in MARKDOWN_ESCAPE_CHARS else char for char in text)


def escape_link_destination(url: str) -> str:
    r"""Escape spaces, parentheses and brackets in a link destination.

    Parameters
    ----------
    url : str
        Link target

    Returns
    -------
    str
        Destination safe for ``[text](destination)``

    Examples
    --------
        >>> escape_link_destination("https://example.com/a (1)")
        'https://example.com/a\\ \\(1\\)'

    """
    return "".join("\\" + char if char in LINK_DESTINATION_ESCAPE_CHARS else char for char in url)


def longest_run(text: str, char: str = CODE_FENCE_CHAR) -> int:
    """Return the length of the longest consecutive run of ``char`` in ``text``.

    Parameters
    ----------
    text : str
        Text to scan
    char : str, default '`'
        Single character to count

    Returns
    -------
    int
        Longest run length, 0 when ``char`` does not occur

    """
    longest = 0
    current = 0
    for c in text:
        if c == char:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def escape_inline_code(code: str, delimiter: str = CODE_FENCE_CHAR) -> tuple[str, str]:
    """Escape inline code and determine the backtick fence to wrap it in.

    The fence is one backtick longer than the longest backtick run inside
    the code. Content that starts or ends with a backtick is padded with one
    space on each side, which CommonMark strips again when parsing.

    Parameters
    ----------
    code : str
        Code content to escape
    delimiter : str, default = '`'
        Fence character

    Returns
    -------
    tuple[str, str]
        (escaped_code, fence_to_use)

    Examples
    --------
        >>> escape_inline_code("simple code")
        ('simple code', '`')
        >>> escape_inline_code("code`tick")
        ('code`tick', '``')
        >>> escape_inline_code("`x")
        (' `x ', '``')

    """
    if not code:
        return code, delimiter

    max_consecutive = longest_run(code, delimiter)
    if max_consecutive == 0:
        return code, delimiter

    fence = delimiter * (max_consecutive + 1)

    if code.startswith(delimiter) or code.endswith(delimiter):
        code = " " + code + " "

    return code, fence


def code_block_fence(content: str, minimum: int = 3) -> str:
    """Return the backtick fence for a fenced code block.

    Parameters
    ----------
    content : str
        Code block content
    minimum : int, default 3
        Shortest fence allowed

    Returns
    -------
    str
        ``max(minimum, longest internal backtick run + 1)`` backticks

    """
    return CODE_FENCE_CHAR * max(minimum, longest_run(content) + 1)

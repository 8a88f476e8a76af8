#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/runmark/utils/text.py
"""Loading Markdown input as normalized text."""

from __future__ import annotations

import re
from pathlib import Path
from typing import IO, Union

from runmark.exceptions import ValidationError

MarkdownInput = Union[str, bytes, Path, IO[bytes], IO[str]]

_LINE_ENDING_RE = re.compile(r"\r\n?")


def normalize_line_endings(text: str) -> str:
    r"""Convert CRLF and lone CR line endings to LF.

    Examples
    --------
        >>> normalize_line_endings("a\r\nb\rc\n")
        'a\nb\nc\n'

    """
    return _LINE_ENDING_RE.sub("\n", text)


def decode_markdown_bytes(data: bytes) -> str:
    """Decode UTF-8 Markdown bytes, dropping a leading byte order mark.

    Raises
    ------
    ValidationError
        If the data is not valid UTF-8

    """
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ValidationError(
            "Markdown input must be UTF-8 encoded", parameter_name="source", original_error=e
        ) from e


def load_markdown_text(source: MarkdownInput) -> str:
    """Load Markdown source from the supported input types.

    Strings are always treated as Markdown content, never as file paths; pass
    a ``Path`` to read a file.

    Parameters
    ----------
    source : str, bytes, Path, or file-like
        Markdown content, UTF-8 bytes, a path to a UTF-8 file, or a binary
        or text stream

    Returns
    -------
    str
        Markdown text with LF line endings

    Raises
    ------
    ValidationError
        If the input type is not supported or bytes are not UTF-8

    """
    if isinstance(source, str):
        text = source
    elif isinstance(source, bytes):
        text = decode_markdown_bytes(source)
    elif isinstance(source, Path):
        text = decode_markdown_bytes(source.read_bytes())
    elif hasattr(source, "read"):
        content = source.read()
        text = decode_markdown_bytes(content) if isinstance(content, bytes) else content
    else:
        raise ValidationError(
            f"Unsupported Markdown input type: {type(source).__name__}",
            parameter_name="source",
            parameter_value=type(source),
        )
    return normalize_line_endings(text)

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/runmark/renderers/base.py
"""Base class for runmark renderers.

Renderers turn one representation into the next: ``RunRenderer`` turns an
AST into runs, ``MarkdownRenderer`` and ``BasicMarkdownRenderer`` turn runs
into Markdown text.

"""

from __future__ import annotations

from abc import ABC
from pathlib import Path
from typing import IO, Union

from runmark.exceptions import InvalidOptionsError
from runmark.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Shared behavior for all renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Renderer-specific options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        r"""Write text output to a file path or stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            File path, binary stream (UTF-8 encoded), or text stream

        Raises
        ------
        TypeError
            If output type is not supported

        Examples
        --------
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("# Hello\n", buffer)
            >>> buffer.getvalue()
            '# Hello\n'

        """
        if isinstance(output, (str, Path)):
            Path(output).write_text(text, encoding="utf-8", newline="\n")
        elif hasattr(output, "write"):
            try:
                output.write(text)  # type: ignore[arg-type]
            except TypeError:
                output.write(text.encode("utf-8"))  # type: ignore[arg-type]
        else:
            raise TypeError(f"Unsupported output type: {type(output).__name__}")

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for parser, renderer and normalizer options.

This module defines the foundation classes for the frozen option dataclasses
used throughout the runmark pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        Raises
        ------
        TypeError
            If a keyword does not name a field of the options class

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Parsers turn Markdown source text into the AST consumed by the run
    renderer.

    Notes
    -----
    Subclasses should define parser-specific options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate field values; subclasses extend this."""


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Renderers turn one representation into the next: the AST into runs, or
    runs into Markdown text.

    Notes
    -----
    Subclasses should define renderer-specific options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate field values; subclasses extend this."""


@dataclass(frozen=True)
class BaseNormalizerOptions(CloneFrozenMixin):
    """Base class for run-sequence normalizer options."""

    def __post_init__(self) -> None:
        """Validate field values; subclasses extend this."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/runmark/normalizers/base.py
"""Base class for run-sequence normalization passes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from runmark.exceptions import InvalidOptionsError
from runmark.options.base import BaseNormalizerOptions
from runmark.runs.run import Run


class BaseNormalizer(ABC):
    """A pass that re-derives structure from the original Markdown source.

    Normalizers never fail on data: when a pass cannot safely improve the
    run sequence it returns its input unchanged.

    Parameters
    ----------
    options : BaseNormalizerOptions or None, default = None
        Pass-specific options

    """

    def __init__(self, options: BaseNormalizerOptions | None = None):
        """Initialize the normalizer with optional configuration."""
        self.options = options

    @staticmethod
    def _validate_options_type(
        options: BaseNormalizerOptions | None, expected_type: type, normalizer_name: str
    ) -> None:
        """Validate that options are of the correct type for this normalizer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=normalizer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def normalize(self, runs: Sequence[Run], source: str) -> list[Run]:
        """Return a repaired copy of ``runs`` using the Markdown ``source``."""
        pass

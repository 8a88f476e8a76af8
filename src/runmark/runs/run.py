#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/runmark/runs/run.py
"""The ``Run`` type and helpers over run sequences.

A run sequence is an ordered ``list[Run]``; concatenating the run texts gives
the flattened character stream. Helpers here never mutate their input and
always return new lists.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from runmark.runs.attributes import PLAIN, AttributeSet


@dataclass(frozen=True)
class Run:
    """A span of text sharing one attribute set.

    Parameters
    ----------
    text : str
        Run text
    attributes : AttributeSet, default plain
        Attributes applied to every character of ``text``

    """

    text: str
    attributes: AttributeSet = field(default=PLAIN)

    def with_text(self, text: str) -> Run:
        """Return a run with the same attributes and different text."""
        return Run(text, self.attributes)

    def with_attributes(self, attributes: AttributeSet) -> Run:
        """Return a run with the same text and different attributes."""
        return Run(self.text, attributes)

    @property
    def is_newline_only(self) -> bool:
        """Whether the text is one or more newlines and nothing else."""
        return bool(self.text) and not self.text.strip("\n")


def flatten_text(runs: Iterable[Run]) -> str:
    """Concatenate the text of all runs."""
    return "".join(run.text for run in runs)


def coalesce_runs(runs: Iterable[Run]) -> list[Run]:
    """Merge adjacent runs with identical attributes and drop empty runs.

    Code-block runs are kept as they are, including empty ones, since each
    stands for one whole block.

    Parameters
    ----------
    runs : iterable of Run
        Input sequence

    Returns
    -------
    list of Run
        Sequence of maximal runs

    Examples
    --------
        >>> [run.text for run in coalesce_runs([Run("a"), Run("b"), Run("")])]
        ['ab']

    """
    merged: list[Run] = []
    for run in runs:
        if run.attributes.code_block is not None:
            merged.append(run)
            continue
        if not run.text:
            continue
        if merged and merged[-1].attributes == run.attributes and merged[-1].attributes.code_block is None:
            merged[-1] = merged[-1].with_text(merged[-1].text + run.text)
        else:
            merged.append(run)
    return merged


def split_run_at(runs: Sequence[Run], offset: int) -> tuple[list[Run], list[Run]]:
    """Split a run sequence at a character offset of the flattened text.

    A run straddling the offset is cut in two, both halves keeping its
    attributes.

    Parameters
    ----------
    runs : sequence of Run
        Input sequence
    offset : int
        Character offset, 0 to the total length inclusive

    Returns
    -------
    tuple of (list of Run, list of Run)
        Runs before and after the offset

    Raises
    ------
    ValueError
        If ``offset`` is outside the flattened text

    """
    total = sum(len(run.text) for run in runs)
    if not 0 <= offset <= total:
        raise ValueError(f"Offset {offset} outside run text of length {total}")

    head: list[Run] = []
    tail: list[Run] = []
    position = 0
    for run in runs:
        end = position + len(run.text)
        if end <= offset:
            head.append(run)
        elif position >= offset:
            tail.append(run)
        else:
            cut = offset - position
            head.append(run.with_text(run.text[:cut]))
            tail.append(run.with_text(run.text[cut:]))
        position = end
    return head, tail


def insert_text(runs: Sequence[Run], offset: int, text: str, attributes: AttributeSet = PLAIN) -> list[Run]:
    """Insert a new run at a character offset of the flattened text.

    Parameters
    ----------
    runs : sequence of Run
        Input sequence
    offset : int
        Character offset, 0 to the total length inclusive
    text : str
        Text of the inserted run
    attributes : AttributeSet, default plain
        Attributes of the inserted run

    Returns
    -------
    list of Run
        New sequence containing the inserted run

    """
    head, tail = split_run_at(runs, offset)
    return head + [Run(text, attributes)] + tail

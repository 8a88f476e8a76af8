#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/runmark/normalizers/presentation.py
"""Presentation flag helpers.

``lift_presentation`` copies the semantic emphasis attributes into the
generic presentation flags so a plain rich-text surface can display them.
``resolve_font_traits`` goes the other way for runs coming back from such a
surface: a caller-supplied resolver reports bold/italic font traits, which
are recorded as presentation flags the collector then honors.

"""

from __future__ import annotations

from typing import Callable, Iterable

from runmark.runs.attributes import PresentationIntent
from runmark.runs.run import Run

# Returns (is_bold, is_italic) for a run
FontTraitResolver = Callable[[Run], tuple[bool, bool]]


def lift_presentation(runs: Iterable[Run]) -> list[Run]:
    """Set presentation flags from semantic emphasis and code attributes.

    Code wins over emphasis: a code run gets ``CODE`` and loses any
    emphasis flags. Existing flags are otherwise kept.

    Parameters
    ----------
    runs : iterable of Run
        Input sequence

    Returns
    -------
    list of Run
        Runs with updated presentation flags

    Examples
    --------
        >>> from runmark.runs import AttributeSet
        >>> lift_presentation([Run("x", AttributeSet(bold=True))])[0].attributes.presentation
        <PresentationIntent.STRONGLY_EMPHASIZED: 2>

    """
    lifted = []
    for run in runs:
        attributes = run.attributes
        intent = attributes.presentation
        if attributes.code:
            intent = (intent | PresentationIntent.CODE) & ~(
                PresentationIntent.STRONGLY_EMPHASIZED | PresentationIntent.EMPHASIZED
            )
        else:
            if attributes.bold:
                intent |= PresentationIntent.STRONGLY_EMPHASIZED
            if attributes.italic:
                intent |= PresentationIntent.EMPHASIZED
            if attributes.strike:
                intent |= PresentationIntent.STRIKETHROUGH

        if intent != attributes.presentation:
            run = run.with_attributes(attributes.replace(presentation=intent))
        lifted.append(run)
    return lifted


def resolve_font_traits(runs: Iterable[Run], resolver: FontTraitResolver) -> list[Run]:
    """Record font traits reported by ``resolver`` as presentation flags.

    Runs marked as code, semantically or through their presentation flags,
    are passed through without calling the resolver. A ``True`` answer adds
    the matching flag; a ``False`` answer never removes one.

    Parameters
    ----------
    runs : iterable of Run
        Runs from an editing surface
    resolver : callable
        ``resolver(run) -> (is_bold, is_italic)``

    Returns
    -------
    list of Run
        Runs with added presentation flags

    """
    resolved = []
    for run in runs:
        attributes = run.attributes
        if attributes.code or PresentationIntent.CODE in attributes.presentation:
            resolved.append(run)
            continue

        is_bold, is_italic = resolver(run)
        intent = attributes.presentation
        if is_bold:
            intent |= PresentationIntent.STRONGLY_EMPHASIZED
        if is_italic:
            intent |= PresentationIntent.EMPHASIZED

        if intent != attributes.presentation:
            run = run.with_attributes(attributes.replace(presentation=intent))
        resolved.append(run)
    return resolved

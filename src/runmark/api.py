#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/runmark/api.py
"""Public entry points for the Markdown/run pipeline.

Parsing direction::

    Markdown --(mistune)--> AST --(RunRenderer)--> runs --(QuoteDepthNormalizer)--> runs

Serialization direction::

    runs --(RunCollector)--> blocks --(MarkdownRenderer)--> Markdown

Every function takes optional pre-built options objects; keyword arguments
override individual fields of those objects (or of the defaults).

"""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Optional, Sequence, Union

from runmark.ast import Document
from runmark.exceptions import ParsingError, RenderingError, RunmarkError
from runmark.normalizers.blank_lines import BlankLineNormalizer
from runmark.normalizers.quote_depth import QuoteDepthNormalizer
from runmark.options.base import CloneFrozenMixin
from runmark.options.markdown import MarkdownParserOptions, MarkdownRendererOptions
from runmark.options.normalizers import BlankLineOptions, QuoteDepthOptions
from runmark.options.runs import RunRendererOptions
from runmark.parsers.markdown import MarkdownToAstConverter
from runmark.renderers.basic import BasicMarkdownRenderer
from runmark.renderers.markdown import MarkdownRenderer
from runmark.renderers.runs import RunRenderer
from runmark.runs.run import Run
from runmark.utils.decorators import debug_timer
from runmark.utils.text import MarkdownInput, load_markdown_text

logger = logging.getLogger(__name__)


def _split_kwargs(kwargs: dict[str, Any], *option_groups: Union[type, tuple[type, ...]]) -> list[dict[str, Any]]:
    """Split keyword arguments among options classes by field name.

    Each group is an options class or a tuple of them. A keyword naming a
    field in several groups is passed to each of them. Keywords matching no
    group are logged and skipped.
    """
    split: list[dict[str, Any]] = []
    matched: set[str] = set()
    for group in option_groups:
        classes = group if isinstance(group, tuple) else (group,)
        names = {f.name for options_class in classes for f in fields(options_class)}
        split.append({key: value for key, value in kwargs.items() if key in names})
        matched.update(names)

    unmatched = set(kwargs) - matched
    if unmatched:
        logger.debug(f"Skipping unknown options: {sorted(unmatched)}")
    return split


def _resolve_options(options: Optional[CloneFrozenMixin], options_class: type, overrides: dict[str, Any]) -> Any:
    """Apply keyword overrides to the given options, or to the defaults."""
    if options is None:
        return options_class(**overrides) if overrides else None
    if overrides:
        return options.create_updated(**overrides)
    return options


def _parse(text: str, parser_options: Optional[MarkdownParserOptions]) -> Document:
    try:
        with debug_timer(logger, "Parsing (markdown to AST)"):
            return MarkdownToAstConverter(parser_options).parse(text)
    except RunmarkError:
        raise
    except Exception as e:
        raise ParsingError(f"AST conversion failed: {e!r}", parsing_stage="ast_conversion", original_error=e) from e


def _render_runs(
    text: str,
    parser_options: Optional[MarkdownParserOptions],
    run_options: Optional[RunRendererOptions],
    quote_depth_options: Optional[QuoteDepthOptions],
) -> list[Run]:
    document = _parse(text, parser_options)
    run_renderer = RunRenderer(run_options)

    try:
        with debug_timer(logger, "Rendering (AST to runs)"):
            runs = run_renderer.render(document, source_text=text)

        if run_renderer.options.normalize_quote_depth:
            with debug_timer(logger, "Quote depth normalization"):
                runs = QuoteDepthNormalizer(quote_depth_options).normalize(runs, text)
    except RunmarkError:
        raise
    except Exception as e:
        raise ParsingError(f"Run conversion failed: {e!r}", parsing_stage="run_conversion", original_error=e) from e

    return runs


def to_ast(
    source: MarkdownInput,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    **kwargs: Any,
) -> Document:
    r"""Parse Markdown into an AST document.

    Parameters
    ----------
    source : str, bytes, Path, or file-like
        Markdown text. A ``str`` is always treated as content, never as a
        path; pass a ``Path`` to read a file.
    parser_options : MarkdownParserOptions, optional
        Parser options
    kwargs : Any
        Individual parser options that override settings in parser_options

    Returns
    -------
    Document
        AST Document node

    Raises
    ------
    ValidationError
        If the source type is unsupported or bytes are not valid UTF-8
    DependencyError
        If mistune is missing or too old
    ParsingError
        If parsing fails

    Examples
    --------
        >>> doc = to_ast("# Title\n\nBody")
        >>> [type(child).__name__ for child in doc.children]
        ['Heading', 'Paragraph']

    """
    (parser_kwargs,) = _split_kwargs(kwargs, MarkdownParserOptions)
    final_parser_options = _resolve_options(parser_options, MarkdownParserOptions, parser_kwargs)
    return _parse(load_markdown_text(source), final_parser_options)


def to_runs(
    source: MarkdownInput,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    run_options: Optional[RunRendererOptions] = None,
    quote_depth_options: Optional[QuoteDepthOptions] = None,
    **kwargs: Any,
) -> list[Run]:
    r"""Parse Markdown into a run sequence.

    The AST is rendered into runs and, unless disabled in ``run_options``,
    block quote depths are repaired against the source.

    Parameters
    ----------
    source : str, bytes, Path, or file-like
        Markdown text
    parser_options : MarkdownParserOptions, optional
        Parser options
    run_options : RunRendererOptions, optional
        Run renderer options
    quote_depth_options : QuoteDepthOptions, optional
        Quote depth repair options
    kwargs : Any
        Individual options that override fields of the options objects

    Returns
    -------
    list of Run
        Run sequence

    Raises
    ------
    ParsingError
        If parsing or run rendering fails
    NormalizationError
        In strict quote depth mode, if repair is declined

    Examples
    --------
        >>> runs = to_runs("**Hello**\n")
        >>> [(run.text, run.attributes.bold) for run in runs]
        [('Hello', True), ('\n', False)]

    """
    parser_kwargs, run_kwargs, quote_kwargs = _split_kwargs(
        kwargs, MarkdownParserOptions, RunRendererOptions, QuoteDepthOptions
    )
    text = load_markdown_text(source)
    return _render_runs(
        text,
        _resolve_options(parser_options, MarkdownParserOptions, parser_kwargs),
        _resolve_options(run_options, RunRendererOptions, run_kwargs),
        _resolve_options(quote_depth_options, QuoteDepthOptions, quote_kwargs),
    )


def to_display_runs(
    source: MarkdownInput,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    run_options: Optional[RunRendererOptions] = None,
    quote_depth_options: Optional[QuoteDepthOptions] = None,
    blank_line_options: Optional[BlankLineOptions] = None,
    **kwargs: Any,
) -> list[Run]:
    r"""Parse Markdown into runs prepared for a rich-text display surface.

    Same as :func:`to_runs`, followed by the blank-line pass: blank lines of
    the source are re-inserted and presentation flags are lifted from the
    emphasis attributes. The result is meant for display, not for
    serializing back to Markdown.

    Parameters
    ----------
    source : str, bytes, Path, or file-like
        Markdown text
    parser_options : MarkdownParserOptions, optional
        Parser options
    run_options : RunRendererOptions, optional
        Run renderer options
    quote_depth_options : QuoteDepthOptions, optional
        Quote depth repair options
    blank_line_options : BlankLineOptions, optional
        Blank-line pass options
    kwargs : Any
        Individual options that override fields of the options objects

    Returns
    -------
    list of Run
        Display run sequence

    Examples
    --------
        >>> runs = to_display_runs("**Hello**")
        >>> runs[0].attributes.presentation
        <PresentationIntent.STRONGLY_EMPHASIZED: 2>

    """
    parser_kwargs, run_kwargs, quote_kwargs, blank_kwargs = _split_kwargs(
        kwargs, MarkdownParserOptions, RunRendererOptions, QuoteDepthOptions, BlankLineOptions
    )
    text = load_markdown_text(source)
    runs = _render_runs(
        text,
        _resolve_options(parser_options, MarkdownParserOptions, parser_kwargs),
        _resolve_options(run_options, RunRendererOptions, run_kwargs),
        _resolve_options(quote_depth_options, QuoteDepthOptions, quote_kwargs),
    )

    normalizer = BlankLineNormalizer(_resolve_options(blank_line_options, BlankLineOptions, blank_kwargs))
    with debug_timer(logger, "Blank line normalization"):
        return normalizer.normalize(runs, text)


def from_runs(
    runs: Sequence[Run],
    *,
    renderer_options: Optional[MarkdownRendererOptions] = None,
    **kwargs: Any,
) -> str:
    r"""Serialize a run sequence to canonical Markdown.

    Parameters
    ----------
    runs : sequence of Run
        Runs from :func:`to_runs` or from an editing surface
    renderer_options : MarkdownRendererOptions, optional
        Markdown formatting options
    kwargs : Any
        Individual renderer options that override settings in renderer_options

    Returns
    -------
    str
        Markdown text

    Raises
    ------
    RenderingError
        If rendering fails

    Examples
    --------
        >>> from runmark.runs import AttributeSet, Run
        >>> from_runs([Run("Title", AttributeSet(heading_level=2, paragraph_id=1)), Run("\n")])
        '## Title\n'

    """
    (renderer_kwargs,) = _split_kwargs(kwargs, MarkdownRendererOptions)
    renderer = MarkdownRenderer(_resolve_options(renderer_options, MarkdownRendererOptions, renderer_kwargs))

    try:
        with debug_timer(logger, "Rendering (runs to markdown)"):
            return renderer.render_to_string(runs)
    except RunmarkError:
        raise
    except Exception as e:
        raise RenderingError(
            f"Markdown rendering failed: {e!r}", rendering_stage="markdown_rendering", original_error=e
        ) from e


def round_trip(source: MarkdownInput, **kwargs: Any) -> str:
    r"""Parse Markdown into runs and serialize it back.

    For the supported Markdown subset the result equals the input, up to
    line ending normalization.

    Parameters
    ----------
    source : str, bytes, Path, or file-like
        Markdown text
    kwargs : Any
        Individual parser, run renderer, quote depth or Markdown renderer
        options

    Returns
    -------
    str
        Canonical Markdown

    Examples
    --------
        >>> round_trip("3. third\n4. fourth\n")
        '1. third\n2. fourth\n'

    """
    parse_kwargs, renderer_kwargs = _split_kwargs(
        kwargs, (MarkdownParserOptions, RunRendererOptions, QuoteDepthOptions), MarkdownRendererOptions
    )
    return from_runs(to_runs(source, **parse_kwargs), **renderer_kwargs)


def to_basic_markdown(runs: Sequence[Run]) -> str:
    r"""Serialize runs with bold and italic markers only.

    Parameters
    ----------
    runs : sequence of Run
        Runs to encode

    Returns
    -------
    str
        Markdown text

    Examples
    --------
        >>> from runmark.runs import AttributeSet, Run
        >>> to_basic_markdown([Run("a*b", AttributeSet(italic=True))])
        '*a\\*b*'

    """
    try:
        return BasicMarkdownRenderer().render_to_string(runs)
    except RunmarkError:
        raise
    except Exception as e:
        raise RenderingError(
            f"Basic markdown rendering failed: {e!r}", rendering_stage="basic_rendering", original_error=e
        ) from e

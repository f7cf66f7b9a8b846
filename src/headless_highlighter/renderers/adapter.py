#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/headless_highlighter/renderers/adapter.py
"""Rendering adapter between the chunk finder and output renderers.

``build_text_chunks`` attaches text and presentation attributes to each
chunk. ``render_highlighted`` then either hands the ``TextChunk`` list to a
caller-supplied renderer (custom mode) or builds the default element tree
with bound click/hover handlers (default mode).
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import partial, reduce
from typing import Any, Callable, Iterable, NamedTuple, Sequence, TypeVar

from headless_highlighter.chunks.finder import find_chunks
from headless_highlighter.chunks.types import Chunk, PresentationAttrs, SearchWord, TextChunk
from headless_highlighter.options.match import MatchOptions
from headless_highlighter.options.presentation import PresentationOptions
from headless_highlighter.renderers.elements import Child, HighlightedElement, MarkElement

logger = logging.getLogger(__name__)

T = TypeVar("T")
CustomRenderer = Callable[[list[TextChunk]], T]


class RenderMode(Enum):
    """Which output path ``render_highlighted`` takes."""

    DEFAULT = "default"
    CUSTOM = "custom"


class _HighlightFold(NamedTuple):
    """Accumulator threaded through ``build_text_chunks``.

    ``text_chunks`` is appended to in place; each step returns a new tuple
    sharing the same list.
    """

    highlight_count: int
    text_chunks: list[TextChunk]


def _fold_chunk(
    text: str, options: PresentationOptions, state: _HighlightFold, indexed: tuple[int, Chunk]
) -> _HighlightFold:
    key, chunk = indexed
    chunk_text = text[chunk.start : chunk.end]
    if not chunk.highlight:
        state.text_chunks.append(TextChunk(chunk, chunk_text))
        return state

    highlight_index = state.highlight_count
    is_active = options.active_index is not None and highlight_index == options.active_index
    active_class = (options.active_class_name or "") if is_active else ""
    style = {**options.highlight_style, **options.active_style} if is_active else dict(options.highlight_style)
    attrs = PresentationAttrs(
        class_name=f"{options.highlight_class_name or ''} {active_class}",
        key=key,
        style=style,
        highlight_index=highlight_index,
        active=is_active,
    )
    state.text_chunks.append(TextChunk(chunk, chunk_text, attrs))
    return state._replace(highlight_count=highlight_index + 1)


def build_text_chunks(
    text: str,
    chunks: Iterable[Chunk],
    options: PresentationOptions | None = None,
) -> list[TextChunk]:
    """Pair each chunk with its text and, for highlights, presentation attributes.

    Parameters
    ----------
    text : str
        The original (unsanitized) text the chunks were computed against
    chunks : Iterable[Chunk]
        Output of ``find_chunks``
    options : PresentationOptions or None, default None
        Classes, styles and the active index

    Returns
    -------
    list[TextChunk]
        One record per chunk. ``attrs.highlight_index`` counts highlights from
        zero, ``attrs.key`` is the chunk's position in the whole sequence, and
        the class string keeps the space before the (possibly empty) active
        class; trim it when writing markup.

    """
    options = options or PresentationOptions()
    initial = _HighlightFold(highlight_count=0, text_chunks=[])
    final = reduce(partial(_fold_chunk, text or "", options), enumerate(chunks), initial)
    return final.text_chunks


def resolve_render_mode(renderer: Callable[..., Any] | None) -> RenderMode:
    """Return the render mode implied by the presence of a custom renderer."""
    return RenderMode.CUSTOM if renderer is not None else RenderMode.DEFAULT


def render_highlighted(
    text: str,
    chunks: Sequence[Chunk],
    options: PresentationOptions | None = None,
    renderer: CustomRenderer[T] | None = None,
) -> HighlightedElement | T:
    """Render a chunk sequence.

    Parameters
    ----------
    text : str
        The original text
    chunks : Sequence[Chunk]
        Output of ``find_chunks``
    options : PresentationOptions or None, default None
        Presentation settings
    renderer : Callable[[list[TextChunk]], T] or None, default None
        Custom renderer. When given it is called once with every
        ``TextChunk`` and its result is returned unchanged.

    Returns
    -------
    HighlightedElement or T
        The default element tree, or whatever the custom renderer returns

    """
    options = options or PresentationOptions()
    text_chunks = build_text_chunks(text, chunks, options)

    mode = resolve_render_mode(renderer)
    if mode is RenderMode.CUSTOM:
        assert renderer is not None
        return renderer(text_chunks)
    return build_element(text_chunks, options)


def build_element(
    text_chunks: Sequence[TextChunk],
    options: PresentationOptions | None = None,
) -> HighlightedElement:
    """Build the default element tree from prepared text chunks."""
    options = options or PresentationOptions()
    children: list[Child] = []
    for text_chunk in text_chunks:
        if not text_chunk.highlight:
            children.append(text_chunk.text)
            continue
        children.append(
            MarkElement(
                tag=options.mark_tag,
                text_chunk=text_chunk,
                on_click=partial(options.on_word_click, text_chunk) if options.on_word_click else None,
                on_hover=partial(options.on_word_hover, text_chunk) if options.on_word_hover else None,
            )
        )
    return HighlightedElement(tag=options.container_tag, attrs=dict(options.container_attrs), children=tuple(children))


def highlight(
    text: str,
    search_words: Iterable[SearchWord] | SearchWord | None,
    match_options: MatchOptions | None = None,
    presentation_options: PresentationOptions | None = None,
    renderer: CustomRenderer[T] | None = None,
) -> HighlightedElement | T:
    """Find chunks and render them in one call.

    Examples
    --------
        >>> element = highlight("The quick brown fox", ["quick", "fox"])
        >>> [mark.text for mark in element.marks]
        ['quick', 'fox']

    """
    chunks = find_chunks(text, search_words, match_options)
    logger.debug("Rendering %d chunk(s) in %s mode", len(chunks), resolve_render_mode(renderer).value)
    return render_highlighted(text or "", chunks, presentation_options, renderer)


__all__ = [
    "CustomRenderer",
    "RenderMode",
    "build_element",
    "build_text_chunks",
    "highlight",
    "render_highlighted",
    "resolve_render_mode",
]

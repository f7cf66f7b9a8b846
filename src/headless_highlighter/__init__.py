"""headless_highlighter - find search words in text and split it into highlight chunks.

The library separates matching from presentation. ``find_chunks`` turns a
text and a list of search words into an ordered sequence of ``Chunk``
intervals tagged highlighted or not; the rendering adapter attaches
classes, styles and the active-highlight flag and hands the result to a
renderer of your choice.

Key Features
------------
- Case-insensitive, literal (auto-escaped) or regular-expression matching
- Overlapping and touching matches merged into single highlights
- Length-preserving sanitizers (e.g. accent-insensitive matching)
- Pluggable matching strategy via ``MatchOptions.find_chunks``
- Default element tree with bound click/hover callbacks
- HTML, Jinja2 template, rich terminal and plain-marker renderers

Examples
--------
Chunks only:

    >>> from headless_highlighter import find_chunks
    >>> [(c.start, c.end, c.highlight) for c in find_chunks("Cat cat", ["cat"])]
    [(0, 3, True), (3, 4, False), (4, 7, True)]

HTML output:

    >>> from headless_highlighter import HtmlRenderer, PresentationOptions, highlight
    >>> element = highlight("a cat", ["cat"], presentation_options=PresentationOptions(highlight_class_name="hl"))
    >>> HtmlRenderer().render_element(element)
    '<span>a <mark class="hl" data-highlight-index="0">cat</mark></span>'

"""

import logging

from headless_highlighter.chunks import (
    Chunk,
    ChunkStrategy,
    PresentationAttrs,
    TextChunk,
    combine_chunks,
    fill_in_chunks,
    find_chunks,
    find_matches,
    normalize_chunks,
)
from headless_highlighter.exceptions import (
    ConfigError,
    DependencyError,
    HighlighterError,
    InvalidOptionsError,
    RenderingError,
    ValidationError,
)
from headless_highlighter.options import (
    HtmlRendererOptions,
    JinjaRendererOptions,
    MarkersRendererOptions,
    MatchOptions,
    PresentationOptions,
    TerminalRendererOptions,
)
from headless_highlighter.renderers import (
    BaseRenderer,
    HighlightedElement,
    HtmlRenderer,
    JinjaRenderer,
    MarkElement,
    MarkersRenderer,
    RenderMode,
    TerminalRenderer,
    build_text_chunks,
    highlight,
    render_highlighted,
)
from headless_highlighter.utils.text import fold_whitespace, strip_diacritics

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "BaseRenderer",
    "Chunk",
    "ChunkStrategy",
    "ConfigError",
    "DependencyError",
    "HighlightedElement",
    "HighlighterError",
    "HtmlRenderer",
    "HtmlRendererOptions",
    "InvalidOptionsError",
    "JinjaRenderer",
    "JinjaRendererOptions",
    "MarkElement",
    "MarkersRenderer",
    "MarkersRendererOptions",
    "MatchOptions",
    "PresentationAttrs",
    "PresentationOptions",
    "RenderMode",
    "RenderingError",
    "TerminalRenderer",
    "TerminalRendererOptions",
    "TextChunk",
    "ValidationError",
    "__version__",
    "build_text_chunks",
    "combine_chunks",
    "fill_in_chunks",
    "find_chunks",
    "find_matches",
    "fold_whitespace",
    "highlight",
    "normalize_chunks",
    "render_highlighted",
    "strip_diacritics",
]

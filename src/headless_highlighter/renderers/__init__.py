#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Rendering adapter and output renderers.

The Jinja2 and terminal renderers import their optional dependencies only
when rendering, so importing this package never requires them.
"""

from headless_highlighter.renderers.adapter import (
    CustomRenderer,
    RenderMode,
    build_element,
    build_text_chunks,
    highlight,
    render_highlighted,
    resolve_render_mode,
)
from headless_highlighter.renderers.base import BaseRenderer
from headless_highlighter.renderers.elements import HighlightedElement, MarkElement
from headless_highlighter.renderers.html import HtmlRenderer
from headless_highlighter.renderers.jinja import JinjaRenderer
from headless_highlighter.renderers.markers import MarkersRenderer
from headless_highlighter.renderers.terminal import TerminalRenderer

__all__ = [
    "BaseRenderer",
    "CustomRenderer",
    "HighlightedElement",
    "HtmlRenderer",
    "JinjaRenderer",
    "MarkElement",
    "MarkersRenderer",
    "RenderMode",
    "TerminalRenderer",
    "build_element",
    "build_text_chunks",
    "highlight",
    "render_highlighted",
    "resolve_render_mode",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option dataclasses for matching, presentation and rendering."""

from headless_highlighter.options.base import BaseRendererOptions, CloneFrozenMixin
from headless_highlighter.options.html import HtmlRendererOptions
from headless_highlighter.options.jinja import JinjaRendererOptions
from headless_highlighter.options.markers import MarkersRendererOptions
from headless_highlighter.options.match import MatchOptions
from headless_highlighter.options.presentation import PresentationOptions
from headless_highlighter.options.terminal import TerminalRendererOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "JinjaRendererOptions",
    "MarkersRendererOptions",
    "MatchOptions",
    "PresentationOptions",
    "TerminalRendererOptions",
]

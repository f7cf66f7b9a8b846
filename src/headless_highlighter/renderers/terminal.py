#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/headless_highlighter/renderers/terminal.py
"""Terminal rendering of highlighted text with rich."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from headless_highlighter.chunks.types import TextChunk
from headless_highlighter.constants import DEPS_TERMINAL
from headless_highlighter.options.terminal import TerminalRendererOptions
from headless_highlighter.renderers.base import BaseRenderer
from headless_highlighter.utils.decorators import requires_dependencies

if TYPE_CHECKING:
    from rich.text import Text


class TerminalRenderer(BaseRenderer):
    """Render highlighted text as a ``rich.text.Text`` for console output."""

    def __init__(self, options: TerminalRendererOptions | None = None):
        """Initialize the terminal renderer with options."""
        BaseRenderer._validate_options_type(options, TerminalRendererOptions, "terminal")
        options = options or TerminalRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: TerminalRendererOptions = options

    @requires_dependencies("terminal", DEPS_TERMINAL)
    def render(self, text_chunks: Sequence[TextChunk]) -> Text:
        """Build a styled ``Text`` with one span per chunk."""
        from rich.text import Text

        result = Text()
        for text_chunk in text_chunks:
            if not text_chunk.highlight:
                result.append(text_chunk.text, style=self.options.plain_style or None)
            elif text_chunk.is_active:
                result.append(text_chunk.text, style=self.options.active_style)
            else:
                result.append(text_chunk.text, style=self.options.highlight_style)
        return result

    @requires_dependencies("terminal", DEPS_TERMINAL)
    def render_to_string(self, text_chunks: Sequence[TextChunk]) -> str:
        """Render to a string containing ANSI escape sequences."""
        from rich.console import Console

        console = Console(force_terminal=True, color_system="standard", width=1_000_000)
        with console.capture() as capture:
            console.print(self.render(text_chunks), end="", soft_wrap=True)
        return capture.get()

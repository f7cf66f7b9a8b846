#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/headless_highlighter/renderers/markers.py
"""Plain-text rendering with highlight markers, e.g. ``the <<quick>> fox``."""

from __future__ import annotations

from typing import Sequence

from headless_highlighter.chunks.types import TextChunk
from headless_highlighter.options.markers import MarkersRendererOptions
from headless_highlighter.renderers.base import BaseRenderer


class MarkersRenderer(BaseRenderer):
    """Wrap highlights in text markers; the active highlight gets its own pair."""

    def __init__(self, options: MarkersRendererOptions | None = None):
        """Initialize the markers renderer with options."""
        BaseRenderer._validate_options_type(options, MarkersRendererOptions, "markers")
        options = options or MarkersRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkersRendererOptions = options

    def render(self, text_chunks: Sequence[TextChunk]) -> str:
        """Render the text chunks to marker-delimited text."""
        return self.render_to_string(text_chunks)

    def render_to_string(self, text_chunks: Sequence[TextChunk]) -> str:
        """Render the text chunks to marker-delimited text."""
        result: list[str] = []
        for text_chunk in text_chunks:
            if not text_chunk.highlight:
                result.append(text_chunk.text)
            elif text_chunk.is_active:
                result.append(f"{self.options.active_open}{text_chunk.text}{self.options.active_close}")
            else:
                result.append(f"{self.options.open_marker}{text_chunk.text}{self.options.close_marker}")
        return "".join(result)

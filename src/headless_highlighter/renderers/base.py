#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/headless_highlighter/renderers/base.py
"""Base class for output renderers.

A renderer consumes the ``TextChunk`` list produced by the rendering
adapter. Renderers are callables, so any of them can be passed as the
custom renderer of ``render_highlighted``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

from headless_highlighter.chunks.types import TextChunk
from headless_highlighter.exceptions import InvalidOptionsError
from headless_highlighter.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for all renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class UpperRenderer(BaseRenderer):
        ...     def render(self, text_chunks):
        ...         return "".join(c.text.upper() if c.highlight else c.text for c in text_chunks)

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, text_chunks: Sequence[TextChunk]) -> Any:
        """Render the text chunks to the renderer's output type.

        Parameters
        ----------
        text_chunks : Sequence[TextChunk]
            Output of ``build_text_chunks``

        """

    def render_to_string(self, text_chunks: Sequence[TextChunk]) -> str:
        """Render the text chunks to a string (if applicable).

        Raises
        ------
        NotImplementedError
            If the renderer does not produce text

        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support rendering to a string.")

    def __call__(self, text_chunks: list[TextChunk]) -> Any:
        """Render in custom mode of ``render_highlighted``."""
        return self.render(text_chunks)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

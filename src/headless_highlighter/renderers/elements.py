#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Framework-neutral element tree produced by the default render mode.

A ``HighlightedElement`` is the container; its children are plain strings
for unhighlighted chunks and ``MarkElement`` instances for highlights. Mark
elements carry their bound click/hover handlers so a host (a templating
layer, a UI toolkit, a test) can dispatch user interaction to them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Union

from headless_highlighter.chunks.types import PresentationAttrs, TextChunk


@dataclass(frozen=True)
class MarkElement:
    """Inline element wrapping one highlighted chunk."""

    tag: str
    text_chunk: TextChunk
    on_click: Callable[[], Any] | None = None
    on_hover: Callable[[], Any] | None = None

    @property
    def text(self) -> str:
        """Return the highlighted text."""
        return self.text_chunk.text

    @property
    def attrs(self) -> PresentationAttrs:
        """Return the presentation attributes of the highlight."""
        assert self.text_chunk.attrs is not None
        return self.text_chunk.attrs

    def click(self) -> Any:
        """Dispatch a click; returns the callback result or None when unbound."""
        if self.on_click is None:
            return None
        return self.on_click()

    def hover(self) -> Any:
        """Dispatch a hover; returns the callback result or None when unbound."""
        if self.on_hover is None:
            return None
        return self.on_hover()


Child = Union[str, MarkElement]


@dataclass(frozen=True)
class HighlightedElement:
    """Container element holding the rendered chunks in text order."""

    tag: str
    attrs: Mapping[str, Any] = field(default_factory=dict)
    children: tuple[Child, ...] = ()

    @property
    def marks(self) -> list[MarkElement]:
        """Return the highlighted children."""
        return [child for child in self.children if isinstance(child, MarkElement)]

    @property
    def text(self) -> str:
        """Return the concatenated text of all children."""
        return "".join(child if isinstance(child, str) else child.text for child in self.children)

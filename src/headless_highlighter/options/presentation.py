#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Presentation options consumed by the rendering adapter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Mapping

from headless_highlighter.constants import DEFAULT_CONTAINER_TAG, DEFAULT_MARK_TAG
from headless_highlighter.options.base import CloneFrozenMixin

if TYPE_CHECKING:
    from headless_highlighter.chunks.types import TextChunk

WordCallback = Callable[["TextChunk"], Any]


@dataclass(frozen=True)
class PresentationOptions(CloneFrozenMixin):
    """Styling and interaction settings for highlighted chunks.

    Parameters
    ----------
    highlight_class_name : str or None, default None
        Class applied to every highlighted chunk.
    highlight_style : Mapping[str, Any], default {}
        Inline style applied to every highlighted chunk.
    active_index : int or None, default None
        Zero-based ordinal of the highlighted chunk to mark as active.
    active_class_name : str or None, default None
        Class added to the active chunk.
    active_style : Mapping[str, Any], default {}
        Style merged over ``highlight_style`` for the active chunk.
    on_word_click : Callable[[TextChunk], Any] or None, default None
        Called with the chunk's ``TextChunk`` when a highlight is clicked.
    on_word_hover : Callable[[TextChunk], Any] or None, default None
        Called with the chunk's ``TextChunk`` when a highlight is hovered.
    container_tag : str, default "span"
        Tag of the element wrapping all chunks in default render mode.
    mark_tag : str, default "mark"
        Tag of the element wrapping each highlighted chunk.
    container_attrs : Mapping[str, Any], default {}
        Extra attributes passed through to the container element.

    """

    highlight_class_name: str | None = field(
        default=None,
        metadata={"help": "CSS class applied to highlighted chunks", "cli_name": "class", "importance": "core"},
    )
    highlight_style: Mapping[str, Any] = field(
        default_factory=dict,
        metadata={"help": "Inline style applied to highlighted chunks", "type": dict, "importance": "advanced"},
    )
    active_index: int | None = field(
        default=None,
        metadata={"help": "Index of the highlight to mark as active", "type": int, "importance": "core"},
    )
    active_class_name: str | None = field(
        default=None,
        metadata={"help": "CSS class added to the active highlight", "cli_name": "active-class", "importance": "core"},
    )
    active_style: Mapping[str, Any] = field(
        default_factory=dict,
        metadata={
            "help": "Style merged over highlight_style for the active highlight",
            "type": dict,
            "importance": "advanced",
        },
    )
    on_word_click: WordCallback | None = field(
        default=None,
        metadata={"help": "Callback invoked when a highlight is clicked", "exclude_from_cli": True},
    )
    on_word_hover: WordCallback | None = field(
        default=None,
        metadata={"help": "Callback invoked when a highlight is hovered", "exclude_from_cli": True},
    )
    container_tag: str = field(
        default=DEFAULT_CONTAINER_TAG,
        metadata={"help": "Tag of the element wrapping the whole text", "importance": "advanced"},
    )
    mark_tag: str = field(
        default=DEFAULT_MARK_TAG,
        metadata={"help": "Tag of the element wrapping each highlight", "importance": "advanced"},
    )
    container_attrs: Mapping[str, Any] = field(
        default_factory=dict,
        metadata={"help": "Extra attributes for the container element", "exclude_from_cli": True},
    )

    def __post_init__(self) -> None:
        """Validate callbacks, tags and the active index."""
        if self.on_word_click is not None and not callable(self.on_word_click):
            raise ValueError("on_word_click must be callable")
        if self.on_word_hover is not None and not callable(self.on_word_hover):
            raise ValueError("on_word_hover must be callable")
        if not self.container_tag or not self.mark_tag:
            raise ValueError("container_tag and mark_tag must be non-empty")
        if self.active_index is not None and (
            isinstance(self.active_index, bool) or not isinstance(self.active_index, int)
        ):
            raise ValueError(f"active_index must be an integer or None, got {self.active_index!r}")


__all__ = ["PresentationOptions", "WordCallback"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML serialization of highlighted text."""

from __future__ import annotations

from dataclasses import dataclass, field

from headless_highlighter.constants import DEFAULT_HTML_DATA_ATTRIBUTES, DEFAULT_HTML_HIGHLIGHT_INDEX_ATTR
from headless_highlighter.options.base import BaseRendererOptions
from headless_highlighter.options.presentation import PresentationOptions


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Options for ``HtmlRenderer``.

    Parameters
    ----------
    include_data_attributes : bool, default True
        Emit the highlight ordinal on each mark element.
    highlight_index_attribute : str, default "data-highlight-index"
        Attribute name used for the highlight ordinal.
    escape_text : bool, default True
        Entity-escape chunk text. Disable only for text that is already HTML-safe.
    presentation : PresentationOptions or None, default None
        Tags and container attributes used when ``render`` is handed a
        ``TextChunk`` list, e.g. as the custom renderer of ``highlight``.
        Classes and styles already live on the chunks; only ``mark_tag``,
        ``container_tag`` and ``container_attrs`` are read from here.

    """

    include_data_attributes: bool = field(
        default=DEFAULT_HTML_DATA_ATTRIBUTES,
        metadata={"help": "Emit the highlight index as a data attribute", "importance": "advanced"},
    )
    highlight_index_attribute: str = field(
        default=DEFAULT_HTML_HIGHLIGHT_INDEX_ATTR,
        metadata={"help": "Attribute name for the highlight index", "importance": "advanced"},
    )
    escape_text: bool = field(
        default=True,
        metadata={"help": "Escape HTML special characters in chunk text", "importance": "security"},
    )
    presentation: PresentationOptions | None = field(
        default=None,
        metadata={"help": "Tags and container attributes for TextChunk input", "exclude_from_cli": True},
    )

    def __post_init__(self) -> None:
        """Validate the data attribute name."""
        if self.include_data_attributes and not self.highlight_index_attribute.strip():
            raise ValueError("highlight_index_attribute must be non-empty when data attributes are enabled")

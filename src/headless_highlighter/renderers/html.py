#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/headless_highlighter/renderers/html.py
"""HTML serialization of highlighted text.

``HtmlRenderer`` writes the default element tree (or a ``TextChunk`` list,
which it first turns into that tree) as an HTML fragment:

    <span>The <mark class="hl" data-highlight-index="0">quick</mark> fox</span>

Chunk text is entity-escaped, class strings are trimmed and style mappings
become inline CSS.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence, Union

from headless_highlighter.chunks.types import TextChunk
from headless_highlighter.options.html import HtmlRendererOptions
from headless_highlighter.renderers.adapter import build_element
from headless_highlighter.renderers.base import BaseRenderer
from headless_highlighter.renderers.elements import HighlightedElement, MarkElement
from headless_highlighter.utils.html_utils import escape_html, normalize_class_name, style_to_css

logger = logging.getLogger(__name__)


class HtmlRenderer(BaseRenderer):
    """Render highlighted text as an HTML fragment.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from headless_highlighter import highlight
        >>> HtmlRenderer().render_element(highlight("a cat", ["cat"]))
        '<span>a <mark data-highlight-index="0">cat</mark></span>'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options

    def render(self, text_chunks: Sequence[TextChunk]) -> str:
        """Render text chunks to HTML.

        Tags and container attributes come from ``options.presentation``, so
        pass the same ``PresentationOptions`` there when this renderer is the
        custom renderer of ``highlight`` or ``render_highlighted``.
        """
        return self.render_to_string(text_chunks)

    def render_to_string(self, text_chunks: Union[Sequence[TextChunk], HighlightedElement]) -> str:
        """Render text chunks or a prepared element tree to HTML."""
        if isinstance(text_chunks, HighlightedElement):
            return self.render_element(text_chunks)
        return self.render_element(build_element(text_chunks, self.options.presentation))

    def render_element(self, element: HighlightedElement) -> str:
        """Serialize a ``HighlightedElement`` and its children."""
        parts = [f"<{element.tag}{self._format_attributes(element.attrs)}>"]
        for child in element.children:
            if isinstance(child, MarkElement):
                parts.append(self._render_mark(child))
            else:
                parts.append(escape_html(child, enabled=self.options.escape_text))
        parts.append(f"</{element.tag}>")
        return "".join(parts)

    def _render_mark(self, mark: MarkElement) -> str:
        attrs = mark.attrs
        html_attrs: dict[str, Any] = {
            "class": attrs.class_name,
            "style": attrs.style,
        }
        if self.options.include_data_attributes:
            html_attrs[self.options.highlight_index_attribute] = attrs.highlight_index
        text = escape_html(mark.text, enabled=self.options.escape_text)
        return f"<{mark.tag}{self._format_attributes(html_attrs)}>{text}</{mark.tag}>"

    @staticmethod
    def _format_attributes(attrs: Mapping[str, Any]) -> str:
        rendered = []
        for name, value in attrs.items():
            if name == "class":
                value = normalize_class_name(value)
            elif name == "style" and isinstance(value, Mapping):
                value = style_to_css(value)

            if value is None or value is False or value == "":
                continue
            if value is True:
                rendered.append(f" {name}")
            else:
                rendered.append(f' {name}="{escape_html(str(value))}"')
        return "".join(rendered)

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Jinja2 template-based rendering of highlighted text.

Templates receive the full ``TextChunk`` list and can produce any text
format, which makes a template the declarative form of a custom renderer.

Template context
----------------
chunks
    Every chunk as a dict: ``text``, ``highlight``, ``start``, ``end``,
    ``active`` and, for highlights, ``class`` (also as ``class_name``),
    ``style``, ``key`` and
    ``highlight_index``.
highlights
    The highlighted subset of ``chunks``.
text
    The full original text.

Filters
-------
escape_html
    Entity-escape a string (marked safe, so it is not escaped twice).
css
    Serialize a style mapping to inline CSS.
classes
    Trim and collapse a class string.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Sequence

from headless_highlighter.chunks.types import TextChunk
from headless_highlighter.constants import DEPS_JINJA
from headless_highlighter.exceptions import RenderingError
from headless_highlighter.options.jinja import JinjaRendererOptions
from headless_highlighter.renderers.base import BaseRenderer
from headless_highlighter.utils.decorators import requires_dependencies
from headless_highlighter.utils.html_utils import escape_html, normalize_class_name, style_to_css

if TYPE_CHECKING:
    from jinja2 import Environment, Template

logger = logging.getLogger(__name__)


def chunk_context(text_chunk: TextChunk) -> dict[str, Any]:
    """Flatten a ``TextChunk`` into the dict exposed to templates."""
    chunk = text_chunk.chunk
    context: dict[str, Any] = {
        "text": text_chunk.text,
        "highlight": chunk.highlight,
        "start": chunk.start,
        "end": chunk.end,
        "active": text_chunk.is_active,
    }
    if text_chunk.attrs is not None:
        context.update(
            {
                "class": text_chunk.attrs.class_name,
                "class_name": text_chunk.attrs.class_name,
                "style": dict(text_chunk.attrs.style),
                "key": text_chunk.attrs.key,
                "highlight_index": text_chunk.attrs.highlight_index,
            }
        )
    return context


class JinjaRenderer(BaseRenderer):
    """Render highlighted text through a user-supplied Jinja2 template.

    Parameters
    ----------
    options : JinjaRendererOptions
        Template source and environment settings

    Examples
    --------
        >>> options = JinjaRendererOptions(
        ...     template_string="{% for c in chunks %}{{ '*' if c.highlight else '' }}{{ c.text }}{% endfor %}"
        ... )
        >>> renderer = JinjaRenderer(options)

    """

    def __init__(self, options: JinjaRendererOptions | None = None):
        """Initialize the Jinja2 renderer with options."""
        BaseRenderer._validate_options_type(options, JinjaRendererOptions, "jinja")
        options = options or JinjaRendererOptions(template_string="{% for c in chunks %}{{ c.text }}{% endfor %}")
        BaseRenderer.__init__(self, options)
        self.options: JinjaRendererOptions = options
        self._env: Environment | None = None
        self._template: Template | None = None

    def _setup_jinja_env(self) -> None:
        """Set up the Jinja2 environment, filters and template."""
        from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError
        from markupsafe import Markup

        loader = None
        if self.options.template_file:
            template_path = Path(self.options.template_file)
            loader = FileSystemLoader(str(template_path.parent) if template_path.parent else ".")

        self._env = Environment(loader=loader, autoescape=self.options.autoescape)
        if self.options.strict_undefined:
            self._env.undefined = StrictUndefined

        self._env.filters["escape_html"] = lambda value: Markup(escape_html(str(value)))
        self._env.filters["css"] = style_to_css
        self._env.filters["classes"] = normalize_class_name

        try:
            if self.options.template_file:
                self._template = self._env.get_template(Path(self.options.template_file).name)
            else:
                self._template = self._env.from_string(self.options.template_string or "")
        except TemplateError as e:
            raise RenderingError(f"Could not load template: {e}", rendering_stage="template", original_error=e) from e

    def _build_context(self, text_chunks: Sequence[TextChunk]) -> dict[str, Any]:
        chunks = [chunk_context(text_chunk) for text_chunk in text_chunks]
        context: dict[str, Any] = {
            "chunks": chunks,
            "highlights": [chunk for chunk in chunks if chunk["highlight"]],
            "text": "".join(text_chunk.text for text_chunk in text_chunks),
        }
        if self.options.extra_context:
            context.update(self.options.extra_context)
        return context

    @requires_dependencies("jinja", DEPS_JINJA)
    def render_to_string(self, text_chunks: Sequence[TextChunk]) -> str:
        """Render the text chunks with the configured template.

        Raises
        ------
        RenderingError
            If the template cannot be loaded or fails while rendering
        DependencyError
            If jinja2 is not installed

        """
        from jinja2 import TemplateError

        if self._template is None:
            self._setup_jinja_env()
        assert self._template is not None

        try:
            return self._template.render(**self._build_context(text_chunks))
        except TemplateError as e:
            logger.debug("Template rendering failed", exc_info=True)
            raise RenderingError(f"Template rendering failed: {e}", rendering_stage="render", original_error=e) from e

    def render(self, text_chunks: Sequence[TextChunk]) -> str:
        """Render the text chunks with the configured template."""
        return self.render_to_string(text_chunks)

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Jinja2 template-based rendering.

Templates receive the ``TextChunk`` list and can produce any text-based
output, which makes them the configuration-file friendly form of a custom
renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from headless_highlighter.constants import DEFAULT_JINJA_AUTOESCAPE, DEFAULT_JINJA_STRICT_UNDEFINED
from headless_highlighter.options.base import BaseRendererOptions


@dataclass(frozen=True)
class JinjaRendererOptions(BaseRendererOptions):
    """Configuration options for Jinja2 template-based rendering.

    Parameters
    ----------
    template_file : str or None, default None
        Path to a Jinja2 template file. Either template_file or
        template_string must be provided; template_file takes precedence.
    template_string : str or None, default None
        Inline Jinja2 template.
    autoescape : bool, default True
        Enable Jinja2 HTML autoescaping.
    strict_undefined : bool, default True
        Raise on undefined template variables instead of rendering blanks.
    extra_context : dict[str, Any] or None, default None
        Additional variables merged into the template context.

    """

    template_file: str | None = field(
        default=None,
        metadata={"help": "Path to Jinja2 template file", "cli_name": "template", "importance": "core"},
    )
    template_string: str | None = field(
        default=None,
        metadata={"help": "Inline Jinja2 template string", "importance": "core"},
    )
    autoescape: bool = field(
        default=DEFAULT_JINJA_AUTOESCAPE,
        metadata={"help": "Enable Jinja2 HTML autoescaping", "importance": "advanced"},
    )
    strict_undefined: bool = field(
        default=DEFAULT_JINJA_STRICT_UNDEFINED,
        metadata={"help": "Raise errors for undefined template variables", "importance": "advanced"},
    )
    extra_context: dict[str, Any] | None = field(
        default=None,
        metadata={"help": "Additional template context variables", "exclude_from_cli": True},
    )

    def __post_init__(self) -> None:
        """Validate that a template source is provided."""
        if not self.template_file and not self.template_string:
            raise ValueError("Either template_file or template_string must be provided")

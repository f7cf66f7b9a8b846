#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/headless_highlighter/options/terminal.py
"""Configuration options for rich terminal output."""

from __future__ import annotations

from dataclasses import dataclass, field

from headless_highlighter.constants import DEFAULT_TERMINAL_ACTIVE_STYLE, DEFAULT_TERMINAL_HIGHLIGHT_STYLE
from headless_highlighter.options.base import BaseRendererOptions


@dataclass(frozen=True)
class TerminalRendererOptions(BaseRendererOptions):
    """Options for ``TerminalRenderer``.

    Styles use rich's style syntax, e.g. ``"bold black on yellow"``.
    """

    highlight_style: str = field(
        default=DEFAULT_TERMINAL_HIGHLIGHT_STYLE,
        metadata={"help": "rich style for highlighted chunks", "importance": "core"},
    )
    active_style: str = field(
        default=DEFAULT_TERMINAL_ACTIVE_STYLE,
        metadata={"help": "rich style for the active highlight", "importance": "core"},
    )
    plain_style: str = field(
        default="",
        metadata={"help": "rich style for unhighlighted text", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate that a highlight style is set."""
        if not self.highlight_style.strip():
            raise ValueError("highlight_style must be a non-empty rich style")

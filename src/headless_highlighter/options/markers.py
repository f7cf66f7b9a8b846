#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/headless_highlighter/options/markers.py
"""Configuration options for marker-delimited plain text output."""

from __future__ import annotations

from dataclasses import dataclass, field

from headless_highlighter.constants import (
    DEFAULT_ACTIVE_MARKER_CLOSE,
    DEFAULT_ACTIVE_MARKER_OPEN,
    DEFAULT_MARKER_CLOSE,
    DEFAULT_MARKER_OPEN,
)
from headless_highlighter.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MarkersRendererOptions(BaseRendererOptions):
    """Options for ``MarkersRenderer``.

    The active highlight uses ``active_open``/``active_close`` instead of the
    regular markers so it stands out in grep-style output.
    """

    open_marker: str = field(
        default=DEFAULT_MARKER_OPEN,
        metadata={"help": "Text inserted before each highlight", "importance": "core"},
    )
    close_marker: str = field(
        default=DEFAULT_MARKER_CLOSE,
        metadata={"help": "Text inserted after each highlight", "importance": "core"},
    )
    active_open: str = field(
        default=DEFAULT_ACTIVE_MARKER_OPEN,
        metadata={"help": "Text inserted before the active highlight", "importance": "advanced"},
    )
    active_close: str = field(
        default=DEFAULT_ACTIVE_MARKER_CLOSE,
        metadata={"help": "Text inserted after the active highlight", "importance": "advanced"},
    )

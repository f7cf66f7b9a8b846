#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/headless_highlighter/options/base.py
"""Base classes for matching, presentation and renderer options.

All option objects are frozen dataclasses: they are validated once in
``__post_init__`` and modified only by creating updated copies.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Renderers turn a list of ``TextChunk`` records into an output format
    (HTML, terminal text, a Jinja2 template, marker-delimited text).

    Notes
    -----
    Subclasses define format-specific rendering options as frozen dataclass fields.

    """

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the chunk finder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from headless_highlighter.constants import DEFAULT_AUTO_ESCAPE, DEFAULT_CASE_SENSITIVE
from headless_highlighter.options.base import CloneFrozenMixin

if TYPE_CHECKING:
    from headless_highlighter.chunks.types import ChunkStrategy


@dataclass(frozen=True)
class MatchOptions(CloneFrozenMixin):
    """Options controlling how search words are matched against text.

    Parameters
    ----------
    case_sensitive : bool, default False
        Whether search words must match letter case exactly.
    auto_escape : bool, default False
        Treat each search word as literal text by escaping regular expression
        metacharacters. When False, string search words are used as patterns.
    sanitize : Callable[[str], str] or None, default None
        Normalization applied to the text and to every string search word
        before matching. Offsets are reported against the original text, so
        the function must preserve length (see ``utils.text``).
    find_chunks : ChunkStrategy or None, default None
        Replacement matching strategy called as
        ``find_chunks(text, search_words, options)``. Its result is clamped,
        merged and gap-filled like the built-in strategy's.

    """

    case_sensitive: bool = field(
        default=DEFAULT_CASE_SENSITIVE,
        metadata={"help": "Match search words case-sensitively", "importance": "core"},
    )
    auto_escape: bool = field(
        default=DEFAULT_AUTO_ESCAPE,
        metadata={"help": "Treat search words as literal text instead of regular expressions", "importance": "core"},
    )
    sanitize: Callable[[str], str] | None = field(
        default=None,
        metadata={
            "help": "Length-preserving normalization applied to text and search words before matching",
            "importance": "advanced",
            "exclude_from_cli": True,
        },
    )
    find_chunks: ChunkStrategy | None = field(
        default=None,
        metadata={
            "help": "Custom strategy returning match intervals instead of the built-in matcher",
            "importance": "advanced",
            "exclude_from_cli": True,
        },
    )

    def __post_init__(self) -> None:
        """Validate that the optional hooks are callables."""
        if self.sanitize is not None and not callable(self.sanitize):
            raise ValueError(f"sanitize must be callable, got {type(self.sanitize).__name__}")
        if self.find_chunks is not None and not callable(self.find_chunks):
            raise ValueError(f"find_chunks must be callable, got {type(self.find_chunks).__name__}")


__all__ = ["MatchOptions"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/headless_highlighter/chunks/types.py
"""Shared data structures for chunk finding and presentation."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Protocol, Sequence, Tuple, Union

if TYPE_CHECKING:
    from headless_highlighter.options.match import MatchOptions

SearchWord = Union[str, "re.Pattern[str]"]
ChunkLike = Union["Chunk", Tuple[int, int], Tuple[int, int, bool], Mapping[str, Any]]


@dataclass(frozen=True)
class Chunk:
    """Half-open interval ``[start, end)`` of the original text.

    ``highlight`` marks the interval as a match.
    """

    start: int
    end: int
    highlight: bool

    @property
    def length(self) -> int:
        """Return the number of characters covered by the chunk."""
        return self.end - self.start

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {"start": self.start, "end": self.end, "highlight": self.highlight}


@dataclass(frozen=True)
class PresentationAttrs:
    """Presentation metadata attached to a highlighted chunk."""

    class_name: str
    key: int
    style: Mapping[str, Any] = field(default_factory=dict)
    highlight_index: int = 0
    active: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the attributes under their markup names."""
        return {
            "class": self.class_name,
            "key": self.key,
            "style": dict(self.style),
            "highlightIndex": self.highlight_index,
        }


@dataclass(frozen=True)
class TextChunk:
    """A chunk paired with its text and, for highlights, presentation attributes."""

    chunk: Chunk
    text: str
    attrs: PresentationAttrs | None = None

    @property
    def highlight(self) -> bool:
        """Return True when the underlying chunk is a match."""
        return self.chunk.highlight

    @property
    def is_active(self) -> bool:
        """Return True when this chunk is the active highlight."""
        return self.attrs is not None and self.attrs.active

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""
        payload: dict[str, Any] = {"chunk": self.chunk.to_dict(), "text": self.text}
        if self.attrs is not None:
            payload["attrs"] = self.attrs.to_dict()
        return payload


class ChunkStrategy(Protocol):
    """Callable replacing the built-in matcher.

    Returns match intervals as ``Chunk`` objects, ``(start, end)`` or
    ``(start, end, highlight)`` tuples, or mappings with ``start``/``end``
    keys. A single interval may be returned on its own. Offsets refer to
    ``text``.
    """

    def __call__(
        self, text: str, search_words: Sequence[SearchWord], options: MatchOptions
    ) -> Iterable[ChunkLike] | ChunkLike: ...

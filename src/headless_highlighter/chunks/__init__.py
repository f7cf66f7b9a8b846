#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Chunk finding: locate search words and partition text into chunks."""

from headless_highlighter.chunks.finder import (
    combine_chunks,
    compile_search_word,
    fill_in_chunks,
    find_chunks,
    find_matches,
    normalize_chunks,
    validate_search_words,
)
from headless_highlighter.chunks.types import (
    Chunk,
    ChunkLike,
    ChunkStrategy,
    PresentationAttrs,
    SearchWord,
    TextChunk,
)

__all__ = [
    "Chunk",
    "ChunkLike",
    "ChunkStrategy",
    "PresentationAttrs",
    "SearchWord",
    "TextChunk",
    "combine_chunks",
    "compile_search_word",
    "fill_in_chunks",
    "find_chunks",
    "find_matches",
    "normalize_chunks",
    "validate_search_words",
]

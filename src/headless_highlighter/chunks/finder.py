#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/headless_highlighter/chunks/finder.py
"""Partition text into highlighted and unhighlighted chunks.

The pipeline has three stages:

1. ``find_matches`` (or a custom ``MatchOptions.find_chunks`` strategy,
   normalized by ``normalize_chunks``) collects raw match intervals.
2. ``combine_chunks`` merges overlapping and touching intervals.
3. ``fill_in_chunks`` interleaves the merged matches with unhighlighted gaps
   so the result covers the whole text.

``find_chunks`` runs all three. None of these functions raise for odd input:
empty words and zero-width matches are skipped, invalid raw patterns are
matched literally, and out-of-range offsets are clamped with a warning.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Mapping, Sequence

from headless_highlighter.chunks.types import Chunk, ChunkLike, SearchWord
from headless_highlighter.exceptions import ValidationError
from headless_highlighter.options.match import MatchOptions
from headless_highlighter.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


def find_chunks(
    text: str | None,
    search_words: Iterable[SearchWord] | SearchWord | None,
    options: MatchOptions | None = None,
) -> list[Chunk]:
    """Split ``text`` into an ordered, gap-free sequence of chunks.

    Parameters
    ----------
    text : str or None
        Text to search. ``None`` is treated as empty.
    search_words : iterable of str or re.Pattern, str, re.Pattern, or None
        Words to highlight. A single string is treated as one word.
    options : MatchOptions or None, default None
        Matching options; defaults apply when omitted.

    Returns
    -------
    list[Chunk]
        Chunks sorted by ``start``, contiguous, covering ``[0, len(text))``,
        with no two neighbours sharing the same ``highlight`` value. Empty
        text yields an empty list.

    Raises
    ------
    ValidationError
        If ``search_words`` contains something other than strings or
        compiled patterns.

    Examples
    --------
        >>> [c.to_dict() for c in find_chunks("abcdef", ["abc", "bcd"])]
        [{'start': 0, 'end': 4, 'highlight': True}, {'start': 4, 'end': 6, 'highlight': False}]

    """
    options = options or MatchOptions()
    words = validate_search_words(search_words)
    if not text:
        return []

    total_length = len(text)
    with debug_timer(logger, "Finding chunks"):
        if options.find_chunks is not None:
            matches = normalize_chunks(options.find_chunks(text, words, options), total_length)
        else:
            matches = find_matches(text, words, options)
        chunks = fill_in_chunks(combine_chunks(matches), total_length)

    logger.debug(
        "Found %d match(es) for %d search word(s); %d chunk(s) over %d characters",
        len(matches),
        len(words),
        len(chunks),
        total_length,
    )
    return chunks


def validate_search_words(search_words: Iterable[SearchWord] | SearchWord | None) -> list[SearchWord]:
    """Coerce ``search_words`` to a list, rejecting unsupported item types."""
    if search_words is None:
        return []
    if isinstance(search_words, (str, re.Pattern)):
        return [search_words]
    try:
        items = list(search_words)
    except TypeError as e:
        raise ValidationError(
            f"search_words must be an iterable of strings, got {type(search_words).__name__}",
            parameter_name="search_words",
            parameter_value=search_words,
            original_error=e,
        ) from e

    for item in items:
        if not isinstance(item, (str, re.Pattern)):
            raise ValidationError(
                f"search_words must contain only strings or compiled patterns, got {type(item).__name__}",
                parameter_name="search_words",
                parameter_value=item,
            )
    return items


def compile_search_word(word: SearchWord, options: MatchOptions) -> re.Pattern[str] | None:
    """Build the pattern used to scan for ``word``.

    Returns None for words that are empty or whitespace-only after
    sanitizing. Compiled patterns are neither sanitized nor escaped; they only
    gain ``re.IGNORECASE`` when matching is case-insensitive.
    """
    flags = 0 if options.case_sensitive else re.IGNORECASE

    if isinstance(word, re.Pattern):
        if flags and not word.flags & re.IGNORECASE:
            return re.compile(word.pattern, word.flags | re.IGNORECASE)
        return word

    if options.sanitize is not None:
        word = options.sanitize(word)
    if not word or not word.strip():
        return None

    source = re.escape(word) if options.auto_escape else word
    try:
        return re.compile(source, flags)
    except re.error as e:
        logger.warning("Search word %r is not a valid regular expression (%s); matching it literally", word, e)
        return re.compile(re.escape(word), flags)


def find_matches(
    text: str,
    search_words: Sequence[SearchWord],
    options: MatchOptions | None = None,
) -> list[Chunk]:
    """Collect every non-empty match of every search word in ``text``.

    Matches are returned in discovery order (word by word) and may overlap;
    pass them through ``combine_chunks`` before use.
    """
    options = options or MatchOptions()
    if not text:
        return []

    haystack = options.sanitize(text) if options.sanitize is not None else text
    length_changed = len(haystack) != len(text)
    if length_changed:
        logger.warning(
            "sanitize changed the text length from %d to %d; highlight offsets may not line up with the text",
            len(text),
            len(haystack),
        )

    matches: list[Chunk] = []
    for word in search_words:
        pattern = compile_search_word(word, options)
        if pattern is None:
            continue
        for match in pattern.finditer(haystack):
            start, end = match.span()
            if end > start:
                matches.append(Chunk(start, end, True))

    if length_changed:
        matches = _clamp(matches, len(text))
    return matches


def combine_chunks(chunks: Iterable[Chunk]) -> list[Chunk]:
    """Merge overlapping or touching match intervals into maximal runs.

    Intervals are ordered by ``start`` ascending and ``end`` descending, so
    the widest interval at a position opens the run. The result does not
    depend on the input order.
    """
    ordered = sorted(chunks, key=lambda chunk: (chunk.start, -chunk.end))
    merged: list[Chunk] = []
    for chunk in ordered:
        if merged and chunk.start <= merged[-1].end:
            current = merged[-1]
            if chunk.end > current.end:
                merged[-1] = Chunk(current.start, chunk.end, True)
            continue
        merged.append(Chunk(chunk.start, chunk.end, True))
    return merged


def fill_in_chunks(highlighted: Sequence[Chunk], total_length: int) -> list[Chunk]:
    """Interleave merged matches with unhighlighted gaps.

    Parameters
    ----------
    highlighted : Sequence[Chunk]
        Sorted, non-overlapping match intervals (output of ``combine_chunks``)
    total_length : int
        Length of the original text

    Returns
    -------
    list[Chunk]
        Chunks covering ``[0, total_length)`` without zero-length entries

    """
    if total_length <= 0:
        return []

    chunks: list[Chunk] = []
    cursor = 0
    for chunk in highlighted:
        if chunk.start > cursor:
            chunks.append(Chunk(cursor, chunk.start, False))
        if chunk.end > chunk.start:
            chunks.append(Chunk(chunk.start, chunk.end, True))
        cursor = max(cursor, chunk.end)
    if cursor < total_length:
        chunks.append(Chunk(cursor, total_length, False))
    return chunks


def normalize_chunks(raw: Iterable[ChunkLike] | ChunkLike | None, total_length: int) -> list[Chunk]:
    """Turn the output of a custom strategy into clean match intervals.

    Accepts ``Chunk`` objects, ``(start, end)`` and ``(start, end, highlight)``
    sequences and mappings with ``start``/``end`` keys, either in an iterable
    or on their own. Entries flagged ``highlight=False`` are dropped since
    gaps are regenerated by ``fill_in_chunks``. Offsets are clamped to
    ``[0, total_length]`` and empty or reversed intervals are discarded.
    Anything else is logged and treated as no matches.
    """
    intervals: list[Chunk] = []
    skipped = 0
    for item in _chunk_items(raw):
        interval = _coerce_interval(item)
        if interval is None:
            skipped += 1
            logger.warning("Ignoring unrecognized chunk %r returned by find_chunks", item)
            continue
        start, end, highlight = interval
        if highlight:
            intervals.append(Chunk(start, end, True))

    clamped = _clamp(intervals, total_length)
    dropped = len(intervals) - len(clamped)
    if dropped or skipped:
        logger.debug("find_chunks output normalized: %d dropped, %d unrecognized", dropped, skipped)
    return clamped


def _chunk_items(raw: Any) -> Iterable[Any]:
    if raw is None:
        return ()
    if isinstance(raw, (Chunk, Mapping)):
        return (raw,)
    if isinstance(raw, (tuple, list)) and _coerce_interval(raw) is not None:
        return (raw,)
    if not isinstance(raw, (str, bytes)):
        try:
            return iter(raw)
        except TypeError:
            pass
    logger.warning("find_chunks returned %r instead of an iterable of chunks; treating it as no matches", raw)
    return ()


def _coerce_interval(item: Any) -> tuple[int, int, bool] | None:
    if isinstance(item, Chunk):
        start, end, highlight = item.start, item.end, item.highlight
    elif isinstance(item, Mapping):
        if "start" not in item or "end" not in item:
            return None
        start, end, highlight = item["start"], item["end"], bool(item.get("highlight", True))
    elif isinstance(item, (tuple, list)) and len(item) in (2, 3):
        start, end = item[0], item[1]
        highlight = bool(item[2]) if len(item) == 3 else True
    else:
        return None

    if not _is_offset(start) or not _is_offset(end):
        return None
    return start, end, highlight


def _is_offset(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _clamp(chunks: Iterable[Chunk], total_length: int) -> list[Chunk]:
    result: list[Chunk] = []
    out_of_range = 0
    for chunk in chunks:
        start = min(max(chunk.start, 0), total_length)
        end = min(max(chunk.end, 0), total_length)
        if (start, end) != (chunk.start, chunk.end) or end < start:
            out_of_range += 1
        if end > start:
            result.append(Chunk(start, end, chunk.highlight))
    if out_of_range:
        logger.warning(
            "%d interval(s) fell outside [0, %d] or were reversed; they were clamped or dropped",
            out_of_range,
            total_length,
        )
    return result


__all__ = [
    "combine_chunks",
    "compile_search_word",
    "fill_in_chunks",
    "find_chunks",
    "find_matches",
    "normalize_chunks",
    "validate_search_words",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Length-preserving sanitizers for use as ``MatchOptions.sanitize``.

Chunk offsets are computed against the sanitized text but reported against
the original text, so a sanitizer must map every input character to exactly
one output character. The helpers here are written to keep that property;
see ``is_length_preserving`` for checking a custom sanitizer.
"""

from __future__ import annotations

import unicodedata
from typing import Callable, Iterable

from headless_highlighter.constants import SanitizerName


def _fold_char(char: str) -> str:
    decomposed = unicodedata.normalize("NFD", char)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    # Ligatures and standalone combining marks have no single base letter
    return base if len(base) == 1 else char


def strip_diacritics(text: str) -> str:
    """Replace accented characters with their unaccented base letter.

    Parameters
    ----------
    text : str
        Text to sanitize

    Returns
    -------
    str
        Text of the same length with diacritics removed

    Examples
    --------
        >>> strip_diacritics("Crème brûlée")
        'Creme brulee'

    """
    if not text:
        return text
    return "".join(_fold_char(char) for char in text)


def fold_whitespace(text: str) -> str:
    """Replace every whitespace character (tabs, newlines, NBSP) with a space."""
    if not text:
        return text
    return "".join(" " if char.isspace() else char for char in text)


def is_length_preserving(sanitize: Callable[[str], str], samples: Iterable[str]) -> bool:
    """Return True when ``sanitize`` keeps the length of every sample."""
    return all(len(sanitize(sample)) == len(sample) for sample in samples)


def split_search_phrase(phrase: str) -> list[str]:
    """Split a phrase into search words on whitespace."""
    return phrase.split()


SANITIZERS: dict[SanitizerName, Callable[[str], str] | None] = {
    "none": None,
    "diacritics": strip_diacritics,
    "whitespace": fold_whitespace,
}


def get_sanitizer(name: SanitizerName) -> Callable[[str], str] | None:
    """Look up a built-in sanitizer by name.

    Raises
    ------
    KeyError
        If ``name`` is not a registered sanitizer

    """
    return SANITIZERS[name]

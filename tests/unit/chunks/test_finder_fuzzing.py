"""Property-based fuzzing tests for the chunk finder.

Test Coverage:
- Property: chunks reconstruct the text exactly
- Property: chunks are contiguous and alternate highlight flags
- Property: every literal occurrence of a word lies inside a highlight
- Property: results do not depend on search word order or repetition
- Property: custom strategy output always normalizes to a valid partition
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from headless_highlighter.chunks import find_chunks
from headless_highlighter.options import MatchOptions

SMALL_ALPHABET = "abAB .*(é"

texts = st.text(alphabet=SMALL_ALPHABET, max_size=60)
words = st.lists(st.text(alphabet=SMALL_ALPHABET, max_size=4), max_size=5)
literal = MatchOptions(auto_escape=True, case_sensitive=True)


def assert_valid_partition(text, chunks):
    if not text:
        assert chunks == []
        return
    assert chunks[0].start == 0
    assert chunks[-1].end == len(text)
    for chunk in chunks:
        assert chunk.end > chunk.start
    for previous, current in zip(chunks, chunks[1:]):
        assert previous.end == current.start
        assert previous.highlight != current.highlight


@pytest.mark.unit
@pytest.mark.fuzzing
class TestFindChunksFuzzing:
    """Invariants of find_chunks over random text and words."""

    @given(texts, words)
    def test_chunks_partition_text(self, text, search_words):
        chunks = find_chunks(text, search_words, literal)
        assert_valid_partition(text, chunks)
        assert "".join(text[chunk.start : chunk.end] for chunk in chunks) == text

    @given(texts, words)
    def test_raw_patterns_partition_text(self, text, search_words):
        """Raw patterns, including invalid ones, still yield a valid partition."""
        chunks = find_chunks(text, search_words, MatchOptions(auto_escape=False))
        assert_valid_partition(text, chunks)

    @given(texts, words)
    def test_literal_occurrences_are_highlighted(self, text, search_words):
        chunks = find_chunks(text, search_words, literal)
        covered = set()
        for chunk in chunks:
            if chunk.highlight:
                covered.update(range(chunk.start, chunk.end))

        for word in search_words:
            if not word.strip():
                continue
            position = text.find(word)
            while position != -1:
                assert set(range(position, position + len(word))) <= covered
                # Matches are scanned left to right without overlap
                position = text.find(word, position + len(word))

    @given(texts, words)
    def test_highlights_contain_only_matches(self, text, search_words):
        """Text outside highlights contains no complete occurrence of any word."""
        chunks = find_chunks(text, search_words, literal)
        for chunk in chunks:
            if chunk.highlight:
                continue
            gap = text[chunk.start : chunk.end]
            for word in search_words:
                if word.strip():
                    assert word not in gap

    @given(texts, words, st.randoms(use_true_random=False))
    def test_word_order_and_repetition_do_not_matter(self, text, search_words, rng):
        shuffled = list(search_words) * 2
        rng.shuffle(shuffled)
        assert find_chunks(text, search_words, literal) == find_chunks(text, shuffled, literal)

    @given(texts, words)
    def test_idempotent(self, text, search_words):
        assert find_chunks(text, search_words) == find_chunks(text, search_words)

    @given(
        texts,
        st.lists(
            st.tuples(st.integers(min_value=-10, max_value=80), st.integers(min_value=-10, max_value=80)),
            max_size=8,
        ),
    )
    def test_custom_strategy_output_is_normalized(self, text, intervals):
        options = MatchOptions(find_chunks=lambda value, search_words, opts: intervals)
        chunks = find_chunks(text, [], options)
        assert_valid_partition(text, chunks)

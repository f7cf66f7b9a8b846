"""Unit tests for the built-in sanitizers."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from headless_highlighter.constants import OUTPUT_FORMATS, SANITIZER_NAMES
from headless_highlighter.utils.text import (
    SANITIZERS,
    fold_whitespace,
    get_sanitizer,
    is_length_preserving,
    split_search_phrase,
    strip_diacritics,
)


@pytest.mark.unit
class TestStripDiacritics:
    """Accent folding."""

    def test_basic(self):
        assert strip_diacritics("Crème brûlée") == "Creme brulee"

    def test_ascii_unchanged(self):
        assert strip_diacritics("plain ASCII 123") == "plain ASCII 123"

    def test_empty(self):
        assert strip_diacritics("") == ""

    def test_decomposed_input_keeps_length(self):
        decomposed = "e\u0301"
        assert len(strip_diacritics(decomposed)) == 2

    @pytest.mark.fuzzing
    @given(st.text(max_size=50))
    def test_preserves_length(self, text):
        assert len(strip_diacritics(text)) == len(text)


@pytest.mark.unit
class TestFoldWhitespace:
    """Whitespace folding."""

    def test_folds_tabs_newlines_and_nbsp(self):
        assert fold_whitespace("a\tb\nc\u00a0d") == "a b c d"

    @pytest.mark.fuzzing
    @given(st.text(max_size=50))
    def test_preserves_length(self, text):
        assert len(fold_whitespace(text)) == len(text)


@pytest.mark.unit
def test_is_length_preserving():
    assert is_length_preserving(str.upper, ["abc", "xyz"])
    assert not is_length_preserving(lambda value: value.strip(), [" a "])


@pytest.mark.unit
def test_split_search_phrase():
    assert split_search_phrase("  quick   brown\tfox ") == ["quick", "brown", "fox"]


@pytest.mark.unit
def test_sanitizer_registry():
    assert get_sanitizer("none") is None
    assert get_sanitizer("diacritics") is strip_diacritics
    assert set(SANITIZERS) == {"none", "diacritics", "whitespace"}
    with pytest.raises(KeyError):
        get_sanitizer("unknown")


@pytest.mark.unit
def test_name_tuples_follow_literal_types():
    assert set(SANITIZERS) == set(SANITIZER_NAMES)
    assert SANITIZER_NAMES == ("none", "diacritics", "whitespace")
    assert OUTPUT_FORMATS == ("html", "json", "markers", "terminal", "template")

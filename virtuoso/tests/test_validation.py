"""
Tests for the word-validity predicate.

Tests:
- Valid words
- Each rejection reason
- Reason priority
"""

import pytest

from ..engine_core.validation import (
    InvalidReason,
    REASON_MESSAGES,
    check_word,
    count_invalid,
    is_valid_word,
)
from ..engine_core.errors import InputValidationError


class TestCheckWord:
    """Tests for check_word."""

    @pytest.mark.parametrize("word", ["crane", "ghost", "adieu", "zebra"])
    def test_valid_words(self, word):
        """Five distinct lowercase letters are valid."""
        assert check_word(word) is None
        assert is_valid_word(word)

    @pytest.mark.parametrize("word", ["", "cran", "cranes", "a"])
    def test_wrong_length(self, word):
        """Anything but five characters is a length failure."""
        assert check_word(word) == InvalidReason.LENGTH

    @pytest.mark.parametrize("word", ["cran3", "cr-ne", "CRANE", "cr ne", "crané"])
    def test_invalid_characters(self, word):
        """Non a-z characters are rejected."""
        assert check_word(word) == InvalidReason.CHARACTERS

    def test_duplicate_letters(self):
        """Repeated letters are rejected."""
        assert check_word("hello") == InvalidReason.DUPLICATES
        assert check_word("apple") == InvalidReason.DUPLICATES

    def test_length_beats_characters(self):
        """Length is reported before bad characters."""
        assert check_word("ab1") == InvalidReason.LENGTH

    def test_characters_beat_duplicates(self):
        """Bad characters are reported before duplicates."""
        assert check_word("aa1bc") == InvalidReason.CHARACTERS

    def test_word_list_membership(self):
        """With a word list, unknown words are rejected last."""
        words = frozenset({"crane"})
        assert check_word("crane", words) is None
        assert check_word("ghost", words) == InvalidReason.NOT_IN_WORD_LIST
        assert check_word("hello", words) == InvalidReason.DUPLICATES


class TestCountInvalid:
    """Tests for counting invalid lines."""

    def test_lines_are_lower_cased(self):
        """Mixed-case lines are valid once lower-cased."""
        assert count_invalid(["CRANE", "Ghost", "plumb"]) == 0

    def test_counts_each_bad_line(self):
        """Every failing line is counted once."""
        assert count_invalid(["crane", "hello", "", "ab cd", "stone "]) == 4


class TestInputValidationError:
    """Tests for the per-guess error."""

    def test_messages(self):
        """Each reason carries its player-facing message."""
        error = InputValidationError("hello", InvalidReason.DUPLICATES)
        assert str(error) == "The input has duplicate letters."
        assert error.word == "hello"
        assert error.reason == InvalidReason.DUPLICATES
        assert REASON_MESSAGES[InvalidReason.LENGTH] == "The input isn't a 5-letter word."

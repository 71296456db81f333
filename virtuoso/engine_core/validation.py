"""
Word Validation - The word-validity predicate shared by loading and guessing.

A word is valid when:
1. It is exactly WORD_LENGTH characters long
2. Every character is a lowercase ASCII letter
3. No letter repeats

Checks run in that order and the first failure is the reason reported.
Guesses are additionally required to be in the word list.
"""

from __future__ import annotations
from enum import Enum
from typing import AbstractSet, Iterable
import re

WORD_LENGTH = 5

_NON_LETTER_RE = re.compile(r"[^a-z]")


class InvalidReason(Enum):
    """Why a word was rejected, in checking order."""
    LENGTH = "length"
    CHARACTERS = "characters"
    DUPLICATES = "duplicates"
    NOT_IN_WORD_LIST = "not_in_word_list"


REASON_MESSAGES: dict[InvalidReason, str] = {
    InvalidReason.LENGTH: f"The input isn't a {WORD_LENGTH}-letter word.",
    InvalidReason.CHARACTERS: "One or more letters of the input aren't valid.",
    InvalidReason.DUPLICATES: "The input has duplicate letters.",
    InvalidReason.NOT_IN_WORD_LIST: "The input word isn't included in my words list.",
}


def check_word(
    word: str,
    words: AbstractSet[str] | None = None,
) -> InvalidReason | None:
    """
    Check a lowercase word against the validity predicate.

    Args:
        word: Candidate word, already lower-cased
        words: If given, the word must also be a member

    Returns:
        None when the word is valid, otherwise the first failing reason
    """
    if len(word) != WORD_LENGTH:
        return InvalidReason.LENGTH
    if _NON_LETTER_RE.search(word):
        return InvalidReason.CHARACTERS
    if len(set(word)) != WORD_LENGTH:
        return InvalidReason.DUPLICATES
    if words is not None and word not in words:
        return InvalidReason.NOT_IN_WORD_LIST
    return None


def is_valid_word(word: str) -> bool:
    return check_word(word) is None


def count_invalid(lines: Iterable[str]) -> int:
    """Count lines that fail the predicate after lower-casing."""
    return sum(1 for line in lines if check_word(line.lower()) is not None)

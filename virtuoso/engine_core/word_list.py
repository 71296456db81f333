"""
Word List Loading - Reads and checks the two word files.

Loading order (first failure wins):
1. Both files must be readable (words file first)
2. Every line of each file must be a valid word
3. Every candidate must appear in the full word list

Lines are compared after lower-casing. Only line terminators are stripped,
so stray spaces or punctuation make a line invalid.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import logging
import os

from .errors import FileAccessError, InvalidWordsError, MissingCandidatesError
from .validation import count_invalid

logger = logging.getLogger(__name__)

WORDS_ROLE = "words"
CANDIDATES_ROLE = "candidate words"


@dataclass(frozen=True)
class WordLists:
    """The validated word list and candidate pool for one session."""
    words: frozenset[str]
    candidates: frozenset[str]
    words_path: str
    candidates_path: str


def check_readable(path: str, role: str) -> None:
    """Raise FileAccessError unless path is a readable regular file."""
    file = Path(path)
    if not file.is_file() or not os.access(file, os.R_OK):
        raise FileAccessError(path, role)


def read_lines(path: str, role: str) -> list[str]:
    """
    Read a word file as a list of lines without terminators.

    Undecodable bytes become U+FFFD, so the line fails validation instead
    of the whole file being unreadable.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return [line.rstrip("\r\n") for line in f]
    except OSError as e:
        logger.debug("Could not read %s: %s", path, e)
        raise FileAccessError(path, role) from e


def check_lines(path: str, lines: list[str]) -> None:
    """Raise InvalidWordsError if any line fails the word-validity check."""
    invalid = count_invalid(lines)
    if invalid:
        raise InvalidWordsError(path, invalid)


def load_word_lists(words_path: str, candidates_path: str) -> WordLists:
    """
    Load and validate the full word list and the candidate pool.

    Args:
        words_path: File with every accepted guess
        candidates_path: File with the words the secret is drawn from

    Returns:
        WordLists with lower-cased, de-duplicated words

    Raises:
        FileAccessError: A file cannot be read
        InvalidWordsError: A file contains invalid words
        MissingCandidatesError: Some candidates are not in the word list
    """
    check_readable(words_path, WORDS_ROLE)
    check_readable(candidates_path, CANDIDATES_ROLE)

    word_lines = read_lines(words_path, WORDS_ROLE)
    check_lines(words_path, word_lines)
    candidate_lines = read_lines(candidates_path, CANDIDATES_ROLE)
    check_lines(candidates_path, candidate_lines)

    words = frozenset(line.lower() for line in word_lines)
    candidates = frozenset(line.lower() for line in candidate_lines)

    absent = candidates - words
    if absent:
        raise MissingCandidatesError(words_path, len(absent))

    logger.info(
        "Loaded %d words from %s and %d candidates from %s",
        len(words), words_path, len(candidates), candidates_path,
    )
    return WordLists(
        words=words,
        candidates=candidates,
        words_path=words_path,
        candidates_path=candidates_path,
    )

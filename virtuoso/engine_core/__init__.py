"""
Engine Core - Word rules, scoring and rendering.

The engine is what the session runs on:
1. Validates words against the five-letter rules
2. Loads and checks the word files
3. Scores guesses against the secret
4. Renders feedback for the console
"""

from .validation import WORD_LENGTH, InvalidReason, check_word, is_valid_word
from .errors import (
    VirtuosoError,
    ArgumentError,
    FileAccessError,
    ContentError,
    InvalidWordsError,
    MissingCandidatesError,
    EmptyPoolError,
    InputValidationError,
    SessionStateError,
)
from .word_list import WordLists, load_word_lists
from .scoring import Mark, LetterScore, score_guess
from .render import Style, Renderer, AnsiRenderer, PlainRenderer

__all__ = [
    "WORD_LENGTH",
    "InvalidReason",
    "check_word",
    "is_valid_word",
    "VirtuosoError",
    "ArgumentError",
    "FileAccessError",
    "ContentError",
    "InvalidWordsError",
    "MissingCandidatesError",
    "EmptyPoolError",
    "InputValidationError",
    "SessionStateError",
    "WordLists",
    "load_word_lists",
    "Mark",
    "LetterScore",
    "score_guess",
    "Style",
    "Renderer",
    "AnsiRenderer",
    "PlainRenderer",
]

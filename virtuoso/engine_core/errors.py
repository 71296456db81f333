"""
Error taxonomy for the game.

Startup errors end the session before it becomes active. Input errors are
reported per guess and leave the session running. Every error's ``str()`` is
the message shown to the player.
"""

from __future__ import annotations

from .validation import InvalidReason, REASON_MESSAGES


class VirtuosoError(Exception):
    """Base class for errors reported to the player as a message."""


class ArgumentError(VirtuosoError):
    """Raised when the wrong number of word files is given."""

    def __init__(self):
        super().__init__("Error: Wrong number of arguments.")


class FileAccessError(VirtuosoError):
    """Raised when a word file cannot be opened for reading."""

    def __init__(self, path: str, role: str):
        self.path = path
        self.role = role
        super().__init__(f"Error: The {role} file {path} doesn't exist.")


class ContentError(VirtuosoError):
    """Raised when a word file has unusable content."""

    def __init__(self, path: str, count: int, message: str):
        self.path = path
        self.count = count
        super().__init__(message)


class InvalidWordsError(ContentError):
    """Some lines of a word file fail the word-validity check."""

    def __init__(self, path: str, count: int):
        super().__init__(
            path, count,
            f"Error: {count} invalid words were found in the {path} file.",
        )


class MissingCandidatesError(ContentError):
    """Some candidate words are absent from the full word list."""

    def __init__(self, words_path: str, count: int):
        super().__init__(
            words_path, count,
            f"Error: {count} candidate words are not included in the {words_path} file.",
        )


class EmptyPoolError(VirtuosoError):
    """Raised when there is no candidate to draw the secret from."""

    def __init__(self):
        super().__init__("Empty candidates list")


class InputValidationError(VirtuosoError):
    """Raised when a guess is rejected."""

    def __init__(self, word: str, reason: InvalidReason):
        self.word = word
        self.reason = reason
        super().__init__(REASON_MESSAGES[reason])


class SessionStateError(RuntimeError):
    """
    Raised when a stopped session is asked to process a guess.

    This is a caller bug, not a player error: the loop must stop polling
    once the session reports it is no longer running.
    """

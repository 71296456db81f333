"""
Game Session - Owns all state for one game.

LIFECYCLE:
1. Session is created STOPPED
2. start() loads the word files, draws the secret and goes ACTIVE
3. process_input() scores one guess per call
4. A correct guess or "exit" returns the session to STOPPED

A failed start() leaves the session STOPPED; the error is returned as the
message, never raised. Calling process_input() on a stopped session with
anything but "exit" is a caller bug and raises SessionStateError.
"""

from __future__ import annotations
from enum import Enum
from typing import Callable, Sequence
import logging
import random
import time

from ..engine_core.errors import (
    ArgumentError,
    EmptyPoolError,
    InputValidationError,
    SessionStateError,
    VirtuosoError,
)
from ..engine_core.render import (
    AnsiRenderer,
    Renderer,
    render_clue,
    render_wrong_letters,
)
from ..engine_core.scoring import absent_letters, score_guess
from ..engine_core.validation import WORD_LENGTH, check_word
from ..engine_core.word_list import load_word_lists

logger = logging.getLogger(__name__)

BANNER = "Words Virtuoso"
EXIT_COMMAND = "exit"
GAME_OVER_MESSAGE = "The game is over."
GUESS_PROMPT = f"Input a {WORD_LENGTH}-letter word:"
FIRST_TRY_MESSAGE = "Amazing luck! The solution was found at once."


class SessionState(Enum):
    """State of a game session."""
    STOPPED = "stopped"  # Before start, after a win or quit
    ACTIVE = "active"  # Accepting guesses


class GameSession:
    """
    A single game of Words Virtuoso.

    Usage:
        session = GameSession(rng=random.Random(7))
        print(session.start(["words.txt", "candidates.txt"]))

        while session.is_running:
            print(session.prompt)
            print(session.process_input(input()))

    The random source and clock are injectable so tests can fix the
    secret and the elapsed time.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
        renderer: Renderer | None = None,
        count_invalid_tries: bool = True,
    ):
        self.rng = rng or random.Random()
        self.clock = clock
        self.renderer = renderer or AnsiRenderer()
        self.count_invalid_tries = count_invalid_tries

        self.state = SessionState.STOPPED
        self.words: frozenset[str] = frozenset()
        self.candidates: frozenset[str] = frozenset()
        self._secret = ""
        self.clues: list[str] = []
        self.wrong_letters: set[str] = set()
        self.tries = 0
        self.started_at = 0.0

    @property
    def is_running(self) -> bool:
        return self.state != SessionState.STOPPED

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def prompt(self) -> str:
        if self.state == SessionState.ACTIVE:
            return "\n" + GUESS_PROMPT
        return "\n"

    def start(self, paths: Sequence[str]) -> str:
        """
        Start a new game from a words file and a candidates file.

        Returns:
            The banner on success, otherwise the error message
        """
        try:
            self._start(paths)
        except VirtuosoError as e:
            logger.info("Session not started: %s", e)
            self.state = SessionState.STOPPED
            return str(e)
        return BANNER

    def _start(self, paths: Sequence[str]) -> None:
        if len(paths) != 2:
            raise ArgumentError()

        lists = load_word_lists(paths[0], paths[1])
        if not lists.candidates:
            raise EmptyPoolError()

        # Sorted so a seeded rng always draws the same word
        secret = self.rng.choice(sorted(lists.candidates))

        self.words = lists.words
        self.candidates = lists.candidates
        self._secret = secret
        self.clues.clear()
        self.wrong_letters.clear()
        self.tries = 0
        self.started_at = self.clock()
        self.state = SessionState.ACTIVE
        logger.info(
            "Session started with %d candidates from %s",
            len(self.candidates), lists.candidates_path,
        )

    def stop(self) -> None:
        """End the game without a win."""
        self.state = SessionState.STOPPED

    def process_input(self, line: str) -> str:
        """
        Process one line typed by the player.

        Returns:
            The message to show: feedback, an input error, the win
            message or the game-over message
        """
        text = line.lower()
        if text == EXIT_COMMAND:
            self.stop()
            logger.debug("Player quit after %d tries", self.tries)
            return GAME_OVER_MESSAGE

        if self.state != SessionState.ACTIVE:
            raise SessionStateError("Cannot process a guess on a stopped session")

        # Invalid attempts still use up a try unless configured otherwise
        if self.count_invalid_tries:
            self.tries += 1

        try:
            self._check_guess(text)
        except InputValidationError as e:
            logger.debug("Rejected guess %r: %s", e.word, e.reason.value)
            return str(e)

        if not self.count_invalid_tries:
            self.tries += 1

        clue = self._add_clue(text)
        if text == self._secret:
            message = self._win_message()
            self.state = SessionState.STOPPED
            logger.info("Solved after %d tries", self.tries)
            return clue + message

        return clue + render_wrong_letters(self.renderer, self.wrong_letters)

    def _check_guess(self, word: str) -> None:
        reason = check_word(word, self.words)
        if reason is not None:
            raise InputValidationError(word, reason)

    def _add_clue(self, guess: str) -> str:
        """Score the guess, record it and return the full clue history."""
        scores = score_guess(guess, self._secret)
        self.wrong_letters |= absent_letters(scores)
        self.clues.append(render_clue(self.renderer, scores))
        return "\n" + "\n".join(self.clues) + "\n\n"

    def elapsed_seconds(self) -> int:
        return int(self.clock() - self.started_at)

    def _win_message(self) -> str:
        if self.tries == 1:
            return "Correct!\n" + FIRST_TRY_MESSAGE
        return (
            "Correct!\n"
            f"The solution was found after {self.tries} tries "
            f"in {self.elapsed_seconds()} seconds."
        )

"""
Game Loop - The console read/print loop.

The loop:
1. Start the session and print the result
2. Print the prompt
3. Read one line
4. Print the session's response
5. Repeat while the session is running

A failed start prints the error and ends the loop immediately.
"""

from __future__ import annotations
from typing import Callable, Sequence, TYPE_CHECKING
import logging

if TYPE_CHECKING:
    from .game_session import GameSession

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Drives a GameSession from line-based I/O.

    Usage:
        loop = GameLoop(session)
        loop.run(["words.txt", "candidates.txt"])

    read_line and write default to input() and print(); tests pass their own.
    """

    def __init__(
        self,
        session: GameSession,
        read_line: Callable[[], str] = input,
        write: Callable[[str], None] = print,
    ):
        self.session = session
        self.read_line = read_line
        self.write = write

    def run(self, paths: Sequence[str]) -> int:
        """
        Play one game.

        Returns:
            Number of lines handed to the session
        """
        self.write(self.session.start(paths))

        lines_read = 0
        while self.session.is_running:
            self.write(self.session.prompt)
            try:
                line = self.read_line()
            except EOFError:
                logger.info("Input closed, ending game")
                self.session.stop()
                break
            lines_read += 1
            self.write(self.session.process_input(line))

        return lines_read

"""
Session Module - One game from start to finish.

A session represents one play-through:
- Created stopped, before any word files are loaded
- Started with a words file and a candidates file
- Processes guesses until a win or "exit"

Sessions are EPHEMERAL:
- Nothing is saved between games
- Starting again draws a new secret and clears the history
"""

from .game_session import GameSession, SessionState
from .game_loop import GameLoop

__all__ = [
    "GameSession",
    "SessionState",
    "GameLoop",
]

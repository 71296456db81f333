"""
Guess scoring.

Both the guess and the secret have distinct letters, so a letter is either
in the right spot, somewhere else in the secret, or not in it at all.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class Mark(Enum):
    """Feedback for one letter of a guess."""
    CORRECT = "correct"  # Right letter, right position
    PRESENT = "present"  # In the secret, elsewhere
    ABSENT = "absent"  # Not in the secret


@dataclass(frozen=True)
class LetterScore:
    letter: str
    mark: Mark


def score_guess(guess: str, secret: str) -> list[LetterScore]:
    """
    Score a guess against the secret, left to right.

    Letters are returned uppercase. The guess must already be validated
    and the same length as the secret.
    """
    scores = []
    for index, char in enumerate(guess):
        if secret[index] == char:
            mark = Mark.CORRECT
        elif char in secret:
            mark = Mark.PRESENT
        else:
            mark = Mark.ABSENT
        scores.append(LetterScore(letter=char.upper(), mark=mark))
    return scores


def absent_letters(scores: list[LetterScore]) -> set[str]:
    """Uppercase letters marked absent."""
    return {s.letter for s in scores if s.mark == Mark.ABSENT}

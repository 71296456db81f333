"""
Rendering - Turns scored guesses into display strings.

Five semantic styles are used. The terminal renderer paints them with ANSI
256-color backgrounds; the plain renderer uses text markers so output stays
readable on consoles without color and easy to assert on in tests.
"""

from __future__ import annotations
from enum import Enum
from typing import Iterable, Protocol

from .scoring import LetterScore, Mark


class Style(Enum):
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"
    WRONG_LETTERS = "wrong_letters"
    RESET = "reset"


MARK_STYLES: dict[Mark, Style] = {
    Mark.CORRECT: Style.CORRECT,
    Mark.PRESENT: Style.PRESENT,
    Mark.ABSENT: Style.ABSENT,
}


class Renderer(Protocol):
    """Anything that can paint a piece of text in a style."""

    def paint(self, text: str, style: Style) -> str:
        ...


class AnsiRenderer:
    """Background colors via ANSI escape sequences."""

    SEQUENCES: dict[Style, str] = {
        Style.CORRECT: "\033[48:5:10m",  # green
        Style.PRESENT: "\033[48:5:11m",  # yellow
        Style.ABSENT: "\033[48:5:7m",  # grey
        Style.WRONG_LETTERS: "\033[48:5:14m",  # azure
        Style.RESET: "\033[0m",
    }

    def paint(self, text: str, style: Style) -> str:
        return self.SEQUENCES[style] + text + self.SEQUENCES[Style.RESET]


class PlainRenderer:
    """Text markers instead of colors."""

    TEMPLATES: dict[Style, str] = {
        Style.CORRECT: "[{}]",
        Style.PRESENT: "({})",
        Style.ABSENT: " {} ",
        Style.WRONG_LETTERS: "<{}>",
        Style.RESET: "{}",
    }

    def paint(self, text: str, style: Style) -> str:
        return self.TEMPLATES[style].format(text)


def render_clue(renderer: Renderer, scores: Iterable[LetterScore]) -> str:
    """Render one scored guess as a single line."""
    return "".join(
        renderer.paint(s.letter, MARK_STYLES[s.mark]) for s in scores
    )


def render_wrong_letters(renderer: Renderer, letters: Iterable[str]) -> str:
    """Render the wrong-letter summary, sorted ascending."""
    return renderer.paint("".join(sorted(letters)), Style.WRONG_LETTERS)

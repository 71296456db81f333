"""
Words Virtuoso - Console word-guessing game

A five-letter word is drawn from a candidate list and the player guesses
until they find it. The package provides:
- Word list loading and validation
- Per-letter scoring of guesses
- A session state machine driven by a console loop
"""

__version__ = "0.1.0"

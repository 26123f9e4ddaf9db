"""Guess scoring against the secret word."""

from typing import List, Optional

from .models import LetterState, Tile


def evaluate(guess: str, secret: str) -> List[LetterState]:
    """
    Score each position of `guess` against `secret`.

    Two passes so duplicate letters are never credited more often than they
    occur in the secret:
    1. Exact matches are CORRECT and consume their secret letter.
    2. Remaining positions claim the first unconsumed occurrence of their
       letter (PRESENT) or get ABSENT.

    Args:
        guess: Uppercase guess
        secret: Uppercase secret word of the same length

    Returns:
        One LetterState per position

    Raises:
        ValueError: If the lengths differ
    """
    if len(guess) != len(secret):
        raise ValueError(
            f"Guess '{guess}' has length {len(guess)}, expected {len(secret)}"
        )

    remaining: List[Optional[str]] = list(secret)
    states = [LetterState.ABSENT] * len(guess)

    for i, char in enumerate(guess):
        if char == secret[i]:
            states[i] = LetterState.CORRECT
            remaining[i] = None

    for i, char in enumerate(guess):
        if states[i] is LetterState.CORRECT:
            continue
        if char in remaining:
            states[i] = LetterState.PRESENT
            remaining[remaining.index(char)] = None

    return states


def score_row(guess: str, secret: str) -> List[Tile]:
    """Evaluate a guess and return the finished tiles for its row."""
    return [
        Tile(char=char, state=state)
        for char, state in zip(guess, evaluate(guess, secret))
    ]

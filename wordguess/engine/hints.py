"""Keyboard hint aggregation."""

from typing import Dict, Iterable

from .models import LetterState, Tile


def merge_letter_states(
    previous: Dict[str, LetterState],
    row: Iterable[Tile],
) -> Dict[str, LetterState]:
    """
    Fold one evaluated row into the keyboard hint map.

    A letter only ever moves up: CORRECT always wins, PRESENT replaces
    anything but CORRECT, ABSENT is recorded only for letters not seen yet.
    `previous` is left untouched.

    Args:
        previous: Letter -> best known state so far
        row: Tiles of the row that was just evaluated

    Returns:
        New letter -> state mapping
    """
    merged = dict(previous)

    for tile in row:
        if not tile.char:
            continue
        current = merged.get(tile.char)

        if tile.state is LetterState.CORRECT:
            merged[tile.char] = LetterState.CORRECT
        elif tile.state is LetterState.PRESENT and current is not LetterState.CORRECT:
            merged[tile.char] = LetterState.PRESENT
        elif tile.state is LetterState.ABSENT and current is None:
            merged[tile.char] = LetterState.ABSENT

    return merged

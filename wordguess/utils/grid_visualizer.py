from typing import Dict, List

from ..engine.models import GameState, GameStatus, LetterState, Tile

KEYBOARD_ROWS = ("QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM")


def render_tile(tile: Tile) -> str:
    """
    Render one tile as a three-character cell.

    [A] correct, (A) present, ' a ' absent, ' A ' typed, ' _ ' empty.
    """
    if not tile.char:
        return " _ "
    if tile.state is LetterState.CORRECT:
        return f"[{tile.char}]"
    if tile.state is LetterState.PRESENT:
        return f"({tile.char})"
    if tile.state is LetterState.ABSENT:
        return f" {tile.char.lower()} "
    return f" {tile.char} "


def render_grid(state: GameState) -> str:
    """Render the board, one line per row."""
    return "\n".join(
        "".join(render_tile(tile) for tile in row)
        for row in state.grid
    )


def render_keyboard(state: GameState) -> str:
    """Render a QWERTY keyboard with the best known state of each letter."""
    hints: Dict[str, LetterState] = state.letter_states
    lines: List[str] = []
    for indent, keys in enumerate(KEYBOARD_ROWS):
        cells = [
            render_tile(Tile(char=key, state=hints.get(key, LetterState.INITIAL)))
            for key in keys
        ]
        lines.append(" " * indent + "".join(cells))
    return "\n".join(lines)


def render_status(state: GameState) -> str:
    """One-line header, e.g. 'GUESSES LEFT: 3'."""
    if state.status is GameStatus.LOADING:
        return "LOADING... (provider unavailable, type :restart to retry)" if state.stalled else "LOADING..."
    if state.status is GameStatus.VALIDATING:
        return "VALIDATING... (provider unavailable, press enter to retry)" if state.stalled else "VALIDATING..."
    if state.status is GameStatus.WON:
        return f"SOLVED: {state.answer}"
    if state.status is GameStatus.LOST:
        return f"OUT OF GUESSES: {state.answer}"
    return f"GUESSES LEFT: {state.guesses_left}"


def render_state(state: GameState) -> str:
    """Header, board and keyboard separated by blank lines."""
    return "\n\n".join([render_status(state), render_grid(state), render_keyboard(state)])

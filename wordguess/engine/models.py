"""
Pydantic models for the game engine.

This module contains the data models (tiles, game state, signals, configuration)
shared by the engine, the evaluation functions and anything that renders a
game. The state machine itself lives in game.py.
"""

from enum import Enum
from functools import total_ordering
from typing import List, Dict, Optional
from pydantic import BaseModel, Field, ConfigDict


@total_ordering
class LetterState(Enum):
    """Evaluation state of a tile or keyboard letter."""
    INITIAL = "initial"
    CORRECT = "correct"  # right letter, right position
    PRESENT = "present"  # in the word, wrong position
    ABSENT = "absent"

    @property
    def rank(self) -> int:
        """Informativeness: INITIAL < ABSENT < PRESENT < CORRECT."""
        return _INFORMATIVENESS[self]

    def __lt__(self, other):
        if not isinstance(other, LetterState):
            return NotImplemented
        return self.rank < other.rank


_INFORMATIVENESS: Dict[LetterState, int] = {
    LetterState.INITIAL: 0,
    LetterState.ABSENT: 1,
    LetterState.PRESENT: 2,
    LetterState.CORRECT: 3,
}


class GameStatus(Enum):
    """Engine status. LOADING -> PLAYING <-> VALIDATING -> WON | LOST."""
    LOADING = "loading"
    PLAYING = "playing"
    VALIDATING = "validating"
    WON = "won"
    LOST = "lost"


class SignalKind(Enum):
    """Kinds of one-shot notifications returned alongside a state snapshot."""
    TOO_SHORT = "too_short"
    INVALID_WORD = "invalid_word"
    WON = "won"
    LOST = "lost"


class Tile(BaseModel):
    """A single letter cell. Replaced, never mutated."""
    model_config = ConfigDict(frozen=True)

    char: str = Field(default="", pattern=r'^[A-Z]?$')
    state: LetterState = LetterState.INITIAL


class GameConfig(BaseModel):
    """Board dimensions, fixed for the lifetime of an engine."""
    model_config = ConfigDict(frozen=True)

    word_length: int = Field(default=5, ge=1)
    max_attempts: int = Field(default=5, ge=1)


class GameState(BaseModel):
    """
    Everything a presentation layer needs to draw a game.

    The secret word is not part of the state. `answer` is only filled in
    once the game is over.

    Attributes:
        grid: max_attempts rows of word_length tiles
        current_row: Row being typed into (0-based)
        current_col: Next free column in the current row
        status: Where the engine is in its state machine
        letter_states: Best known state of every submitted letter
        answer: The secret word, revealed on WON or LOST
        stalled: True when the last provider call failed and nothing is in flight
    """
    grid: List[List[Tile]] = Field(default_factory=list)
    current_row: int = Field(default=0, ge=0)
    current_col: int = Field(default=0, ge=0)
    status: GameStatus = GameStatus.LOADING
    letter_states: Dict[str, LetterState] = Field(default_factory=dict)
    word_length: int = Field(default=5, ge=1)
    max_attempts: int = Field(default=5, ge=1)
    answer: Optional[str] = None
    stalled: bool = False

    @classmethod
    def empty(cls, config: GameConfig) -> "GameState":
        """Create a fresh LOADING state with a blank grid."""
        grid = [
            [Tile() for _ in range(config.word_length)]
            for _ in range(config.max_attempts)
        ]
        return cls(
            grid=grid,
            word_length=config.word_length,
            max_attempts=config.max_attempts,
        )

    @property
    def guesses_left(self) -> int:
        return self.max_attempts - self.current_row

    @property
    def is_over(self) -> bool:
        return self.status in (GameStatus.WON, GameStatus.LOST)

    @property
    def current_guess(self) -> str:
        """Letters typed so far in the active row."""
        if self.current_row >= len(self.grid):
            return ""
        return "".join(tile.char for tile in self.grid[self.current_row])

    @property
    def guesses(self) -> List[str]:
        """Every evaluated row, oldest first."""
        return [
            "".join(tile.char for tile in row)
            for row in self.grid
            if row and row[0].state is not LetterState.INITIAL
        ]


class Signal(BaseModel):
    """Transient UI notification (shake, toast, win animation)."""
    kind: SignalKind
    message: str
    payload: Optional[str] = None


class StepResult(BaseModel):
    """What every engine intent returns."""
    state: GameState
    signal: Optional[Signal] = None

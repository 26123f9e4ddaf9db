"""Game engine for wordguess."""

from .models import (
    LetterState,
    GameStatus,
    SignalKind,
    Tile,
    GameConfig,
    GameState,
    Signal,
    StepResult,
)
from .evaluation import evaluate, score_row
from .hints import merge_letter_states
from .game import GameEngine
from .keys import dispatch_key

__all__ = [
    "LetterState",
    "GameStatus",
    "SignalKind",
    "Tile",
    "GameConfig",
    "GameState",
    "Signal",
    "StepResult",
    "evaluate",
    "score_row",
    "merge_letter_states",
    "GameEngine",
    "dispatch_key",
]

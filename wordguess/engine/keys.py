"""Map raw key names onto engine intents."""

from .game import GameEngine
from .models import StepResult


ENTER_KEYS = ("ENTER", "RETURN")
DELETE_KEYS = ("BACKSPACE", "DELETE")


def dispatch_key(engine: GameEngine, key: str) -> StepResult:
    """
    Route one key press to the matching intent.

    ENTER submits the row, or starts a new game when the current one is over.
    BACKSPACE/DELETE removes the last letter, a single letter is typed, and
    anything else is ignored.

    Args:
        engine: The engine receiving the intent
        key: Key name as reported by the input layer (case-insensitive)

    Returns:
        StepResult from the intent, or the unchanged state for unknown keys
    """
    name = key.strip().upper() if isinstance(key, str) else ""

    if name in ENTER_KEYS:
        if engine.state.is_over:
            return engine.restart()
        return engine.submit()

    if name in DELETE_KEYS:
        return engine.delete()

    if len(name) == 1:
        return engine.type_char(name)

    return StepResult(state=engine.snapshot())

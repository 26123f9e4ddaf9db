import logging
from typing import Any, Callable, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

from .evaluation import score_row
from .hints import merge_letter_states
from .models import (
    GameConfig,
    GameState,
    GameStatus,
    Signal,
    SignalKind,
    StepResult,
    Tile,
)
from ..providers.base import ProviderUnavailable, WordProvider


logger = logging.getLogger(__name__)

TOO_SHORT_MESSAGE = "Too short"
INVALID_WORD_MESSAGE = "Not a valid word"
WIN_MESSAGE = "SPLENDID"


class GameEngine(BaseModel):
    """
    Owns a single game session and drives its state machine.

    A presentation layer calls the intent methods (type_char, delete, submit,
    restart) and renders the StepResult each one returns. Intents that are not
    allowed in the current status are ignored without raising.

    Attributes:
        provider: Word source used for secret words and guess validation
        config: Board dimensions
        state: Current game state (read it through snapshot())
        on_step: Optional callback receiving every StepResult that changed state
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    provider: Any
    config: GameConfig = Field(default_factory=GameConfig)
    state: Optional[GameState] = None
    on_step: Optional[Callable[[StepResult], None]] = None
    _secret_word: str = ""
    _in_flight: bool = False

    @field_validator("provider")
    @classmethod
    def _check_provider(cls, value: Any) -> Any:
        if not isinstance(value, WordProvider):
            raise ValueError("provider must implement fetch_secret_word and is_valid_word")
        return value

    def model_post_init(self, __context) -> None:
        """Start out in LOADING with a blank grid."""
        if self.state is None:
            self.state = GameState.empty(self.config)

    @classmethod
    def create(
        cls,
        provider: WordProvider,
        config: Optional[GameConfig] = None,
        on_step: Optional[Callable[[StepResult], None]] = None,
        **config_kwargs: Any
    ) -> "GameEngine":
        """
        Factory method to build an engine and fetch its first secret word.

        Args:
            provider: Word source
            config: Optional GameConfig instance
            on_step: Optional state change callback
            **config_kwargs: Config parameters if config not provided

        Returns:
            Engine in PLAYING, or stalled in LOADING if the provider failed
        """
        if config is None:
            config = GameConfig(**config_kwargs)

        engine = cls(provider=provider, config=config, on_step=on_step)
        engine.start()
        return engine

    @property
    def status(self) -> GameStatus:
        return self.state.status

    def snapshot(self) -> GameState:
        """Deep copy of the current state, safe to hand to a renderer."""
        return self.state.model_copy(deep=True)

    # --- Intents ---

    def start(self) -> StepResult:
        """
        Hard reset: throw away whatever game is in progress and fetch a new
        secret word. Unlike restart(), this is not limited to finished or
        stalled games; only an in-flight provider call blocks it.

        Returns:
            StepResult in PLAYING, or stalled in LOADING if the fetch failed
        """
        if self._in_flight:
            return self._ignore("start", "a provider call is in flight")

        self.state = GameState.empty(self.config)
        self._secret_word = ""
        return self._load_secret_word()

    def type_char(self, letter: str) -> StepResult:
        """Put a letter into the next free tile of the active row."""
        if self.state.status is not GameStatus.PLAYING:
            return self._ignore("type_char", f"status is {self.state.status.value}")

        if not isinstance(letter, str) or len(letter) != 1 or not (letter.isascii() and letter.isalpha()):
            return self._ignore("type_char", f"{letter!r} is not a single letter")

        if self.state.current_col >= self.config.word_length:
            return self._ignore("type_char", "row is full")

        row = self.state.grid[self.state.current_row]
        row[self.state.current_col] = Tile(char=letter.upper())
        self.state.current_col += 1
        return self._emit()

    def delete(self) -> StepResult:
        """Clear the last typed tile of the active row."""
        if self.state.status is not GameStatus.PLAYING:
            return self._ignore("delete", f"status is {self.state.status.value}")

        if self.state.current_col <= 0:
            return self._ignore("delete", "row is empty")

        self.state.current_col -= 1
        self.state.grid[self.state.current_row][self.state.current_col] = Tile()
        return self._emit()

    def submit(self) -> StepResult:
        """
        Submit the active row.

        A short row only produces a TOO_SHORT signal. A full row is validated
        by the provider and then scored. Calling submit while a failed
        validation is stalled retries it.
        """
        if self.state.status is GameStatus.VALIDATING and self._can_retry():
            logger.info("Retrying validation of %s", self.state.current_guess)
            return self._validate_current_row()

        if self.state.status is not GameStatus.PLAYING:
            return self._ignore("submit", f"status is {self.state.status.value}")

        if self.state.current_col < self.config.word_length:
            logger.debug("Guess %r is too short", self.state.current_guess)
            return self._emit(Signal(kind=SignalKind.TOO_SHORT, message=TOO_SHORT_MESSAGE))

        self.state.status = GameStatus.VALIDATING
        return self._validate_current_row()

    def restart(self) -> StepResult:
        """Throw the current game away and load a new one."""
        if not (self.state.is_over or self._can_retry()):
            return self._ignore("restart", f"status is {self.state.status.value}")

        logger.info("Restarting game (was %s)", self.state.status.value)
        return self.start()

    # --- Transitions ---

    def _load_secret_word(self) -> StepResult:
        length = self.config.word_length
        self._in_flight = True
        try:
            word = self.provider.fetch_secret_word(length)
        except ProviderUnavailable as e:
            logger.error("Could not fetch a secret word: %s", e)
            self.state.stalled = True
            return self._emit()
        except Exception:
            logger.exception("Provider crashed while fetching a secret word")
            self.state.stalled = True
            raise
        finally:
            self._in_flight = False

        word = word.strip().upper() if isinstance(word, str) else ""
        if len(word) != length or not (word.isascii() and word.isalpha()):
            logger.error("Provider returned an unusable secret word %r (need %d letters)", word, length)
            self.state.stalled = True
            return self._emit()

        self._secret_word = word
        self.state.status = GameStatus.PLAYING
        logger.info(
            "New game started (%d letters, %d attempts)",
            self.config.word_length, self.config.max_attempts,
        )
        return self._emit()

    def _validate_current_row(self) -> StepResult:
        guess = self.state.current_guess
        self.state.stalled = False
        self._in_flight = True
        try:
            is_valid = self.provider.is_valid_word(guess)
        except ProviderUnavailable as e:
            logger.error("Could not validate %s: %s", guess, e)
            self.state.stalled = True
            return self._emit()
        except Exception:
            logger.exception("Provider crashed while validating %s", guess)
            self.state.stalled = True
            raise
        finally:
            self._in_flight = False

        if not is_valid:
            logger.info("Rejected guess %s", guess)
            self.state.status = GameStatus.PLAYING
            return self._emit(Signal(
                kind=SignalKind.INVALID_WORD,
                message=INVALID_WORD_MESSAGE,
                payload=guess,
            ))

        return self._score_guess(guess)

    def _score_guess(self, guess: str) -> StepResult:
        row_index = self.state.current_row
        tiles = score_row(guess, self._secret_word)
        self.state.grid[row_index] = tiles
        self.state.letter_states = merge_letter_states(self.state.letter_states, tiles)
        logger.info(
            "Guess %d/%d %s -> %s",
            row_index + 1, self.config.max_attempts, guess,
            " ".join(tile.state.value for tile in tiles),
        )

        if guess == self._secret_word:
            self.state.status = GameStatus.WON
            self.state.answer = self._secret_word
            logger.info("Game won in %d guesses", row_index + 1)
            return self._emit(Signal(kind=SignalKind.WON, message=WIN_MESSAGE, payload=guess))

        if row_index == self.config.max_attempts - 1:
            self.state.status = GameStatus.LOST
            self.state.answer = self._secret_word
            logger.info("Game lost, the word was %s", self._secret_word)
            return self._emit(Signal(
                kind=SignalKind.LOST,
                message=self._secret_word,
                payload=self._secret_word,
            ))

        self.state.status = GameStatus.PLAYING
        self.state.current_row += 1
        self.state.current_col = 0
        return self._emit()

    # --- Helpers ---

    def _can_retry(self) -> bool:
        """A failed provider call left us waiting with nothing in flight."""
        return (
            self.state.status in (GameStatus.LOADING, GameStatus.VALIDATING)
            and self.state.stalled
            and not self._in_flight
        )

    def _ignore(self, intent: str, reason: str) -> StepResult:
        logger.debug("Ignoring %s: %s", intent, reason)
        return StepResult(state=self.snapshot())

    def _emit(self, signal: Optional[Signal] = None) -> StepResult:
        result = StepResult(state=self.snapshot(), signal=signal)
        if self.on_step:
            self.on_step(result)
        return result

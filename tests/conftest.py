from typing import Callable, List, Optional, Set

import pytest

from wordguess.engine import GameEngine
from wordguess.providers import ProviderUnavailable


class ScriptedProvider:
    """Deterministic word source: hands out secrets in order, validates against a set."""

    def __init__(
        self,
        secrets: List[str],
        valid_words: Optional[Set[str]] = None,
        fail_fetch: bool = False,
        fail_validate: bool = False,
        on_validate: Optional[Callable[[str], None]] = None,
    ):
        self.secrets = list(secrets)
        self.valid_words = set(valid_words or ()) | set(secrets)
        self.fail_fetch = fail_fetch
        self.fail_validate = fail_validate
        self.on_validate = on_validate
        self.fetch_calls: List[int] = []
        self.validate_calls: List[str] = []

    def fetch_secret_word(self, length: int) -> str:
        self.fetch_calls.append(length)
        if self.fail_fetch:
            raise ProviderUnavailable("word service down")
        return self.secrets.pop(0)

    def is_valid_word(self, candidate: str) -> bool:
        self.validate_calls.append(candidate)
        if self.on_validate:
            self.on_validate(candidate)
        if self.fail_validate:
            raise ProviderUnavailable("word service down")
        return candidate in self.valid_words


VALID_GUESSES = {"CRAZY", "REACT", "TRAIN", "PLANT", "STONE", "SHEEP", "LIGHT", "MOUSE"}


@pytest.fixture
def provider() -> ScriptedProvider:
    return ScriptedProvider(["CRANE", "ALLOY", "LLAMA"], VALID_GUESSES)


@pytest.fixture
def engine(provider) -> GameEngine:
    return GameEngine.create(provider=provider)


def type_word(engine: GameEngine, word: str) -> None:
    for char in word:
        engine.type_char(char)


def guess(engine: GameEngine, word: str):
    type_word(engine, word)
    return engine.submit()

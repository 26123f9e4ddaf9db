"""The word source contract the engine depends on."""

from typing import Protocol, runtime_checkable


class ProviderUnavailable(RuntimeError):
    """A provider could not produce a word or a validity verdict."""


@runtime_checkable
class WordProvider(Protocol):
    """
    Supplies secret words and checks guesses.

    Both calls may block for as long as they like; they are the only places
    where the engine waits on something outside itself.
    """

    def fetch_secret_word(self, length: int) -> str:
        """Return an uppercase word of exactly `length` letters or raise ProviderUnavailable."""
        ...

    def is_valid_word(self, candidate: str) -> bool:
        """Return whether `candidate` is an acceptable word. Must be idempotent."""
        ...

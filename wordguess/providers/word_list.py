import json
import logging
import random
from pathlib import Path
from typing import List, Optional, Set
from pydantic import BaseModel, Field, ConfigDict, field_validator

from .base import ProviderUnavailable
from .data import DEFAULT_WORDS


logger = logging.getLogger(__name__)


class WordListProvider(BaseModel):
    """
    Word source backed by a fixed list of words.

    Secret words are drawn from the list with a (optionally seeded) random
    generator and validation is a case-insensitive membership test.

    Attributes:
        words: Uppercase alphabetic words, duplicates removed
        seed: Optional random seed for reproducible secret words
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    words: List[str] = Field(default_factory=lambda: list(DEFAULT_WORDS))
    seed: Optional[int] = None
    _rng: random.Random = None
    _lookup: Set[str] = None

    @field_validator("words")
    @classmethod
    def _normalize_words(cls, value: List[str]) -> List[str]:
        normalized = []
        seen = set()
        for word in value:
            word = word.strip().upper()
            if not word.isascii() or not word.isalpha() or word in seen:
                continue
            seen.add(word)
            normalized.append(word)
        return normalized

    def model_post_init(self, __context) -> None:
        """Initialize the random generator and lookup set after model creation."""
        self._rng = random.Random(self.seed)
        self._lookup = set(self.words)

    @classmethod
    def from_file(cls, path: str | Path, seed: Optional[int] = None) -> "WordListProvider":
        """
        Load a word list from disk.

        `.json` files must hold an array of strings; anything else is read as
        one word per line (blank lines and `#` comments skipped).

        Args:
            path: Path to the word list
            seed: Optional random seed

        Returns:
            Provider over the loaded words

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If a JSON file does not contain a list
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Word list not found: {path}")

        with open(path, encoding="utf-8") as f:
            if path.suffix == ".json":
                words = json.load(f)
                if not isinstance(words, list):
                    raise ValueError(f"{path} must contain a JSON array of words")
            else:
                words = [
                    line.strip() for line in f
                    if line.strip() and not line.lstrip().startswith("#")
                ]

        provider = cls(words=[str(w) for w in words], seed=seed)
        logger.info("Loaded %d words from %s", len(provider.words), path)
        return provider

    def words_of_length(self, length: int) -> List[str]:
        return [word for word in self.words if len(word) == length]

    def fetch_secret_word(self, length: int) -> str:
        """
        Pick a random word of the requested length.

        Raises:
            ProviderUnavailable: If the list has no word of that length
        """
        candidates = self.words_of_length(length)
        if not candidates:
            raise ProviderUnavailable(f"No {length}-letter words in the word list")
        return self._rng.choice(candidates)

    def is_valid_word(self, candidate: str) -> bool:
        """Check if `candidate` is in the word list."""
        return candidate.strip().upper() in self._lookup

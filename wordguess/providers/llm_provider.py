"""
Word provider backed by a chat model.

Asks the model for random secret words and for yes/no verdicts on guesses.
Any LiteLLM failure, or a reply that cannot be parsed after `max_retries`
attempts, is raised as ProviderUnavailable.
"""

import logging
import re
from typing import List, Dict, Optional, Any
from pydantic import BaseModel, Field, ConfigDict

from .base import ProviderUnavailable
from .llm_client import LLMClient
from .prompts import SYSTEM_PROMPT, build_secret_word_prompt, build_validation_prompt


logger = logging.getLogger(__name__)

# Previously served words included in the prompt to avoid repeats
RECENT_WORDS_IN_PROMPT = 10


class LLMWordProvider(BaseModel):
    """
    Word source that delegates to an LLM.

    Attributes:
        llm_client: Client used for every question
        max_retries: Attempts per request before giving up
        served_words: Secret words handed out so far
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    llm_client: LLMClient
    max_retries: int = Field(default=3, ge=1)
    served_words: List[str] = Field(default_factory=list)
    _verdicts: Dict[str, bool] = None

    def model_post_init(self, __context) -> None:
        """Start with an empty verdict cache."""
        self._verdicts = {}

    @classmethod
    def create(
        cls,
        model: str,
        temperature: float = 1.0,
        max_tokens: Optional[int] = None,
        max_retries: int = 3,
        **llm_kwargs: Any
    ) -> "LLMWordProvider":
        """
        Factory method to create a provider with its LLM client.

        Args:
            model: LLM model name (e.g., "gpt-4o-mini")
            temperature: LLM temperature setting
            max_tokens: Optional max tokens for responses
            max_retries: Attempts per request before raising ProviderUnavailable
            **llm_kwargs: Additional arguments for the LLM client

        Returns:
            A new LLMWordProvider
        """
        llm_client = LLMClient(
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
            system_prompt=SYSTEM_PROMPT,
            **llm_kwargs
        )
        return cls(llm_client=llm_client, max_retries=max_retries)

    @staticmethod
    def parse_word(response: str, length: int) -> Optional[str]:
        """
        Pull the first alphabetic token of `length` letters out of a reply.

        Args:
            response: Raw model reply
            length: Required word length

        Returns:
            The uppercased word, or None if the reply has no such token
        """
        for token in re.findall(r'[A-Za-z]+', response):
            if len(token) == length:
                return token.upper()
        return None

    @staticmethod
    def parse_verdict(response: str) -> Optional[bool]:
        """Read a leading YES/NO from a reply. None if it has neither."""
        match = re.match(r'^\W*(YES|NO)\b', response.strip(), re.IGNORECASE)
        if not match:
            return None
        return match.group(1).upper() == "YES"

    def fetch_secret_word(self, length: int) -> str:
        """
        Ask the model for a new secret word.

        Raises:
            ProviderUnavailable: If the model errors or never returns a usable word
        """
        recent = self.served_words[-RECENT_WORDS_IN_PROMPT:]
        prompt = build_secret_word_prompt(length, exclude=recent)

        for attempt in range(1, self.max_retries + 1):
            reply = self._ask(prompt)
            word = self.parse_word(reply, length)
            if word and word not in recent:
                self.served_words.append(word)
                self._verdicts[word] = True
                return word
            logger.warning(
                "Attempt %d/%d: no usable %d-letter word in reply %r",
                attempt, self.max_retries, length, reply,
            )

        raise ProviderUnavailable(
            f"Model gave no usable {length}-letter word after {self.max_retries} attempts"
        )

    def is_valid_word(self, candidate: str) -> bool:
        """
        Ask the model whether `candidate` is a real word.

        Verdicts are cached, so asking twice about the same word costs one call.

        Raises:
            ProviderUnavailable: If the model errors or never answers YES/NO
        """
        word = candidate.strip().upper()
        if not word.isascii() or not word.isalpha():
            return False
        if word in self._verdicts:
            return self._verdicts[word]

        prompt = build_validation_prompt(word)
        for attempt in range(1, self.max_retries + 1):
            reply = self._ask(prompt)
            verdict = self.parse_verdict(reply)
            if verdict is not None:
                self._verdicts[word] = verdict
                return verdict
            logger.warning(
                "Attempt %d/%d: no YES/NO verdict for %s in reply %r",
                attempt, self.max_retries, word, reply,
            )

        raise ProviderUnavailable(
            f"Model gave no verdict for {word} after {self.max_retries} attempts"
        )

    def _ask(self, prompt: str) -> str:
        try:
            return self.llm_client.ask(prompt)
        except Exception as e:
            raise ProviderUnavailable(f"LLM error: {str(e)}") from e

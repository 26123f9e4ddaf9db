"""Prompt templates for the LLM word provider."""

from .system_prompt import SYSTEM_PROMPT, get_system_prompt
from .word_prompt import build_secret_word_prompt, build_validation_prompt

__all__ = [
    "SYSTEM_PROMPT",
    "get_system_prompt",
    "build_secret_word_prompt",
    "build_validation_prompt",
]

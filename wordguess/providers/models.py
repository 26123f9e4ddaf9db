"""
Pydantic models for the provider layer.

Configuration for choosing and building a word provider, plus the chat
message model used by the LLM client.
"""

from pathlib import Path
from typing import Optional, Literal
from pydantic import BaseModel, Field, ConfigDict


# Type aliases
Role = Literal["system", "user", "assistant"]
ProviderKind = Literal["word_list", "llm"]


class Message(BaseModel):
    """Represents a single message in the conversation."""
    role: Role
    content: str


class ProviderConfig(BaseModel):
    """Configuration for the word provider."""
    model_config = ConfigDict(extra='allow')

    kind: ProviderKind = "word_list"
    words_file: Optional[Path] = None
    seed: Optional[int] = None
    model: str = "gpt-4o-mini"
    temperature: float = 1.0
    max_tokens: Optional[int] = None
    max_retries: int = Field(default=3, ge=1)
    # Additional kwargs are allowed and passed to LiteLLM

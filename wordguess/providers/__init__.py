"""Word providers for wordguess."""

from .base import WordProvider, ProviderUnavailable
from .models import Message, Role, ProviderKind, ProviderConfig
from .llm_client import LLMClient
from .word_list import WordListProvider
from .llm_provider import LLMWordProvider
from .factory import create_provider

__all__ = [
    "WordProvider",
    "ProviderUnavailable",
    "Message",
    "Role",
    "ProviderKind",
    "ProviderConfig",
    "LLMClient",
    "WordListProvider",
    "LLMWordProvider",
    "create_provider",
]

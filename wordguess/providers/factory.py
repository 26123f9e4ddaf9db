from .base import WordProvider
from .llm_provider import LLMWordProvider
from .models import ProviderConfig
from .word_list import WordListProvider


def create_provider(config: ProviderConfig) -> WordProvider:
    """
    Build the word provider described by `config`.

    Args:
        config: Provider configuration

    Returns:
        A WordListProvider or LLMWordProvider
    """
    if config.kind == "llm":
        llm_kwargs = {}
        # Extra config keys (e.g. api_base, top_p) go straight to LiteLLM
        if hasattr(config, '__pydantic_extra__') and config.__pydantic_extra__:
            llm_kwargs.update(config.__pydantic_extra__)

        return LLMWordProvider.create(
            model=config.model,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            max_retries=config.max_retries,
            **llm_kwargs
        )

    if config.words_file is not None:
        return WordListProvider.from_file(config.words_file, seed=config.seed)
    return WordListProvider(seed=config.seed)

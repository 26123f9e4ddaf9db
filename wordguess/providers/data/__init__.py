from .words import DEFAULT_WORDS

__all__ = ["DEFAULT_WORDS"]

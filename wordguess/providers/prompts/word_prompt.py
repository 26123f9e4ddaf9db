from typing import List, Optional


def build_secret_word_prompt(length: int, exclude: Optional[List[str]] = None) -> str:
    """
    Build the request for a new secret word.

    Args:
        length: Number of letters the word must have
        exclude: Words already used this session, to avoid repeats

    Returns:
        Formatted prompt string
    """
    lines = [f"Give me one random common English word with exactly {length} letters."]

    if exclude:
        lines.append(f"Do not use any of these: {', '.join(exclude)}.")

    lines.append("Reply with the word only.")
    return "\n".join(lines)


def build_validation_prompt(candidate: str) -> str:
    """Build the yes/no question for a guessed word."""
    return f"Is \"{candidate}\" a valid English word? Answer YES or NO."

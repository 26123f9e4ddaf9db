"""wordguess: a single-session Wordle-style game engine."""

__version__ = "0.1.0"

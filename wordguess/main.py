"""
Main entry point for playing wordguess in a terminal.

Usage:
    python -m wordguess.main
    python -m wordguess.main config.yaml --verbose
    python -m wordguess.main --provider llm --model gpt-4o-mini
"""

import argparse
import logging
import sys
from typing import Iterable, Optional

from .config import AppConfig, load_config
from .engine import GameEngine, GameStatus, Signal, SignalKind, StepResult, dispatch_key
from .providers import ProviderConfig, create_provider
from .utils import render_state


QUIT_COMMAND = ":quit"
RESTART_COMMAND = ":restart"
TOO_LONG_MESSAGE = "Too long"


def handle_line(engine: GameEngine, line: str) -> StepResult:
    """
    Turn one line of terminal input into key presses.

    An empty line is ENTER, '-' is BACKSPACE, ':restart' restarts, and
    anything else replaces the letters of the active row and is submitted.
    A word longer than the row is rejected without touching the board.

    Returns:
        The StepResult of the last key press; its signal is the first one raised
    """
    line = line.strip()

    if line == RESTART_COMMAND:
        return engine.restart()
    if line == "":
        return dispatch_key(engine, "ENTER")
    if line == "-":
        return dispatch_key(engine, "BACKSPACE")

    if engine.status is GameStatus.PLAYING:
        if len(line) > engine.config.word_length:
            return StepResult(
                state=engine.snapshot(),
                signal=Signal(kind=SignalKind.INVALID_WORD, message=TOO_LONG_MESSAGE, payload=line.upper()),
            )
        for _ in range(engine.state.current_col):
            dispatch_key(engine, "BACKSPACE")

    signal = None
    for char in line:
        result = dispatch_key(engine, char)
        signal = signal or result.signal
    result = dispatch_key(engine, "ENTER")
    if result.signal is None and signal is not None:
        result = StepResult(state=result.state, signal=signal)
    return result


def run_session(engine: GameEngine, lines: Iterable[str]) -> None:
    """Feed input lines to the engine and print the board after each one."""
    print(render_state(engine.snapshot()))

    for line in lines:
        if line.strip() == QUIT_COMMAND:
            break

        result = handle_line(engine, line)
        print()
        if result.signal:
            print(f">>> {result.signal.message}")
        print(render_state(result.state))
        if result.state.is_over:
            print("\nPress enter to play again, or type :quit to leave.")


def build_config(args: argparse.Namespace) -> AppConfig:
    """Load the YAML config (if any) and apply command line overrides."""
    config = load_config(args.config) if args.config else AppConfig()

    overrides = {}
    if args.provider:
        overrides["kind"] = args.provider
    if args.model:
        overrides["model"] = args.model
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.words_file:
        overrides["words_file"] = args.words_file

    if overrides:
        provider = ProviderConfig.model_validate({**config.provider.model_dump(), **overrides})
        config = config.model_copy(update={"provider": provider})
    return config


def main(argv: Optional[list] = None):
    parser = argparse.ArgumentParser(
        description="Play a Wordle-style guessing game in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  game:
    word_length: 5
    max_attempts: 5
  provider:
    kind: llm
    model: gpt-4o-mini
    temperature: 1.0

Input: type a word and press enter to guess it, enter alone to submit,
'-' to delete a letter, :restart for a new game, :quit to leave.
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--provider",
        choices=["word_list", "llm"],
        help="Word provider to use (overrides the config file)"
    )
    parser.add_argument(
        "--model",
        help="LiteLLM model name for the llm provider"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for the word_list provider"
    )
    parser.add_argument(
        "--words-file",
        help="Word list file (.txt, one word per line, or .json array)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log game events to stderr"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        config = build_config(args)
        provider = create_provider(config.provider)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    engine = GameEngine.create(provider=provider, config=config.game)

    try:
        run_session(engine, sys.stdin)
    except KeyboardInterrupt:
        print("\nGame interrupted by user")

    return 0


if __name__ == "__main__":
    sys.exit(main())

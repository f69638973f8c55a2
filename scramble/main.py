"""
Main entry point for playing word-scramble in a terminal.

Usage:
    python -m scramble.main
    python -m scramble.main config.yaml --seed 42 --verbose
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .environment import Game, GameConfig, SubmissionResult, WordListError, build_checker


RESTART = ":restart"
QUIT = ":quit"
HELP = ":help"

HELP_TEXT = f"""Type a word made from the letters of the root word and press Enter.
  {RESTART:<9} start over with a new root word
  {QUIT:<9} leave the game
  {HELP:<9} show this message"""


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def render(game: Game) -> str:
    """Render the root word, score and used words as plain text."""
    lines = [
        f"=== {game.root_word} ===",
        f"Your score is: {game.score}",
    ]
    if game.used_words:
        lines.append("Words used:")
        for word in game.used_words:
            lines.append(f"  ({len(word)}) {word}")
    return "\n".join(lines)


def describe(result: SubmissionResult) -> Optional[str]:
    """Turn a submission result into feedback, or None for skipped input."""
    if result.accepted:
        return f"+1 {result.word}"
    if result.error is not None:
        return f"{result.error.title}: {result.error.message}"
    return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play word-scramble: spell words from the letters of a root word",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  word_list: words/start.txt
  language: en
  min_length: 3
  seed: 42
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--word-list",
        help="Newline-delimited file of root words (default: bundled list)"
    )
    parser.add_argument(
        "--dictionary",
        help="Newline-delimited file of accepted words (default: wordfreq)"
    )
    parser.add_argument(
        "--language",
        help="Dictionary language code (default: en)"
    )
    parser.add_argument(
        "--min-length",
        type=int,
        help="Minimum accepted word length (default: 3)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible root words"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug output to stderr"
    )
    return parser


def apply_overrides(config: GameConfig, args: argparse.Namespace) -> GameConfig:
    """Command-line flags win over values from the config file."""
    overrides = {
        "word_list": args.word_list,
        "dictionary": args.dictionary,
        "language": args.language,
        "min_length": args.min_length,
        "seed": args.seed,
    }
    data = config.model_dump()
    data.update({k: v for k, v in overrides.items() if v is not None})
    return GameConfig(**data)


def play(game: Game) -> None:
    """Read submissions from stdin until the player quits or input ends."""
    print(render(game))
    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        command = line.strip().lower()
        if command == QUIT:
            break
        if command == HELP:
            print(HELP_TEXT)
            continue
        if command == RESTART:
            game.start()
            print(render(game))
            continue

        result = game.add_new_word(line)
        feedback = describe(result)
        if feedback is None:
            continue
        print(feedback)
        if result.accepted:
            print(render(game))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("scramble").setLevel(logging.DEBUG)

    try:
        config = load_config(args.config) if args.config else GameConfig()
        config = apply_overrides(config, args)
        checker = build_checker(config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    # Without a root word there is no game to play
    try:
        game = Game.create(config=config, checker=checker)
    except WordListError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    play(game)

    summary = game.summary()
    print()
    print("=== Game Summary ===")
    print(f"Root word: {summary.root_word}")
    print(f"Score: {summary.score}")
    if summary.used_words:
        print(f"Words: {', '.join(reversed(summary.used_words))}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

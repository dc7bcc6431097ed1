"""
Main entry point for playing LetterCraze levels in a terminal.

Usage:
    python -m lettercraze.main levels/puzzle_01.yaml
    python -m lettercraze.main levels/ --level 1 --config config.yaml --verbose
"""

import argparse
import logging
import re
import sys
import time
from pathlib import Path
from typing import List, Optional, Tuple

from .engine import LevelSession
from .exceptions import LetterCrazeError
from .io import load_level, load_levels
from .model import GameConfig, Model, load_config
from .utils import configure_logging
from .utils.board_view import TextBoardView


def parse_positions(text: str) -> Optional[List[Tuple[int, int]]]:
    """Parse ``"0,0 0,1 1,2"`` into positions; None if the text is not a path."""
    pairs = re.findall(r"(\d+)\s*,\s*(\d+)", text)
    if not pairs or re.sub(r"[\d,\s]", "", text):
        return None
    return [(int(r), int(c)) for r, c in pairs]


def build_session(args: argparse.Namespace, config: GameConfig) -> Tuple[LevelSession, Optional[Model]]:
    """Create the session for the level (or level directory) given on the command line."""
    source = Path(args.levels)
    if source.is_dir():
        model = Model(levels=load_levels(source))
        if not model.levels:
            raise LetterCrazeError(f"No levels found in {source}")
        return LevelSession.from_model(model, args.level, config=config), model
    return LevelSession.create(load_level(source), config=config), None


def play(session: LevelSession, view: TextBoardView) -> None:
    """Read selections from stdin until the level ends or the player quits."""
    print("Enter a word as row,col pairs (e.g. 0,0 0,1 1,2), 'show' or 'quit'.")
    print(view.render())
    last = time.monotonic()

    while session.is_playing:
        try:
            inp = input("word> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            session.stop()
            break

        now = time.monotonic()
        view.apply_tick(session.tick(now - last))
        last = now
        if not session.is_playing:
            print(view.render())
            break

        cmd = inp.lower()
        if cmd == "quit":
            session.stop()
            break
        if cmd == "show" or not cmd:
            print(view.render())
            continue

        positions = parse_positions(inp)
        if positions is None:
            print("  Invalid.  ROW,COL ROW,COL ROW,COL ...")
            continue

        view.highlight(positions)
        result = session.select_word(positions)
        view.apply(result)
        print(view.render())


def main():
    parser = argparse.ArgumentParser(
        description="Play a LetterCraze level in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  min_word_length: 3
  allow_duplicate_words: true
  gravity: down
  seed: 42
  dictionary_path: words.txt
        """
    )
    parser.add_argument(
        "levels",
        help="Level YAML file, or a directory of level files"
    )
    parser.add_argument(
        "--level", "-l",
        type=int,
        default=0,
        help="Index of the level to play when a directory is given (default: 0)"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to a YAML game configuration"
    )
    parser.add_argument(
        "--dictionary", "-d",
        help="Word list to use instead of the bundled one"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for tile generation"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log engine decisions"
    )

    args = parser.parse_args()
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = load_config(args.config) if args.config else GameConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    overrides = {}
    if args.dictionary:
        overrides["dictionary_path"] = args.dictionary
    if args.seed is not None:
        overrides["seed"] = args.seed
    if overrides:
        config = config.model_copy(update=overrides)

    try:
        session, model = build_session(args, config)
    except (LetterCrazeError, IndexError, ValueError) as e:
        print(f"Error starting level: {e}", file=sys.stderr)
        return 1

    level = session.progress.level
    view = TextBoardView(session.board.snapshot(), max_stars=len(level.stars))
    view.remaining_time = session.progress.remaining_time()
    print(f"=== {level.name} ({level.type}) ===")

    play(session, view)

    if model is not None:
        model.finish_level()

    # Print summary
    state = session.get_state()
    print()
    print("=== Level Summary ===")
    print(f"Score: {state['score']}")
    print(f"Stars: {state['star_count']}")
    print(f"Words: {', '.join(state['found_words']) or '(none)'}")
    print(f"Completed: {state['completed']}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

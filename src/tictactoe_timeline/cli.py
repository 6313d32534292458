"""
Command-line interface for playing and replaying games.
"""

import argparse
import logging
import sys
from typing import List, Optional

from tictactoe_timeline.api import play_session, replay_moves
from tictactoe_timeline.core.errors import OutOfRangeError
from tictactoe_timeline.history.store import HistoryStore
from tictactoe_timeline.utils.config import (
    DEFAULT_CONFIG,
    LANGUAGES,
    LOG_LEVELS,
    SORT_ORDERS,
    Config,
    configure_logging,
)
from tictactoe_timeline.view.render import render

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Two-player tic-tac-toe with move history and time travel"
    )
    parser.add_argument(
        "--moves", "-m",
        type=str,
        default=None,
        help="Comma-separated cell indices (0-8) to play first, e.g. '0,3,1'",
    )
    parser.add_argument(
        "--jump", "-j",
        type=int,
        default=None,
        help="History entry to view after the scripted moves",
    )
    parser.add_argument(
        "--sort", "-s",
        choices=list(SORT_ORDERS.keys()),
        default="asc",
        help="Move list order (default: asc)",
    )
    parser.add_argument(
        "--lang", "-l",
        choices=list(LANGUAGES),
        default=DEFAULT_CONFIG.language,
        help=f"Language for status and move list (default: {DEFAULT_CONFIG.language})",
    )
    parser.add_argument(
        "--no-interactive",
        action="store_true",
        help="Print the resulting position and exit",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=list(LOG_LEVELS),
        default=DEFAULT_CONFIG.log_level,
        help=f"Logging level (default: {DEFAULT_CONFIG.log_level})",
    )
    return parser.parse_args(argv)


def parse_moves(moves_str: Optional[str]) -> List[int]:
    """Parse the --moves argument."""
    if moves_str is None:
        return []

    try:
        return [int(m.strip()) for m in moves_str.split(",") if m.strip()]
    except ValueError as e:
        raise ValueError(
            f"Invalid --moves format: '{moves_str}'. "
            "Expected comma-separated integers (e.g., '0,4,8')."
        ) from e


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = Config(sort_order=args.sort, language=args.lang, log_level=args.log_level)
    configure_logging(config.log_level)

    store = HistoryStore(sort_order=config.sort_order)

    try:
        moves = parse_moves(args.moves)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 2

    applied = replay_moves(store, moves)
    logger.info("Applied %d of %d scripted moves", applied, len(moves))

    if args.jump is not None:
        try:
            store.jump_to(args.jump)
        except OutOfRangeError as e:
            print(e, file=sys.stderr)
            return 2

    if args.no_interactive:
        print(render(store, config.language))
        return 0

    try:
        play_session(store, config.language)
    except KeyboardInterrupt:
        print("\nInterrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())

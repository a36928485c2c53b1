"""
guessgame CLI.

Usage:
    guessgame [play] [--mode bounded|single] [--attempts N]
    guessgame score [--games N] [--player bisection|random]
"""

import argparse
import logging
import sys

from .benchmark import PLAYERS, score_game
from .errors import GuessGameError
from .providers import ConsoleInput, NumpySecretSource
from .session import DEFAULT_ATTEMPTS, GameConfig, GuessSession, Mode


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Guess the number between 1 and 100",
        prog="guessgame",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")
    # bare `guessgame` plays with the defaults; must follow add_subparsers
    parser.set_defaults(
        command="play", mode=Mode.BOUNDED.value, attempts=DEFAULT_ATTEMPTS, seed=None
    )

    play_parser = subparsers.add_parser("play", help="Play a game (default)")
    _add_play_arguments(play_parser)

    score_parser = subparsers.add_parser("score", help="Benchmark an automated player")
    score_parser.add_argument("--games", type=int, default=1000, help="Games to play")
    score_parser.add_argument(
        "--player", choices=sorted(PLAYERS), default="bisection", help="Strategy"
    )
    score_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    return parser


def _add_play_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--mode",
        choices=[m.value for m in Mode],
        default=Mode.BOUNDED.value,
        help="bounded: several chances, single: one shot",
    )
    parser.add_argument(
        "--attempts",
        type=int,
        default=DEFAULT_ATTEMPTS,
        help="Chances in bounded mode (ignored with --mode single)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.command == "score":
        code = cmd_score(args)
    else:
        code = cmd_play(args, parser)
    sys.exit(code)


def cmd_play(args, parser: argparse.ArgumentParser) -> int:
    """Play one interactive game."""
    try:
        config = GameConfig(attempts=args.attempts, mode=Mode(args.mode))
    except ValueError as exc:
        parser.error(str(exc))

    session = GuessSession(config, NumpySecretSource(args.seed), ConsoleInput())
    try:
        session.run()
    except GuessGameError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def cmd_score(args) -> int:
    """Benchmark an automated player."""
    if args.games < 1:
        print("Error: --games must be positive", file=sys.stderr)
        return 1
    score_game(PLAYERS[args.player], games=args.games, seed=args.seed)
    return 0


if __name__ == "__main__":
    main()

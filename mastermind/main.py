'''
Mastermind on the terminal

Usage:
  mastermind            -> play with the configured roles
  mastermind -d         -> same, plus a debug line naming both players
                           (shows the computer codemaker's secret)

Roles and the rest are configured through MASTERMIND_* environment variables or
a local .env file, see config.py.
'''

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import load_settings
from .errors import MastermindError
from .players import build_codemaker, build_guesser
from .render import TranscriptPrinter
from .store import RESULT_MESSAGES, Game

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mastermind",
        description="Code-breaking game for human or computer players.",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show internal role details alongside the transcript",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(debug=args.debug)
    except MastermindError as exc:
        print(exc, file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    log.debug("Running with %s", settings)

    try:
        game = Game(
            guesser=build_guesser(settings.guesser),
            codemaker=build_codemaker(settings.codemaker, settings),
            renderer=TranscriptPrinter(),
            debug=settings.debug,
        )
        status = game.play()
    except MastermindError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(RESULT_MESSAGES[status])
    return 0


if __name__ == "__main__":
    sys.exit(main())

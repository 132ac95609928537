"""Yahtzee - command-line entrypoint for text-mode play."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Sequence

from rich.console import Console

from src.config import RULES_TEXT, VERSION_INFO, configure_logging, get_settings
from src.engine.game import YahtzeeGame
from src.engine.io import select_io_mode
from src.ui.text_io import TextAdapter

logger = logging.getLogger(__name__)


class _RulesAction(argparse.Action):
    """Print the rules and exit, like ``--version``."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        sys.stdout.write(RULES_TEXT)
        parser.exit()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yahtzee",
        description="Play Yahtzee. This program takes no other arguments.",
        epilog="While the game is running, enter ? for assistance.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="\n".join(VERSION_INFO),
    )
    parser.add_argument(
        "--rules",
        action=_RulesAction,
        help="show the rules of the game and exit",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Parse arguments and play until the player quits.

    Returns:
        Process exit status
    """
    build_parser().parse_args(argv)

    settings = get_settings()
    configure_logging(settings)

    mode = select_io_mode(os.environ)
    logger.info("Environment supports the %s interface", mode.value)

    adapter = TextAdapter(console=Console(highlight=False, no_color=not settings.use_color))
    if not adapter.initialize(mode):
        logger.error("Unable to initialise the %s interface", mode.value)
        return 1

    YahtzeeGame.from_settings(settings).run(adapter)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Command line driver.

    mailbox-movegen settings.json            list the pseudo-legal moves of the configured position
    mailbox-movegen --fen "8/8/8/8/8/8/P7/8 w"  same, for a position with standard chess pieces
    mailbox-movegen settings.json --exercise make and take back every move, checking the board is restored
"""

import argparse
import logging
import sys
from typing import Optional

from src.config.models import standard_settings
from src.core.exceptions import ConfigurationError, RoundTripError
from src.services.engine_service import EngineService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mailbox-movegen",
        description="Generate pseudo-legal chess moves on a padded mailbox board.",
    )
    parser.add_argument(
        "settings",
        nargs="?",
        help="JSON settings file (fen, pieces, colors, directions, rank_2, rank_7).",
    )
    parser.add_argument(
        "--fen",
        help="Use standard chess pieces with this position instead of a settings file.",
    )
    parser.add_argument(
        "--exercise",
        action="store_true",
        help="Make and take back every generated move.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (renders the board after every move).",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.settings and args.fen:
        parser.error("give either a settings file or --fen, not both")

    try:
        if args.settings:
            service = EngineService.from_file(args.settings)
        elif args.fen:
            service = EngineService(standard_settings(args.fen))
        else:
            service = EngineService(standard_settings())
    except ConfigurationError as error:
        logger.error("%s", error)
        return 2

    moves = service.pseudo_legal_moves()
    for move in moves:
        print(move.to_uci())

    if args.exercise:
        try:
            service.exercise()
        except RoundTripError as error:
            logger.error("%s", error)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from connect_six.config import ENV_LOG_LEVEL, GameConfig
from connect_six.errors import InvalidConfiguration
from connect_six.game import ConnectSixGame
from connect_six.handler import ERROR_PREFIX, run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="connect-six",
        description="Play connect six on a standard or torus board.",
    )
    parser.add_argument(
        "settings",
        nargs="*",
        metavar="SETTING",
        help="<standard|torus> <side> <players>; falls back to CONNECT_SIX_* variables",
    )
    return parser


def log_level() -> str:
    level = os.getenv(ENV_LOG_LEVEL, "WARNING").upper()
    if level not in logging.getLevelNamesMapping():
        return "WARNING"
    return level


def main(argv=None, stdin=None, stdout=None) -> int:
    load_dotenv()
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    args = build_parser().parse_args(argv)
    try:
        if args.settings:
            config = GameConfig.from_args(args.settings)
        else:
            config = GameConfig.from_env()
    except InvalidConfiguration as exc:
        print(ERROR_PREFIX + exc.message, file=stdout)
        return 1

    logger.info(
        "Starting %s game on a %dx%d board for %d players",
        config.topology.value, config.side, config.side, config.players,
    )
    run(ConnectSixGame(config), stdin, stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())

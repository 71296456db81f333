"""
Words Virtuoso CLI - Command-line entry point.

Usage:
    virtuoso <words_file> <candidates_file> [--seed N] [--plain]
                                            [--log-level LEVEL] [--strict-tries]

The two files are passed straight to the session, which reports a wrong
number of files as its startup message.
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from .config import GameConfig
from .session import GameLoop


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Words Virtuoso - guess the five-letter word",
        prog="virtuoso",
    )
    # Arity is checked by the session, not by argparse
    parser.add_argument(
        "paths", nargs="*", metavar="FILE",
        help="Words file, then candidate words file",
    )
    parser.add_argument("--seed", type=int, help="Seed for the secret word draw")
    parser.add_argument("--plain", action="store_true", help="Plain-text feedback, no colors")
    parser.add_argument("--log-level", help="Logging level for stderr (default WARNING)")
    parser.add_argument(
        "--strict-tries", action="store_true",
        help="Count only scored guesses as tries",
    )
    return parser


def load_config(args: argparse.Namespace) -> GameConfig:
    """Environment settings with command-line overrides applied."""
    values = GameConfig.from_env().model_dump()
    if args.seed is not None:
        values["seed"] = args.seed
    if args.plain:
        values["color"] = False
    if args.log_level:
        values["log_level"] = args.log_level
    if args.strict_tries:
        values["count_invalid_tries"] = False
    return GameConfig(**values)


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except ValidationError as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        sys.exit(2)

    logging.basicConfig(
        level=config.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    session = config.build_session()
    GameLoop(session).run(args.paths)


if __name__ == "__main__":
    main()

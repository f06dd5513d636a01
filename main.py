"""Command-line entry point: stats to help deckbuilding."""

from __future__ import annotations

import argparse
from pathlib import Path

from loguru import logger

from controllers.deck_stats_controller import DeckStatsController
from services.config_service import ConfigService
from services.errors import DeckStatsError
from utils.constants import FORMAT_OPTIONS, INPUT_METHOD_OPTIONS
from utils.logging_setup import configure_logging


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Stats to help deckbuilding !")
    parser.add_argument(
        "-i",
        "--input",
        default=None,
        metavar="{" + ",".join(INPUT_METHOD_OPTIONS) + "}",
        help="Reads from stdin or from <category_file> (default: stdin)",
    )
    parser.add_argument(
        "-f",
        "--format",
        default=None,
        metavar="{" + ",".join(FORMAT_OPTIONS) + "}",
        help="Changes the type of deck to have stats on (default: commander)",
    )
    parser.add_argument(
        "-t",
        "--turns",
        type=non_negative_int,
        default=None,
        help="The number of turns to simulate (default: 15)",
    )
    parser.add_argument(
        "-c",
        "--category-file",
        type=Path,
        default=None,
        help="Alternating name/size lines, read with --input file (default: categories)",
    )
    parser.add_argument(
        "--output", type=Path, default=None, help="If set outputs a csv file at that location"
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to a JSON file with default options")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write debug logs to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging("DEBUG" if args.verbose else "INFO", args.log_file)
    settings = ConfigService(args.config).resolve(
        {
            "input": args.input,
            "format": args.format,
            "turns": args.turns,
            "category_file": args.category_file,
            "output": args.output,
        }
    )
    if not args.verbose and settings.log_level != "INFO":
        configure_logging(settings.log_level, args.log_file)

    try:
        DeckStatsController(settings).run()
    except DeckStatsError as exc:
        logger.error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

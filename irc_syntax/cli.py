"""Command line entry point: ``irc-syntax parse`` and ``irc-syntax manifest``."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from .callbacks import MessageFactoryCallback
from .config import load_settings
from .errors.handling import log_error
from .errors.internal import ConfigError, ParsingError
from .logging_config import LoggerConfigurator
from .logs.logger import logger
from .message_parser import MessageParser
from .registry import OPERATIONS, manifest


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="irc-syntax",
        description="Tokenize IRC protocol lines and dispatch them to operations.",
    )
    parser.add_argument("--config", help="JSON settings file")
    parser.add_argument("--debug", action="store_true", help="enable DEBUG logging")
    sub = parser.add_subparsers(dest="command", required=True)

    parse_cmd = sub.add_parser("parse", help="parse lines into JSON messages")
    parse_cmd.add_argument(
        "file",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="input file, one protocol line per line (default: stdin)",
    )

    sub.add_parser("manifest", help="print the operation manifest as JSON")
    return parser


def parse_lines(
    parser: MessageParser, lines: Iterable[str], out: TextIO
) -> tuple[int, int]:
    """Parse each line and write one JSON object per line to ``out``.

    Blank lines are skipped. Returns ``(parsed, failed)`` counts.
    """
    parsed = failed = 0
    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        try:
            message = parser.parse(line)
        except ParsingError as e:
            failed += 1
            log_error("Failed to parse line", e, context={"line_number": number})
            continue
        parsed += 1
        out.write(json.dumps(message.to_dict(), ensure_ascii=False) + "\n")
    return parsed, failed


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    LoggerConfigurator(
        {"debug": args.debug, "report_on_exit": args.command == "parse"}
    ).configure()

    if args.command == "manifest":
        logger.log_event("app", "manifest", count=len(OPERATIONS))
        json.dump(manifest(), sys.stdout, indent=2)
        sys.stdout.write("\n")
        return 0

    try:
        settings = load_settings(args.config)
    except ConfigError as e:
        log_error("Invalid configuration", e)
        return 2

    source = getattr(args.file, "name", "<stdin>")
    logger.log_event("app", "start", source=source)
    parser: MessageParser = MessageParser(MessageFactoryCallback(), settings)
    parsed, failed = parse_lines(parser, args.file, sys.stdout)
    logger.log_event("app", "finish", parsed=parsed, failed=failed)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())

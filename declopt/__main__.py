"""
Declopt Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from argparse import ArgumentParser, Namespace
from typing import Sequence

from rich.markup import escape

from declopt.command_line import ParseFailure, parse
from declopt.config import loader
from declopt.console import console, error_console
from declopt.exceptions import ConfigError
from declopt.help import render_help
from declopt.logger import logger
from declopt.utils import setup_logging

EXIT_CONFIG_ERROR = 1
EXIT_PARSE_ERROR = 2


def get_root_parser(prog: str = "declopt") -> ArgumentParser:
    """Construct the argument parser of the declopt developer CLI."""
    parser = ArgumentParser(
        prog=prog,
        description="Preview help text and dry-run command lines against an option "
        "declaration file.",
        epilog="Tokens to parse go after '--', e.g. "
        "'declopt parse opts.yaml -- --port 80'.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    parser.add_argument(
        "--log-mode",
        choices=["cli", "json"],
        default=None,
        help="Logging output mode (defaults to $DECLOPT_LOG_MODE or 'cli').",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    help_parser = subparsers.add_parser(
        "help", help="Print the formatted help text of a declaration file."
    )
    help_parser.add_argument("file", help="YAML or TOML declaration file.")

    parse_parser = subparsers.add_parser(
        "parse", help="Parse tokens against a declaration file and print the result."
    )
    parse_parser.add_argument("file", help="YAML or TOML declaration file.")
    parse_parser.add_argument(
        "--collect-unrecognized",
        action="store_true",
        help="Report undeclared tokens instead of failing.",
    )
    parse_parser.add_argument(
        "--check-minimums",
        action="store_true",
        help="Fail when a mandatory option is missing.",
    )
    return parser


def split_tokens(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split CLI arguments at the first '--' into (cli_args, tokens)."""
    argv = list(argv)
    if "--" in argv:
        index = argv.index("--")
        return argv[:index], argv[index + 1 :]
    return argv, []


def run_help(args: Namespace) -> int:
    spec = loader(args.file)
    render_help(spec.help_sections, console=console)
    return 0


def run_parse(args: Namespace, tokens: list[str]) -> int:
    spec = loader(args.file)
    outcome = parse(
        tokens,
        spec.options,
        collect_unrecognized=args.collect_unrecognized,
        check_minimums=args.check_minimums,
    )
    if isinstance(outcome, ParseFailure):
        error_console.print(f"[declopt.error]error:[/] {escape(outcome.message)}")
        return EXIT_PARSE_ERROR

    data: dict = {"values": outcome.values}
    if outcome.unrecognized is not None:
        data["unrecognized"] = outcome.unrecognized
    console.print_json(data=data)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    cli_args, tokens = split_tokens(sys.argv[1:] if argv is None else argv)
    args = get_root_parser().parse_args(cli_args)
    setup_logging(
        mode=args.log_mode,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    try:
        if args.command == "help":
            return run_help(args)
        return run_parse(args, tokens)
    except ConfigError as error:
        logger.debug("Failed to load '%s': %s", args.file, error)
        error_console.print(f"[declopt.error]error:[/] {escape(str(error))}")
        return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    sys.exit(main())

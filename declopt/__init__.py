"""
Declopt Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .appearance import Appearance
from .command_line import (
    ParseFailure,
    ParseOutcome,
    ParseResult,
    parse,
    parse_command_line,
    parse_command_line_and_collect_unrecognized,
    verify_option_counts,
)
from .exceptions import (
    ConfigError,
    DecloptError,
    OptionDeclarationError,
    ParseError,
    ParseErrorKind,
)
from .help import HelpLine, HelpSection, format_help, help_line_for, render_help, word_wrap
from .logger import logger
from .matcher import find_option, looks_like_option_name
from .option import Option, names

__all__ = [
    "Appearance",
    "ConfigError",
    "DecloptError",
    "HelpLine",
    "HelpSection",
    "Option",
    "OptionDeclarationError",
    "ParseError",
    "ParseErrorKind",
    "ParseFailure",
    "ParseOutcome",
    "ParseResult",
    "find_option",
    "format_help",
    "help_line_for",
    "logger",
    "looks_like_option_name",
    "names",
    "parse",
    "parse_command_line",
    "parse_command_line_and_collect_unrecognized",
    "render_help",
    "verify_option_counts",
    "word_wrap",
]

# Declopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders help sections into word-wrapped, column-aligned terminal text.

A help section is a title plus ordered `HelpLine`s, each pairing a syntax
description (`--port <num>`) with a blurb. `format_help` lines up every blurb
in one column, wide enough for the longest syntax description across all
sections, and wraps blurbs to fit 79 columns. Blurbs always get at least 30
columns, so very long syntax descriptions push the text past 79 instead of
squeezing it.

    Options:
      --port, -p <num>  Port to listen on.
      --verbose         Print more.

This module has no knowledge of the parser; it only formats strings.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from rich.console import Console

from declopt.console import console as default_console
from declopt.option import Option

LINE_WIDTH = 79
MIN_SUMMARY_WIDTH = 30


@dataclass(frozen=True)
class HelpLine:
    """One row of help: syntax on the left, blurb on the right."""

    syntax: str
    blurb: str = ""


@dataclass(frozen=True)
class HelpSection:
    """A titled group of help lines."""

    title: str
    lines: tuple[HelpLine, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))


def split_by_spaces(text: str) -> list[str]:
    """
    Split on runs of whitespace, dropping empty words.

    Any Unicode whitespace separates words, including non-breaking spaces.
    """
    return text.split()


def word_wrap(text: str, width: int) -> list[str]:
    """
    Greedily pack the words of `text` into lines of at most `width` characters.

    Words are joined by single spaces. A word longer than `width` gets a line
    of its own. Text with no words yields exactly one empty line.
    """
    lines: list[str] = []
    current_line = ""
    for word in split_by_spaces(text):
        if not current_line:
            current_line = word
        elif len(current_line) + 1 + len(word) <= width:
            current_line = f"{current_line} {word}"
        else:
            lines.append(current_line)
            current_line = word
    lines.append(current_line)
    return lines


def format_help(sections: Sequence[HelpSection]) -> str:
    """
    Format help sections as aligned, wrapped text.

    Each section is rendered as `<title>:` followed by its lines and one
    blank line.
    """
    max_syntax_width = max(
        (len(line.syntax) for section in sections for line in section.lines),
        default=0,
    )
    summary_width = max(MIN_SUMMARY_WIDTH, LINE_WIDTH - max_syntax_width)
    # Two spaces before the syntax column, two after it.
    indent_width = max_syntax_width + 4

    parts: list[str] = []
    for section in sections:
        parts.append(f"{section.title}:\n")
        for line in section.lines:
            for index, wrapped in enumerate(word_wrap(line.blurb, summary_width)):
                if index == 0:
                    parts.append(f"  {line.syntax}".ljust(indent_width))
                else:
                    parts.append(" " * indent_width)
                parts.append(f"{wrapped}\n")
        parts.append("\n")
    return "".join(parts)


def help_line_for(option: Option, metavar: str | None = None, blurb: str = "") -> HelpLine:
    """Build a help line listing every spelling of `option`."""
    syntax = ", ".join(option.names)
    if not option.no_parameter:
        syntax = f"{syntax} <{metavar or 'value'}>"
    return HelpLine(syntax=syntax, blurb=blurb)


def render_help(sections: Sequence[HelpSection], console: Console | None = None) -> None:
    """Print formatted help through a rich console, without markup or highlighting."""
    console = console or default_console
    console.print(
        format_help(sections),
        end="",
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )

# Declopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parses an argument vector against a list of declared `Option`s.

The parser walks the tokens once, left to right. Every token must be a
declared option name; value-bearing options consume the following token as
their parameter. The outcome maps each canonical name to the list of values it
received, in order. Bare flags record one empty string per occurrence so that
counting appearances works the same way for flags and value options.

Failures are returned as `ParseFailure` values rather than raised:

    outcome = parse(sys.argv[1:], options)
    if isinstance(outcome, ParseFailure):
        console.print(outcome.message)
        sys.exit(2)
    port = outcome.values["--port"][0]

Callers that prefer exceptions can use `parse_command_line()` or
`parse_command_line_and_collect_unrecognized()`, which raise `ParseError`.

Limitations:
- Any parameter starting with `-` is rejected because it looks like a
  mistyped option, so negative numbers cannot be passed as values.
- Mandatory options that never appear are only reported when
  `check_minimums=True` is passed, or when the caller runs
  `verify_option_counts()` itself.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from declopt.exceptions import ParseError, ParseErrorKind
from declopt.logger import logger
from declopt.matcher import find_option, looks_like_option_name
from declopt.option import Option


@dataclass
class ParseResult:
    """
    Successful outcome of `parse`.

    Attributes:
        values (dict[str, list[str]]): Parameters supplied per canonical name.
        unrecognized (list[str] | None): Tokens matching no declared option,
            or None if collection was not requested.
    """

    values: dict[str, list[str]]
    unrecognized: list[str] | None = None


@dataclass(frozen=True)
class ParseFailure:
    """
    Failed outcome of `parse`.

    Attributes:
        kind (ParseErrorKind): What went wrong.
        message (str): Human-readable explanation, quoting what the user typed.
        token (str): The offending token.
    """

    kind: ParseErrorKind
    message: str
    token: str = ""

    def to_error(self) -> ParseError:
        return ParseError(self.kind, self.message, self.token)

    def raise_error(self) -> None:
        raise self.to_error()


ParseOutcome = ParseResult | ParseFailure


def _failure(kind: ParseErrorKind, message: str, token: str) -> ParseFailure:
    logger.debug("Command line rejected (%s): %s", kind, message)
    return ParseFailure(kind=kind, message=message, token=token)


def verify_option_counts(
    options: Sequence[Option], values: Mapping[str, Sequence[str]]
) -> ParseFailure | None:
    """
    Check that every declared option appears an allowed number of times.

    Args:
        options (Sequence[Option]): The declarations that produced `values`.
        values (Mapping[str, Sequence[str]]): A name→values map from `parse`.

    Returns:
        ParseFailure | None: The first violation found, or None.
    """
    for option in options:
        count = len(values.get(option.canonical_name, ()))
        if count < option.min_appearances:
            if option.min_appearances == 1:
                message = f"option '{option.canonical_name}' is mandatory"
            else:
                message = (
                    f"option '{option.canonical_name}' must appear at least "
                    f"{option.min_appearances} times"
                )
            return _failure(ParseErrorKind.MISSING_OPTION, message, option.canonical_name)
        if option.max_appearances is not None and count > option.max_appearances:
            return _failure(
                ParseErrorKind.TOO_MANY_APPEARANCES,
                f"option '{option.canonical_name}' appears too many times "
                f"(i.e. more than {option.max_appearances} times)",
                option.canonical_name,
            )
    return None


def parse(
    tokens: Sequence[str],
    options: Sequence[Option],
    collect_unrecognized: bool = False,
    check_minimums: bool = False,
) -> ParseOutcome:
    """
    Parse `tokens` against `options`.

    Args:
        tokens (Sequence[str]): The argument vector, without the program name.
        options (Sequence[Option]): Declared options, searched in order.
        collect_unrecognized (bool): Route undeclared tokens to
            `ParseResult.unrecognized` instead of failing.
        check_minimums (bool): Also fail when a mandatory option is absent.

    Returns:
        ParseResult | ParseFailure: The parsed values, or why parsing stopped.
    """
    logger.debug("Parsing %d tokens against %d options", len(tokens), len(options))
    values: dict[str, list[str]] = {}
    unrecognized: list[str] = []

    i = 0
    while i < len(tokens):
        # Error messages quote the spelling the user typed, not the canonical name.
        raw_name = tokens[i]
        i += 1

        option = find_option(raw_name, options)
        if option is None:
            if collect_unrecognized:
                unrecognized.append(raw_name)
                continue
            if looks_like_option_name(raw_name):
                return _failure(
                    ParseErrorKind.UNRECOGNIZED_OPTION,
                    f"unrecognized option '{raw_name}'",
                    raw_name,
                )
            return _failure(
                ParseErrorKind.UNEXPECTED_VALUE,
                f"unexpected unnamed value '{raw_name}' (did you forget the option "
                "name, or forget to quote a parameter list?)",
                raw_name,
            )

        slot = values.setdefault(option.canonical_name, [])
        if len(slot) == option.max_appearances:
            return _failure(
                ParseErrorKind.TOO_MANY_APPEARANCES,
                f"option '{raw_name}' appears too many times "
                f"(i.e. more than {option.max_appearances} times)",
                raw_name,
            )

        if option.no_parameter:
            slot.append("")
            continue

        if i == len(tokens):
            return _failure(
                ParseErrorKind.MISSING_PARAMETER,
                f"option '{raw_name}' is missing its parameter",
                raw_name,
            )

        parameter = tokens[i]
        i += 1
        if looks_like_option_name(parameter):
            return _failure(
                ParseErrorKind.PARAMETER_LOOKS_LIKE_OPTION,
                f"option '{raw_name}' is missing its parameter "
                f"(because '{parameter}' looks like another option name)",
                parameter,
            )
        slot.append(parameter)

    for option in options:
        if option.min_appearances == 0 and option.canonical_name not in values:
            values[option.canonical_name] = list(option.default_values)

    if check_minimums:
        failure = verify_option_counts(options, values)
        if failure is not None:
            return failure

    if collect_unrecognized:
        if unrecognized:
            logger.debug("Collected %d unrecognized tokens", len(unrecognized))
        return ParseResult(values=values, unrecognized=unrecognized)
    return ParseResult(values=values)


def parse_command_line(
    tokens: Sequence[str], options: Sequence[Option]
) -> dict[str, list[str]]:
    """
    Parse `tokens`, raising on any failure.

    Raises:
        ParseError: If the tokens do not match the declarations.
    """
    outcome = parse(tokens, options)
    if isinstance(outcome, ParseFailure):
        raise outcome.to_error()
    return outcome.values


def parse_command_line_and_collect_unrecognized(
    tokens: Sequence[str], options: Sequence[Option]
) -> tuple[dict[str, list[str]], list[str]]:
    """
    Parse `tokens`, returning undeclared tokens alongside the values.

    Raises:
        ParseError: If a declared option is misused.
    """
    outcome = parse(tokens, options, collect_unrecognized=True)
    if isinstance(outcome, ParseFailure):
        raise outcome.to_error()
    assert outcome.unrecognized is not None, "unrecognized should be collected"
    return outcome.values, outcome.unrecognized

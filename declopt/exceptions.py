# Declopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by declopt.

Parse failures are normally returned as values by `declopt.command_line.parse`;
`ParseError` is only raised by the raising wrappers built on top of it.
Declaration mistakes are bugs in the declaring program and are raised eagerly
as `OptionDeclarationError`.

Exception Hierarchy:
- DecloptError
    ├── ParseError
    ├── OptionDeclarationError
    └── ConfigError
"""
from __future__ import annotations

from enum import Enum


class ParseErrorKind(Enum):
    """Enumerates the ways a command line can fail to parse."""

    UNRECOGNIZED_OPTION = "unrecognized_option"
    UNEXPECTED_VALUE = "unexpected_value"
    TOO_MANY_APPEARANCES = "too_many_appearances"
    MISSING_PARAMETER = "missing_parameter"
    PARAMETER_LOOKS_LIKE_OPTION = "parameter_looks_like_option"
    MISSING_OPTION = "missing_option"

    def __str__(self) -> str:
        return self.value


class DecloptError(Exception):
    """Base exception for declopt."""


class ParseError(DecloptError):
    """Exception raised when a command line does not match its option declarations."""

    def __init__(self, kind: ParseErrorKind, message: str, token: str = "") -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.token = token


class OptionDeclarationError(DecloptError):
    """Exception raised when an option is declared with inconsistent settings."""


class ConfigError(DecloptError):
    """Exception raised when a declaration file cannot be loaded."""

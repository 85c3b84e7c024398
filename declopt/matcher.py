# Declopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Resolves raw command-line tokens to declared options by exact name."""
from __future__ import annotations

from typing import Sequence

from declopt.option import Option


def looks_like_option_name(token: str) -> bool:
    """True when the token starts with a dash, e.g. `-x` or `--port`."""
    return token.startswith("-")


def find_option(token: str, options: Sequence[Option]) -> Option | None:
    """Return the first option declaring `token` as one of its names."""
    for option in options:
        if token in option.names:
            return option
    return None

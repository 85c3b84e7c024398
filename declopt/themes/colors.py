# Declopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Nord palette and the rich `Theme` used by declopt's consoles.

Only the developer CLI uses styles; `format_help` output is always plain text.
"""
from rich.style import Style
from rich.theme import Theme


class NordColors:
    """Hex values of the Nord palette used for CLI output."""

    NORD11 = "#BF616A"


def get_nord_theme() -> Theme:
    """Return the named styles used by declopt's CLI output."""
    return Theme({"declopt.error": Style(color=NordColors.NORD11, bold=True)})

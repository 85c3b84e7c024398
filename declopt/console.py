# Declopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for declopt output."""
from rich.console import Console

from declopt.themes import get_nord_theme

console = Console(theme=get_nord_theme())
error_console = Console(theme=get_nord_theme(), stderr=True)

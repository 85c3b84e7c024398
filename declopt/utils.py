# Declopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler


def setup_logging(
    mode: str | None = None,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Configure console logging for the declopt CLI.

    Library code never calls this; it only logs through `declopt.logger`.

    Args:
        mode (str | None):
            Logging output mode. Can be:
                - "cli": human-readable Rich console logs (default)
                - "json": machine-readable JSON logs
            If not provided, the `DECLOPT_LOG_MODE` environment variable is used.
        console_log_level (int):
            Logging level for console output. Defaults to `logging.WARNING`.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    if not mode:
        mode = os.getenv("DECLOPT_LOG_MODE") or "cli"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    logger = logging.getLogger("declopt")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)

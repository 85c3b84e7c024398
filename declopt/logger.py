# Declopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for declopt."""
import logging

logger: logging.Logger = logging.getLogger("declopt")

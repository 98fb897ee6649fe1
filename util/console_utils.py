"""Console helpers.

Keep terminal output quiet by default. Set LITE_BUNDLE_VERBOSE=1 (or pass
--verbose) to enable debug logging. Everything goes to stderr so stdout only
ever carries the bundle.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, TextIO

RED = "\u001b[31m"
YELLOW = "\u001b[33m"
RESET = "\u001b[39;49m"

ERROR_PREFIX = f"{RED}>>> ERROR: {RESET}"
WARNING_PREFIX = f"{YELLOW}>>> WARNING: {RESET}"


def env_verbose() -> bool:
    val = os.environ.get("LITE_BUNDLE_VERBOSE", "").strip().lower()
    return val in {"1", "true", "yes", "y", "on"}


class PrefixFormatter(logging.Formatter):
    """Prefix messages with a coloured ``>>> LEVEL:`` marker."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.ERROR:
            return ERROR_PREFIX + message
        if record.levelno >= logging.WARNING:
            return WARNING_PREFIX + message
        return f">>> {record.levelname}: {message}"


def configure_logging(*, verbose: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    logger = logging.getLogger("lite_bundle")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.handlers.clear()

    ch = logging.StreamHandler(stream or sys.stderr)
    ch.setLevel(logging.DEBUG if verbose else logging.INFO)
    ch.setFormatter(PrefixFormatter("%(message)s"))
    logger.addHandler(ch)
    return logger

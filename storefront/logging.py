"""
Storefront logging.

Call get_logger(__name__) in each module. The root handler is installed
once, on first import, at the level named by LOG_LEVEL.
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Control characters that would let a user-supplied value forge a log line
_UNSAFE = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": None})


def _setup() -> None:
    root = logging.getLogger()
    if root.handlers:
        return

    level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)

    # catalog requests would otherwise log every GET at INFO
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


_setup()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def sanitize_id_for_logging(id_value: str | int | None) -> str:
    """Product / user ids: escaped, first 8 characters, "N/A" when missing."""
    if id_value is None or id_value == "":
        return "N/A"
    return str(id_value).translate(_UNSAFE)[:8]


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """Emails, titles, category names: escaped and cut at max_length."""
    if not value:
        return "N/A"
    safe = str(value).translate(_UNSAFE)
    return safe if len(safe) <= max_length else safe[:max_length] + "..."

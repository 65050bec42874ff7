"""
Logging for the cart service.

The root handler is installed once on import unless the host (uvicorn,
pytest) already configured one. Product ids, names and session ids come
from the client, so log lines pass them through log_id()/log_text().
"""

import logging
import sys
from functools import cache

from stitches import config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Control characters a client could use to forge extra log lines (CWE-117)
_UNSAFE_CHARS = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": ""})


def _install_root_handler() -> None:
    root = logging.getLogger()
    if root.handlers:
        return

    level = getattr(logging, config.LOG_LEVEL, logging.INFO)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.setLevel(level)
    root.addHandler(handler)

    # upstash_redis talks REST over httpx; one line per store call is noise
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


_install_root_handler()


@cache
def get_logger(name: str) -> logging.Logger:
    """Module logger, e.g. get_logger(__name__)."""
    return logging.getLogger(name)


def log_text(value: object, max_length: int = 50) -> str:
    """Escape a client-supplied value and cap it at max_length chars."""
    if value is None or value == "":
        return "N/A"
    text = str(value).translate(_UNSAFE_CHARS)
    return text if len(text) <= max_length else text[:max_length] + "..."


def log_id(value: object) -> str:
    """Short form of an id: first 8 chars, escaped."""
    if value is None or value == "":
        return "N/A"
    return str(value).translate(_UNSAFE_CHARS)[:8]

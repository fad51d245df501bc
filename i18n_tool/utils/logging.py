# FILE: i18n_tool/utils/logging.py
"""
Unified logging helpers for the i18n tool

- Creates a named stderr logger once (no duplicate handlers on re-import).
- Honors the log level from the tool config ("log_level" in i18n_tool.json or --log-level).
- Provides small helpers to shorten paths and identifier lists for log lines.
"""

import logging
import os
import sys
from typing import Iterable, Optional, Union


LOG_FORMAT = "%(levelname)s: %(message)s"


# ---------------------------
# Level helpers
# ---------------------------

def _level_from_string(level_str: Optional[str]) -> int:
    """Map string level to logging constant; defaults to INFO on unknown."""
    level = getattr(logging, str(level_str).upper(), None)
    return level if isinstance(level, int) else logging.INFO


def coerce_level(level: Union[int, str, None], default: int = logging.WARNING) -> int:
    """Accept either a logging constant or a name such as "DEBUG"."""
    if level is None or level == "":
        return default
    if isinstance(level, int):
        return level
    return _level_from_string(level)


# ---------------------------
# Public logger factory
# ---------------------------

def get_tool_logger(
    name: str = "i18n_tool",
    *,
    default_level: int = logging.WARNING,
) -> logging.Logger:
    """
    Create or return a stderr logger for the tool.

    The handler is attached only once so repeated calls (tests, re-imports)
    do not duplicate every line.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(h)
        logger.setLevel(default_level)
        logger.propagate = False
    return logger


# Singleton logger used across the tool
tool_logger = get_tool_logger()


def set_level(level: Union[int, str, None]) -> int:
    """Apply a level to the tool logger and return the numeric value."""
    value = coerce_level(level)
    tool_logger.setLevel(value)
    return value


# ---------------------------
# Format utilities
# ---------------------------

def short_path(path: Union[str, os.PathLike], base: Optional[Union[str, os.PathLike]] = None) -> str:
    """Path relative to ``base`` when possible, for compact log lines."""
    p = os.fspath(path)
    if base is None:
        return p
    try:
        rel = os.path.relpath(p, os.fspath(base))
    except ValueError:
        return p
    return p if rel.startswith("..") else rel


def preview_ids(ids: Iterable[str], limit: int = 5) -> str:
    """First few identifiers of a collection, for DEBUG lines."""
    items = sorted(ids)
    head = ", ".join(items[:limit])
    if len(items) > limit:
        head += f", …(+{len(items) - limit})"
    return head

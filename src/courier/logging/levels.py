"""
Log level registry.

Courier uses six levels, most severe first: error, warn, info, http, debug,
verbose. The four that exist in the standard library map onto it directly;
HTTP and VERBOSE are registered as custom levels at import time.
"""

import logging
from typing import Dict, Union

HTTP = 15
VERBOSE = 5

LEVELS: Dict[str, int] = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "http": HTTP,
    "debug": logging.DEBUG,
    "verbose": VERBOSE,
}

LEVEL_COLORS: Dict[str, str] = {
    "error": "red",
    "warn": "yellow",
    "info": "green",
    "http": "magenta",
    "debug": "blue",
    "verbose": "cyan",
}


def register_levels() -> None:
    """Register the custom levels with the logging module."""
    logging.addLevelName(HTTP, "HTTP")
    logging.addLevelName(VERBOSE, "VERBOSE")


def to_level_number(level: Union[str, int]) -> int:
    """Resolve a level name (or enum value) to its numeric level."""
    if isinstance(level, int):
        return level
    name = getattr(level, "value", level)
    try:
        return LEVELS[str(name).lower()]
    except KeyError:
        raise ValueError(
            f"Unknown log level {name!r}; expected one of: {', '.join(LEVELS)}"
        ) from None


def level_name(levelno: int) -> str:
    """Map a numeric level to the closest Courier level name at or below it."""
    for name, number in LEVELS.items():
        if levelno >= number:
            return name
    return "verbose"


register_levels()

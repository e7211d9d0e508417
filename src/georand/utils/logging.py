"""Logging utilities for georand.

All submodules log through the ``georand`` logger, silent by default (a
``NullHandler`` is installed).  The CLI calls :func:`configure_logging`; the
``GEORAND_LOG_LEVEL`` environment variable overrides the level it is given.
"""

import logging
import os
from typing import Optional, Union

logger = logging.getLogger("georand")
logger.addHandler(logging.NullHandler())

ENV_LEVEL = "GEORAND_LOG_LEVEL"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_LEVEL_MAP = {
    "none": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

Level = Optional[Union[str, int]]


def level_from_name(level: Level) -> int:
    """Map ``"debug"``/``"info"``/``"none"`` (or an int) to a logging level."""
    if level is None or level == "":
        return logging.WARNING
    if isinstance(level, int):
        return level
    return _LEVEL_MAP.get(str(level).strip().lower(), logging.WARNING)


def configure_logging(enabled: bool = True, level: Level = logging.INFO) -> int:
    """Route ``georand`` records to stderr, or silence them.

    ``level`` may be a name or an int; a non-empty ``GEORAND_LOG_LEVEL`` wins
    over it.  Repeated calls replace the handler.  Returns the level applied.
    """
    logger.handlers.clear()
    if not enabled:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.CRITICAL + 1)
        return logger.level

    resolved = level_from_name(os.getenv(ENV_LEVEL) or level)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(resolved)
    return resolved


__all__ = ["logger", "configure_logging", "level_from_name", "ENV_LEVEL"]

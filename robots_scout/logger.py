# robots_scout/logger.py
"""Package logger for **RobotsScout**.

Library code logs through the shared :data:`logger`; the CLI calls
:func:`configure` once with the level and optional log file it was given::

    from robots_scout.logger import logger
    logger.debug("Parsed %d groups", 3)
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOGGER_NAME: Final[str] = "RobotsScout"


def configure(
    level: Union[int, str] = "WARNING", log_file: str | Path | None = None
) -> logging.Logger:
    """Replace the package logger's handlers: stderr, plus a rotating file if given."""
    lg = logging.getLogger(_LOGGER_NAME)
    lg.setLevel(level)
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()

    # stdout is reserved for CLI output
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(str(log_file), maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
        )
    for handler in handlers:
        handler.setFormatter(logging.Formatter(_FORMAT))
        lg.addHandler(handler)

    lg.propagate = False
    return lg


logger: logging.Logger = configure()

__all__ = ["logger", "configure"]

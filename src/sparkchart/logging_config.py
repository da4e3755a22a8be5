"""
Logging setup for the sparkchart namespace.

Library modules only create loggers; output is attached here, by the
command line or by a host application that wants to see the geometry
pipeline's debug messages. Handlers that the host attached itself are
left alone.
"""
from __future__ import annotations

import logging
import sys
from typing import IO, Optional, Union

LOGGER_NAME = "sparkchart"
LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
DATE_FORMAT = "%H:%M:%S"

# Marks handlers installed by setup_logging so a second call replaces only those
_OWNED = "_sparkchart_owned"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: {level!r}")
    return resolved


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Attach console (and optionally file) output to the sparkchart logger.

    Args:
        level: A logging level number or name such as "debug".
        log_file: Optional path; the file is overwritten on each call.
        stream: Console stream, stderr when omitted.

    Raises:
        ValueError: If the level name is not a known logging level.

    Returns:
        The configured "sparkchart" logger.
    """
    level = _resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        setattr(handler, _OWNED, True)
        logger.addHandler(handler)

    logger.debug(f"Logging at {logging.getLevelName(level)}, file={log_file or '-'}")
    return logger

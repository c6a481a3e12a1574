#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/logging_utils.py
"""Logging setup for the mdliteral command line.

Library code only creates module loggers; handlers are installed here, by the
entry point, so that embedding applications keep control of their own logging
configuration.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: int | str) -> int:
    """Turn a level name or number into a numeric logging level.

    Unknown names resolve to ``logging.WARNING``.

    Examples
    --------
    >>> resolve_log_level("debug")
    10
    >>> resolve_log_level(logging.ERROR)
    40

    """
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.WARNING


def _make_handlers(log_file: Optional[str]) -> tuple[list[logging.Handler], Optional[OSError]]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as e:
            return handlers, e
    return handlers, None


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install console (and optionally file) handlers on the root logger.

    Existing root handlers are replaced, so calling this twice does not
    duplicate output.

    Parameters
    ----------
    log_level : int | str
        Level name (``"INFO"``) or number
    log_file : str, optional
        Also append log records to this file
    trace_mode : bool, default False
        Include timestamps and logger names in every record

    Returns
    -------
    logging.Logger
        The root logger

    """
    level = resolve_log_level(log_level)
    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(CONSOLE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    handlers, file_error = _make_handlers(log_file)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if file_error is not None:
        root_logger.warning(f"Could not open log file {log_file}: {file_error}")
    elif log_file:
        root_logger.debug(f"Logging to file: {log_file}")
    return root_logger

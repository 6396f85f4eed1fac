"""Event logging"""

from __future__ import annotations

__all__ = ("init_log",)

import logging
import warnings
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from typing import Iterable, Optional, Set


def init_log(
    logfile: str,
    level: int = logging.WARNING,
    debug: bool = False,
    *,
    exclude: Iterable[str] = (),
    capture_warnings: bool = False,
) -> logging.Handler:
    """Initializes logging of the package's events to a file.

    Args:
        logfile: Path to the log file. It's rotated at 1 MiB, keeping one backup.
        level: The logging level of the package logger.
        debug: If ``True``, *level* is overridden with :py:data:`logging.DEBUG` and
          records carry the thread and function names.
        exclude: Names of loggers (and their children) whose records are dropped
          e.g ``"term_tags.tags"``.
        capture_warnings: If ``True``, package warnings are redirected to the log.

    Returns:
        The installed handler.

    A handler installed by a previous call is removed and closed, and its exclusions
    are discarded.
    """
    global DEBUG, _handler

    if _handler is not None:
        _package_logger.removeHandler(_handler)
        _handler.close()
        _handler = None
    filter_.disallowed.clear()

    handler = RotatingFileHandler(
        logfile,
        maxBytes=2**20,  # 1 MiB
        backupCount=1,
    )
    for name in exclude:
        filter_.add(name)
    handler.addFilter(filter_)

    DEBUG = debug = debug or level == logging.DEBUG
    if debug:
        level = logging.DEBUG

    FORMAT = (
        "({process}) ({asctime}) "
        + "{threadName}: " * debug
        + "[{levelname}] {name}: "
        + "{funcName}: " * debug
        + "{message}"
    )
    handler.setFormatter(logging.Formatter(FORMAT, style="{"))

    _package_logger.addHandler(handler)
    _handler = handler
    _package_logger.setLevel(level)

    if capture_warnings:
        warnings.showwarning = _log_warning

    _logger.info("Starting a new session")
    _logger.info(f"Logging level set to {logging.getLevelName(level)}")

    return handler


# Not annotated because it's not directly used.
def _log_warning(msg, catg, fname, lineno, f=None, line=None):
    """Redirects warnings to the logging system.

    Intended to replace `warnings.showwarning()`.
    """
    _logger.warning(warnings.formatwarning(msg, catg, fname, lineno, line))


# See "Filters" section in `logging` standard library documentation.
@dataclass
class Filter:
    disallowed: Set[str]

    def filter(self, record: logging.LogRecord) -> bool:
        return not any(
            record.name == name or record.name.startswith(f"{name}.")
            for name in self.disallowed
        )

    def add(self, name: str) -> None:
        self.disallowed.add(name)

    def remove(self, name: str) -> None:
        self.disallowed.remove(name)


filter_ = Filter(set())

_package_logger = logging.getLogger("term_tags")
_logger = logging.getLogger(__name__)

# Set from within `init_log()`
DEBUG = None  #: Optional[bool]
_handler: Optional[RotatingFileHandler] = None

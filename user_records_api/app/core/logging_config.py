"""
Logging configuration for the application.

``setup_logging`` installs a console handler and, when a log file is
configured, a file handler on the root logger.  The two handlers can
run at different levels (``LOG_LEVEL`` and ``LOG_FILE_LEVEL``), so a
deployment can keep the console terse while the file records debug
output.  Configuration happens at most once per process.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(name: Optional[str], default: int = logging.INFO) -> int:
    """Map a level name such as ``"debug"`` to its number; unknown names give ``default``."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def _handler(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, file_level: Optional[str] = None) -> bool:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Level of the console handler, case insensitive.
    logfile : Optional[str]
        Path of a log file.  No file handler is added when omitted.
    file_level : Optional[str]
        Level of the file handler; defaults to ``level``.

    Returns
    -------
    bool
        ``False`` when the root logger already had handlers and was
        left untouched, ``True`` otherwise.
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    console_level = resolve_level(level)
    handlers = [_handler(logging.StreamHandler(), console_level, formatter)]

    if logfile:
        log_level = resolve_level(file_level, console_level)
        log_path = Path(logfile).resolve()
        handlers.append(_handler(logging.FileHandler(log_path, encoding="utf-8"), log_level, formatter))

    # The root logger must let through the most verbose handler's records.
    root.setLevel(min(handler.level for handler in handlers))
    for handler in handlers:
        root.addHandler(handler)
    return True

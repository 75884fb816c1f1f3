"""Logging configuration for schema_codegen.

Every module obtains its logger through :func:`get_logger` so that all
records end up under the ``schema_codegen`` namespace. The library itself
only installs a ``NullHandler``; command line runs call :func:`setup_logging`
to get rich console output.
"""

import logging
import os

from rich.logging import RichHandler

ROOT_LOGGER_NAME = "schema_codegen"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(name)s | %(message)s"

_root_logger = logging.getLogger(ROOT_LOGGER_NAME)
_root_logger.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the schema_codegen namespace.

    Args:
        name: Module name (typically ``__name__``).

    Returns:
        Logger instance.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(level: str | None = None, console: bool = True) -> logging.Logger:
    """Configure the package logger for interactive use.

    Args:
        level: Log level name. Falls back to ``SCHEMA_CODEGEN_LOG_LEVEL``
            and then to WARNING.
        console: Attach a rich console handler.

    Returns:
        The configured package logger.
    """
    if level is None:
        level = os.getenv("SCHEMA_CODEGEN_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    log_level = getattr(logging, level.upper(), logging.WARNING)

    for handler in list(_root_logger.handlers):
        if isinstance(handler, RichHandler):
            _root_logger.removeHandler(handler)

    _root_logger.setLevel(log_level)

    if console:
        handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _root_logger.addHandler(handler)

    _root_logger.debug("Logging configured at %s", logging.getLevelName(log_level))
    return _root_logger

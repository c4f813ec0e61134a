"""Package logging for isapflow.

The ``isapflow`` logger carries only a ``NullHandler`` until an application
calls `configure_logging`, so importing the library never prints anything.
Modules obtain their logger with ``get_logger(__name__)``.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "isapflow"

_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_root = logging.getLogger(ROOT_LOGGER_NAME)
_root.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``isapflow`` hierarchy.

    Args:
        name: Logger name, typically ``__name__`` of the calling module.

    Returns:
        The logger; its level is left at NOTSET so it follows ``isapflow``.
    """
    return logging.getLogger(name)


def configure_logging(
    level: int = logging.INFO,
    handler: Optional[logging.Handler] = None,
    format_string: Optional[str] = None,
) -> logging.Handler:
    """Attach an output handler to the ``isapflow`` logger.

    Any handler installed by a previous call is replaced, so calling this
    again only changes the level, destination or format.

    Args:
        level: Level for the ``isapflow`` logger and the new handler.
        handler: Output handler; defaults to a StreamHandler on stdout.
        format_string: Record format; defaults to timestamp, name and level.

    Returns:
        The installed handler.
    """
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))
    handler.setLevel(level)
    handler._isapflow_configured = True  # type: ignore[attr-defined]

    for old in list(_root.handlers):
        if getattr(old, "_isapflow_configured", False):
            _root.removeHandler(old)
    _root.addHandler(handler)
    _root.setLevel(level)
    return handler

"""
Logging setup for creatorkit.

All modules log through ``logging.getLogger(__name__)``; this module
attaches a single stream handler to the package logger so records carry
the current request id.
"""

from __future__ import annotations

import logging

from creatorkit.api.middleware.request_id import RequestIdFilter

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "creatorkit-console"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the ``creatorkit`` logger.

    Safe to call more than once: the console handler is only installed
    the first time, later calls just update the level.

    Parameters
    ----------
    level : str
        Log level name (e.g. "INFO", "DEBUG").

    Returns
    -------
    logging.Logger
        The configured package logger.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    package_logger = logging.getLogger("creatorkit")
    package_logger.setLevel(log_level)

    if not any(h.get_name() == _HANDLER_NAME for h in package_logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.addFilter(RequestIdFilter())
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        package_logger.addHandler(handler)

    for handler in package_logger.handlers:
        handler.setLevel(log_level)

    return package_logger

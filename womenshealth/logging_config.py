"""Logging setup for applications embedding the calculator.

Library modules only create loggers under the ``womenshealth`` namespace;
handlers are installed here, by the host, once at startup.
"""

from __future__ import annotations

import logging
import sys

from womenshealth.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Install a stdout handler at the configured level.

    Args:
        settings: Settings to read ``log_level``/``debug`` from.  Defaults to
                  the cached environment settings.

    Returns:
        The ``womenshealth`` package logger.
    """
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
    )
    logger = logging.getLogger("womenshealth")
    logger.setLevel(level)
    logger.info(
        "Logging configured for %s v%s [%s]",
        settings.app_name,
        settings.app_version,
        settings.environment,
    )
    return logger

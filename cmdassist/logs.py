from __future__ import annotations

import logging
import sys

from .config import AssistantConfig

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_PACKAGE_LOGGER = "cmdassist"


def configure_logging(config: AssistantConfig) -> logging.Logger:
    """Point the package logger at the configured log file, or silence it.

    Safe to call again after a ``set logging=...`` toggle; the previous
    handler is closed and replaced.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.propagate = False
    logger.setLevel(logging.DEBUG if config.verbose else logging.INFO)

    if not config.logging:
        logger.addHandler(logging.NullHandler())
        return logger

    try:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(config.log_file, encoding="utf-8")
    except OSError as e:
        logger.addHandler(logging.NullHandler())
        print(f"warning: cannot open log file {config.log_file}: {e}", file=sys.stderr)
        return logger

    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return logger

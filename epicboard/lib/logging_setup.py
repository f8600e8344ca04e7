"""Logging setup for the eb command.

Modules log through `logging.getLogger(__name__)`; this attaches a single
handler to the `epicboard` logger. With a log file everything goes there so
the interactive screen stays clean.
"""

import logging
import sys
from pathlib import Path

LOGGER_NAME = "epicboard"
_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

_handler: logging.Handler | None = None


def configure_logging(level: str = "WARNING", log_file: Path | None = None) -> logging.Logger:
    """Attach (or replace) the epicboard handler. Safe to call more than once."""
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if _handler is not None:
        logger.removeHandler(_handler)
        _handler.close()
        _handler = None

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(logging.Formatter(_FORMAT, _DATEFMT))
    logger.addHandler(handler)
    _handler = handler
    return logger

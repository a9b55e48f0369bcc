"""Logging configuration for the anki-bridge CLI."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "anki_bridge"


def setup_logging(log_path: Path, *, debug: bool = False) -> None:
    """Send package logs to a rotating file. The library never calls this, only the CLI.

    Idempotent: returns early when the package logger already has a handler.

    Args:
        log_path: Log file, its directory must exist.
        debug: Also record per-request DEBUG lines (action names).

    """
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return

    handler = RotatingFileHandler(log_path, maxBytes=512_000, backupCount=2, encoding="utf-8")
    handler.setFormatter(logging.Formatter(fmt="%(asctime)s %(levelname)-8s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"))

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.addHandler(handler)

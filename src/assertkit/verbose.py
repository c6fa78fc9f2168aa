"""Logging setup for assertion output."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def _attach(logger: logging.Logger, handler: logging.Handler, formatter: logging.Formatter) -> None:
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def setup_logger(debug_file: Path, verbose: bool = False, logger_name: str = "assertkit") -> logging.Logger:
    """Return a DEBUG logger that writes assertion output to ``debug_file``.

    One name per suite: a second call with a name whose logger already has
    handlers raises ``RuntimeError`` rather than sharing the file. With
    ``verbose`` the same records also go to stderr.
    """
    logger = logging.getLogger(logger_name)
    if logger.handlers:
        raise RuntimeError(
            f"Logger '{logger_name}' already exists with handlers attached; "
            "use a unique logger name per suite"
        )

    logger.disabled = False
    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    debug_file.parent.mkdir(parents=True, exist_ok=True)
    _attach(logger, logging.FileHandler(debug_file, mode="a"), formatter)
    if verbose:
        _attach(logger, logging.StreamHandler(sys.stderr), formatter)

    return logger

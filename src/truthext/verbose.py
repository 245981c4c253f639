"""Routing of derivation and failure records to a debug file or stderr.

Subject modules log below the ``truthext`` logger: every derivation at DEBUG
and every failed claim at INFO. Nothing is emitted until a handler is
attached here, which the command line does for ``--debug-file`` and
``--verbose``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

PACKAGE_LOGGER = "truthext"

RECORD_FORMAT = "[%(asctime)s] %(name)s: %(message)s"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


def _attach(logger: logging.Logger, handler: logging.Handler) -> None:
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(RECORD_FORMAT, datefmt=TIMESTAMP_FORMAT))
    logger.addHandler(handler)


def setup_logger(
    debug_file: Path | None,
    verbose: bool = False,
    logger_name: str = PACKAGE_LOGGER,
) -> logging.Logger:
    """Attach handlers for *logger_name* and return the logger.

    Args:
        debug_file: File the records are appended to; parent directories are
            created. ``None`` skips the file.
        verbose: Also write the records to stderr.
        logger_name: Logger to configure. The default collects every subject
            module's records.

    Raises:
        ValueError: if neither a debug file nor verbose output is requested.
        RuntimeError: if the logger already has handlers. Two debug files
            must use two logger names.
    """
    if debug_file is None and not verbose:
        raise ValueError("setup_logger needs a debug file or verbose output")

    logger = logging.getLogger(logger_name)
    if logger.handlers:
        raise RuntimeError(f"Logger '{logger_name}' already exists with handlers attached")

    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        _attach(logger, logging.FileHandler(debug_file, mode="a"))
    if verbose:
        _attach(logger, logging.StreamHandler(sys.stderr))

    return logger

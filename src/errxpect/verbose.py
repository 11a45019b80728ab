"""Debug log setup for the ``errxpect`` logger hierarchy.

What ends up in the log:

- ``errxpect.trailing``: the offending index when a result is rejected
  as inconsistent with its trailing error (DEBUG)
- ``errxpect.assertion``: results rejected before the caller's matcher ran
  (DEBUG)
- ``errxpect.zero``: values whose zero value could not be built or compared
  (DEBUG)
- ``errxpect.engine.expect``: every reported failure with its blamed
  location (INFO) and failures held back by collecting handlers (WARNING)
- ``errxpect.pytest_plugin``: the config file loaded for the session (DEBUG)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(debug_file: Path, verbose: bool = False, logger_name: str = "errxpect") -> logging.Logger:
    """
    Configure and return a logger for debug output.

    Always writes to debug_file. Optionally also writes to stderr if verbose=True.
    The default name is the package root, so records from every errxpect
    module end up in the same file.

    Args:
        debug_file: Path to debug log file (always created)
        verbose: If True, also log to stderr. If False, only log to file.
        logger_name: Name of the logger instance

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)

    # Calling again replaces the previous handlers instead of stacking them
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S"
    )

    debug_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(debug_file, mode='a')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    return logger

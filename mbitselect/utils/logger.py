"""
Logger utility for mbitselect
"""

import logging
import sys


def get_logger(name: str = None, fmt: str = None, verbose: bool = False) -> logging.Logger:
    """
    Get a configured logger instance.

    Diagnostics always go to stderr; stdout is reserved for the resolved
    target so build tools can capture it.

    Args:
        name:    Logger name (defaults to 'mbitselect').
        fmt:     Log format string.  Defaults to the standard timestamped format.
        verbose: Emit INFO messages as well as errors.
    """
    logger = logging.getLogger(name or "mbitselect")

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                fmt or "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)

    logger.setLevel(logging.INFO if verbose else logging.ERROR)
    return logger

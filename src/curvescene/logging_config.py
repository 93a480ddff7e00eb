"""Logger setup for the ``curvescene`` command line."""
import logging
import sys


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Route the 'curvescene' loggers to stderr.

    Args:
        verbose: log at DEBUG instead of WARNING
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger("curvescene")
    logger.setLevel(level)
    logger.handlers.clear()

    # stdout carries the scene report
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(name)s: %(levelname)s: %(message)s'))
    logger.addHandler(handler)
    return logger
